"""Free-text daily note model."""

from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from fitpoints.database import Base


class DailyNote(Base):
    """One note per user per day."""
    
    __tablename__ = "daily_notes"
    __table_args__ = (
        UniqueConstraint("user_id", "note_date", name="uq_daily_note"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    note_date = Column(Date, nullable=False, index=True)
    content = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    user = relationship("User", back_populates="notes")
