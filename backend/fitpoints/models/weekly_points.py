"""Derived weekly point totals."""

from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from fitpoints.database import Base


class WeeklyPoints(Base):
    """Sum of points_earned for one user over the Monday-Sunday week starting at week_start."""
    
    __tablename__ = "weekly_points"
    __table_args__ = (
        UniqueConstraint("user_id", "week_start", name="uq_weekly_points_user_week"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    week_start = Column(Date, nullable=False, index=True)  # Always a Monday
    total_points = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    user = relationship("User", back_populates="weekly_points")
    
    def __repr__(self):
        return f"<WeeklyPoints user={self.user_id} {self.week_start}: {self.total_points}>"
