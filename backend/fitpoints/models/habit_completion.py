"""Completion ledger: one row per habit completed by a user on a day."""

from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from fitpoints.database import Base


class HabitCompletion(Base):
    """
    A habit completed by a user on a calendar day.
    
    Toggling off deletes the row. points_earned is copied from the habit
    when the row is created and never recomputed afterwards.
    """
    
    __tablename__ = "habit_completions"
    __table_args__ = (
        UniqueConstraint("user_id", "habit_id", "completion_date", name="uq_completion_per_day"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # No FK: toggling an unknown habit still records a completion at the default points
    habit_id = Column(Integer, nullable=False, index=True)
    completion_date = Column(Date, nullable=False, index=True)
    points_earned = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    user = relationship("User", back_populates="completions")
    
    def __repr__(self):
        return f"<HabitCompletion user={self.user_id} habit={self.habit_id} {self.completion_date}>"
