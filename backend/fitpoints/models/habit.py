"""Habit catalogue and per-user habit activation."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from datetime import datetime

from fitpoints.database import Base


class Habit(Base):
    """A trackable action worth a number of points."""
    
    __tablename__ = "habits"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    description = Column(Text, nullable=True)
    points = Column(Integer, nullable=True, default=1)
    is_default = Column(Boolean, default=False)  # Offered to every user by /habits/initialize
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    user_habits = relationship("UserHabit", back_populates="habit", cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<Habit {self.id} {self.name} ({self.points} pts)>"


class UserHabit(Base):
    """Activation of a habit for one user."""
    
    __tablename__ = "user_habits"
    __table_args__ = (
        UniqueConstraint("user_id", "habit_id", name="uq_user_habit"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    habit_id = Column(Integer, ForeignKey("habits.id"), nullable=False, index=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    user = relationship("User", back_populates="user_habits")
    habit = relationship("Habit", back_populates="user_habits")
