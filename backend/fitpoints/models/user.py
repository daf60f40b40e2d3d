"""User model for the people tracking habits."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime

from fitpoints.database import Base


class User(Base):
    """Account that owns habits, completions and notes."""
    
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=True)
    name = Column(String(255), nullable=True)
    is_admin = Column(Boolean, default=False)
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    is_active = Column(Boolean, default=True)
    
    # Relationships
    user_habits = relationship("UserHabit", back_populates="user", cascade="all, delete-orphan")
    completions = relationship("HabitCompletion", back_populates="user", cascade="all, delete-orphan")
    weekly_points = relationship("WeeklyPoints", back_populates="user", cascade="all, delete-orphan")
    notes = relationship("DailyNote", back_populates="user", cascade="all, delete-orphan")
