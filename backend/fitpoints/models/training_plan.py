"""Training plan and plan exercise models."""

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from fitpoints.database import Base


class TrainingPlan(Base):
    """A named collection of exercises assigned to students."""
    
    __tablename__ = "training_plans"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    goal = Column(String(255), nullable=True)
    frequency = Column(String(100), nullable=True)  # "3x per week"
    daily_steps = Column(Integer, nullable=True)
    active_breaks = Column(String(255), nullable=True)
    duration = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    exercises = relationship("PlanExercise", back_populates="plan", cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<TrainingPlan {self.id} {self.name}>"


class PlanExercise(Base):
    """One exercise occurrence on a plan day."""
    
    __tablename__ = "plan_exercises"
    
    id = Column(Integer, primary_key=True, index=True)
    plan_id = Column(Integer, ForeignKey("training_plans.id"), nullable=False, index=True)
    day = Column(Integer, nullable=False)  # Day index within the plan (1 = first day)
    exercise = Column(String(255), nullable=False)
    
    # Prescription
    sets = Column(Integer, nullable=True)
    reps = Column(String(50), nullable=True)  # "8-12", "30s"
    rest = Column(String(50), nullable=True)
    intensity = Column(String(50), nullable=True)
    video_url = Column(String(500), nullable=True)
    
    # Display position, assigned from import sequence
    order = Column(Integer, nullable=True)
    
    # Relationships
    plan = relationship("TrainingPlan", back_populates="exercises")
    
    def __repr__(self):
        return f"<PlanExercise plan={self.plan_id} day={self.day} #{self.order}: {self.exercise}>"
