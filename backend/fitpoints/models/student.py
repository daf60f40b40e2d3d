"""Student (coached subject) model."""

from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime

from fitpoints.database import Base


class Student(Base):
    """A coached student, referenced by email in plan imports."""
    
    __tablename__ = "students"
    
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    age = Column(Integer, nullable=True)
    goal = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    
    # Plan assignment, overwritten by every imported row that names this student
    assigned_plan_id = Column(Integer, ForeignKey("training_plans.id"), nullable=True)
    
    # Billing
    paid_on = Column(Date, nullable=True)
    expires_on = Column(Date, nullable=True)
    total_points = Column(Integer, default=0)
    
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    
    # Relationships
    assigned_plan = relationship("TrainingPlan")
    
    def __repr__(self):
        return f"<Student {self.email} plan={self.assigned_plan_id}>"
