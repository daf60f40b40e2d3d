"""Assigned training plan API router."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fitpoints.database import get_db
from fitpoints.models import Student, TrainingPlan, PlanExercise
from fitpoints.schemas import (
    PlanExerciseResponse,
    StudentPlanResponse,
    StudentResponse,
    TrainingPlanResponse,
)

router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("/students/{student_id}", response_model=Optional[StudentPlanResponse])
def get_student_plan(
    student_id: int,
    db: Session = Depends(get_db),
):
    """
    Get the plan assigned to a student with exercises grouped by day.
    
    Returns null when the student has no plan or the plan row is gone.
    """
    student = db.get(Student, student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    
    if student.assigned_plan_id is None:
        return None
    
    plan = db.get(TrainingPlan, student.assigned_plan_id)
    if not plan:
        return None
    
    exercises = (
        db.query(PlanExercise)
        .filter(PlanExercise.plan_id == plan.id)
        .order_by(PlanExercise.day, PlanExercise.order)
        .all()
    )
    
    exercises_by_day = {}
    for exercise in exercises:
        exercises_by_day.setdefault(exercise.day, []).append(
            PlanExerciseResponse.model_validate(exercise)
        )
    
    return StudentPlanResponse(
        plan=TrainingPlanResponse.model_validate(plan),
        student=StudentResponse.model_validate(student),
        exercises_by_day=exercises_by_day,
    )
