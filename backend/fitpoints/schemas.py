"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List, Dict
from datetime import datetime, date


# ============== Habit Schemas ==============

class HabitCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    description: Optional[str] = None
    points: Optional[int] = Field(None, ge=0)


class HabitCreated(BaseModel):
    success: bool = True
    id: int


class HabitForDay(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    points: int
    completed: bool


class HabitsInitialized(BaseModel):
    success: bool = True
    added: int


class ToggleResponse(BaseModel):
    completed: bool


# ============== Points Schemas ==============

class PointsSummary(BaseModel):
    day: date
    week_start: date
    daily_total: int = 0
    daily_completed_count: int = 0
    weekly_total: int = 0


# ============== Note Schemas ==============

class DailyNoteUpdate(BaseModel):
    content: Optional[str] = ""


class DailyNoteResponse(BaseModel):
    content: str = ""


# ============== Student Schemas ==============

class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    age: Optional[int] = Field(None, ge=0)
    goal: Optional[str] = None
    notes: Optional[str] = None
    paid_on: Optional[date] = None
    expires_on: Optional[date] = None


class StudentResponse(BaseModel):
    id: int
    name: str
    email: str
    age: Optional[int] = None
    goal: Optional[str] = None
    notes: Optional[str] = None
    assigned_plan_id: Optional[int] = None
    paid_on: Optional[date] = None
    expires_on: Optional[date] = None
    total_points: Optional[int] = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ============== Training Plan Schemas ==============

class TrainingPlanResponse(BaseModel):
    id: int
    name: str
    goal: Optional[str] = None
    frequency: Optional[str] = None
    daily_steps: Optional[int] = None
    active_breaks: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None

    class Config:
        from_attributes = True


class PlanExerciseResponse(BaseModel):
    day: int
    exercise: str
    sets: Optional[int] = None
    reps: Optional[str] = None
    rest: Optional[str] = None
    intensity: Optional[str] = None
    video_url: Optional[str] = None
    order: Optional[int] = None

    class Config:
        from_attributes = True


class StudentPlanResponse(BaseModel):
    plan: TrainingPlanResponse
    student: StudentResponse
    exercises_by_day: Dict[int, List[PlanExerciseResponse]]


# ============== Import Schemas ==============

class PlanImportResponse(BaseModel):
    success: bool = True
    message: str = "Plan imported successfully"
    rows_processed: int
    distinct_plans_touched: int
    rows_skipped: int = 0
