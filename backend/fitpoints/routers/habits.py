"""Habits API router."""

import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fitpoints.database import get_db
from fitpoints.dependencies import get_current_user, resolve_day
from fitpoints.exceptions import FitpointsError
from fitpoints.models import User
from fitpoints.schemas import (
    HabitCreate,
    HabitCreated,
    HabitForDay,
    HabitsInitialized,
    ToggleResponse,
)
from fitpoints.services.completion_service import CompletionService
from fitpoints.services.habit_service import HabitService

router = APIRouter(prefix="/habits", tags=["habits"])
logger = logging.getLogger(__name__)


@router.get("/today", response_model=List[HabitForDay])
def list_habits_for_day(
    day: date = Depends(resolve_day),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """List the user's active habits with their completion state for the day."""
    try:
        return HabitService(db).habits_for_day(user.id, day)
    except FitpointsError as e:
        logger.error("Error fetching habits: %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch habits")


@router.post("/custom", response_model=HabitCreated)
def create_custom_habit(
    habit_data: HabitCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Create a custom habit and activate it for the user."""
    try:
        habit = HabitService(db).create_habit(
            user.id,
            name=habit_data.name,
            description=habit_data.description,
            points=habit_data.points,
        )
    except FitpointsError as e:
        logger.error("Error creating custom habit: %s", e)
        raise HTTPException(status_code=500, detail="Failed to create custom habit")
    
    return HabitCreated(id=habit.id)


@router.post("/initialize", response_model=HabitsInitialized)
def initialize_habits(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Activate the default habits for the user."""
    try:
        added = HabitService(db).initialize_defaults(user.id)
    except FitpointsError as e:
        logger.error("Error initializing habits: %s", e)
        raise HTTPException(status_code=500, detail="Failed to initialize habits")
    
    return HabitsInitialized(added=added)


@router.post("/{habit_id}/toggle", response_model=ToggleResponse)
def toggle_habit(
    habit_id: int,
    day: date = Depends(resolve_day),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Toggle completion of a habit for the day."""
    try:
        completed = CompletionService(db).toggle(user.id, habit_id, day)
    except FitpointsError as e:
        logger.error("Error toggling habit %s: %s", habit_id, e)
        raise HTTPException(status_code=500, detail="Failed to toggle habit")
    
    return ToggleResponse(completed=completed)
