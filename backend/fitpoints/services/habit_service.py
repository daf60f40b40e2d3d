"""Habit catalogue: custom habits, defaults, and the per-day habit list."""

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitpoints.config import Settings, get_settings
from fitpoints.exceptions import PersistenceError
from fitpoints.models import Habit, UserHabit, HabitCompletion

logger = logging.getLogger(__name__)


class HabitService:
    """Service for the habits a user tracks."""
    
    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()
    
    def create_habit(
        self,
        user_id: int,
        name: str,
        description: Optional[str] = None,
        points: Optional[int] = None,
    ) -> Habit:
        """Create a custom habit and activate it for the user."""
        habit = Habit(
            name=name,
            description=description or None,
            points=points if points is not None else self.settings.default_habit_points,
            is_default=False,
        )
        try:
            self.db.add(habit)
            self.db.flush()
            self.db.add(UserHabit(user_id=user_id, habit_id=habit.id, is_active=True))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to create habit: {e}") from e
        
        self.db.refresh(habit)
        logger.info("Created habit %s (%s pts) for user %s", habit.id, habit.points, user_id)
        return habit
    
    def initialize_defaults(self, user_id: int) -> int:
        """Activate every default habit for the user. Returns how many were added."""
        try:
            default_ids = [
                habit_id for (habit_id,) in
                self.db.query(Habit.id).filter(Habit.is_default == True).all()
            ]
            linked_ids = {
                habit_id for (habit_id,) in
                self.db.query(UserHabit.habit_id).filter(UserHabit.user_id == user_id).all()
            }
            
            added = 0
            for habit_id in default_ids:
                if habit_id in linked_ids:
                    continue
                self.db.add(UserHabit(user_id=user_id, habit_id=habit_id, is_active=True))
                added += 1
            
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to initialize habits: {e}") from e
        
        return added
    
    def habits_for_day(self, user_id: int, day: date) -> List[dict]:
        """Active habits of the user with their completion flag for the day."""
        try:
            rows = (
                self.db.query(Habit, HabitCompletion.id)
                .join(UserHabit, UserHabit.habit_id == Habit.id)
                .outerjoin(
                    HabitCompletion,
                    (HabitCompletion.habit_id == Habit.id)
                    & (HabitCompletion.user_id == UserHabit.user_id)
                    & (HabitCompletion.completion_date == day),
                )
                .filter(UserHabit.user_id == user_id, UserHabit.is_active == True)
                .order_by(Habit.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to fetch habits: {e}") from e
        
        return [
            {
                "id": habit.id,
                "name": habit.name,
                "description": habit.description,
                "points": habit.points if habit.points is not None else self.settings.default_habit_points,
                "completed": completion_id is not None,
            }
            for habit, completion_id in rows
        ]
