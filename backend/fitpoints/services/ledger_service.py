"""Completion ledger persistence - the habit_completions table and nothing else."""

from datetime import date
from typing import Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from fitpoints.exceptions import ConflictError, NotFoundError, PersistenceError
from fitpoints.models import HabitCompletion


class LedgerService:
    """Reads and writes completion events. Never touches derived totals."""
    
    def __init__(self, db: Session):
        self.db = db
    
    def find_event(self, user_id: int, habit_id: int, day: date) -> Optional[HabitCompletion]:
        """Get the completion for (user, habit, day), if any."""
        try:
            return (
                self.db.query(HabitCompletion)
                .filter(
                    HabitCompletion.user_id == user_id,
                    HabitCompletion.habit_id == habit_id,
                    HabitCompletion.completion_date == day,
                )
                .first()
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read completion: {e}") from e
    
    def create_event(self, user_id: int, habit_id: int, day: date, points: int) -> HabitCompletion:
        """
        Insert a completion event.
        
        The insert runs in a SAVEPOINT so a failed insert only undoes itself
        and leaves the caller's transaction usable.

        Raises:
            ConflictError: an event already exists for (user, habit, day).
            PersistenceError: any other constraint or storage failure.
        """
        event = HabitCompletion(
            user_id=user_id,
            habit_id=habit_id,
            completion_date=day,
            points_earned=points,
        )
        try:
            with self.db.begin_nested():
                self.db.add(event)
        except IntegrityError as e:
            # Only a row already sitting on the key is a conflict
            if self.find_event(user_id, habit_id, day) is None:
                raise PersistenceError(f"Failed to create completion: {e}") from e
            raise ConflictError(
                f"Habit {habit_id} already completed by user {user_id} on {day.isoformat()}"
            ) from e
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to create completion: {e}") from e
        return event
    
    def delete_event(self, event_id: int) -> None:
        """
        Remove a completion event.
        
        Raises:
            NotFoundError: no event with this id.
        """
        try:
            event = self.db.get(HabitCompletion, event_id)
            if event is None:
                raise NotFoundError(f"Completion {event_id} not found")
            self.db.delete(event)
            self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to delete completion {event_id}: {e}") from e
    
    def sum_points(self, user_id: int, from_day: date, to_day: date) -> int:
        """Sum of points_earned over [from_day, to_day], both inclusive. 0 when empty."""
        try:
            total = (
                self.db.query(func.coalesce(func.sum(HabitCompletion.points_earned), 0))
                .filter(
                    HabitCompletion.user_id == user_id,
                    HabitCompletion.completion_date >= from_day,
                    HabitCompletion.completion_date <= to_day,
                )
                .scalar()
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to sum points: {e}") from e
        return int(total or 0)
    
    def daily_totals(self, user_id: int, day: date) -> Tuple[int, int]:
        """Return (points earned, completions count) for a single day."""
        try:
            total, count = (
                self.db.query(
                    func.coalesce(func.sum(HabitCompletion.points_earned), 0),
                    func.count(HabitCompletion.id),
                )
                .filter(
                    HabitCompletion.user_id == user_id,
                    HabitCompletion.completion_date == day,
                )
                .one()
            )
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read daily totals: {e}") from e
        return int(total or 0), int(count or 0)
