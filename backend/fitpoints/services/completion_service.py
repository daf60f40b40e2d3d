"""Habit completion toggling and points read-out."""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from fitpoints.config import Settings, get_settings
from fitpoints.exceptions import ConflictError, NotFoundError
from fitpoints.models import Habit
from fitpoints.services.aggregation_service import AggregationService, week_start_of
from fitpoints.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)


class CompletionService:
    """The single mutating operation on the ledger: toggle a habit for a day."""
    
    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()
        self.ledger = LedgerService(db)
        self.aggregator = AggregationService(db, self.ledger)
    
    def toggle(self, user_id: int, habit_id: int, day: date) -> bool:
        """
        Flip the completion state of (user, habit, day) and refresh the weekly total.
        
        Lookup, ledger write and recompute share one transaction: if anything
        fails the whole toggle is rolled back and the error propagates.
        
        Returns:
            True if the habit is now completed, False if it no longer is.
        """
        try:
            completed = self._flip(user_id, habit_id, day)
            self.aggregator.recompute(user_id, week_start_of(day))
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.error("Toggle failed for user=%s habit=%s day=%s", user_id, habit_id, day)
            raise
        
        logger.info(
            "Toggled habit=%s for user=%s on %s -> %s",
            habit_id, user_id, day.isoformat(), "completed" if completed else "cleared",
        )
        return completed
    
    def points_for_day(self, user_id: int, day: date) -> dict:
        """Daily points and count from the ledger, weekly total from the stored summary."""
        week_start = week_start_of(day)
        daily_total, completed_count = self.ledger.daily_totals(user_id, day)
        weekly_total = self.aggregator.get_weekly_total(user_id, week_start)
        
        return {
            "day": day,
            "week_start": week_start,
            "daily_total": daily_total,
            "daily_completed_count": completed_count,
            "weekly_total": weekly_total,
        }
    
    def _flip(self, user_id: int, habit_id: int, day: date) -> bool:
        existing = self.ledger.find_event(user_id, habit_id, day)
        
        if existing is not None:
            try:
                self.ledger.delete_event(existing.id)
            except NotFoundError:
                # A concurrent toggle removed it first
                logger.warning("Completion %s already removed", existing.id)
            return False
        
        points = self._points_for_habit(habit_id)
        try:
            self.ledger.create_event(user_id, habit_id, day, points)
        except ConflictError:
            # A concurrent toggle completed it first
            logger.warning(
                "Habit %s already completed for user %s on %s", habit_id, user_id, day.isoformat()
            )
        return True
    
    def _points_for_habit(self, habit_id: int) -> int:
        """Current point value of the habit, or the configured default."""
        habit = self.db.get(Habit, habit_id)
        if habit is None or habit.points is None:
            return self.settings.default_habit_points
        return habit.points
