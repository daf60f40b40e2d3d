"""Weekly points aggregation over the completion ledger."""

import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from fitpoints.exceptions import PersistenceError
from fitpoints.models import WeeklyPoints
from fitpoints.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)

WEEK_LENGTH_DAYS = 7


def week_start_of(day: date) -> date:
    """Monday on or before the given day (ISO-8601 weeks)."""
    return day - timedelta(days=day.weekday())


def week_end_of(week_start: date) -> date:
    """Sunday closing the week that starts on week_start."""
    return week_start + timedelta(days=WEEK_LENGTH_DAYS - 1)


class AggregationService:
    """Keeps weekly_points in line with the completion ledger."""
    
    def __init__(self, db: Session, ledger: Optional[LedgerService] = None):
        self.db = db
        self.ledger = ledger or LedgerService(db)
    
    def recompute(self, user_id: int, week_start: date) -> WeeklyPoints:
        """
        Recompute and upsert the weekly total for (user, week_start).
        
        The total is always re-summed from the ledger, so repeated calls with
        no ledger change write the same value. Flushes but does not commit;
        the caller owns the transaction.
        """
        if week_start.weekday() != 0:
            raise ValueError(f"week_start must be a Monday, got {week_start.isoformat()}")
        
        total = self.ledger.sum_points(user_id, week_start, week_end_of(week_start))
        
        try:
            summary = self._get_summary(user_id, week_start)
            if summary is None:
                summary = self._insert_summary(user_id, week_start, total)
            else:
                summary.total_points = total
            self.db.flush()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to update weekly points: {e}") from e
        
        logger.debug("Weekly points user=%s week=%s total=%s", user_id, week_start, total)
        return summary
    
    def get_weekly_total(self, user_id: int, week_start: date) -> int:
        """Stored weekly total, 0 when the week has no summary yet."""
        try:
            summary = self._get_summary(user_id, week_start)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read weekly points: {e}") from e
        return summary.total_points if summary else 0
    
    def _insert_summary(self, user_id: int, week_start: date, total: int) -> WeeklyPoints:
        """Insert the week's row, or overwrite it if another transaction created it first."""
        summary = WeeklyPoints(user_id=user_id, week_start=week_start, total_points=total)
        try:
            with self.db.begin_nested():
                self.db.add(summary)
            return summary
        except IntegrityError:
            existing = self._get_summary(user_id, week_start)
            if existing is None:
                raise
            logger.warning("Weekly points user=%s week=%s created concurrently", user_id, week_start)
            existing.total_points = total
            return existing

    def _get_summary(self, user_id: int, week_start: date) -> Optional[WeeklyPoints]:
        return (
            self.db.query(WeeklyPoints)
            .filter(WeeklyPoints.user_id == user_id, WeeklyPoints.week_start == week_start)
            .first()
        )
