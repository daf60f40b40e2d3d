"""Training plan bulk import - applies parsed rows to students and plans."""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fitpoints.config import Settings, get_settings
from fitpoints.exceptions import NotFoundError, PersistenceError
from fitpoints.models import Student, PlanExercise
from fitpoints.services.import_parser import ImportRow, ParsedTable, parse_plan_table

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Read the leading integer of a field, like JavaScript's parseInt.
    
    "12" -> 12, "12x" -> 12, "abc" or "" -> None.
    """
    if not value:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


@dataclass
class ImportResult:
    rows_processed: int = 0
    distinct_plans_touched: int = 0
    rows_skipped: int = 0


class PlanImportService:
    """
    Reconciles imported rows against students and plan exercises.
    
    Rows are applied strictly in file order. For each row the student is
    looked up by email, re-assigned to the row's plan and a new plan
    exercise is inserted with the next import-wide position. A row that
    fails for any reason is logged and skipped; it never stops the batch.
    """
    
    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()
    
    def import_payload(self, payload: str) -> ImportResult:
        """Parse and import a raw payload. SchemaError propagates before any row is applied."""
        parsed = parse_plan_table(payload, self.settings.import_delimiter)
        return self.import_rows(parsed)
    
    def import_rows(self, parsed: ParsedTable) -> ImportResult:
        """Apply parsed rows and commit once at the end."""
        result = ImportResult(rows_skipped=parsed.skipped)
        plans_touched: Set[int] = set()
        
        logger.info("Importing %d plan rows (%d skipped by parser)", len(parsed.rows), parsed.skipped)
        
        for row in parsed.rows:
            try:
                with self.db.begin_nested():
                    plan_id = self._apply_row(row, order=result.rows_processed + 1)
            except NotFoundError as e:
                logger.warning("Row %d skipped: %s", row.line_number, e)
                result.rows_skipped += 1
                continue
            except Exception:
                logger.exception("Error processing row %d", row.line_number)
                result.rows_skipped += 1
                continue
            
            result.rows_processed += 1
            plans_touched.add(plan_id)
        
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to commit plan import: {e}") from e
        
        result.distinct_plans_touched = len(plans_touched)
        logger.info(
            "Import completed: %d exercises processed, %d plans updated, %d rows skipped",
            result.rows_processed, result.distinct_plans_touched, result.rows_skipped,
        )
        return result
    
    def _apply_row(self, row: ImportRow, order: int) -> int:
        """Apply one row inside the caller's savepoint. Returns the plan id."""
        plan_id = parse_int(row.plan_id)
        day = parse_int(row.day)
        if plan_id is None:
            raise ValueError(f"Invalid plan_id {row.plan_id!r}")
        if day is None:
            raise ValueError(f"Invalid day {row.day!r}")
        
        student = self.db.query(Student).filter(Student.email == row.subject_email).first()
        if student is None:
            raise NotFoundError(f"Student not found for email: {row.subject_email}")
        
        # Last row in file order wins
        student.assigned_plan_id = plan_id
        
        self.db.add(PlanExercise(
            plan_id=plan_id,
            day=day,
            exercise=row.exercise,
            sets=parse_int(row.sets),
            reps=row.reps or None,
            rest=row.rest or None,
            intensity=row.intensity or None,
            video_url=row.video_url or None,
            order=order,
        ))
        self.db.flush()
        return plan_id
