"""Services package."""

from fitpoints.services.ledger_service import LedgerService
from fitpoints.services.aggregation_service import AggregationService, week_start_of
from fitpoints.services.completion_service import CompletionService
from fitpoints.services.habit_service import HabitService
from fitpoints.services.import_parser import ImportRow, ParsedTable, parse_plan_table
from fitpoints.services.plan_import_service import ImportResult, PlanImportService

__all__ = [
    "LedgerService",
    "AggregationService",
    "week_start_of",
    "CompletionService",
    "HabitService",
    "ImportRow",
    "ParsedTable",
    "parse_plan_table",
    "ImportResult",
    "PlanImportService",
]
