"""Import a training plan CSV straight into the configured database.
Usage: python scripts/import_plan.py plan.csv
"""
import sys
from pathlib import Path

from fitpoints.database import SessionLocal, engine, Base
from fitpoints.exceptions import SchemaError
from fitpoints.logging_config import setup_logging
from fitpoints import models  # noqa: F401
from fitpoints.services.plan_import_service import PlanImportService


def import_plan(csv_path: Path) -> int:
    """Run the import and print the summary. Returns a process exit code."""
    payload = csv_path.read_text(encoding="utf-8-sig")
    
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        result = PlanImportService(db).import_payload(payload)
    except SchemaError as e:
        print(f"✗ {e}")
        return 1
    finally:
        db.close()
    
    print(f"✓ {result.rows_processed} exercises imported")
    print(f"  {result.distinct_plans_touched} plans updated")
    print(f"  {result.rows_skipped} rows skipped")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__)
        sys.exit(2)
    setup_logging()
    sys.exit(import_plan(Path(sys.argv[1])))
