"""Admin API router - students and training plan import."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from sqlalchemy.orm import Session

from fitpoints.config import get_settings
from fitpoints.database import get_db
from fitpoints.exceptions import FitpointsError, SchemaError
from fitpoints.models import Student
from fitpoints.schemas import PlanImportResponse, StudentCreate, StudentResponse
from fitpoints.services.plan_import_service import PlanImportService

router = APIRouter(prefix="/admin", tags=["admin"])
settings = get_settings()
logger = logging.getLogger(__name__)

CSV_CONTENT_TYPES = ("text/csv",)


@router.get("/students", response_model=List[StudentResponse])
def list_students(db: Session = Depends(get_db)):
    """List all students ordered by name."""
    students = db.query(Student).order_by(Student.name).all()
    logger.info("Students found: %d", len(students))
    return students


@router.post("/students", response_model=StudentResponse)
def create_student(
    student_data: StudentCreate,
    db: Session = Depends(get_db),
):
    """Register a student so plan imports can reference them by email."""
    existing = db.query(Student).filter(Student.email == student_data.email).first()
    if existing:
        raise HTTPException(status_code=400, detail="Email already registered")
    
    student = Student(**student_data.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def _is_csv(upload: UploadFile) -> bool:
    return upload.content_type in CSV_CONTENT_TYPES or (upload.filename or "").lower().endswith(".csv")


@router.post("/import-plan", response_model=PlanImportResponse)
def import_plan(
    csv_file: Optional[UploadFile] = File(None, alias="csvFile"),
    db: Session = Depends(get_db),
):
    """
    Import training plan exercises from a CSV upload.
    
    Required header columns: plan_id, subject_email, day, exercise, sets,
    reps, rest, intensity (video_url is optional). Rows that cannot be
    applied are skipped and only counted.
    """
    if csv_file is None:
        raise HTTPException(status_code=400, detail="No CSV file provided")
    if not _is_csv(csv_file):
        raise HTTPException(status_code=400, detail="Only CSV files are allowed")
    
    raw = csv_file.file.read(settings.import_max_bytes + 1)
    if len(raw) > settings.import_max_bytes:
        raise HTTPException(status_code=413, detail="CSV file too large")
    
    try:
        payload = raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV file must be UTF-8 encoded")
    
    logger.info("Processing CSV file: %s", csv_file.filename)
    
    try:
        result = PlanImportService(db).import_payload(payload)
    except SchemaError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": str(e), "missing_columns": e.missing_columns},
        )
    except FitpointsError as e:
        logger.error("Error importing plan: %s", e)
        raise HTTPException(status_code=500, detail="Failed to import plan")
    
    return PlanImportResponse(
        rows_processed=result.rows_processed,
        distinct_plans_touched=result.distinct_plans_touched,
        rows_skipped=result.rows_skipped,
    )
