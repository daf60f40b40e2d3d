"""Points API router."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fitpoints.database import get_db
from fitpoints.dependencies import get_current_user, resolve_day
from fitpoints.exceptions import FitpointsError
from fitpoints.models import User
from fitpoints.schemas import PointsSummary
from fitpoints.services.completion_service import CompletionService

router = APIRouter(prefix="/points", tags=["points"])
logger = logging.getLogger(__name__)


@router.get("/today", response_model=PointsSummary)
def get_points(
    day: date = Depends(resolve_day),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Daily points, completed habit count and weekly total for the day."""
    try:
        return CompletionService(db).points_for_day(user.id, day)
    except FitpointsError as e:
        logger.error("Error fetching points: %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch points")
