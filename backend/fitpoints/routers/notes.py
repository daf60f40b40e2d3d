"""Daily notes API router."""

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fitpoints.database import get_db
from fitpoints.dependencies import get_current_user, resolve_day
from fitpoints.models import DailyNote, User
from fitpoints.schemas import DailyNoteResponse, DailyNoteUpdate

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/today", response_model=DailyNoteResponse)
def get_note(
    day: date = Depends(resolve_day),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Get the note for the day, empty when none was written."""
    note = (
        db.query(DailyNote)
        .filter(DailyNote.user_id == user.id, DailyNote.note_date == day)
        .first()
    )
    return DailyNoteResponse(content=note.content if note else "")


@router.post("/today", response_model=DailyNoteResponse)
def save_note(
    note_data: DailyNoteUpdate,
    day: date = Depends(resolve_day),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Create or replace the note for the day."""
    content = note_data.content or ""
    
    existing = (
        db.query(DailyNote)
        .filter(DailyNote.user_id == user.id, DailyNote.note_date == day)
        .first()
    )
    if existing:
        existing.content = content
    else:
        db.add(DailyNote(user_id=user.id, note_date=day, content=content))
    
    db.commit()
    return DailyNoteResponse(content=content)
