"""Request-scoped dependencies shared by the routers."""

from datetime import date
from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from fitpoints.database import get_db
from fitpoints.models import User


def get_current_user(
    x_user_id: Optional[int] = Header(None),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the acting user from the trusted X-User-Id header."""
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    
    user = db.get(User, x_user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def resolve_day(day: Optional[date] = None) -> date:
    """Day from the ?day=YYYY-MM-DD query parameter, today when omitted."""
    return day or date.today()
