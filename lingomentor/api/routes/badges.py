from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import errors, schemas
from ...database import get_db
from ...services import badges as service

router = APIRouter()


@router.get("", response_model=List[schemas.BadgeOut])
def list_badges(user_id: Optional[int] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    """A user's badges, most recently earned first."""
    if user_id is None:
        raise errors.ValidationError("userId required")
    return service.list_badges(db, user_id)


@router.post("", response_model=schemas.BadgeOut)
def award_badge(payload: schemas.BadgeCreate, db: Session = Depends(get_db)):
    """Award a badge. A badge name can be earned once per user (409 otherwise)."""
    return service.create_badge(db, payload)


@router.post("/check", response_model=schemas.BadgeCheckOut)
def check_badges(payload: schemas.BadgeCheck, db: Session = Depends(get_db)):
    """Evaluate the badge catalogue against the user's quizzes and award new ones."""
    return {"awarded": service.award_earned_badges(db, payload.user_id)}
