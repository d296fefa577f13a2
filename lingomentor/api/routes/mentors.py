from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ... import schemas
from ...database import get_db
from ...services import mentors as service

router = APIRouter()


@router.get("", response_model=List[schemas.UserWithProfile])
def list_mentors(db: Session = Depends(get_db)):
    return service.list_mentors(db)


@router.post("", response_model=schemas.MentorRegistered)
def register_mentor(payload: schemas.MentorRegister, db: Session = Depends(get_db)):
    """Promote the user's profile to mentor."""
    profile = service.register_mentor(db, payload)
    return {"success": True, "message": "Successfully registered as mentor", "profile": profile}
