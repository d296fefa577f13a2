from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import errors, schemas
from ...database import get_db
from ...services import chat as service

router = APIRouter()


@router.get("/sessions", response_model=List[schemas.ChatSessionOut])
def list_sessions(user_id: Optional[int] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    """Sessions the user takes part in, most recently active first, with their latest message."""
    if user_id is None:
        raise errors.ValidationError("userId required")
    return service.list_sessions(db, user_id)


@router.post("/sessions", response_model=schemas.ChatSessionOut)
def create_session(payload: schemas.ChatSessionCreate, db: Session = Depends(get_db)):
    return service.create_session(db, payload)


@router.get("/messages", response_model=List[schemas.ChatMessageOut])
def list_messages(session_id: Optional[int] = Query(default=None, alias="sessionId"), db: Session = Depends(get_db)):
    """Messages of a session in the order they were sent."""
    if session_id is None:
        raise errors.ValidationError("sessionId required")
    return service.list_messages(db, session_id)


@router.post("/messages", response_model=schemas.ChatMessageOut)
def post_message(payload: schemas.ChatMessageCreate, db: Session = Depends(get_db)):
    """Append a message and bump the session's updatedAt."""
    return service.create_message(db, payload)
