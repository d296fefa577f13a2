from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import schemas
from ...database import get_db
from ...services import quizzes as service

router = APIRouter()


@router.get("", response_model=List[schemas.QuizWithUser])
def list_quizzes(user_id: Optional[str] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    """All quizzes, or one user's. Non-numeric user ids match nothing."""
    return service.list_quizzes(db, user_id)


@router.post("", response_model=schemas.QuizOut)
def create_quiz(payload: schemas.QuizCreate, db: Session = Depends(get_db)):
    return service.create_quiz(db, payload)


@router.delete("", response_model=schemas.SuccessOut)
def delete_user_quizzes(user_id: Optional[str] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    """Delete every quiz of a user."""
    service.delete_quizzes_for_user(db, user_id)
    return {"success": True}


@router.get("/{quiz_id}", response_model=schemas.QuizWithUser)
def get_quiz(quiz_id: int, db: Session = Depends(get_db)):
    return service.get_quiz(db, quiz_id)


@router.put("/{quiz_id}", response_model=schemas.QuizOut)
def update_quiz(quiz_id: int, payload: schemas.QuizUpdate, db: Session = Depends(get_db)):
    return service.update_quiz(db, quiz_id, payload)


@router.delete("/{quiz_id}", response_model=schemas.SuccessOut)
def delete_quiz(quiz_id: int, db: Session = Depends(get_db)):
    service.delete_quiz(db, quiz_id)
    return {"success": True}
