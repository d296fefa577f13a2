from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from .. import errors, schemas
from ..database import unit_of_work
from ..models import Quiz
from .crud import apply_changes, get_or_404

logger = logging.getLogger(__name__)

QUIZ_LIST_FIELDS = ("options",)


def _parse_user_id(raw: str | None) -> int | None:
    """
    Numeric ids select a user. Identity-provider UUIDs (anything with a dash)
    and other non-numeric values match nobody.
    """
    raw = (raw or "").strip()
    if "-" in raw or not raw.isdigit():
        return None
    return int(raw)


def list_quizzes(db: Session, user_id: str | None = None) -> list[Quiz]:
    query = db.query(Quiz).options(selectinload(Quiz.user))
    if user_id is not None:
        parsed = _parse_user_id(user_id)
        if parsed is None:
            return []
        query = query.filter(Quiz.user_id == parsed)
    return query.order_by(Quiz.id).all()


def get_quiz(db: Session, quiz_id: int) -> Quiz:
    return get_or_404(db, Quiz, quiz_id, "Quiz", options=(selectinload(Quiz.user),))


def create_quiz(db: Session, payload: schemas.QuizCreate) -> Quiz:
    with unit_of_work(db):
        quiz = Quiz()
        apply_changes(quiz, payload.model_dump(), QUIZ_LIST_FIELDS)
        db.add(quiz)
        db.flush()
        logger.info("Stored quiz %s for user %s", quiz.id, quiz.user_id)
    return quiz


def update_quiz(db: Session, quiz_id: int, payload: schemas.QuizUpdate) -> Quiz:
    with unit_of_work(db):
        quiz = get_or_404(db, Quiz, quiz_id, "Quiz")
        apply_changes(quiz, payload.model_dump(exclude_unset=True), QUIZ_LIST_FIELDS)
    return quiz


def delete_quiz(db: Session, quiz_id: int) -> None:
    with unit_of_work(db):
        db.delete(get_or_404(db, Quiz, quiz_id, "Quiz"))


def delete_quizzes_for_user(db: Session, user_id: str | None) -> int:
    parsed = _parse_user_id(user_id)
    if parsed is None:
        raise errors.ValidationError("userId required")
    with unit_of_work(db):
        count = db.query(Quiz).filter(Quiz.user_id == parsed).delete(synchronize_session=False)
    logger.info("Deleted %d quizzes for user %s", count, parsed)
    return count
