from __future__ import annotations

import json
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import errors, schemas
from ..badges import BADGE_DEFINITIONS, calculate_user_stats
from ..database import unit_of_work
from ..models import Badge, Quiz, User
from .crud import get_or_404

logger = logging.getLogger(__name__)

AWARD_ATTEMPTS = 3


def list_badges(db: Session, user_id: int) -> list[Badge]:
    return (
        db.query(Badge)
        .filter(Badge.user_id == user_id)
        .order_by(Badge.earned_at.desc(), Badge.id.desc())
        .all()
    )


def _encode_metadata(value) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def create_badge(db: Session, payload: schemas.BadgeCreate) -> Badge:
    with unit_of_work(db):
        existing = (
            db.query(Badge)
            .filter(Badge.user_id == payload.user_id, Badge.name == payload.name)
            .first()
        )
        if existing is not None:
            raise errors.ConflictError("Badge already earned")

        badge = Badge(
            user_id=payload.user_id,
            name=payload.name,
            description=payload.description,
            icon=payload.icon,
            color=payload.color,
            type=payload.type,
            meta=_encode_metadata(payload.metadata),
        )
        db.add(badge)
        try:
            db.flush()
        except IntegrityError as exc:
            # Either a concurrent award of the same badge or an unknown user.
            db.rollback()
            if db.query(Badge.id).filter(
                Badge.user_id == payload.user_id, Badge.name == payload.name
            ).first():
                raise errors.ConflictError("Badge already earned") from exc
            raise
        logger.info("Awarded badge %r to user %s", badge.name, badge.user_id)
    return badge


def _held_badge_names(db: Session, user_id: int) -> set[str]:
    return {name for (name,) in db.query(Badge.name).filter(Badge.user_id == user_id)}


def award_earned_badges(db: Session, user_id: int) -> list[str]:
    """Award every catalogue badge the user qualifies for but does not hold yet."""
    get_or_404(db, User, user_id, "User")
    quizzes = (
        db.query(Quiz)
        .filter(Quiz.user_id == user_id)
        .order_by(Quiz.created_at, Quiz.id)
        .all()
    )
    stats = calculate_user_stats(quizzes, user_id)
    earned = [d for d in BADGE_DEFINITIONS if d.condition(stats)]

    for _attempt in range(AWARD_ATTEMPTS):
        held = _held_badge_names(db, user_id)
        pending = [d for d in earned if d.name not in held]
        with unit_of_work(db):
            for definition in pending:
                db.add(Badge(
                    user_id=user_id,
                    name=definition.name,
                    description=definition.description,
                    icon=definition.icon,
                    color=definition.color,
                    type=definition.type,
                ))
            try:
                db.flush()
            except IntegrityError:
                # A concurrent check awarded some of these first; reload what is held.
                db.rollback()
                logger.info("Badge award for user %s raced another check, retrying", user_id)
                continue
        awarded = [d.name for d in pending]
        break
    else:
        raise errors.ConflictError("Badge already earned")

    if awarded:
        logger.info("User %s earned %d badge(s): %s", user_id, len(awarded), ", ".join(awarded))
    return awarded
