from __future__ import annotations

from sqlalchemy.orm import Session, selectinload

from .. import schemas
from ..database import unit_of_work
from ..models import Achievement
from .crud import apply_changes, get_or_404


def list_achievements(db: Session, user_id: int | None = None) -> list[Achievement]:
    query = db.query(Achievement).options(selectinload(Achievement.user))
    if user_id is not None:
        query = query.filter(Achievement.user_id == user_id)
    return query.order_by(Achievement.id).all()


def get_achievement(db: Session, achievement_id: int) -> Achievement:
    return get_or_404(
        db, Achievement, achievement_id, "Achievement",
        options=(selectinload(Achievement.user),),
    )


def create_achievement(db: Session, payload: schemas.AchievementCreate) -> Achievement:
    with unit_of_work(db):
        achievement = Achievement(user_id=payload.user_id, title=payload.title)
        db.add(achievement)
        db.flush()
    return achievement


def update_achievement(db: Session, achievement_id: int, payload: schemas.AchievementUpdate) -> Achievement:
    with unit_of_work(db):
        achievement = get_or_404(db, Achievement, achievement_id, "Achievement")
        apply_changes(achievement, payload.model_dump(exclude_unset=True))
    return achievement


def delete_achievement(db: Session, achievement_id: int) -> None:
    with unit_of_work(db):
        db.delete(get_or_404(db, Achievement, achievement_id, "Achievement"))
