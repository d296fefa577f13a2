from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from .. import schemas
from ..database import unit_of_work
from ..models import Profile
from .crud import apply_changes, get_or_404
from .users import PROFILE_LIST_FIELDS

logger = logging.getLogger(__name__)


def list_profiles(db: Session, user_id: int | None = None) -> list[Profile]:
    query = db.query(Profile).options(selectinload(Profile.user))
    if user_id is not None:
        query = query.filter(Profile.user_id == user_id)
    return query.order_by(Profile.id).all()


def get_profile(db: Session, profile_id: int) -> Profile:
    return get_or_404(db, Profile, profile_id, "Profile", options=(selectinload(Profile.user),))


def create_profile(db: Session, payload: schemas.ProfileCreate) -> Profile:
    with unit_of_work(db):
        profile = Profile(user_id=payload.user_id, languages="[]", interests="[]")
        apply_changes(
            profile,
            payload.model_dump(exclude={"user_id"}, exclude_unset=True),
            PROFILE_LIST_FIELDS,
        )
        db.add(profile)
        db.flush()
        logger.info("Created profile %s for user %s", profile.id, payload.user_id)
    return profile


def update_profile(db: Session, profile_id: int, payload: schemas.ProfileUpdate) -> Profile:
    with unit_of_work(db):
        profile = get_or_404(db, Profile, profile_id, "Profile")
        apply_changes(profile, payload.model_dump(exclude_unset=True), PROFILE_LIST_FIELDS)
    return profile


def delete_profile(db: Session, profile_id: int) -> None:
    with unit_of_work(db):
        db.delete(get_or_404(db, Profile, profile_id, "Profile"))
