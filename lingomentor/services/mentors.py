from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from .. import errors, schemas
from ..codec import encode_list
from ..database import unit_of_work
from ..models import Profile, User

logger = logging.getLogger(__name__)


def list_mentors(db: Session) -> list[User]:
    # TODO: a filled-in expertise field is all that makes a user a mentor;
    # promote this to an explicit role column once profiles carry one.
    return (
        db.query(User)
        .join(User.profile)
        .options(selectinload(User.profile))
        .filter(Profile.expertise.isnot(None))
        .order_by(User.id)
        .all()
    )


def register_mentor(db: Session, payload: schemas.MentorRegister) -> Profile:
    with unit_of_work(db):
        profile = db.query(Profile).filter(Profile.user_id == payload.user_id).first()
        if profile is None:
            raise errors.NotFoundError("Profile not found")

        profile.expertise = payload.expertise
        profile.experience = payload.experience
        profile.bio = payload.bio
        profile.availability = payload.availability
        profile.languages = encode_list(payload.languages if payload.languages is not None else ["en"])
        profile.interests = encode_list(payload.interests)
        logger.info("User %s registered as mentor", payload.user_id)
    return profile
