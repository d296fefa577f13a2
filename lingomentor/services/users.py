"""
User service: listing, lookup and the email-keyed upsert used at sign-up
and on every sign-in (identity sync).
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from .. import errors, schemas
from ..database import unit_of_work
from ..models import Profile, User
from .crud import apply_changes, get_or_404

logger = logging.getLogger(__name__)

PROFILE_FIELDS = set(schemas.ProfileFields.model_fields)
PROFILE_LIST_FIELDS = ("languages", "interests")
ROLES = ("mentor", "student")

_DETAIL_OPTIONS = (
    selectinload(User.profile),
    selectinload(User.quizzes),
    selectinload(User.achievements),
    selectinload(User.voice_records),
)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _find_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def list_users(
    db: Session,
    *,
    user_id: int | None = None,
    email: str | None = None,
    name: str | None = None,
    role: str | None = None,
) -> list[User]:
    query = db.query(User).options(*_DETAIL_OPTIONS)
    if user_id is not None:
        query = query.filter(User.id == user_id)
    if email:
        query = query.filter(User.email == normalize_email(email))
    if name:
        query = query.filter(User.name == name)
    if role:
        if role not in ROLES:
            raise errors.ValidationError("role must be 'mentor' or 'student'")
        # Mentor-ness is derived from the profile having expertise filled in.
        query = query.join(User.profile)
        if role == "mentor":
            query = query.filter(Profile.expertise.isnot(None))
        else:
            query = query.filter(Profile.expertise.is_(None))
    return query.order_by(User.id).all()


def get_user(db: Session, user_id: int) -> User:
    return get_or_404(db, User, user_id, "User", options=_DETAIL_OPTIONS)


def _merge_profile(db: Session, user: User, profile_data: dict) -> Profile:
    profile = user.profile
    if profile is None:
        profile = Profile(user_id=user.id, languages="[]", interests="[]")
        db.add(profile)
        user.profile = profile
    apply_changes(profile, profile_data, PROFILE_LIST_FIELDS)
    return profile


def upsert_user(db: Session, payload: schemas.UserCreate) -> dict:
    """
    Create a user + profile, or, when the email is already registered, update
    the user's name and merge the supplied profile fields into its profile.
    """
    email = normalize_email(payload.email)
    profile_data = payload.model_dump(include=PROFILE_FIELDS, exclude_unset=True)

    with unit_of_work(db):
        user = _find_by_email(db, email)
        if user is None:
            user = User(name=payload.name, email=email)
            db.add(user)
            try:
                db.flush()
                logger.info("Created user %s (%s)", user.id, email)
            except IntegrityError:
                # Lost a race against a concurrent insert for the same email.
                db.rollback()
                user = _find_by_email(db, email)
                if user is None:
                    raise
                if payload.name:
                    user.name = payload.name
        elif payload.name:
            user.name = payload.name
            logger.info("Updated existing user %s (%s)", user.id, email)

        profile = _merge_profile(db, user, profile_data)
        db.flush()

    return {"user": user, "profile": profile}


def sync_identity(db: Session, identity: schemas.IdentitySync) -> dict:
    """Make sure a signed-in identity-provider user has an app user/profile."""
    name = identity.user_metadata.full_name or identity.email
    return upsert_user(db, schemas.UserCreate(name=name, email=identity.email))


def update_user(db: Session, user_id: int, payload: schemas.UserUpdate) -> User:
    changes = payload.model_dump(exclude_unset=True)
    if "email" in changes and changes["email"] is not None:
        changes["email"] = normalize_email(changes["email"])

    with unit_of_work(db):
        user = get_or_404(db, User, user_id, "User")
        apply_changes(user, changes)
        try:
            db.flush()
        except IntegrityError as exc:
            raise errors.ValidationError("Email is already registered") from exc
    return user


def delete_user(db: Session, user_id: int) -> None:
    with unit_of_work(db):
        user = get_or_404(db, User, user_id, "User")
        db.delete(user)
    logger.info("Deleted user %s", user_id)
