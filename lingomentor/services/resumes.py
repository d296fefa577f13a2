"""
Resume service.

At most one resume per user: POST is an upsert keyed by userId, backed by a
unique constraint on `resumes.user_id`. PUT updates by resume id directly.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .. import errors, schemas
from ..database import unit_of_work
from ..models import Resume
from .crud import apply_changes, get_or_404

logger = logging.getLogger(__name__)

RESUME_LIST_FIELDS = ("skills", "achievements", "projects", "certifications")


def _find_for_user(db: Session, user_id: int) -> Resume | None:
    return db.query(Resume).filter(Resume.user_id == user_id).first()


def get_resume_for_user(db: Session, user_id: int) -> Resume | None:
    return _find_for_user(db, user_id)


def upsert_resume(db: Session, payload: schemas.ResumeUpsert) -> Resume:
    values = payload.model_dump(exclude={"user_id"})

    with unit_of_work(db):
        resume = _find_for_user(db, payload.user_id)
        if resume is not None:
            apply_changes(resume, values, RESUME_LIST_FIELDS)
            logger.info("Updated resume %s for user %s", resume.id, payload.user_id)
            return resume

        resume = Resume(user_id=payload.user_id)
        apply_changes(resume, values, RESUME_LIST_FIELDS)
        db.add(resume)
        try:
            db.flush()
        except IntegrityError:
            # A concurrent request created it first, or the user does not exist.
            db.rollback()
            resume = _find_for_user(db, payload.user_id)
            if resume is None:
                raise
            apply_changes(resume, values, RESUME_LIST_FIELDS)
        logger.info("Created resume %s for user %s", resume.id, payload.user_id)
    return resume


def update_resume(db: Session, payload: schemas.ResumeUpdate) -> Resume:
    if payload.id is None:
        raise errors.ValidationError("Resume ID required")

    changes = payload.model_dump(exclude={"id"}, exclude_unset=True)
    with unit_of_work(db):
        resume = get_or_404(db, Resume, payload.id, "Resume")
        apply_changes(resume, changes, RESUME_LIST_FIELDS)
    return resume


def resume_document_data(db: Session, user_id: int) -> dict:
    """Decoded resume fields, ready for the PDF builder."""
    resume = _find_for_user(db, user_id)
    if resume is None:
        raise errors.NotFoundError("Resume not found")
    return schemas.ResumeOut.model_validate(resume).model_dump()
