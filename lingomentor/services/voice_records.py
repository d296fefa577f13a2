"""
Voice record service, including the upload flow:
bucket upload first, then the VoiceRecord row pointing at its public URL.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session, selectinload

from .. import errors, schemas
from ..database import unit_of_work
from ..models import VoiceRecord
from ..storage import SupabaseStorage, StorageError, object_name
from .crud import apply_changes, get_or_404

logger = logging.getLogger(__name__)


def list_voice_records(db: Session, user_id: int | None = None) -> list[VoiceRecord]:
    query = db.query(VoiceRecord).options(selectinload(VoiceRecord.user))
    if user_id is not None:
        query = query.filter(VoiceRecord.user_id == user_id)
    return query.order_by(VoiceRecord.id).all()


def get_voice_record(db: Session, record_id: int) -> VoiceRecord:
    return get_or_404(
        db, VoiceRecord, record_id, "Voice record",
        options=(selectinload(VoiceRecord.user),),
    )


def create_voice_record(db: Session, payload: schemas.VoiceRecordCreate) -> VoiceRecord:
    with unit_of_work(db):
        record = VoiceRecord(user_id=payload.user_id, url=payload.url)
        db.add(record)
        db.flush()
    return record


def update_voice_record(db: Session, record_id: int, payload: schemas.VoiceRecordUpdate) -> VoiceRecord:
    with unit_of_work(db):
        record = get_or_404(db, VoiceRecord, record_id, "Voice record")
        apply_changes(record, payload.model_dump(exclude_unset=True))
    return record


def delete_voice_record(db: Session, record_id: int) -> None:
    with unit_of_work(db):
        db.delete(get_or_404(db, VoiceRecord, record_id, "Voice record"))


def upload_voice(
    db: Session,
    storage: SupabaseStorage,
    *,
    user_id: int,
    filename: str | None,
    data: bytes,
    content_type: str | None = None,
) -> VoiceRecord:
    name = object_name(filename)
    # Upload failure aborts here, before any row is written.
    url = storage.upload(name, data, content_type)
    logger.info("Uploaded %s (%d bytes) for user %s", name, len(data), user_id)

    try:
        return create_voice_record(db, schemas.VoiceRecordCreate(user_id=user_id, url=url))
    except errors.AppError:
        # The blob is already in the bucket; remove it so it is not orphaned.
        logger.warning("VoiceRecord insert failed after upload; removing orphan %s", name)
        try:
            storage.delete(name)
        except StorageError:
            logger.exception("Could not remove orphaned upload %s", name)
        raise
