from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from ... import errors, schemas
from ...database import get_db
from ...services import voice_records as service
from ...storage import SupabaseStorage, get_storage

router = APIRouter()
upload_router = APIRouter()


@router.get("", response_model=List[schemas.VoiceRecordWithUser])
def list_voice_records(user_id: Optional[int] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    return service.list_voice_records(db, user_id)


@router.post("", response_model=schemas.VoiceRecordOut)
def create_voice_record(payload: schemas.VoiceRecordCreate, db: Session = Depends(get_db)):
    return service.create_voice_record(db, payload)


@router.get("/{record_id}", response_model=schemas.VoiceRecordWithUser)
def get_voice_record(record_id: int, db: Session = Depends(get_db)):
    return service.get_voice_record(db, record_id)


@router.put("/{record_id}", response_model=schemas.VoiceRecordOut)
def update_voice_record(record_id: int, payload: schemas.VoiceRecordUpdate, db: Session = Depends(get_db)):
    return service.update_voice_record(db, record_id, payload)


@router.delete("/{record_id}", response_model=schemas.SuccessOut)
def delete_voice_record(record_id: int, db: Session = Depends(get_db)):
    service.delete_voice_record(db, record_id)
    return {"success": True}


@upload_router.post("", response_model=schemas.VoiceRecordOut)
def upload_voice(
    file: Optional[UploadFile] = File(default=None),
    user_id: Optional[str] = Form(default=None, alias="userId"),
    db: Session = Depends(get_db),
    storage: SupabaseStorage = Depends(get_storage),
):
    """Store an audio file in the bucket and record its public URL."""
    if file is None or not (user_id or "").strip().isdigit() or int(user_id) == 0:
        raise errors.ValidationError("Missing file or userId")

    return service.upload_voice(
        db,
        storage,
        user_id=int(user_id),
        filename=file.filename,
        data=file.file.read(),
        content_type=file.content_type,
    )
