import re
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from ... import errors, schemas
from ...database import get_db
from ...pdf import render_resume_pdf, resume_filename
from ...services import resumes as service

router = APIRouter()

_UNSAFE_FILENAME = re.compile(r'[^\x20-\x7e]+|["\\]')


def content_disposition(filename: str) -> str:
    """
    `attachment` header that survives any resume name: an ASCII `filename`
    for old clients plus the UTF-8 `filename*` form (RFC 5987).
    """
    fallback = _UNSAFE_FILENAME.sub("_", filename).strip() or "resume.pdf"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _require_user_id(user_id: Optional[int]) -> int:
    if user_id is None:
        raise errors.ValidationError("userId required")
    return user_id


@router.get("", response_model=Optional[schemas.ResumeOut])
def get_resume(user_id: Optional[int] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    """The user's resume, or null if they have none yet."""
    return service.get_resume_for_user(db, _require_user_id(user_id))


@router.post("", response_model=schemas.ResumeOut)
def save_resume(payload: schemas.ResumeUpsert, db: Session = Depends(get_db)):
    """Create the user's resume, or update it in place if one exists."""
    return service.upsert_resume(db, payload)


@router.put("", response_model=schemas.ResumeOut)
def update_resume(payload: schemas.ResumeUpdate, db: Session = Depends(get_db)):
    """Update a resume by its id."""
    return service.update_resume(db, payload)


@router.get("/pdf")
def download_resume_pdf(user_id: Optional[int] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    data = service.resume_document_data(db, _require_user_id(user_id))
    return Response(
        content=render_resume_pdf(data),
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(resume_filename(data))},
    )
