from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import schemas
from ...database import get_db
from ...services import users as service

router = APIRouter()


@router.get("", response_model=List[schemas.UserDetail])
def list_users(
    id: Optional[int] = None,
    email: Optional[str] = None,
    name: Optional[str] = None,
    role: Optional[str] = Query(default=None, description="mentor | student"),
    db: Session = Depends(get_db),
):
    """List users, optionally filtered by id, email, name or role."""
    return service.list_users(db, user_id=id, email=email, name=name, role=role)


@router.post("", response_model=schemas.UserUpsertResult)
def create_user(payload: schemas.UserCreate, db: Session = Depends(get_db)):
    """Create a user + profile; an already-registered email updates them instead."""
    return service.upsert_user(db, payload)


@router.post("/sync", response_model=schemas.UserUpsertResult)
def sync_user(payload: schemas.IdentitySync, db: Session = Depends(get_db)):
    """Ensure the signed-in identity has an app user and profile."""
    return service.sync_identity(db, payload)


@router.get("/{user_id}", response_model=schemas.UserDetail)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return service.get_user(db, user_id)


@router.put("/{user_id}", response_model=schemas.UserOut)
def update_user(user_id: int, payload: schemas.UserUpdate, db: Session = Depends(get_db)):
    return service.update_user(db, user_id, payload)


@router.delete("/{user_id}", response_model=schemas.SuccessOut)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    service.delete_user(db, user_id)
    return {"success": True}
