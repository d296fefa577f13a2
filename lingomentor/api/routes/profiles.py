from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import schemas
from ...database import get_db
from ...services import profiles as service

router = APIRouter()


@router.get("", response_model=List[schemas.ProfileWithUser])
def list_profiles(user_id: Optional[int] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    return service.list_profiles(db, user_id)


@router.post("", response_model=schemas.ProfileOut)
def create_profile(payload: schemas.ProfileCreate, db: Session = Depends(get_db)):
    return service.create_profile(db, payload)


@router.get("/{profile_id}", response_model=schemas.ProfileWithUser)
def get_profile(profile_id: int, db: Session = Depends(get_db)):
    return service.get_profile(db, profile_id)


@router.put("/{profile_id}", response_model=schemas.ProfileOut)
def update_profile(profile_id: int, payload: schemas.ProfileUpdate, db: Session = Depends(get_db)):
    return service.update_profile(db, profile_id, payload)


@router.delete("/{profile_id}", response_model=schemas.SuccessOut)
def delete_profile(profile_id: int, db: Session = Depends(get_db)):
    service.delete_profile(db, profile_id)
    return {"success": True}
