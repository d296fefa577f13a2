from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ... import schemas
from ...database import get_db
from ...services import achievements as service

router = APIRouter()


@router.get("", response_model=List[schemas.AchievementWithUser])
def list_achievements(user_id: Optional[int] = Query(default=None, alias="userId"), db: Session = Depends(get_db)):
    return service.list_achievements(db, user_id)


@router.post("", response_model=schemas.AchievementOut)
def create_achievement(payload: schemas.AchievementCreate, db: Session = Depends(get_db)):
    return service.create_achievement(db, payload)


@router.get("/{achievement_id}", response_model=schemas.AchievementWithUser)
def get_achievement(achievement_id: int, db: Session = Depends(get_db)):
    return service.get_achievement(db, achievement_id)


@router.put("/{achievement_id}", response_model=schemas.AchievementOut)
def update_achievement(achievement_id: int, payload: schemas.AchievementUpdate, db: Session = Depends(get_db)):
    return service.update_achievement(db, achievement_id, payload)


@router.delete("/{achievement_id}", response_model=schemas.SuccessOut)
def delete_achievement(achievement_id: int, db: Session = Depends(get_db)):
    service.delete_achievement(db, achievement_id)
    return {"success": True}
