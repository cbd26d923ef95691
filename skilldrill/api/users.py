from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.crud import drill as drill_crud
from skilldrill.crud import user as user_crud
from skilldrill.database import get_db

router = APIRouter(prefix="/users", tags=["Users"])


# ======================
# POST: Mirror an identity-provider user (idempotent)
# ======================
@router.post("/", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def create_user(payload: schemas.UserCreate, db: Session = Depends(get_db)):
    return user_crud.create_user(db, payload.user_id, payload.name)


@router.get("/", response_model=List[schemas.User])
def list_users(limit: Optional[int] = None, db: Session = Depends(get_db)):
    return user_crud.get_users(db, limit=limit)


@router.get("/{user_id}", response_model=schemas.User)
def get_user(user_id: str, db: Session = Depends(get_db)):
    return user_crud.require_user(db, user_id)


@router.patch("/{user_id}", response_model=schemas.User)
def update_user(user_id: str, payload: schemas.UserUpdate, db: Session = Depends(get_db)):
    return user_crud.update_user(db, user_id, payload.name)


# ======================
# GET: Drills authored by a user
# ======================
@router.get("/{user_id}/drills", response_model=List[schemas.DrillWithSkill])
def get_user_drills(user_id: str, limit: Optional[int] = None, db: Session = Depends(get_db)):
    return [
        schemas.DrillWithSkill(
            **schemas.Drill.model_validate(drill).model_dump(),
            skill=schemas.Skill.model_validate(skill),
        )
        for drill, skill in drill_crud.get_drills_by_user(db, user_id, limit=limit)
    ]
