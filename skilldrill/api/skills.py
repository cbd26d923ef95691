from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.crud import skill as skill_crud
from skilldrill.database import get_db
from skilldrill.services import progress_service

router = APIRouter(prefix="/skills", tags=["Skills"])


# ======================
# GET: Skills visible to a user
# ======================
@router.get("/", response_model=List[schemas.Skill])
def list_skills(user_id: Optional[str] = None, db: Session = Depends(get_db)):
    """Public skills, plus the private skills created by ``user_id`` when given."""
    return skill_crud.get_skills(db, user_id=user_id)


@router.post("/", response_model=schemas.Skill, status_code=status.HTTP_201_CREATED)
def create_skill(payload: schemas.SkillCreate, db: Session = Depends(get_db)):
    return skill_crud.create_skill(
        db,
        name=payload.name,
        categories=payload.categories,
        created_by=payload.created_by,
        is_public=payload.is_public,
    )


@router.get("/{skill_id}", response_model=schemas.Skill)
def get_skill(skill_id: int, db: Session = Depends(get_db)):
    return skill_crud.require_skill(db, skill_id)


# ======================
# GET: Per-category drill and session counts
# ======================
@router.get("/{skill_id}/categories", response_model=schemas.SkillCategories)
def get_skill_categories(skill_id: int, db: Session = Depends(get_db)):
    return progress_service.get_skill_category_stats(db, skill_id)
