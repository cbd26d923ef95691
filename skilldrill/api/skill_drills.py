from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.crud import skill_drill as skill_drill_crud
from skilldrill.database import get_db
from skilldrill.exceptions import NotFoundError
from skilldrill.utils.security import get_current_user_id

router = APIRouter(prefix="/skill-drills", tags=["Skill Drills"])


# ======================
# GET: Caller's skill drills
# ======================
@router.get("/", response_model=List[schemas.SkillDrill])
def list_skill_drills(
    current_user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return skill_drill_crud.get_skill_drills(db, current_user_id)


@router.get("/{skill_drill_id}", response_model=schemas.SkillDrill)
def get_skill_drill(
    skill_drill_id: int,
    current_user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    skill_drill = skill_drill_crud.get_skill_drill(db, current_user_id, skill_drill_id)
    if not skill_drill:
        raise NotFoundError("Skill drill not found", resource="skill_drill")
    return skill_drill


# ======================
# POST: Assign a drill to the caller
# ======================
@router.post("/", response_model=schemas.SkillDrill, status_code=status.HTTP_201_CREATED)
def create_skill_drill(
    payload: schemas.SkillDrillCreate,
    current_user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return skill_drill_crud.create_skill_drill(
        db,
        user_id=current_user_id,
        skill_name=payload.skill_name,
        level=payload.level,
        drill_description=payload.drill_description,
        assigned_date=payload.assigned_date,
    )


@router.post("/{skill_drill_id}/complete", response_model=schemas.SkillDrill)
def complete_skill_drill(
    skill_drill_id: int,
    payload: schemas.SkillDrillComplete,
    current_user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    return skill_drill_crud.complete_skill_drill(
        db, current_user_id, skill_drill_id, payload.feedback
    )
