from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from skilldrill import schemas
from skilldrill.crud import drill as drill_crud
from skilldrill.crud import skill as skill_crud
from skilldrill.database import get_db
from skilldrill.models.drill import Difficulty

router = APIRouter(prefix="/drills", tags=["Drills"])


@router.post("/", response_model=schemas.Drill, status_code=status.HTTP_201_CREATED)
def create_drill(payload: schemas.DrillCreate, db: Session = Depends(get_db)):
    return drill_crud.create_drill(
        db,
        skill_id=payload.skill_id,
        category=payload.category,
        difficulty=payload.difficulty,
        description=payload.description,
        created_by=payload.created_by,
    )


@router.get("/by-skill/{skill_id}", response_model=List[schemas.Drill])
def list_drills_by_skill(
    skill_id: int,
    category: Optional[str] = None,
    difficulty: Optional[Difficulty] = None,
    db: Session = Depends(get_db),
):
    return drill_crud.get_drills_by_skill(db, skill_id, category=category, difficulty=difficulty)


@router.get("/by-skill/{skill_id}/categories/{category}", response_model=List[schemas.Drill])
def list_drills_by_category(skill_id: int, category: str, db: Session = Depends(get_db)):
    return drill_crud.get_drills_by_category(db, skill_id, category)


@router.get("/{drill_id}", response_model=schemas.DrillWithSkill)
def get_drill(drill_id: int, db: Session = Depends(get_db)):
    drill = drill_crud.require_drill(db, drill_id)
    skill = skill_crud.require_skill(db, drill.skill_id)
    return schemas.DrillWithSkill(
        **schemas.Drill.model_validate(drill).model_dump(),
        skill=schemas.Skill.model_validate(skill),
    )
