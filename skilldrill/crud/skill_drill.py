from datetime import datetime
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from skilldrill import models
from skilldrill.crud.drill import coerce_difficulty
from skilldrill.exceptions import NotFoundError
from skilldrill.models.drill import Difficulty


def get_skill_drills(db: Session, user_id: str) -> List[models.SkillDrill]:
    return db.query(models.SkillDrill).filter(
        models.SkillDrill.user_id == user_id
    ).order_by(models.SkillDrill.created_at.desc(), models.SkillDrill.id.desc()).all()


def get_skill_drill(db: Session, user_id: str, skill_drill_id: int) -> Optional[models.SkillDrill]:
    return db.query(models.SkillDrill).filter(
        models.SkillDrill.id == skill_drill_id,
        models.SkillDrill.user_id == user_id,
    ).first()


def create_skill_drill(
    db: Session,
    user_id: str,
    skill_name: str,
    level: Union[str, Difficulty],
    drill_description: str,
    assigned_date: datetime,
) -> models.SkillDrill:
    skill_drill = models.SkillDrill(
        user_id=user_id,
        skill_name=skill_name,
        level=coerce_difficulty(level),
        drill_description=drill_description,
        assigned_date=assigned_date,
        completed=False,
    )
    db.add(skill_drill)
    db.commit()
    db.refresh(skill_drill)
    return skill_drill


def complete_skill_drill(
    db: Session,
    user_id: str,
    skill_drill_id: int,
    feedback: Optional[str] = None,
) -> models.SkillDrill:
    skill_drill = get_skill_drill(db, user_id, skill_drill_id)
    if not skill_drill:
        raise NotFoundError("Skill drill not found", resource="skill_drill")

    skill_drill.completed = True
    # Empty feedback leaves any earlier feedback untouched
    if feedback:
        skill_drill.feedback = feedback
    db.commit()
    db.refresh(skill_drill)
    return skill_drill
