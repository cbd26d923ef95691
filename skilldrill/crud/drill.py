from typing import List, Optional, Tuple, Union

from sqlalchemy.orm import Session

from skilldrill import models
from skilldrill.crud.skill import require_skill
from skilldrill.crud.user import require_user
from skilldrill.exceptions import InvalidCategoryError, NotFoundError, ValidationError
from skilldrill.models.drill import DIFFICULTY_LEVELS, Difficulty
from skilldrill.utils.validation import require_limit, require_text


def coerce_difficulty(value: Union[str, Difficulty]) -> Difficulty:
    if isinstance(value, Difficulty):
        return value
    try:
        return Difficulty(value)
    except ValueError:
        raise ValidationError(f"difficulty must be one of: {', '.join(DIFFICULTY_LEVELS)}")


def require_category(skill: models.Skill, category: str) -> str:
    if category not in (skill.categories or []):
        raise InvalidCategoryError(
            f'Category "{category}" not found for skill "{skill.name}"',
            resource="category",
        )
    return category


# ============================
# DRILL TABLE
# ============================

def create_drill(
    db: Session,
    skill_id: int,
    category: str,
    difficulty: Union[str, Difficulty],
    description: str,
    created_by: str,
) -> models.Drill:
    """
    Insert a drill after checking the skill exists and owns the category.
    Nothing is written when either check fails.
    """
    drill = stage_drill(db, skill_id, category, difficulty, description, created_by)
    db.commit()
    db.refresh(drill)
    return drill


def stage_drill(
    db: Session,
    skill_id: int,
    category: str,
    difficulty: Union[str, Difficulty],
    description: str,
    created_by: str,
) -> models.Drill:
    """Validate and add a drill to the session without committing."""
    skill = require_skill(db, skill_id)
    require_category(skill, category)
    level = coerce_difficulty(difficulty)
    clean_description = require_text(description, "description")
    clean_creator = require_text(created_by, "created_by")

    drill = models.Drill(
        skill_id=skill.id,
        category=category,
        difficulty=level,
        description=clean_description,
        created_by=clean_creator,
    )
    db.add(drill)
    return drill


def get_drill(db: Session, drill_id: int) -> Optional[models.Drill]:
    return db.query(models.Drill).filter(models.Drill.id == drill_id).first()


def require_drill(db: Session, drill_id: int) -> models.Drill:
    drill = get_drill(db, drill_id)
    if not drill:
        raise NotFoundError("Drill not found", resource="drill")
    return drill


def get_drills_by_skill(
    db: Session,
    skill_id: int,
    category: Optional[str] = None,
    difficulty: Optional[Union[str, Difficulty]] = None,
) -> List[models.Drill]:
    require_skill(db, skill_id)

    query = db.query(models.Drill).filter(models.Drill.skill_id == skill_id)
    if category:
        query = query.filter(models.Drill.category == category)
    if difficulty:
        query = query.filter(models.Drill.difficulty == coerce_difficulty(difficulty))

    return query.order_by(models.Drill.created_at.desc(), models.Drill.id.desc()).all()


def get_drills_by_category(db: Session, skill_id: int, category: str) -> List[models.Drill]:
    skill = require_skill(db, skill_id)
    require_category(skill, category)

    return (
        db.query(models.Drill)
        .filter(models.Drill.skill_id == skill_id, models.Drill.category == category)
        .order_by(models.Drill.created_at.desc(), models.Drill.id.desc())
        .all()
    )


def get_drills_by_user(
    db: Session,
    user_id: str,
    limit: Optional[int] = None,
) -> List[Tuple[models.Drill, models.Skill]]:
    """Drills authored by the user, newest first, paired with their skill."""
    require_user(db, user_id)

    query = (
        db.query(models.Drill, models.Skill)
        .join(models.Skill, models.Skill.id == models.Drill.skill_id)
        .filter(models.Drill.created_by == user_id)
        .order_by(models.Drill.created_at.desc(), models.Drill.id.desc())
    )
    limit = require_limit(limit)
    if limit:
        query = query.limit(limit)
    return [(drill, skill) for drill, skill in query.all()]
