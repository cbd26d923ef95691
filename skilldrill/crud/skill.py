from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from skilldrill import models
from skilldrill.exceptions import NotFoundError
from skilldrill.utils.validation import require_text


# ============================
# SKILL TABLE
# ============================

def create_skill(
    db: Session,
    name: str,
    categories: List[str],
    created_by: Optional[str] = None,
    is_public: bool = True,
) -> models.Skill:
    clean_name = require_text(name, "name")
    clean_categories = [require_text(category, "category") for category in categories or []]

    new_skill = models.Skill(
        name=clean_name,
        categories=clean_categories,
        created_by=created_by,
        is_public=is_public,
    )
    db.add(new_skill)
    db.commit()
    db.refresh(new_skill)
    return new_skill


def get_skill(db: Session, skill_id: int) -> Optional[models.Skill]:
    return db.query(models.Skill).filter(models.Skill.id == skill_id).first()


def require_skill(db: Session, skill_id: int) -> models.Skill:
    skill = get_skill(db, skill_id)
    if not skill:
        raise NotFoundError("Skill not found", resource="skill")
    return skill


def get_skills(db: Session, user_id: Optional[str] = None) -> List[models.Skill]:
    """Public skills, plus the caller's own private ones; newest first."""
    query = db.query(models.Skill)
    if user_id:
        query = query.filter(
            or_(models.Skill.is_public.is_(True), models.Skill.created_by == user_id)
        )
    else:
        query = query.filter(models.Skill.is_public.is_(True))
    return query.order_by(models.Skill.created_at.desc(), models.Skill.id.desc()).all()
