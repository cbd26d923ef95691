from typing import List, Optional

from sqlalchemy.orm import Session

from skilldrill import models
from skilldrill.exceptions import NotFoundError
from skilldrill.utils.validation import require_limit, require_text


def get_user(db: Session, user_id: str) -> Optional[models.User]:
    return db.query(models.User).filter(models.User.user_id == user_id).first()


def require_user(db: Session, user_id: str) -> models.User:
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found", resource="user")
    return user


def create_user(db: Session, user_id: str, name: Optional[str] = None) -> models.User:
    """Called on first sign-in; returns the existing record on repeat calls."""
    user_id = require_text(user_id, "user_id")
    existing = get_user(db, user_id)
    if existing:
        return existing

    db_user = models.User(user_id=user_id, name=name)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, user_id: str, name: Optional[str]) -> models.User:
    db_user = require_user(db, user_id)
    db_user.name = name
    db.commit()
    db.refresh(db_user)
    return db_user


def get_users(db: Session, limit: Optional[int] = None) -> List[models.User]:
    query = db.query(models.User).order_by(
        models.User.created_at.desc(), models.User.id.desc()
    )
    limit = require_limit(limit)
    if limit:
        query = query.limit(limit)
    return query.all()
