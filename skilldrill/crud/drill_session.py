from typing import List, Optional

from sqlalchemy.orm import Session

from skilldrill import models
from skilldrill.crud.drill import require_drill
from skilldrill.crud.user import require_user
from skilldrill.utils.validation import require_limit


def log_completion(
    db: Session,
    user_id: str,
    drill_id: int,
    notes: Optional[str] = None,
) -> models.DrillSession:
    """Record that a user completed a drill; the timestamp is stamped here."""
    require_drill(db, drill_id)
    require_user(db, user_id)

    session = models.DrillSession(
        user_id=user_id,
        drill_id=drill_id,
        notes=notes,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def get_session(db: Session, session_id: int) -> Optional[models.DrillSession]:
    return db.query(models.DrillSession).filter(models.DrillSession.id == session_id).first()


def get_user_sessions(
    db: Session,
    user_id: str,
    limit: Optional[int] = None,
) -> List[models.DrillSession]:
    query = db.query(models.DrillSession).filter(
        models.DrillSession.user_id == user_id
    ).order_by(
        models.DrillSession.completed_at.desc(),
        models.DrillSession.id.desc(),
    )
    limit = require_limit(limit)
    if limit:
        query = query.limit(limit)
    return query.all()


def get_sessions_by_drill(
    db: Session,
    drill_id: int,
    limit: Optional[int] = None,
) -> List[models.DrillSession]:
    require_drill(db, drill_id)

    query = db.query(models.DrillSession).filter(
        models.DrillSession.drill_id == drill_id
    ).order_by(
        models.DrillSession.completed_at.desc(),
        models.DrillSession.id.desc(),
    )
    limit = require_limit(limit)
    if limit:
        query = query.limit(limit)
    return query.all()
