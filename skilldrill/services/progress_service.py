# skilldrill/services/progress_service.py
"""
Progress & Statistics Service

Per-user statistics over the completion history. Sessions are joined to
their drill and the drill's skill in memory; every call scans the user's
full history (or the most recent ``limit`` sessions).
"""

import logging
from typing import Dict, Iterable, List, NamedTuple, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from skilldrill import models, schemas
from skilldrill.crud import drill_session as session_crud
from skilldrill.crud.skill import require_skill
from skilldrill.crud.user import require_user
from skilldrill.models.drill import DIFFICULTY_LEVELS
from skilldrill.utils.validation import require_limit, require_text

logger = logging.getLogger(__name__)


class ResolvedSession(NamedTuple):
    session: models.DrillSession
    drill: models.Drill
    skill: models.Skill


# =====================================
# JOIN POLICY
# =====================================

def exclude_orphaned_sessions(
    db: Session,
    sessions: Iterable[models.DrillSession],
) -> List[ResolvedSession]:
    """
    Resolve each session's drill and the drill's skill.

    A session whose drill or skill no longer resolves is an orphan: it is
    dropped from the result instead of failing the whole read. Input order
    is preserved.
    """
    sessions = list(sessions)
    if not sessions:
        return []

    drill_ids = {s.drill_id for s in sessions}
    drills = {
        d.id: d
        for d in db.query(models.Drill).filter(models.Drill.id.in_(drill_ids)).all()
    }
    skill_ids = {d.skill_id for d in drills.values()}
    skills = {
        s.id: s
        for s in db.query(models.Skill).filter(models.Skill.id.in_(skill_ids)).all()
    } if skill_ids else {}

    resolved = []
    for session in sessions:
        drill = drills.get(session.drill_id)
        skill = skills.get(drill.skill_id) if drill else None
        if drill is None or skill is None:
            continue
        resolved.append(ResolvedSession(session, drill, skill))

    orphaned = len(sessions) - len(resolved)
    if orphaned:
        logger.debug("Excluded %s orphaned drill session(s)", orphaned)
    return resolved


def empty_difficulty_counts() -> Dict[str, int]:
    return {level: 0 for level in DIFFICULTY_LEVELS}


def _difficulty_label(drill: models.Drill) -> str:
    level = drill.difficulty
    return level.value if hasattr(level, "value") else str(level)


# =====================================
# USER STATISTICS
# =====================================

def compute_user_stats(
    db: Session,
    user_id: str,
    limit: Optional[int] = None,
) -> schemas.UserDrillStats:
    """
    Aggregate a user's completion history.

    Args:
        db: Database session
        user_id: External identity of the user
        limit: Only aggregate the N most recently completed sessions

    Returns:
        UserDrillStats with totals and per skill / difficulty / category counts

    Raises:
        ValidationError: If user_id is blank or limit is not a positive integer
        NotFoundError: If no user correlates to user_id
    """
    user_id = require_text(user_id, "user_id")
    limit = require_limit(limit)
    require_user(db, user_id)

    # Newest first, so per-skill ordering follows most recent activity
    sessions = session_crud.get_user_sessions(db, user_id, limit=limit)
    resolved = exclude_orphaned_sessions(db, sessions)

    by_skill: Dict[int, schemas.SkillSessionCount] = {}
    by_difficulty = empty_difficulty_counts()
    by_category: Dict[str, int] = {}
    drill_ids = set()

    for session, drill, skill in resolved:
        drill_ids.add(drill.id)

        entry = by_skill.get(skill.id)
        if entry is None:
            by_skill[skill.id] = schemas.SkillSessionCount(
                skill_id=skill.id,
                skill_name=skill.name,
                session_count=1,
                last_completed=session.completed_at,
            )
        else:
            entry.session_count += 1
            # Strictly later only: on equal timestamps the first-seen session wins
            if entry.last_completed is None or session.completed_at > entry.last_completed:
                entry.last_completed = session.completed_at

        by_difficulty[_difficulty_label(drill)] += 1
        by_category[drill.category] = by_category.get(drill.category, 0) + 1

    return schemas.UserDrillStats(
        total_sessions=len(resolved),
        total_drills=len(drill_ids),
        total_skills=len(by_skill),
        sessions_by_skill=list(by_skill.values()),
        sessions_by_difficulty=by_difficulty,
        sessions_by_category=by_category,
    )


# =====================================
# HISTORY
# =====================================

def get_drill_history(
    db: Session,
    user_id: str,
    limit: Optional[int] = None,
) -> List[ResolvedSession]:
    """User's completed drills in reverse chronological order, with details."""
    user_id = require_text(user_id, "user_id")
    require_user(db, user_id)
    sessions = session_crud.get_user_sessions(db, user_id, limit=limit)
    return exclude_orphaned_sessions(db, sessions)


def to_history_entry(item: ResolvedSession) -> schemas.DrillHistoryEntry:
    base = schemas.DrillSession.model_validate(item.session).model_dump()
    return schemas.DrillHistoryEntry(
        **base,
        drill=schemas.Drill.model_validate(item.drill),
        skill=schemas.Skill.model_validate(item.skill),
    )


# =====================================
# SKILL / PLATFORM COUNTS
# =====================================

def get_skill_category_stats(db: Session, skill_id: int) -> schemas.SkillCategories:
    """Drill and session counts for every category of a skill (all users)."""
    skill = require_skill(db, skill_id)

    drill_rows = db.query(models.Drill.id, models.Drill.category).filter(
        models.Drill.skill_id == skill.id
    ).all()
    drill_category = {drill_id: category for drill_id, category in drill_rows}

    session_rows = []
    if drill_category:
        session_rows = db.query(
            models.DrillSession.drill_id, func.count(models.DrillSession.id)
        ).filter(
            models.DrillSession.drill_id.in_(list(drill_category))
        ).group_by(models.DrillSession.drill_id).all()

    drill_counts: Dict[str, int] = {}
    for category in drill_category.values():
        drill_counts[category] = drill_counts.get(category, 0) + 1

    session_counts: Dict[str, int] = {}
    for drill_id, count in session_rows:
        category = drill_category[drill_id]
        session_counts[category] = session_counts.get(category, 0) + count

    categories = list(skill.categories or [])
    return schemas.SkillCategories(
        skill_name=skill.name,
        categories=categories,
        category_stats=[
            schemas.SkillCategoryStat(
                category=category,
                drill_count=drill_counts.get(category, 0),
                sessions_count=session_counts.get(category, 0),
            )
            for category in categories
        ],
    )


def get_database_stats(db: Session) -> schemas.DatabaseStats:
    users = db.query(models.User).count()
    skills = db.query(models.Skill).count()
    drills = db.query(models.Drill).count()
    sessions = db.query(models.DrillSession).count()
    return schemas.DatabaseStats(
        users_count=users,
        skills_count=skills,
        drills_count=drills,
        sessions_count=sessions,
        message=(
            f"Database contains {users} users, {skills} skills, "
            f"{drills} drills, and {sessions} sessions."
        ),
    )
