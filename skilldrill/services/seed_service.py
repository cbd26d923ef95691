# skilldrill/services/seed_service.py
"""
Development seeding and bulk clearing.

Both operations run in a single transaction: on any database error the
session is rolled back and the error propagates.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skilldrill import models
from skilldrill.database import utcnow
from skilldrill.models.drill import Difficulty
from skilldrill.schemas.admin import ClearResult, SeedResult
from skilldrill.seed_data import SAMPLE_DRILLS, SAMPLE_SESSIONS, SAMPLE_SKILLS, SAMPLE_USERS

logger = logging.getLogger(__name__)


def seed_database(db: Session, now: Optional[datetime] = None) -> SeedResult:
    """
    Insert the sample users, skills, drills and completion sessions.

    Existing users with a sample ``user_id`` are reused rather than
    duplicated; skills, drills and sessions are always inserted.
    """
    now = now or utcnow()

    def ago(days: int) -> datetime:
        return now - timedelta(days=days)

    try:
        users = []
        users_created = 0
        for data in SAMPLE_USERS:
            user = db.query(models.User).filter(models.User.user_id == data["user_id"]).first()
            if user is None:
                user = models.User(
                    user_id=data["user_id"],
                    name=data["name"],
                    created_at=ago(data["days_ago"]),
                )
                db.add(user)
                users_created += 1
            users.append(user)

        skills_by_name = {}
        for data in SAMPLE_SKILLS:
            skill = models.Skill(
                name=data["name"],
                categories=list(data["categories"]),
                is_public=True,
                created_at=ago(data["days_ago"]),
            )
            db.add(skill)
            skills_by_name[data["name"]] = skill
        db.flush()

        drills = []
        for data in SAMPLE_DRILLS:
            drill = models.Drill(
                skill_id=skills_by_name[data["skill"]].id,
                category=data["category"],
                difficulty=Difficulty(data["difficulty"]),
                description=data["description"],
                created_by=data["created_by"],
                created_at=ago(data["days_ago"]),
            )
            db.add(drill)
            drills.append(drill)
        db.flush()

        for data in SAMPLE_SESSIONS:
            db.add(
                models.DrillSession(
                    user_id=users[data["user"]].user_id,
                    drill_id=drills[data["drill"]].id,
                    completed_at=ago(data["days_ago"]),
                    notes=data["notes"],
                )
            )

        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error seeding database")
        raise

    result = SeedResult(
        users_created=users_created,
        skills_created=len(SAMPLE_SKILLS),
        drills_created=len(SAMPLE_DRILLS),
        sessions_created=len(SAMPLE_SESSIONS),
        message=(
            f"Successfully seeded database with {users_created} users, "
            f"{len(SAMPLE_SKILLS)} skills, {len(SAMPLE_DRILLS)} drills, "
            f"and {len(SAMPLE_SESSIONS)} sessions."
        ),
    )
    logger.info(result.message)
    return result


def clear_database(db: Session) -> ClearResult:
    """Delete every session, drill, skill and user, in that order."""
    try:
        sessions = db.query(models.DrillSession).delete(synchronize_session=False)
        drills = db.query(models.Drill).delete(synchronize_session=False)
        skills = db.query(models.Skill).delete(synchronize_session=False)
        users = db.query(models.User).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error clearing database")
        raise

    message = (
        f"Successfully cleared database. Deleted {sessions} sessions, "
        f"{drills} drills, {skills} skills, and {users} users."
    )
    logger.warning(message)
    return ClearResult(
        sessions_deleted=sessions,
        drills_deleted=drills,
        skills_deleted=skills,
        users_deleted=users,
        message=message,
    )
