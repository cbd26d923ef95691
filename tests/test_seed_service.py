"""
Sample data seeding and bulk clearing.
"""

from datetime import datetime

from skilldrill import models
from skilldrill.services import progress_service, seed_service

NOW = datetime(2024, 3, 10, 8, 30, 0)


def test_seed_inserts_sample_records(db_session):
    result = seed_service.seed_database(db_session, now=NOW)

    assert (result.users_created, result.skills_created, result.drills_created, result.sessions_created) == (3, 6, 13, 9)
    assert result.message == (
        "Successfully seeded database with 3 users, 6 skills, 13 drills, and 9 sessions."
    )
    assert db_session.query(models.DrillSession).count() == 9


def test_seeded_user_statistics(db_session):
    seed_service.seed_database(db_session, now=NOW)

    stats = progress_service.compute_user_stats(db_session, "user_2abc123def456")

    assert stats.total_sessions == 3
    assert stats.total_skills == 3
    assert stats.sessions_by_difficulty == {"Beginner": 3, "Intermediate": 0, "Advanced": 0}
    # Most recent first: LeetCode (1 day), Basketball (2 days), Piano (3 days)
    assert [entry.skill_name for entry in stats.sessions_by_skill] == ["LeetCode", "Basketball", "Piano"]


def test_reseeding_reuses_existing_users(db_session):
    seed_service.seed_database(db_session, now=NOW)

    again = seed_service.seed_database(db_session, now=NOW)

    assert again.users_created == 0
    assert db_session.query(models.User).count() == 3
    assert db_session.query(models.Skill).count() == 12


def test_clear_database_removes_everything(db_session):
    seed_service.seed_database(db_session, now=NOW)

    result = seed_service.clear_database(db_session)

    assert (result.sessions_deleted, result.drills_deleted, result.skills_deleted, result.users_deleted) == (9, 13, 6, 3)
    assert result.message == (
        "Successfully cleared database. Deleted 9 sessions, 13 drills, 6 skills, and 3 users."
    )
    stats = progress_service.get_database_stats(db_session)
    assert (stats.users_count, stats.skills_count, stats.drills_count, stats.sessions_count) == (0, 0, 0, 0)
