# tests/test_recommendations.py
"""
AI drill actions with a fake drafting client: tagged results, prompt
contents, variation parsing and progress analysis. The Gemini client is
exercised against stubbed model responses.
"""

import random
from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import OperationalError

from skilldrill import models
from skilldrill.crud import drill as drill_crud
from skilldrill.crud import skill as skill_crud
from skilldrill.crud import user as user_crud
from skilldrill.exceptions import UpstreamServiceError
from skilldrill.models.drill import Difficulty
from skilldrill.schemas.ai import HistoryDrill, HistoryItem
from skilldrill.services import drafting_service, recommendation_service
from skilldrill.services.drafting_service import GeminiDraftingClient, UnconfiguredDraftingClient

from conftest import FakeDraftingClient

NOW = datetime(2024, 6, 15, 9, 0, 0)


@pytest.fixture
def piano(db_session):
    user_crud.create_user(db_session, "u1", "Pianist")
    return skill_crud.create_skill(db_session, "Piano", ["scales", "chords", "sight-reading"])


def _log(db, user_id, drill, completed_at):
    db.add(models.DrillSession(user_id=user_id, drill_id=drill.id, completed_at=completed_at))
    db.commit()


# ======================
# GENERATE AND STORE
# ======================

def test_generate_drill_stores_ai_description(db_session, piano, drafting_client):
    result = recommendation_service.generate_and_store_drill(
        db_session, drafting_client, piano.id, "scales", "Beginner", "u1"
    )

    assert result.success is True
    assert result.error is None
    assert result.drill.description == drafting_client.reply
    assert result.drill.difficulty == Difficulty.BEGINNER
    assert result.drill.created_by == "u1"
    assert db_session.query(models.Drill).count() == 1

    prompt = drafting_client.prompts[0]
    assert "Create a beginner level drill for Piano - scales category." in prompt
    assert "Available Categories: scales, chords, sight-reading" in prompt


def test_generate_drill_includes_recent_history(db_session, piano, drafting_client):
    drill = drill_crud.create_drill(db_session, piano.id, "chords", "Intermediate", "Triads", "u1")
    db_session.add(models.DrillSession(user_id="u1", drill_id=drill.id, notes="minor is hard"))
    db_session.commit()

    recommendation_service.generate_and_store_drill(
        db_session, drafting_client, piano.id, "scales", "Advanced", "u1"
    )

    prompt = drafting_client.prompts[0]
    assert "User's recent drill history:" in prompt
    assert "1. chords - Intermediate: Triads" in prompt
    assert "Notes: minor is hard" in prompt


def test_generate_drill_uses_supplied_history(db_session, piano, drafting_client):
    history = [
        HistoryItem(
            drill_id=1,
            completed_at=NOW,
            drill=HistoryDrill(category="scales", difficulty="Beginner", description="Supplied"),
        )
    ]

    recommendation_service.generate_and_store_drill(
        db_session, drafting_client, piano.id, "scales", "Beginner", "u1", user_history=history
    )

    assert "Supplied" in drafting_client.prompts[0]


def test_generate_drill_invalid_category_is_tagged_failure(db_session, piano, drafting_client):
    result = recommendation_service.generate_and_store_drill(
        db_session, drafting_client, piano.id, "jazz", "Beginner", "u1"
    )

    assert result.success is False
    assert result.drill is None
    assert 'Category "jazz" not found for skill "Piano"' in result.error
    assert drafting_client.prompts == []
    assert db_session.query(models.Drill).count() == 0


def test_generate_drill_upstream_failure(db_session, piano, failing_client):
    result = recommendation_service.generate_and_store_drill(
        db_session, failing_client, piano.id, "scales", "Beginner", "u1"
    )

    assert result.success is False
    assert "Google Gemini API error" in result.error
    assert db_session.query(models.Drill).count() == 0


def test_unconfigured_client_fails_every_call(db_session, piano):
    result = recommendation_service.generate_and_store_drill(
        db_session, UnconfiguredDraftingClient(), piano.id, "scales", "Beginner", "u1"
    )

    assert result.success is False
    assert "API key not found" in result.error


# ======================
# DAILY DRILL
# ======================

def test_daily_drill_picks_existing_drill(db_session, piano, drafting_client):
    a = drill_crud.create_drill(db_session, piano.id, "scales", "Beginner", "A", "u1")
    b = drill_crud.create_drill(db_session, piano.id, "chords", "Beginner", "B", "u1")

    result = recommendation_service.get_daily_drill(
        db_session, drafting_client, "u1", rng=random.Random(7)
    )

    assert result.success is True
    assert result.drill.id in {a.id, b.id}
    assert result.drill.skill.name == "Piano"
    assert drafting_client.prompts == []


def test_daily_drill_drafts_when_skill_has_no_drills(db_session, piano, drafting_client):
    result = recommendation_service.get_daily_drill(db_session, drafting_client, "u1")

    assert result.success is True
    assert result.drill.category == "scales"
    assert result.drill.difficulty == Difficulty.INTERMEDIATE
    assert result.analysis.current_level == "Beginner"
    assert result.analysis.focus_areas == ["scales", "chords"]
    assert db_session.query(models.Drill).count() == 1


def test_daily_drill_without_any_skill(db_session, drafting_client):
    user_crud.create_user(db_session, "lonely")

    result = recommendation_service.get_daily_drill(db_session, drafting_client, "lonely")

    assert result.success is False
    assert result.error == "No skills available"


def test_daily_drill_for_explicit_skill_and_category(db_session, piano, drafting_client):
    result = recommendation_service.get_daily_drill(
        db_session, drafting_client, "u1", skill_id=piano.id, category="chords"
    )

    assert result.success is True
    assert result.drill.category == "chords"


def test_daily_drill_skill_without_categories(db_session, piano, drafting_client):
    bare = skill_crud.create_skill(db_session, "Bare", [])

    result = recommendation_service.get_daily_drill(
        db_session, drafting_client, "u1", skill_id=bare.id
    )

    assert result.success is False
    assert "has no categories" in result.error


# ======================
# VARIATIONS
# ======================

def test_variations_are_parsed_and_stored(db_session, piano):
    client = FakeDraftingClient(reply="1. Play slowly\n2. Play with metronome\n3. Play hands apart")

    result = recommendation_service.generate_drill_variations(
        db_session, client, piano.id, "scales", "Beginner", "u1", count=3
    )

    assert result.success is True
    assert [d.description for d in result.drills] == [
        "Play slowly",
        "Play with metronome",
        "Play hands apart",
    ]
    assert db_session.query(models.Drill).count() == 3
    assert "Create 3 different beginner level drill variations" in client.prompts[0]


def test_variations_count_out_of_range(db_session, piano, drafting_client):
    result = recommendation_service.generate_drill_variations(
        db_session, drafting_client, piano.id, "scales", "Beginner", "u1", count=0
    )

    assert result.success is False
    assert "count must be between 1 and 10" in result.error
    assert drafting_client.prompts == []


def test_variations_upstream_failure_stores_nothing(db_session, piano, failing_client):
    result = recommendation_service.generate_drill_variations(
        db_session, failing_client, piano.id, "scales", "Beginner", "u1"
    )

    assert result.success is False
    assert db_session.query(models.Drill).count() == 0


def test_parse_variations_handles_markers():
    content = "1. First idea\n2. Second idea\n- Third idea\n* Fourth idea"

    assert drafting_service.parse_variations(content, count=3) == [
        "First idea",
        "Second idea",
        "Third idea",
    ]
    assert drafting_service.parse_variations("Just one block of text", count=3) == [
        "Just one block of text"
    ]
    assert drafting_service.parse_variations("   ", count=3) == []


# ======================
# PROGRESS ANALYSIS
# ======================

def test_analyze_progress_summarises_skill_history(db_session, piano, drafting_client):
    scales = drill_crud.create_drill(db_session, piano.id, "scales", "Beginner", "S", "u1")
    chords = drill_crud.create_drill(db_session, piano.id, "chords", "Intermediate", "C", "u1")
    guitar = skill_crud.create_skill(db_session, "Guitar", ["songs"])
    songs = drill_crud.create_drill(db_session, guitar.id, "songs", "Advanced", "G", "u1")

    _log(db_session, "u1", scales, NOW - timedelta(days=1))
    _log(db_session, "u1", scales, NOW - timedelta(days=2))
    _log(db_session, "u1", chords, NOW - timedelta(days=10))
    _log(db_session, "u1", songs, NOW - timedelta(days=1))

    result = recommendation_service.analyze_user_progress(
        db_session, drafting_client, "u1", piano.id, now=NOW
    )

    assert result.success is True
    analysis = result.analysis
    assert analysis.progress_stats.total_sessions == 3
    assert analysis.progress_stats.average_sessions_per_week == 2
    assert analysis.progress_stats.most_practiced_category == "scales"
    assert analysis.progress_stats.difficulty_progression == {
        "Beginner": 2,
        "Intermediate": 1,
        "Advanced": 0,
    }
    assert analysis.current_level == "Intermediate"
    assert analysis.recommended_difficulty == Difficulty.INTERMEDIATE
    assert analysis.focus_areas == ["sight-reading", "chords"]
    assert analysis.suggested_drill == drafting_client.reply
    assert "Analyze the progress for user u1 in skill Piano." in drafting_client.prompts[0]


def test_analyze_progress_without_sessions(db_session, piano, drafting_client):
    result = recommendation_service.analyze_user_progress(
        db_session, drafting_client, "u1", piano.id, category="chords", now=NOW
    )

    assert result.success is True
    stats = result.analysis.progress_stats
    assert stats.total_sessions == 0
    assert stats.most_practiced_category == "None"
    assert stats.difficulty_progression == {"Beginner": 0, "Intermediate": 0, "Advanced": 0}
    assert "specifically in the chords category" in drafting_client.prompts[0]


def test_analyze_progress_unknown_skill(db_session, piano, drafting_client):
    result = recommendation_service.analyze_user_progress(
        db_session, drafting_client, "u1", 999, now=NOW
    )

    assert result.success is False
    assert result.error == "Skill not found"


def test_assess_level_promotes_after_threshold():
    current, recommended = recommendation_service.assess_level(
        {"Beginner": 5, "Intermediate": 0, "Advanced": 0}
    )
    assert current == Difficulty.BEGINNER
    assert recommended == Difficulty.INTERMEDIATE

    current, recommended = recommendation_service.assess_level(
        {"Beginner": 0, "Intermediate": 0, "Advanced": 9}
    )
    assert current == recommended == Difficulty.ADVANCED


def test_build_drafting_client_without_key():
    from skilldrill.config import Settings

    client = drafting_service.build_drafting_client(Settings(GEMINI_API_KEY=None))
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(drafting_client=client)))

    assert isinstance(client, UnconfiguredDraftingClient)
    assert drafting_service.get_drafting_client(request) is client


# ======================
# VARIATIONS: SINGLE TRANSACTION
# ======================

def _count_commits(monkeypatch, db, fail=False):
    real_commit = db.commit
    calls = []

    def commit():
        calls.append(1)
        if fail:
            raise OperationalError("INSERT INTO drills", {}, Exception("database is locked"))
        real_commit()

    monkeypatch.setattr(db, "commit", commit)
    return calls


def test_variations_are_stored_in_one_commit(db_session, piano, monkeypatch):
    client = FakeDraftingClient(reply="1. One\n2. Two\n3. Three")
    calls = _count_commits(monkeypatch, db_session)

    result = recommendation_service.generate_drill_variations(
        db_session, client, piano.id, "scales", "Beginner", "u1", count=3
    )

    assert result.success is True
    assert len(calls) == 1
    assert all(drill.id is not None for drill in result.drills)


def test_variations_commit_failure_leaves_no_drills(db_session, piano, monkeypatch):
    client = FakeDraftingClient(reply="1. One\n2. Two\n3. Three")
    _count_commits(monkeypatch, db_session, fail=True)

    result = recommendation_service.generate_drill_variations(
        db_session, client, piano.id, "scales", "Beginner", "u1", count=3
    )

    assert result.success is False
    assert result.error == "Database error while generating drill variations"
    assert db_session.query(models.Drill).count() == 0


# ======================
# GEMINI CLIENT
# ======================

class _BlockedResponse:
    """Mimics a response whose prompt was blocked: no candidates at all."""

    prompt_feedback = "block_reason: SAFETY"

    @property
    def parts(self):
        raise ValueError(
            "Invalid operation: The `response.parts` quick accessor requires a single "
            "candidate, but `response.candidates` is empty."
        )

    @property
    def text(self):
        raise ValueError("Invalid operation: no candidates")


def _gemini_client(generate_content):
    client = GeminiDraftingClient("test-key")
    client.model = SimpleNamespace(generate_content=generate_content)
    return client


def test_gemini_client_returns_stripped_text():
    response = SimpleNamespace(parts=["part"], text="  Practise scales.  ", prompt_feedback=None)
    client = _gemini_client(lambda prompt: response)

    assert client.complete("prompt") == "Practise scales."


def test_gemini_client_wraps_provider_errors():
    def generate_content(prompt):
        raise RuntimeError("quota exceeded")

    client = _gemini_client(generate_content)

    with pytest.raises(UpstreamServiceError, match="Google Gemini API error: quota exceeded"):
        client.complete("prompt")


@pytest.mark.parametrize(
    "response",
    [
        SimpleNamespace(parts=["part"], text="   ", prompt_feedback=None),
        SimpleNamespace(parts=[], text="", prompt_feedback="block_reason: OTHER"),
    ],
)
def test_gemini_client_rejects_empty_content(response):
    client = _gemini_client(lambda prompt: response)

    with pytest.raises(UpstreamServiceError, match="No content generated"):
        client.complete("prompt")


def test_gemini_client_blocked_prompt_is_upstream_error():
    client = _gemini_client(lambda prompt: _BlockedResponse())

    with pytest.raises(UpstreamServiceError):
        client.complete("prompt")


def test_blocked_prompt_comes_back_as_tagged_failure(db_session, piano):
    client = _gemini_client(lambda prompt: _BlockedResponse())

    result = recommendation_service.generate_and_store_drill(
        db_session, client, piano.id, "scales", "Beginner", "u1"
    )

    assert result.success is False
    assert "Google Gemini API error" in result.error
    assert db_session.query(models.Drill).count() == 0


def test_drafting_client_is_abstract():
    with pytest.raises(TypeError):
        drafting_service.DraftingClient()
