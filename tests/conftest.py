"""Pytest bootstrap and shared fixtures."""

from pathlib import Path
import sys

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Ensure project root is on sys.path so `import skilldrill` works uninstalled
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from skilldrill.database import Base  # noqa: E402
from skilldrill import models  # noqa: E402,F401
from skilldrill.exceptions import UpstreamServiceError  # noqa: E402
from skilldrill.services.drafting_service import DraftingClient  # noqa: E402


# ======================
# TEST DATABASE SETUP
# ======================

@pytest.fixture
def db_session():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    yield session

    session.close()
    engine.dispose()


# ======================
# FAKE AI PROVIDER
# ======================

class FakeDraftingClient(DraftingClient):
    """Records prompts and replays canned replies (or fails when asked to)."""

    def __init__(self, reply="Do 20 reps slowly, then 20 at full speed.", fail=False):
        self.reply = reply
        self.fail = fail
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise UpstreamServiceError("Google Gemini API error: quota exceeded", resource="ai")
        return self.reply


@pytest.fixture
def drafting_client():
    return FakeDraftingClient()


@pytest.fixture
def failing_client():
    return FakeDraftingClient(fail=True)
