"""Shared pytest fixtures for the interview API."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

# Ensure the application package is importable during tests.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from interview_api import storage  # noqa: E402
from interview_api.main import create_app  # noqa: E402
from interview_api.services import generation_service  # noqa: E402

GENERATED_QUESTIONS = "\n".join(
    [
        "Here are your questions:",
        "1. Walk me through your experience building Flask APIs.",
        "2. How have you used PostgreSQL in production systems?",
        "3. Describe a time you debugged a difficult production incident.",
        "4. How would you get up to speed with Kubernetes in your first month?",
        "5. What questions do you have for us about the team?",
    ]
)


@pytest.fixture(autouse=True)
def reset_state():
    """Give every test an empty session store and recording index."""
    storage.sessions.clear()
    storage.recordings.clear()
    yield
    storage.sessions.clear()
    storage.recordings.clear()


@pytest.fixture
def app(tmp_path):
    application = create_app({"TESTING": True, "RECORDINGS_DIR": str(tmp_path / "recordings")})
    yield application


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fake_generation(monkeypatch: pytest.MonkeyPatch) -> Callable[..., List[Tuple[str, str]]]:
    """Replace provider calls with canned text, recording each (flow, prompt)."""

    def install(response: str = GENERATED_QUESTIONS, error: Exception = None) -> List[Tuple[str, str]]:
        calls: List[Tuple[str, str]] = []

        def fake_generate_text(flow: str, prompt: str) -> str:
            calls.append((flow, prompt))
            if error is not None:
                raise error
            return response

        monkeypatch.setattr(generation_service, "generate_text", fake_generate_text)
        return calls

    return install
