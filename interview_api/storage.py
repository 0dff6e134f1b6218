"""In-memory data stores backing the interview session state."""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional, Sequence

from interview_api.errors import NotFoundError

DEFAULT_SESSION_ID = "default"


class SessionState:
    """Documents and generated questions for one interview session.

    Empty text is a legal extraction result, so "never uploaded" is tracked
    with explicit flags rather than by checking for an empty string.
    """

    def __init__(self) -> None:
        self.job_description_text = ""
        self.resume_text = ""
        self.questions: List[str] = []
        self._has_documents = False
        self._has_questions = False
        self.last_used = time.time()

    def touch(self) -> None:
        self.last_used = time.time()

    def set_documents(self, job_description: str, resume: str) -> None:
        self.job_description_text = job_description
        self.resume_text = resume
        self._has_documents = True

    def set_questions(self, questions: Sequence[str]) -> None:
        # A new batch replaces the previous one in full.
        self.questions = list(questions)
        self._has_questions = True

    def get_questions(self) -> List[str]:
        if not self._has_questions or not self.questions:
            raise NotFoundError("No questions generated yet.")
        return list(self.questions)

    def get_job_description(self) -> str:
        if not self._has_documents:
            raise NotFoundError("No job description loaded yet.")
        return self.job_description_text

    def get_resume(self) -> str:
        if not self._has_documents:
            raise NotFoundError("No resume loaded yet.")
        return self.resume_text


class SessionStore:
    """Session states keyed by a client-supplied session id.

    Only writes create entries; lookups for an unknown id hand back an
    unsaved empty state. Idle entries are dropped by ``prune_expired``.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, SessionState] = {}

    @staticmethod
    def _key(session_id: Optional[str]) -> str:
        return (session_id or "").strip() or DEFAULT_SESSION_ID

    def find(self, session_id: Optional[str] = None) -> SessionState:
        """Return the stored state for ``session_id`` without creating one."""
        state = self._sessions.get(self._key(session_id))
        if state is None:
            return SessionState()
        state.touch()
        return state

    def get(self, session_id: Optional[str] = None) -> SessionState:
        """Return the state for ``session_id``, creating it on first use."""
        key = self._key(session_id)
        state = self._sessions.get(key)
        if state is None:
            state = SessionState()
            self._sessions[key] = state
        state.touch()
        return state

    def prune_expired(self, ttl_seconds: int, now: Optional[float] = None) -> int:
        """Drop sessions idle for longer than ``ttl_seconds``; return how many."""
        current = time.time() if now is None else now
        expired = [key for key, state in self._sessions.items() if current - state.last_used > ttl_seconds]
        for key in expired:
            self._sessions.pop(key, None)
        return len(expired)

    def clear(self) -> None:
        self._sessions.clear()

    def __contains__(self, session_id: object) -> bool:
        return isinstance(session_id, str) and self._key(session_id) in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


# Interview sessions keyed by the X-Session-Id header.
sessions = SessionStore()

# Saved audio recordings keyed by recording id.
recordings: Dict[str, Dict[str, Any]] = {}
