"""Session lookup and identifier helpers."""

from __future__ import annotations

import os
import secrets
import time
from typing import Optional

from flask import Flask, current_app, request

from interview_api.storage import SessionState, sessions

SESSION_HEADER = "X-Session-Id"

# Sessions untouched for this long are dropped (seconds).
SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", str(24 * 60 * 60)))


def now_millis() -> int:
    """Return the current UNIX timestamp in milliseconds."""
    return int(time.time() * 1000)


def generate_token(prefix: str = "sess") -> str:
    """Return a random token with the given prefix suitable for in-memory keys."""
    return f"{prefix}_{secrets.token_urlsafe(12)}"


def session_id() -> Optional[str]:
    """Return the session id named by the request header, if any."""
    return request.headers.get(SESSION_HEADER)


def current_session() -> SessionState:
    """Return the interview session for this request without creating one.

    Requests without the header share the default session. Unknown ids get
    an empty state that is not stored.
    """
    return sessions.find(session_id())


def prune_expired() -> None:
    """Remove idle interview sessions from in-memory storage."""
    ttl = current_app.config.get("SESSION_TTL_SECONDS", SESSION_TTL_SECONDS)
    removed = sessions.prune_expired(ttl)
    if removed:
        current_app.logger.info("Pruned %d idle interview sessions", removed)


def register_session_cleanup(app: Flask) -> None:
    """Attach a before-request handler that keeps session state tidy."""

    @app.before_request
    def _cleanup_state() -> None:
        prune_expired()
