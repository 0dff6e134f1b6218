"""Flask application setup and blueprint wiring."""

from __future__ import annotations

import os
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from interview_api.errors import register_error_handlers
from interview_api.routes import register_routes
from interview_api.utils.session import SESSION_TTL_SECONDS, register_session_cleanup

UPLOAD_LIMIT_BYTES = int(os.getenv("UPLOAD_LIMIT_BYTES", str(10 * 1024 * 1024)))  # 10 MB per request
DEFAULT_RECORDINGS_DIR = os.path.join(os.getcwd(), "recordings")


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Configure and return the Flask application instance."""
    app = Flask(__name__)
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    app.config["MAX_CONTENT_LENGTH"] = UPLOAD_LIMIT_BYTES
    app.config["RECORDINGS_DIR"] = os.getenv("RECORDINGS_DIR", DEFAULT_RECORDINGS_DIR)
    app.config["SESSION_TTL_SECONDS"] = SESSION_TTL_SECONDS
    if config:
        app.config.update(config)

    register_session_cleanup(app)
    register_error_handlers(app)
    register_routes(app)

    app.logger.info("Recordings will be written to %s", app.config["RECORDINGS_DIR"])
    return app
