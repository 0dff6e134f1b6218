"""Blueprint registration helper."""

from __future__ import annotations

from flask import Flask, jsonify

from .interview import bp as interview_bp
from .recordings import bp as recordings_bp


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(interview_bp)
    app.register_blueprint(recordings_bp)

    @app.get("/")
    def index():
        return jsonify(message="Hello from the Mock Interview Flask API"), 200
