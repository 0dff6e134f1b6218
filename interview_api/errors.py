"""Application error types and their JSON rendering."""

from __future__ import annotations

from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify


class AppError(Exception):
    """Base error carrying a client-facing message and optional detail."""

    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(AppError):
    """Missing or malformed request input."""

    status_code = 400


class ExtractionError(AppError):
    """An uploaded document could not be converted to text."""


class GenerationError(AppError):
    """The text-generation provider failed or returned nothing usable."""


class NotFoundError(AppError):
    """A session field was requested before it was ever populated."""

    status_code = 404


class ConfigurationError(AppError):
    """Configuration names an unknown provider or lacks a required value."""


def register_error_handlers(app: Flask) -> None:
    """Render any AppError that escapes a view as a JSON error response."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.status_code >= 500:
            current_app.logger.error("%s: %s", exc.message, exc.details or "")
        else:
            current_app.logger.info("Request rejected: %s", exc.message)
        return jsonify(exc.to_dict()), exc.status_code
