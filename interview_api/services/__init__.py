"""Service layer modules for the Mock Interview API."""

from . import (
    gemini_service,
    generation_service,
    interview_service,
    openai_service,
    prompt_service,
    recording_service,
)

__all__ = [
    "gemini_service",
    "generation_service",
    "interview_service",
    "openai_service",
    "prompt_service",
    "recording_service",
]
