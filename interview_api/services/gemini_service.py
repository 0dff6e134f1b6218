"""Wrapper utilities around the Google GenAI client."""

from __future__ import annotations

import os
from typing import Optional

from google import genai

from interview_api.errors import GenerationError

DEFAULT_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")


def get_gemini_client() -> genai.Client:
    """Instantiate a GenAI client using the configured API key."""
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise GenerationError("Text generation is not configured.", details="GEMINI_API_KEY environment variable is not set")
    return genai.Client(api_key=api_key)


def generate_content(client: genai.Client, prompt: str, *, model: Optional[str] = None):
    """Send a single-turn prompt to the configured Gemini model."""
    return client.models.generate_content(
        model=model or DEFAULT_MODEL,
        contents=prompt,
    )
