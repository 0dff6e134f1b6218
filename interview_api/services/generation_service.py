"""Provider-neutral text generation used by the interview flows.

Every provider exposes ``generate_text(prompt) -> str`` and raises
``GenerationError`` instead of returning partial or empty text. Calls are
made exactly once; there is no retry or backoff.
"""

from __future__ import annotations

import logging
import os
from typing import Callable, Dict, Optional

from google.genai import errors as genai_errors
from openai import APIError

from interview_api.errors import ConfigurationError, GenerationError
from interview_api.services import gemini_service, openai_service

_LOGGER = logging.getLogger(__name__)

QUESTIONS_FLOW = "questions"
SCORING_FLOW = "scoring"
ALTERNATE_SCORING_FLOW = "alternate_scoring"

# Environment variable and default provider per flow.
FLOW_SETTINGS: Dict[str, tuple] = {
    QUESTIONS_FLOW: ("QUESTION_PROVIDER", "gemini"),
    SCORING_FLOW: ("SCORING_PROVIDER", "gemini"),
    ALTERNATE_SCORING_FLOW: ("ALTERNATE_SCORING_PROVIDER", "openai"),
}

UPSTREAM_FAILURE_MESSAGE = "Text generation request failed."


class OpenAIGenerator:
    """Generate text through the OpenAI Responses API."""

    name = "openai"

    def __init__(self, model: Optional[str] = None, client_factory: Optional[Callable] = None):
        self.model = model
        self._client_factory = client_factory

    def generate_text(self, prompt: str) -> str:
        client = (self._client_factory or openai_service.get_openai_client)()
        try:
            completion = openai_service.create_response(client, prompt, model=self.model)
        except APIError as exc:
            _LOGGER.exception("OpenAI API error during text generation")
            raise GenerationError(UPSTREAM_FAILURE_MESSAGE, details=getattr(exc, "message", str(exc))) from exc
        except Exception as exc:
            _LOGGER.exception("Unexpected error during OpenAI text generation")
            raise GenerationError(UPSTREAM_FAILURE_MESSAGE, details=str(exc)) from exc

        text = (getattr(completion, "output_text", None) or "").strip()
        if not text:
            raise GenerationError(UPSTREAM_FAILURE_MESSAGE, details="OpenAI returned an empty response")
        return text


class GeminiGenerator:
    """Generate text through the Google GenAI SDK."""

    name = "gemini"

    def __init__(self, model: Optional[str] = None, client_factory: Optional[Callable] = None):
        self.model = model
        self._client_factory = client_factory

    def generate_text(self, prompt: str) -> str:
        client = (self._client_factory or gemini_service.get_gemini_client)()
        try:
            response = gemini_service.generate_content(client, prompt, model=self.model)
            # Accessing .text can itself raise when the candidate was blocked.
            text = (response.text or "").strip()
        except genai_errors.APIError as exc:
            _LOGGER.exception("Gemini API error during text generation")
            raise GenerationError(UPSTREAM_FAILURE_MESSAGE, details=getattr(exc, "message", None) or str(exc)) from exc
        except Exception as exc:
            _LOGGER.exception("Unexpected error during Gemini text generation")
            raise GenerationError(UPSTREAM_FAILURE_MESSAGE, details=str(exc)) from exc

        if not text:
            raise GenerationError(UPSTREAM_FAILURE_MESSAGE, details="Gemini returned an empty response")
        return text


PROVIDERS: Dict[str, Callable[[], object]] = {
    OpenAIGenerator.name: OpenAIGenerator,
    GeminiGenerator.name: GeminiGenerator,
}


def provider_name_for(flow: str) -> str:
    """Return the configured provider name for ``flow``."""
    try:
        env_var, default = FLOW_SETTINGS[flow]
    except KeyError:
        raise ConfigurationError(f"Unknown generation flow: {flow}") from None
    return (os.getenv(env_var) or default).strip().lower()


def get_generator(flow: str):
    """Instantiate the generator configured for ``flow``."""
    name = provider_name_for(flow)
    factory = PROVIDERS.get(name)
    if factory is None:
        raise ConfigurationError(
            "Text generation is misconfigured.",
            details=f"Unknown provider '{name}' for flow '{flow}'",
        )
    return factory()


def generate_text(flow: str, prompt: str) -> str:
    """Run ``prompt`` through the provider configured for ``flow``."""
    generator = get_generator(flow)
    _LOGGER.info("Generating text for %s flow with %s (%d prompt chars)", flow, generator.name, len(prompt))
    return generator.generate_text(prompt)
