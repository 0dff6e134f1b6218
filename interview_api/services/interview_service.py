"""Business logic for the mock interview flows."""

from __future__ import annotations

import logging
from typing import List, Optional

from interview_api.services import generation_service
from interview_api.services.prompt_service import (
    build_answer_prompt,
    build_question_prompt,
    build_transcript_prompt,
)
from interview_api.storage import SessionState, sessions
from interview_api.utils.questions import parse_questions
from interview_api.utils.text import declared_kind_for, extract_document_text

_LOGGER = logging.getLogger(__name__)


def extract_upload_text(raw_bytes: bytes, mimetype: str) -> str:
    """Validate an upload's MIME type and return its text."""
    return extract_document_text(raw_bytes, declared_kind_for(mimetype))


def generate_questions(job_description: str, resume: str) -> List[str]:
    """Ask the question provider for a batch and parse it into questions."""
    prompt = build_question_prompt(job_description, resume)
    raw_text = generation_service.generate_text(generation_service.QUESTIONS_FLOW, prompt)
    questions = parse_questions(raw_text)
    if not questions:
        _LOGGER.warning("No usable questions found in generated text (%d chars)", len(raw_text))
    return questions


def start_interview(session_id: Optional[str], job_description: str, resume: str) -> List[str]:
    """Generate questions and only then store the documents and batch on the session."""
    questions = generate_questions(job_description, resume)
    state = sessions.get(session_id)
    state.set_documents(job_description, resume)
    state.set_questions(questions)
    return questions


def evaluate_answer(state: SessionState, question: str, answer: str) -> str:
    """Score an answer against the documents stored on the session."""
    prompt = build_answer_prompt(state.job_description_text, state.resume_text, question, answer)
    return generation_service.generate_text(generation_service.SCORING_FLOW, prompt)


def evaluate_answer_with_context(job_description: str, resume_summary: str, question: str, transcript: str) -> str:
    """Score an answer using caller-supplied context and the alternate provider."""
    prompt = build_answer_prompt(job_description, resume_summary, question, transcript)
    return generation_service.generate_text(generation_service.ALTERNATE_SCORING_FLOW, prompt).strip()


def review_transcript(state: SessionState, transcript: str) -> str:
    """Produce an overall review of a finished interview."""
    prompt = build_transcript_prompt(state.job_description_text, state.resume_text, transcript)
    return generation_service.generate_text(generation_service.SCORING_FLOW, prompt)
