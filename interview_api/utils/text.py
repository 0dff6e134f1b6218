"""Text extraction helpers for uploaded job descriptions and resumes."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import List

from pypdf import PdfReader

from interview_api.errors import ExtractionError, ValidationError

_LOGGER = logging.getLogger(__name__)

PLAIN_TEXT = "plain_text"
PDF = "pdf"

ALLOWED_MIME_TYPES = {
    "text/plain": PLAIN_TEXT,
    "application/pdf": PDF,
}

SUMMARY_LINE_COUNT = 10


def declared_kind_for(mimetype: str) -> str:
    """Map an upload's MIME type to a document kind, rejecting anything else."""
    # Browsers may append parameters, e.g. "text/plain; charset=utf-8".
    mime = (mimetype or "").split(";", 1)[0].strip().lower()
    kind = ALLOWED_MIME_TYPES.get(mime)
    if kind is None:
        raise ValidationError("Invalid file type. Only TXT and PDF files are allowed.")
    return kind


def extract_pdf_text(raw_bytes: bytes) -> str:
    """Extract text from every page of a PDF, failing loudly on parser errors."""
    try:
        reader = PdfReader(BytesIO(raw_bytes))
        collected: List[str] = []
        for page in reader.pages:
            page_text = page.extract_text() or ""
            if page_text:
                collected.append(page_text)
    except Exception as exc:
        _LOGGER.warning("Failed to extract text from PDF upload", exc_info=True)
        raise ExtractionError("Failed to extract text from PDF.", details=str(exc)) from exc

    return "\n".join(collected).strip()


def extract_document_text(raw_bytes: bytes, declared_kind: str) -> str:
    """Convert an uploaded payload into plain text according to its kind."""
    if declared_kind == PLAIN_TEXT:
        return raw_bytes.decode("utf-8", errors="replace")
    if declared_kind == PDF:
        return extract_pdf_text(raw_bytes)
    raise ValidationError("Invalid file type. Only TXT and PDF files are allowed.")


def summarize_job_description(text: str, line_count: int = SUMMARY_LINE_COUNT) -> str:
    """Return the first few lines of a job description followed by an ellipsis."""
    return "\n".join(text.split("\n")[:line_count]) + "..."


def clip_text(text: str, limit: int) -> str:
    """Clamp ``text`` to ``limit`` characters, logging when anything is dropped."""
    if limit <= 0 or len(text) <= limit:
        return text
    _LOGGER.warning("Clipping document text from %d to %d characters", len(text), limit)
    return text[:limit]
