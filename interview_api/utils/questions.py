"""Parsing of numbered interview questions out of generated text."""

from __future__ import annotations

import random
import re
from typing import Iterable, List, Optional

NUMBERED_LINE_PATTERN = re.compile(r"^\s*\d+\.[^\S\n]*(.+)", re.MULTILINE)
# Decimal, exponent and Infinity forms with an optional sign, or unsigned
# hex/octal/binary literals. No digit separators, no "nan".
NUMERIC_PATTERN = re.compile(
    r"[+-]?(?:Infinity|\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?)"
    r"|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+",
    re.ASCII,
)
MAX_QUESTIONS = 20
MIN_QUESTION_LENGTH = 10
# Questions at the head and tail of the list keep their position.
FIXED_HEAD = 1
FIXED_TAIL = 2


def extract_numbered_lines(text: str) -> List[str]:
    """Return the text following ``<digits>.`` on each numbered line, in order."""
    return [match.group(1).strip() for match in NUMBERED_LINE_PATTERN.finditer(text or "")]


def dedupe(items: Iterable[str]) -> List[str]:
    """Drop exact duplicates while preserving first-seen order."""
    return list(dict.fromkeys(items))


def _is_number(text: str) -> bool:
    """True when ``text`` reads as a number the way a browser's ``Number()`` does."""
    return NUMERIC_PATTERN.fullmatch(text.strip()) is not None


def filter_questions(items: Iterable[str]) -> List[str]:
    """Keep entries longer than the minimum length that are not bare numbers."""
    kept: List[str] = []
    for item in items:
        stripped = item.strip()
        if len(stripped) > MIN_QUESTION_LENGTH and not _is_number(stripped):
            kept.append(item)
    return kept


def shuffle_middle(items: List[str], rng: Optional[random.Random] = None) -> List[str]:
    """Shuffle everything except the first question and the last two.

    Lists of three or fewer entries are returned unchanged.
    """
    if len(items) <= FIXED_HEAD + FIXED_TAIL:
        return list(items)

    rng = rng or random.Random()
    middle = items[FIXED_HEAD:-FIXED_TAIL]
    rng.shuffle(middle)
    return items[:FIXED_HEAD] + middle + items[-FIXED_TAIL:]


def parse_questions(text: str, rng: Optional[random.Random] = None) -> List[str]:
    """Turn raw generated text into the final, ordered question batch."""
    candidates = filter_questions(dedupe(extract_numbered_lines(text)))
    return shuffle_middle(candidates[:MAX_QUESTIONS], rng)
