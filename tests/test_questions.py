"""Tests for parsing numbered questions out of generated text."""

from __future__ import annotations

import random

from interview_api.utils.questions import (
    MAX_QUESTIONS,
    dedupe,
    extract_numbered_lines,
    filter_questions,
    parse_questions,
    shuffle_middle,
)


def test_extracts_numbered_lines_in_source_order():
    text = "1. First question here?\n  2.Second question here?\n10.   Tenth question here?\n"

    assert extract_numbered_lines(text) == [
        "First question here?",
        "Second question here?",
        "Tenth question here?",
    ]


def test_ignores_unnumbered_and_bulleted_lines():
    text = "Intro text\n- bullet point\n1) not a match\n3. A real question to keep?\nOutro"

    assert extract_numbered_lines(text) == ["A real question to keep?"]


def test_empty_numbered_line_does_not_capture_next_line():
    text = "1.\nFollow-up line without a number\n2. Numbered question survives?"

    assert extract_numbered_lines(text) == ["Numbered question survives?"]


def test_dedupe_keeps_first_occurrence_and_is_idempotent():
    items = ["b question", "a question", "b question", "c question", "a question"]

    once = dedupe(items)

    assert once == ["b question", "a question", "c question"]
    assert dedupe(once) == once


def test_filter_drops_short_and_numeric_entries():
    items = ["12", "Too short", "12 years experience", "3.14159265358", "Exactly10!", "Eleven char"]

    assert filter_questions(items) == ["12 years experience", "Eleven char"]


def test_scenario_drops_numeric_answer_line():
    text = "1. Tell me about X.\n2. 5\n3. Describe your experience with Y in detail.\n"

    survivors = filter_questions(dedupe(extract_numbered_lines(text)))

    assert survivors == ["Tell me about X.", "Describe your experience with Y in detail."]


def test_shuffle_keeps_head_and_tail_in_place():
    items = [f"Question number {i:02d}?" for i in range(12)]

    for seed in range(20):
        shuffled = shuffle_middle(items, random.Random(seed))
        assert shuffled[0] == items[0]
        assert shuffled[-2:] == items[-2:]
        assert sorted(shuffled) == sorted(items)


def test_shuffle_actually_reorders_the_middle():
    items = [f"Question number {i:02d}?" for i in range(12)]

    orders = {tuple(shuffle_middle(items, random.Random(seed))) for seed in range(10)}

    assert len(orders) > 1


def test_short_lists_are_not_shuffled():
    for size in range(4):
        items = [f"Question number {i:02d}?" for i in range(size)]
        assert shuffle_middle(items, random.Random(1)) == items


def test_parse_caps_batch_at_twenty():
    text = "\n".join(f"{i}. Generated interview question {i}?" for i in range(1, 31))

    questions = parse_questions(text, random.Random(7))

    assert len(questions) == MAX_QUESTIONS
    assert questions[0] == "Generated interview question 1?"
    assert questions[-2:] == ["Generated interview question 19?", "Generated interview question 20?"]
    assert "Generated interview question 21?" not in questions


def test_parse_returns_empty_list_when_nothing_survives():
    assert parse_questions("No numbered content at all.\n1. 42\n2. short") == []


def test_numeric_filter_follows_browser_number_parsing():
    items = [
        "1_000_000_000",
        "0x1234567890",
        "  +1.5e+100000  ",
        "-Infinity000",
        "0b1010101010",
        "nan nan nan nan",
    ]

    assert filter_questions(items) == ["1_000_000_000", "-Infinity000", "nan nan nan nan"]
