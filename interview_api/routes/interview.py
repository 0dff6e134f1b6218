"""/api endpoints driving question generation and answer scoring."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from interview_api.errors import ExtractionError, GenerationError
from interview_api.services import interview_service
from interview_api.utils.session import current_session, session_id
from interview_api.utils.text import summarize_job_description

bp = Blueprint("interview", __name__, url_prefix="/api")


def _has_file(storage) -> bool:
    return storage is not None and storage.filename != ""


def _json_payload() -> Dict[str, Any]:
    """Return the request's JSON object, or an empty dict for anything else."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return {}
    return payload


@bp.post("/upload")
def upload_documents():
    """Extract both documents, generate a question batch and store it on the session."""
    job_file = request.files.get("jobDescription")
    resume_file = request.files.get("resume")

    if not _has_file(job_file) or not _has_file(resume_file):
        current_app.logger.warning("Missing job description or resume file.")
        return jsonify(error="Both job description and resume files are required."), 400

    try:
        job_text = interview_service.extract_upload_text(job_file.read(), job_file.mimetype)
        resume_text = interview_service.extract_upload_text(resume_file.read(), resume_file.mimetype)
        current_app.logger.info(
            "Extracted %d job description chars and %d resume chars", len(job_text), len(resume_text)
        )
        questions = interview_service.start_interview(session_id(), job_text, resume_text)
    except (ExtractionError, GenerationError) as exc:
        current_app.logger.error("Error during file upload or processing: %s", exc.details or exc.message)
        return jsonify(error="An error occurred during processing.", details=exc.details or exc.message), 500

    return (
        jsonify(
            message="Interview questions generated successfully!",
            interviewQuestions=questions,
            jobDescriptionSummary=summarize_job_description(job_text),
        ),
        200,
    )


@bp.get("/job-description")
def get_job_description():
    """Return the job description text stored on the session."""
    job_description = current_session().get_job_description()
    return jsonify(message="Job description retrieved successfully.", jobDescription=job_description), 200


@bp.get("/questions")
def get_questions():
    """Return the current question batch."""
    questions = current_session().get_questions()
    return jsonify(message="Questions retrieved successfully.", questions=questions, count=len(questions)), 200


@bp.post("/analyze-answer")
def analyze_answer():
    """Score one answer against the session's job description and resume."""
    payload = _json_payload()
    question = payload.get("question")
    answer = payload.get("answer")

    if not question or not answer:
        return jsonify(error="Question and answer are required for analysis."), 400

    try:
        feedback = interview_service.evaluate_answer(current_session(), question, answer)
    except GenerationError as exc:
        current_app.logger.error("Error analyzing answer: %s", exc.details or exc.message)
        return jsonify(error="Failed to analyze answer.", details=exc.details or exc.message), 500

    return jsonify(feedback=feedback), 200


@bp.post("/analyze-answer-openai")
def analyze_answer_with_context():
    """Score one answer using context supplied in the request body."""
    payload = _json_payload()
    job_description = payload.get("job_description")
    resume_summary = payload.get("resume_summary")
    question = payload.get("question")
    transcript = payload.get("transcript")

    if not job_description or not resume_summary or not question or not transcript:
        return jsonify(error="Missing required fields"), 400

    try:
        evaluation = interview_service.evaluate_answer_with_context(
            job_description, resume_summary, question, transcript
        )
    except GenerationError as exc:
        current_app.logger.error("Error analyzing answer: %s", exc.details or exc.message)
        return jsonify(error="Failed to analyze answer", details=exc.details or exc.message), 500

    return jsonify(evaluation=evaluation), 200


@bp.post("/analyze-transcript")
def analyze_transcript():
    """Review a finished interview from its accumulated question/feedback transcript."""
    payload = _json_payload()
    transcript = payload.get("transcript")

    if not transcript:
        return jsonify(error="A transcript is required for analysis."), 400

    try:
        feedback = interview_service.review_transcript(current_session(), transcript)
    except GenerationError as exc:
        current_app.logger.error("Error analyzing transcript: %s", exc.details or exc.message)
        return jsonify(error="Failed to analyze transcript.", details=exc.details or exc.message), 500

    return jsonify(feedback=feedback), 200
