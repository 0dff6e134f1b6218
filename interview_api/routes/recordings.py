"""/api/save-recording endpoint for interview audio."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from interview_api.services import recording_service

bp = Blueprint("recordings", __name__, url_prefix="/api")


@bp.post("/save-recording")
def save_recording():
    """Persist an uploaded audio recording to the recordings directory."""
    storage = request.files.get("audio")
    if storage is None or storage.filename == "":
        return jsonify(error="No audio file uploaded."), 400

    try:
        record = recording_service.save_recording(storage, current_app.config["RECORDINGS_DIR"])
    except OSError:
        current_app.logger.exception("Error saving recording")
        return jsonify(error="Failed to save recording."), 500

    current_app.logger.info("Audio file saved: %s", record["stored_name"])
    return (
        jsonify(
            message="Recording saved successfully.",
            recordingId=record["id"],
            filename=record["stored_name"],
        ),
        200,
    )
