"""Storage of audio recordings captured during an interview."""

from __future__ import annotations

import os
from typing import Any, Dict

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from interview_api.storage import recordings
from interview_api.utils.session import generate_token, now_millis

DEFAULT_FILENAME = "recording"


def save_recording(storage: FileStorage, directory: str) -> Dict[str, Any]:
    """Write an uploaded recording to ``directory`` and index its metadata.

    Files are stored under ``<recording id>_<original name>`` so two uploads
    with the same name never overwrite each other.
    """
    recording_id = generate_token("rec")
    original_name = storage.filename or DEFAULT_FILENAME
    stored_name = f"{recording_id}_{secure_filename(original_name) or DEFAULT_FILENAME}"

    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, stored_name)
    storage.save(path)

    record = {
        "id": recording_id,
        "original_name": original_name,
        "stored_name": stored_name,
        "size": os.path.getsize(path),
        "mime_type": storage.mimetype,
        "saved_at": now_millis(),
    }
    recordings[recording_id] = record
    return record
