"""MIME type hints for common messaging uploads."""

from __future__ import annotations

from typing import Optional

DEFAULT_MIME_TYPE = "application/octet-stream"

# Not a general MIME database: only the media types bots usually send.
MIME_TYPES: dict[str, str] = {
    # Images
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
    # Video
    "mp4": "video/mp4",
    "avi": "video/x-msvideo",
    "mkv": "video/x-matroska",
    "webm": "video/webm",
    # Audio
    "mp3": "audio/mpeg",
    "ogg": "audio/ogg",
    "wav": "audio/wav",
    # Documents
    "pdf": "application/pdf",
    "zip": "application/zip",
    "json": "application/json",
    "xml": "application/xml",
}


def detect_mime_type(filename: str) -> Optional[str]:
    """Guess the MIME type from the final extension of ``filename``.

    Returns None for unknown or missing extensions; callers pick their own
    default (usually ``DEFAULT_MIME_TYPE``).
    """
    _, dot, extension = filename.rpartition(".")
    if not dot:
        return None
    return MIME_TYPES.get(extension.lower())
