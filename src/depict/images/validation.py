"""Client-side checks run before an image is sent anywhere."""

from __future__ import annotations

from collections.abc import Collection

from depict.errors import ValidationError
from depict.images.types import UploadCandidate

ACCEPTED_MIME_TYPES: tuple[str, ...] = ("image/jpeg", "image/png", "image/webp")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MiB

TYPE_ERROR_MESSAGE = "Please upload a JPEG, PNG, or WebP image."
SIZE_ERROR_MESSAGE = "File size must be less than 10MB."


def _format_limit(max_bytes: int) -> str:
    if max_bytes >= 1024 * 1024 and max_bytes % (1024 * 1024) == 0:
        return f"{max_bytes // (1024 * 1024)}MB"
    if max_bytes >= 1024 and max_bytes % 1024 == 0:
        return f"{max_bytes // 1024}KB"
    return f"{max_bytes} bytes"


def size_error_message(max_bytes: int = MAX_UPLOAD_BYTES) -> str:
    """Message for a file over ``max_bytes``."""
    if max_bytes == MAX_UPLOAD_BYTES:
        return SIZE_ERROR_MESSAGE
    return f"File size must be less than {_format_limit(max_bytes)}."


def validate(
    candidate: UploadCandidate,
    *,
    allowed_mime_types: Collection[str] = ACCEPTED_MIME_TYPES,
    max_bytes: int = MAX_UPLOAD_BYTES,
) -> ValidationError | None:
    """Check a candidate's declared type and size.

    Returns the first violated rule as an error, or None if the file is
    acceptable. Type is checked before size.
    """
    if candidate.mime_type not in allowed_mime_types:
        return ValidationError(TYPE_ERROR_MESSAGE)
    if candidate.size > max_bytes:
        return ValidationError(size_error_message(max_bytes))
    return None
