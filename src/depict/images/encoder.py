"""Base64 transport encoding for image payloads."""

from __future__ import annotations

import base64

from depict.images.types import UploadCandidate


def to_data_url(payload: str, mime_type: str) -> str:
    return f"data:{mime_type};base64,{payload}"


async def encode(candidate: UploadCandidate) -> str:
    """Read the candidate and return its bytes as bare base64 text.

    The payload carries no ``data:`` prefix; use :func:`to_data_url` when
    one is needed.

    Raises:
        ReadError: If the underlying file could not be read.
    """
    data = await candidate.read()
    return base64.b64encode(data).decode("ascii")
