"""Image validation, encoding and description."""

from depict.images.encoder import encode
from depict.images.types import AnalysisResult, AnalysisState, UploadCandidate
from depict.images.validation import (
    ACCEPTED_MIME_TYPES,
    MAX_UPLOAD_BYTES,
    validate,
)

__all__ = [
    "ACCEPTED_MIME_TYPES",
    "MAX_UPLOAD_BYTES",
    "AnalysisResult",
    "AnalysisState",
    "UploadCandidate",
    "encode",
    "validate",
]
