"""Tests for upload validation."""

import pytest

from depict.errors import ValidationError
from depict.images.types import UploadCandidate
from depict.images.validation import (
    MAX_UPLOAD_BYTES,
    SIZE_ERROR_MESSAGE,
    TYPE_ERROR_MESSAGE,
    size_error_message,
    validate,
)


def _candidate(mime_type: str = "image/png", size: int = 1024) -> UploadCandidate:
    return UploadCandidate(name="photo", mime_type=mime_type, size=size)


class TestValidate:
    @pytest.mark.parametrize("mime_type", ["image/jpeg", "image/png", "image/webp"])
    def test_accepts_supported_types(self, mime_type):
        assert validate(_candidate(mime_type)) is None

    @pytest.mark.parametrize(
        "mime_type",
        ["image/gif", "image/svg+xml", "application/pdf", "", "IMAGE/PNG"],
    )
    def test_rejects_other_types(self, mime_type):
        result = validate(_candidate(mime_type))
        assert isinstance(result, ValidationError)
        assert str(result) == TYPE_ERROR_MESSAGE

    def test_limit_is_ten_mebibytes(self):
        assert MAX_UPLOAD_BYTES == 10_485_760

    def test_accepts_exactly_max_size(self):
        assert validate(_candidate(size=MAX_UPLOAD_BYTES)) is None

    def test_rejects_one_byte_over(self):
        result = validate(_candidate(size=MAX_UPLOAD_BYTES + 1))
        assert isinstance(result, ValidationError)
        assert str(result) == SIZE_ERROR_MESSAGE

    def test_type_error_reported_before_size(self):
        result = validate(_candidate("image/gif", size=MAX_UPLOAD_BYTES * 2))
        assert str(result) == TYPE_ERROR_MESSAGE

    def test_custom_limits(self):
        candidate = _candidate("image/gif", size=200)
        assert validate(candidate, allowed_mime_types=["image/gif"]) is None
        result = validate(candidate, allowed_mime_types=["image/gif"], max_bytes=100)
        assert str(result) == "File size must be less than 100 bytes."

    @pytest.mark.parametrize(
        ("max_bytes", "expected"),
        [
            (MAX_UPLOAD_BYTES, SIZE_ERROR_MESSAGE),
            (1024, "File size must be less than 1KB."),
            (5 * 1024 * 1024, "File size must be less than 5MB."),
            (1500, "File size must be less than 1500 bytes."),
        ],
    )
    def test_size_message_names_configured_limit(self, max_bytes, expected):
        result = validate(_candidate(size=max_bytes + 1), max_bytes=max_bytes)
        assert str(result) == expected
        assert size_error_message(max_bytes) == expected

    def test_does_not_read_data(self, tmp_path):
        # A path that does not exist is fine: only declared metadata is checked
        candidate = UploadCandidate(
            name="gone.png",
            mime_type="image/png",
            size=10,
            path=tmp_path / "gone.png",
        )
        assert validate(candidate) is None
