"""Types for image description."""

from __future__ import annotations

import asyncio
import mimetypes
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path
from uuid import uuid4

from depict.errors import ReadError

# Not registered by every platform's mime.types
mimetypes.add_type("image/webp", ".webp")

DEFAULT_MIME_TYPE = "application/octet-stream"


class AnalysisState(Enum):
    """Lifecycle of a single analysis invocation."""

    IDLE = "idle"
    ENCODING = "encoding"
    REQUESTING = "requesting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(slots=True)
class UploadCandidate:
    """An image picked for analysis.

    Holds either the bytes themselves or a path that is read on demand.
    The declared ``mime_type`` and ``size`` are what validation looks at;
    reading a path updates ``size`` to the number of bytes actually read.
    """

    name: str
    mime_type: str
    size: int
    data: bytes | None = None
    path: Path | None = None

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        mime_type: str,
        name: str = "upload",
    ) -> UploadCandidate:
        return cls(name=name, mime_type=mime_type, size=len(data), data=data)

    @classmethod
    def from_path(cls, path: Path, mime_type: str | None = None) -> UploadCandidate:
        """Describe a file on disk without reading it.

        Raises:
            ReadError: If the file cannot be stat'ed.
        """
        path = Path(path).expanduser()
        try:
            size = path.stat().st_size
        except OSError as e:
            raise ReadError(f"Failed to read file: {path}") from e

        if mime_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            mime_type = guessed or DEFAULT_MIME_TYPE

        return cls(name=path.name, mime_type=mime_type, size=size, path=path)

    async def read(self) -> bytes:
        """Return the candidate's bytes, reading from disk if needed."""
        if self.data is not None:
            return self.data
        if self.path is None:
            raise ReadError(f"No image data for {self.name}")
        try:
            data = await asyncio.to_thread(self.path.read_bytes)
        except OSError as e:
            raise ReadError(f"Failed to read file: {self.name}") from e
        # The file may have changed since from_path() stat'ed it
        self.size = len(data)
        return data


@dataclass(slots=True)
class AnalysisResult:
    """A description returned for one uploaded image."""

    description: str
    file_name: str
    image_reference: str
    id: str = field(default_factory=lambda: uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "file_name": self.file_name,
            "image_reference": self.image_reference,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
        }
