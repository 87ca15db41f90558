"""Configuration models using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from depict.config.paths import get_storage_path
from depict.images.validation import ACCEPTED_MIME_TYPES, MAX_UPLOAD_BYTES

DEFAULT_PROMPT = (
    "Please analyze this image and provide a detailed description of what you "
    "see, including objects, people, settings, colors, composition, and any "
    "notable features."
)


class GeminiConfig(BaseModel):
    """Configuration for the generateContent endpoint.

    ``top_k`` and ``top_p`` are omitted from requests when None.
    """

    base_url: str = "https://generativelanguage.googleapis.com"
    api_version: str = "v1beta"
    model: str = "gemini-1.5-flash"
    prompt: str = DEFAULT_PROMPT
    temperature: float = Field(default=0.4, ge=0.0, le=2.0)
    max_output_tokens: int = Field(default=500, gt=0)
    top_k: int | None = Field(default=None, gt=0)
    top_p: float | None = Field(default=None, gt=0.0, le=1.0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.api_version}/models/{self.model}:generateContent"


class UploadConfig(BaseModel):
    """Limits applied to files before they are sent."""

    max_bytes: int = Field(default=MAX_UPLOAD_BYTES, gt=0)
    allowed_mime_types: list[str] = Field(
        default_factory=lambda: list(ACCEPTED_MIME_TYPES)
    )


class StorageConfig(BaseModel):
    """Where the API key is kept."""

    path: Path = Field(default_factory=get_storage_path)
    credential_key: str = "google-ai-api-key"


class DepictConfig(BaseModel):
    """Root configuration model."""

    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
