"""Shared test fixtures and factories."""

import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest

from depict.config.models import GeminiConfig
from depict.config.paths import ENV_VAR, get_depict_home
from depict.credentials import CredentialStore
from depict.images.gemini import GeminiClient
from depict.images.types import UploadCandidate

# Smallest valid PNG: 1x1 transparent pixel
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d00000000"
    "49454e44ae426082"
)

TEST_API_KEY = "AIzaSyTestKey1234567890abcdefghij"


# =============================================================================
# Storage Fixtures
# =============================================================================


class InMemoryStore:
    """Key/value store that forgets everything when the test ends."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None


@pytest.fixture
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def credentials(memory_store: InMemoryStore) -> CredentialStore:
    """Credential store that already holds TEST_API_KEY."""
    store = CredentialStore(memory_store)
    store.set(TEST_API_KEY)
    return store


@pytest.fixture
def depict_home(monkeypatch, tmp_path: Path) -> Iterator[Path]:
    """Point DEPICT_HOME at a temporary directory."""
    home = (tmp_path / "depict-home").resolve()
    monkeypatch.setenv(ENV_VAR, str(home))
    monkeypatch.chdir(tmp_path)
    get_depict_home.cache_clear()
    yield home
    get_depict_home.cache_clear()


# =============================================================================
# Image Fixtures
# =============================================================================


@pytest.fixture
def png_candidate() -> UploadCandidate:
    return UploadCandidate.from_bytes(PNG_BYTES, "image/png", name="pixel.png")


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    path = tmp_path / "pixel.png"
    path.write_bytes(PNG_BYTES)
    return path


# =============================================================================
# HTTP Fixtures
# =============================================================================


def gemini_response(text: str) -> dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with one scripted response."""

    def factory(
        status_code: int = 200,
        json_body: Any = None,
        content: bytes | None = None,
    ) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        return RecordingTransport(handler)

    return factory


@pytest.fixture
def make_client() -> Callable[..., GeminiClient]:
    def factory(
        transport: httpx.AsyncBaseTransport,
        config: GeminiConfig | None = None,
    ) -> GeminiClient:
        return GeminiClient(config, http_client=httpx.AsyncClient(transport=transport))

    return factory


# =============================================================================
# CLI Fixtures
# =============================================================================


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled."""
    from typer.testing import CliRunner

    return CliRunner(env={"NO_COLOR": "1"})
