"""Google generateContent client for image descriptions."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from depict.config.models import GeminiConfig
from depict.errors import ApiError, EmptyResultError

logger = logging.getLogger(__name__)


def _extract_error_message(response: httpx.Response) -> str | None:
    try:
        payload = response.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


def _extract_text(payload: Any) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body."""
    try:
        text = payload["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise EmptyResultError() from None
    if not isinstance(text, str) or not text.strip():
        raise EmptyResultError()
    return text


class GeminiClient:
    """Sends one image and a fixed instruction prompt, returns the text.

    A single POST per call: no retries, no streaming. Pass ``http_client``
    to control transport (tests use ``httpx.MockTransport``); otherwise a
    client without a timeout is created and owned by this instance.
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or GeminiConfig()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=None)

    @property
    def name(self) -> str:
        return "gemini"

    @property
    def model(self) -> str:
        return self._config.model

    def build_payload(self, image_base64: str, mime_type: str) -> dict[str, Any]:
        generation_config: dict[str, Any] = {
            "maxOutputTokens": self._config.max_output_tokens,
            "temperature": self._config.temperature,
        }
        if self._config.top_k is not None:
            generation_config["topK"] = self._config.top_k
        if self._config.top_p is not None:
            generation_config["topP"] = self._config.top_p

        return {
            "contents": [
                {
                    "parts": [
                        {"text": self._config.prompt},
                        {
                            "inline_data": {
                                "mime_type": mime_type,
                                "data": image_base64,
                            }
                        },
                    ]
                }
            ],
            "generationConfig": generation_config,
        }

    def build_request(
        self, image_base64: str, mime_type: str, credential: str
    ) -> httpx.Request:
        return self._client.build_request(
            "POST",
            self._config.endpoint,
            params={"key": credential},
            headers={"Content-Type": "application/json"},
            json=self.build_payload(image_base64, mime_type),
        )

    async def analyze(self, image_base64: str, mime_type: str, credential: str) -> str:
        """Describe an image.

        Raises:
            ApiError: Non-success status, or the request never completed.
            EmptyResultError: The response held no description text.
        """
        request = self.build_request(image_base64, mime_type, credential)
        logger.debug(
            "generateContent model=%s mime=%s payload_chars=%d",
            self._config.model,
            mime_type,
            len(image_base64),
        )

        try:
            response = await self._client.send(request)
        except httpx.HTTPError as e:
            detail = str(e)
            reason = f"{type(e).__name__}: {detail}" if detail else type(e).__name__
            raise ApiError(None, reason=reason) from e

        if not response.is_success:
            provider_message = _extract_error_message(response)
            logger.debug(
                "generateContent failed: %d %s",
                response.status_code,
                provider_message or response.reason_phrase,
            )
            raise ApiError(
                response.status_code,
                reason=response.reason_phrase,
                provider_message=provider_message,
            )

        try:
            payload = response.json()
        except ValueError:
            raise EmptyResultError() from None
        return _extract_text(payload)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> GeminiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
