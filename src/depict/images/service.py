"""Image description orchestration."""

from __future__ import annotations

import logging

from depict.config.models import DepictConfig
from depict.credentials import CredentialStore
from depict.errors import (
    AnalysisInProgressError,
    DepictError,
    MissingCredentialError,
)
from depict.images.encoder import encode, to_data_url
from depict.images.gemini import GeminiClient
from depict.images.types import AnalysisResult, AnalysisState, UploadCandidate
from depict.images.validation import validate

logger = logging.getLogger(__name__)


def _image_reference(candidate: UploadCandidate, payload: str) -> str:
    if candidate.path is not None:
        return candidate.path.resolve().as_uri()
    return to_data_url(payload, candidate.mime_type)


class ImageDescriptionService:
    """Validates, encodes and describes one image at a time.

    Keeps the results of this session in memory, most recent first. A
    busy flag rejects a second analysis while one is outstanding.
    """

    def __init__(
        self,
        *,
        credentials: CredentialStore,
        client: GeminiClient,
        config: DepictConfig | None = None,
    ) -> None:
        self._config = config or DepictConfig()
        self._credentials = credentials
        self._client = client
        self._results: list[AnalysisResult] = []
        self._state = AnalysisState.IDLE
        self._busy = False
        self._last_error: DepictError | None = None

    @property
    def state(self) -> AnalysisState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def last_error(self) -> DepictError | None:
        return self._last_error

    @property
    def results(self) -> list[AnalysisResult]:
        return list(self._results)

    def select(self, candidate: UploadCandidate) -> UploadCandidate:
        """Accept a candidate, raising ValidationError if it is unusable."""
        upload = self._config.upload
        error = validate(
            candidate,
            allowed_mime_types=upload.allowed_mime_types,
            max_bytes=upload.max_bytes,
        )
        if error is not None:
            raise error
        return candidate

    async def describe(self, candidate: UploadCandidate) -> AnalysisResult:
        """Run one analysis and record its result.

        Raises:
            AnalysisInProgressError: Another analysis is outstanding.
            ValidationError: The file type or size is not accepted.
            MissingCredentialError: No API key is stored.
            ReadError: The image could not be read.
            ApiError: The provider rejected the request.
            EmptyResultError: The provider returned no description.
        """
        if self._busy:
            raise AnalysisInProgressError()

        self._busy = True
        self._last_error = None
        try:
            # read() refreshed size from the bytes actually on disk
            self.select(candidate)
            credential = self._credentials.get()
            if credential is None:
                raise MissingCredentialError()

            self._state = AnalysisState.ENCODING
            payload = await encode(candidate)
            # read() refreshed size from the bytes actually on disk
            self.select(candidate)

            self._state = AnalysisState.REQUESTING
            description = await self._client.analyze(
                payload, candidate.mime_type, credential
            )
        except DepictError as e:
            self._state = AnalysisState.FAILED
            self._last_error = e
            logger.debug("Analysis of %s failed: %s", candidate.name, e)
            raise
        finally:
            self._busy = False

        result = AnalysisResult(
            description=description,
            file_name=candidate.name,
            image_reference=_image_reference(candidate, payload),
        )
        self._results.insert(0, result)
        self._state = AnalysisState.SUCCEEDED
        logger.info(
            "Described %s (%d chars, model=%s)",
            candidate.name,
            len(description),
            self._client.model,
        )
        return result

    def remove_result(self, result_id: str) -> bool:
        for index, result in enumerate(self._results):
            if result.id == result_id:
                del self._results[index]
                return True
        return False

    def clear_results(self) -> None:
        self._results.clear()
