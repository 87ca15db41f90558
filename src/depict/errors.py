"""Error types raised by the image description flow.

Every error is terminal for the current analysis and safe to show to the
user. None of them are retried.
"""


class DepictError(Exception):
    """Base class for user-facing failures."""


class ValidationError(DepictError):
    """The selected file has an unsupported type or is too large."""


class MissingCredentialError(DepictError):
    """No API key is stored."""

    def __init__(
        self,
        message: str = (
            "Google AI Studio API key is required. "
            "Add one with `depict key set`."
        ),
    ) -> None:
        super().__init__(message)


class ReadError(DepictError):
    """The image bytes could not be read for encoding."""


class ApiError(DepictError):
    """The provider answered with a non-success status or was unreachable."""

    def __init__(
        self,
        status_code: int | None,
        reason: str = "",
        provider_message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.provider_message = provider_message

        if status_code is None:
            message = f"Google AI Studio request failed: {reason}"
        else:
            message = f"Google AI Studio API error: {status_code}"
            if reason:
                message += f" {reason}"
        if provider_message:
            message += f" - {provider_message}"
        super().__init__(message)


class EmptyResultError(DepictError):
    """The provider response carried no description text."""

    def __init__(self, message: str = "No description returned") -> None:
        super().__init__(message)


class AnalysisInProgressError(DepictError):
    """An analysis is already running on this service."""

    def __init__(self, message: str = "An analysis is already in progress.") -> None:
        super().__init__(message)
