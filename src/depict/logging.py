"""Centralized logging configuration for Depict.

Entry points call configure_logging() once, early.

Logging Levels:
- DEBUG: Request details (model, media type, payload size), store access
- INFO: Completed analyses
- WARNING: Recoverable issues such as an unreadable store file
- ERROR: Failures that affect operation

The API key travels as a ``key=`` query parameter, so every console line
goes through SecretRedactor before it is written.
"""

import logging
import os
import re
from dataclasses import dataclass, field

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "DEPICT_LOG_LEVEL"

# Default patterns for secret detection and redaction
DEFAULT_REDACT_PATTERNS: list[str] = [
    # Google API keys
    r"\b(AIza[0-9A-Za-z\-_]{20,})\b",
    # key=... query parameters
    r"[?&]key=([^&\s\"']+)",
    # API key prefixes (OpenAI, Anthropic, GitHub)
    r"\b(sk-[A-Za-z0-9_-]{20,})\b",
    r"\b(ghp_[A-Za-z0-9]{20,})\b",
    # ENV-style assignments: API_KEY=secret or API_KEY: secret
    r"\b[A-Z0-9_]+(?:KEY|TOKEN|SECRET|PASSWORD|PASSWD)\s*[=:]\s*([^\s\"']{8,})",
    # Bearer tokens in headers
    r"\bBearer\s+([A-Za-z0-9._\-+=]{20,})\b",
]


@dataclass
class SecretRedactor:
    """Redacts sensitive information from log messages.

    Matches are replaced with partially masked versions for debuggability.
    """

    patterns: list[re.Pattern[str]] = field(default_factory=list)
    enabled: bool = True

    def __post_init__(self) -> None:
        if not self.patterns:
            self.patterns = [
                re.compile(p, re.IGNORECASE) for p in DEFAULT_REDACT_PATTERNS
            ]

    def redact(self, text: str) -> str:
        """Redact secrets from text, preserving partial info for debugging."""
        if not self.enabled or not text:
            return text
        result = text
        for pattern in self.patterns:
            result = pattern.sub(self._mask_match, result)
        return result

    def _mask_match(self, match: re.Match[str]) -> str:
        """Mask a matched secret, preserving start/end for identification."""
        full = match.group(0)
        token = match.group(1) if match.lastindex else full

        # Already masked by an earlier pattern
        if "..." in token or token == "***":
            return full

        if len(token) < 12:
            return full.replace(token, "***") if token != full else "***"

        masked = f"{token[:4]}...{token[-4:]}"
        return full.replace(token, masked) if token != full else masked


# Module-level redactor instance
_redactor = SecretRedactor()


def configure_redaction(
    enabled: bool = True, extra_patterns: list[str] | None = None
) -> None:
    """Configure secret redaction for log messages.

    Args:
        enabled: Whether to enable redaction.
        extra_patterns: Additional regex patterns to match secrets.
    """
    global _redactor
    patterns = [re.compile(p, re.IGNORECASE) for p in DEFAULT_REDACT_PATTERNS]
    if extra_patterns:
        patterns.extend(re.compile(p, re.IGNORECASE) for p in extra_patterns)
    _redactor = SecretRedactor(patterns=patterns, enabled=enabled)


class ComponentFormatter(logging.Formatter):
    """Formatter that shortens logger paths and redacts secrets.

    - depict.images.gemini -> images
    - depict.credentials -> credentials
    - httpx -> httpx
    """

    def format(self, record: logging.LogRecord) -> str:
        parts = record.name.split(".")
        if len(parts) >= 2 and parts[0] == "depict":
            record.component = parts[1]
        else:
            record.component = parts[0]
        return _redactor.redact(super().format(record))


# Third-party loggers that are too noisy (httpx logs full request URLs at INFO)
NOISY_LOGGERS = [
    "httpx",
    "httpcore",
    "filelock",
]


def resolve_log_level(level: str | None = None) -> int:
    """Resolve a level name from the argument, DEPICT_LOG_LEVEL, or the default."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    level = level.upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        level = DEFAULT_LOG_LEVEL
    return getattr(logging, level)


def configure_logging(level: str | None = None, use_rich: bool = False) -> None:
    """Configure logging for Depict.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
            If None, uses DEPICT_LOG_LEVEL env var or WARNING.
        use_rich: Use Rich handler for colorful output.
    """
    log_level = resolve_log_level(level)

    if use_rich:
        from rich.console import Console
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=False,
            show_path=False,
            show_time=True,
            markup=False,
        )
        handler.setFormatter(ComponentFormatter("%(component)s | %(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            ComponentFormatter(
                "%(asctime)s | %(levelname)-8s | %(component)s | %(message)s",
                datefmt="%H:%M:%S",
            )
        )

    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
