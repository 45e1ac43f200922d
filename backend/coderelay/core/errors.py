# coderelay/core/errors.py
from __future__ import annotations

from typing import Any, Optional


class RelayError(Exception):
    """Base class for failures reported back to the editor as an error envelope."""

    kind = "error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(RelayError):
    kind = "configuration"


class TransportError(RelayError):
    kind = "transport"


class UpstreamError(RelayError):
    kind = "upstream"


class SubmissionTimeoutError(RelayError):
    kind = "timeout"


class SubmissionCancelledError(RelayError):
    kind = "cancelled"


class UnsupportedLanguageError(RelayError):
    kind = "validation"

    def __init__(self, language: Optional[str]):
        super().__init__(f"Unsupported language: {language}")
        self.language = language
