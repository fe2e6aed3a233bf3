"""Error taxonomy shared by the tone adjustment service and its client."""

from __future__ import annotations


class ToneServiceError(Exception):
    """Base class for tone adjustment errors."""


class ValidationError(ToneServiceError):
    """Raised when an adjustment request is malformed or out of range."""


class UpstreamError(ToneServiceError):
    """Raised when the language model call fails or returns an unexpected shape."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CacheError(ToneServiceError):
    """Raised by cache backends when a read or write fails."""


class ToneAPIError(Exception):
    """Raised by the HTTP client when the adjustment endpoint reports a failure."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status
