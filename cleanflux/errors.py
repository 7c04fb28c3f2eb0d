"""Exception hierarchy for the CleanFlux SDK.

Construction problems raise ConfigurationError before any request is made.
Non-2xx responses raise ApiError carrying the status code and the parsed
response body. Transport failures (DNS, TLS, refused connections, timeouts)
are raised by httpx as-is.
"""

from typing import Any, Optional


class CleanFluxError(Exception):
    """Base exception for CleanFlux SDK errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(CleanFluxError):
    """Client was constructed with invalid settings (missing or bad API key)."""

    pass


class ApiError(CleanFluxError):
    """API returned a non-2xx response.

    Attributes:
        status_code: HTTP status code of the response.
        response: Parsed JSON body, or None when the body was not valid JSON.
    """

    _RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

    def __init__(
        self,
        message: str,
        status_code: int,
        response: Optional[Any] = None,
    ) -> None:
        self.status_code = status_code
        self.response = response
        super().__init__(message)

    @property
    def status(self) -> int:
        """Alias for status_code."""
        return self.status_code

    @property
    def retryable(self) -> bool:
        """Whether the same request may succeed later.

        The SDK never retries on its own; this only helps callers decide.
        """
        return self.status_code in self._RETRYABLE_STATUS_CODES

    def verbose_str(self) -> str:
        """Return the error message with the status code appended."""
        return f"{self.message} ({self.status_code})"
