"""Core shared logic for the CleanFlux clients.

This module contains pure functions and configuration that are shared
between CleanFlux and CleanFluxSync. It handles API key validation, base URL
normalization, header construction, body decoding and response
classification. Nothing in here performs I/O.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

from cleanflux.errors import ApiError, ConfigurationError
from cleanflux.version import USER_AGENT

DEFAULT_BASE_URL = "https://api.cleanflux.ai"
DEFAULT_TIMEOUT = 30.0
# Per-call timeout default: defer to the timeout configured on the client.
USE_CLIENT_DEFAULT = httpx.USE_CLIENT_DEFAULT
API_KEY_HEADER = "x-api-key"
DASHBOARD_URL = "https://cleanflux.ai/dashboard"
ERROR_PREFIX = "CleanFlux API Error"


class Endpoint(str, Enum):
    """Path segments of the remote operations, appended to ``/api/``."""

    CLEAN = "clean"
    NORMALIZE = "normalize"
    EXTRACT_URLS = "extract-urls"
    REMOVE_PROFANITY = "remove-profanity"
    METADATA = "metadata"
    PING = "ping"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for client instances.

    Attributes:
        api_key: Secret sent in the x-api-key header
        base_url: API root without trailing slash (e.g. https://api.cleanflux.ai)
        timeout: Request timeout in seconds, None to wait indefinitely
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT

    def endpoint_url(self, endpoint: str) -> str:
        """Build the absolute URL of an API endpoint."""
        return f"{self.base_url}/api/{endpoint}"

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )


def normalize_base_url(base_url: Optional[str] = None) -> str:
    """Resolve the effective base URL.

    Falls back to the production URL when base_url is empty. A single
    trailing slash is removed so that endpoint concatenation never yields
    ``//api``; only one slash is stripped.
    """
    effective_url = base_url or DEFAULT_BASE_URL
    if effective_url.endswith("/"):
        effective_url = effective_url[:-1]
    return effective_url


def build_config(
    api_key: Any,
    base_url: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> ClientConfig:
    """Validate constructor arguments and build a ClientConfig.

    Raises:
        ConfigurationError: If api_key is missing or not a string, or
            timeout is neither None nor a positive number
    """
    if not api_key:
        raise ConfigurationError(
            f"CleanFlux: API key is required. Get yours at {DASHBOARD_URL}"
        )

    if not isinstance(api_key, str):
        raise ConfigurationError("CleanFlux: API key must be a string")

    if timeout is not None and (
        not isinstance(timeout, (int, float))
        or isinstance(timeout, bool)
        or timeout <= 0
    ):
        raise ConfigurationError("CleanFlux: timeout must be a positive number")

    return ClientConfig(
        api_key=api_key,
        base_url=normalize_base_url(base_url),
        timeout=timeout,
    )


def auth_headers(config: ClientConfig) -> dict[str, str]:
    """Headers for authenticated POST requests."""
    return {
        API_KEY_HEADER: config.api_key,
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }


def public_headers() -> dict[str, str]:
    """Headers for unauthenticated requests (ping)."""
    return {"User-Agent": USER_AGENT}


def decode_body(response: httpx.Response) -> Optional[Any]:
    """Parse the response body as JSON, returning None if it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return None


def error_message(status_code: int, data: Optional[Any]) -> str:
    """Pick the error message for a failed response.

    Priority: the body's ``error`` field, then its ``message`` field, then a
    generic message naming the status code.
    """
    detail = None
    if isinstance(data, dict):
        detail = data.get("error") or data.get("message")
    if not detail:
        detail = f"Request failed with status {status_code}"
    return f"{ERROR_PREFIX}: {detail}"


def parse_response(response: httpx.Response) -> Any:
    """Classify a response, returning its parsed body on success.

    Any 2xx status is a success and the parsed body (or None) is returned
    unchanged.

    Raises:
        ApiError: For any status outside 200-299
    """
    data = decode_body(response)

    if 200 <= response.status_code < 300:
        return data

    raise ApiError(
        error_message(response.status_code, data),
        status_code=response.status_code,
        response=data,
    )
