"""Blocking client for the CleanFlux API.

This module provides CleanFluxSync, a synchronous counterpart of CleanFlux
built on httpx.Client. It shares validation and response classification
with the async client through cleanflux.core, so both behave identically.
"""

from typing import Any, Optional

import httpx

from cleanflux.core import (
    DEFAULT_TIMEOUT,
    USE_CLIENT_DEFAULT,
    ClientConfig,
    Endpoint,
    auth_headers,
    build_config,
    parse_response,
    public_headers,
)
from cleanflux.logging import get_logger

logger = get_logger(__name__)


class CleanFluxSync:
    """Synchronous CleanFlux API client.

    Usage:
        with CleanFluxSync("sk_live_...") as client:
            result = client.metadata({"text": "A short paragraph."})

    Attributes:
        config: Immutable client configuration
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the client. No network activity happens here.

        Args:
            api_key: CleanFlux API key (starts with sk_live_)
            base_url: API base URL, defaults to https://api.cleanflux.ai
            timeout: Request timeout in seconds, None to wait indefinitely
            transport: Custom httpx transport (mocking, proxies)

        Raises:
            ConfigurationError: If api_key is missing or not a string
        """
        self.config: ClientConfig = build_config(api_key, base_url, timeout)
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "CleanFluxSync":
        """Build a client from CLEANFLUX_* environment variables."""
        from cleanflux.settings import get_client_settings

        settings = get_client_settings()
        kwargs: dict[str, Any] = {
            "api_key": settings.api_key,
            "base_url": settings.base_url,
            "timeout": settings.timeout,
        }
        kwargs.update(overrides)
        return cls(**kwargs)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def __repr__(self) -> str:
        return f"CleanFluxSync(base_url={self.config.base_url!r})"

    def __enter__(self) -> "CleanFluxSync":
        if self._client is None:
            self._client = self._build_http_client()
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the shared HTTP client, if one is open."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _build_http_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self.config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    def _send(
        self,
        method: str,
        url: str,
        timeout: Any = USE_CLIENT_DEFAULT,
        **kwargs: Any,
    ) -> httpx.Response:
        logger.debug("API request", method=method, url=url)

        if self._client is not None:
            response = self._client.request(method, url, timeout=timeout, **kwargs)
        else:
            with self._build_http_client() as client:
                response = client.request(method, url, timeout=timeout, **kwargs)

        logger.debug("API response", method=method, url=url, status=response.status_code)
        return response

    def _request(
        self,
        endpoint: str,
        payload: dict[str, Any],
        *,
        timeout: Any = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Make an authenticated POST request, see CleanFlux._request."""
        url = self.config.endpoint_url(endpoint)
        response = self._send(
            "POST",
            url,
            timeout=timeout,
            headers=auth_headers(self.config),
            json=payload,
        )

        if not response.is_success:
            logger.warning("API error response", url=url, status=response.status_code)

        return parse_response(response)

    def clean(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        return self._request(Endpoint.CLEAN.value, payload, timeout=timeout)

    def normalize(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        return self._request(Endpoint.NORMALIZE.value, payload, timeout=timeout)

    def extract_urls(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        return self._request(Endpoint.EXTRACT_URLS.value, payload, timeout=timeout)

    def remove_profanity(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        return self._request(Endpoint.REMOVE_PROFANITY.value, payload, timeout=timeout)

    def metadata(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        return self._request(Endpoint.METADATA.value, payload, timeout=timeout)

    def ping(self, *, timeout: Any = USE_CLIENT_DEFAULT) -> Any:
        """Check API connectivity without presenting the API key."""
        url = self.config.endpoint_url(Endpoint.PING.value)
        response = self._send("GET", url, timeout=timeout, headers=public_headers())
        return response.json()
