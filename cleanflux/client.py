"""Asynchronous client for the CleanFlux API.

This module provides CleanFlux, an asyncio client built on httpx.AsyncClient.
Every capability method is a thin wrapper around _request(), which owns
authentication headers, JSON encoding and error classification.

Usage:
    client = CleanFlux("sk_live_...")
    result = await client.clean({"text": "Check http://example.com!!!"})

    async with CleanFlux("sk_live_...") as client:
        urls = await client.extract_urls({"text": "Visit https://cleanflux.ai"})
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


class CleanFlux:
    """CleanFlux API client for text cleaning and content moderation.

    The client holds no per-request state, so concurrent calls from several
    tasks are independent. Outside an ``async with`` block each call opens
    and closes its own connection; inside one, a single httpx.AsyncClient is
    shared until the block exits.

    Attributes:
        config: Immutable client configuration
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
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
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "CleanFlux":
        """Build a client from CLEANFLUX_* environment variables.

        Keyword overrides take precedence over the environment.
        """
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
        return f"CleanFlux(base_url={self.config.base_url!r})"

    async def __aenter__(self) -> "CleanFlux":
        """Open a shared httpx.AsyncClient for the duration of the block."""
        if self._client is None:
            self._client = self._build_http_client()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the shared HTTP client, if one is open."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _build_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def _send(
        self,
        method: str,
        url: str,
        timeout: Any = USE_CLIENT_DEFAULT,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send one request on the shared client or a one-shot client."""
        logger.debug("API request", method=method, url=url)

        if self._client is not None:
            response = await self._client.request(method, url, timeout=timeout, **kwargs)
        else:
            async with self._build_http_client() as client:
                response = await client.request(method, url, timeout=timeout, **kwargs)

        logger.debug("API response", method=method, url=url, status=response.status_code)
        return response

    async def _request(
        self,
        endpoint: str,
        payload: dict[str, Any],
        *,
        timeout: Any = USE_CLIENT_DEFAULT,
    ) -> Any:
        """Make an authenticated POST request to the CleanFlux API.

        Args:
            endpoint: Endpoint path segment (e.g. "clean")
            payload: Request body, serialized as JSON unchanged
            timeout: Per-call timeout in seconds, None to wait indefinitely.
                Defaults to the timeout configured on the client.

        Returns:
            Parsed JSON response body

        Raises:
            ApiError: On non-2xx responses
            httpx.TransportError: On network failures
        """
        url = self.config.endpoint_url(endpoint)
        response = await self._send(
            "POST",
            url,
            timeout=timeout,
            headers=auth_headers(self.config),
            json=payload,
        )

        if not response.is_success:
            logger.warning("API error response", url=url, status=response.status_code)

        return parse_response(response)

    async def clean(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        """Clean text by removing unwanted content and normalizing formatting.

        Example:
            result = await client.clean({
                "text": "Check out http://example.com for more info!!!",
                "options": {"removeUrls": True, "normalizeWhitespace": True},
            })
            result["cleaned"]  # 'Check out for more info!'
        """
        return await self._request(Endpoint.CLEAN.value, payload, timeout=timeout)

    async def normalize(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        """Normalize text formatting (whitespace, unicode, case, etc.).

        Example:
            result = await client.normalize({
                "text": "  Hello   World  ",
                "options": {"trim": True, "collapseWhitespace": True},
            })
            result["normalized"]  # 'Hello World'
        """
        return await self._request(Endpoint.NORMALIZE.value, payload, timeout=timeout)

    async def extract_urls(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        """Extract URLs from text."""
        return await self._request(
            Endpoint.EXTRACT_URLS.value, payload, timeout=timeout
        )

    async def remove_profanity(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        """Remove or mask profanity, e.g. ``{"options": {"replacement": "***"}}``."""
        return await self._request(
            Endpoint.REMOVE_PROFANITY.value, payload, timeout=timeout
        )

    async def metadata(
        self, payload: dict[str, Any], *, timeout: Any = USE_CLIENT_DEFAULT
    ) -> Any:
        """Extract text metadata (word count, reading time, etc.)."""
        return await self._request(Endpoint.METADATA.value, payload, timeout=timeout)

    async def ping(self, *, timeout: Any = USE_CLIENT_DEFAULT) -> Any:
        """Check API connectivity without presenting the API key.

        The parsed body is returned whatever the status code; a body that is
        not JSON raises the decode error.
        """
        url = self.config.endpoint_url(Endpoint.PING.value)
        response = await self._send(
            "GET", url, timeout=timeout, headers=public_headers()
        )
        return response.json()
