"""
Shared pytest fixtures for CleanFlux SDK tests.
"""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from cleanflux.settings import clear_settings_cache


class RecordingHandler:
    """httpx.MockTransport handler that records requests and replays a response."""

    def __init__(self, response_factory: Callable[[httpx.Request], httpx.Response]):
        self.response_factory = response_factory
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response_factory(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def respond():
    """Build a recording handler returning a fixed status and body.

    Pass ``json_body`` for a JSON response or ``text`` for a raw body.
    """

    def _respond(status_code: int = 200, json_body: Any = None, text: Optional[str] = None):
        def factory(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body)

        return RecordingHandler(factory)

    return _respond


@pytest.fixture(autouse=True)
def clear_cache():
    """Clear settings cache before and after each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
