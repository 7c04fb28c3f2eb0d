"""Tests for SDK logging setup"""

import logging

import httpx
import pytest
import structlog

from cleanflux import ApiError, CleanFluxSync
from cleanflux.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def restore_logging():
    """Reset structlog and the SDK logger after a test reconfigures them."""
    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(sdk_logger.handlers)
    level = sdk_logger.level
    propagate = sdk_logger.propagate
    yield
    structlog.reset_defaults()
    sdk_logger.handlers[:] = handlers
    sdk_logger.setLevel(level)
    sdk_logger.propagate = propagate


def test_sdk_logger_has_null_handler():
    handlers = logging.getLogger(ROOT_LOGGER_NAME).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger_wraps_stdlib_logger(caplog):
    logger = get_logger("cleanflux.tests")

    with caplog.at_level(logging.INFO, logger="cleanflux.tests"):
        logger.info("hello", answer=42)

    assert any("hello" in record.getMessage() for record in caplog.records)


def test_requests_are_logged_without_api_key(caplog, respond):
    client = CleanFluxSync(
        "sk_live_secret", transport=httpx.MockTransport(respond(200, {}))
    )

    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        client.clean({"text": "x"})

    messages = [record.getMessage() for record in caplog.records]
    assert any("API request" in message for message in messages)
    assert all("sk_live_secret" not in message for message in messages)


def test_error_responses_log_warning(caplog, respond):
    client = CleanFluxSync("sk_live_x", transport=httpx.MockTransport(respond(401, {})))

    with caplog.at_level(logging.WARNING, logger=ROOT_LOGGER_NAME):
        with pytest.raises(ApiError):
            client.clean({"text": "x"})

    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_configure_logging_sets_level(restore_logging):
    configure_logging(level="debug", json_logs=True)

    sdk_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert sdk_logger.level == logging.DEBUG
    assert sdk_logger.propagate is False
    assert len(sdk_logger.handlers) == 1
