"""
CleanFlux - Python SDK for the CleanFlux text cleaning API.
"""

from cleanflux.client import CleanFlux
from cleanflux.core import DEFAULT_BASE_URL, ClientConfig, Endpoint
from cleanflux.errors import ApiError, CleanFluxError, ConfigurationError
from cleanflux.logging import configure_logging
from cleanflux.sync_client import CleanFluxSync
from cleanflux.version import __version__

__all__ = [
    "CleanFlux",
    "CleanFluxSync",
    "ClientConfig",
    "Endpoint",
    "DEFAULT_BASE_URL",
    "CleanFluxError",
    "ConfigurationError",
    "ApiError",
    "configure_logging",
    "__version__",
]
