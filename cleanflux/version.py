"""
Version information for the CleanFlux SDK.

The User-Agent sent with every request is derived from this version so the
API can tell client releases apart.
"""

__version__ = "1.0.0"

CLIENT_NAME = "cleanflux-python"
USER_AGENT = f"{CLIENT_NAME}/{__version__}"


def get_version() -> str:
    """Get the current version of the SDK."""
    return __version__
