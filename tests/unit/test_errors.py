"""Tests for the CleanFlux exception hierarchy"""

import pytest

from cleanflux.errors import ApiError, CleanFluxError, ConfigurationError


class TestApiError:
    def test_attributes(self):
        error = ApiError("CleanFlux API Error: bad", status_code=401, response={"error": "bad"})

        assert error.message == "CleanFlux API Error: bad"
        assert error.status_code == 401
        assert error.status == 401
        assert error.response == {"error": "bad"}
        assert str(error) == "CleanFlux API Error: bad"

    def test_response_defaults_to_none(self):
        assert ApiError("boom", status_code=500).response is None

    @pytest.mark.parametrize("status_code", [429, 500, 502, 503, 504])
    def test_retryable_statuses(self, status_code):
        assert ApiError("x", status_code=status_code).retryable is True

    @pytest.mark.parametrize("status_code", [400, 401, 403, 404, 422, 501])
    def test_non_retryable_statuses(self, status_code):
        assert ApiError("x", status_code=status_code).retryable is False

    def test_verbose_str(self):
        assert ApiError("boom", status_code=503).verbose_str() == "boom (503)"


class TestHierarchy:
    def test_all_errors_share_base(self):
        assert issubclass(ApiError, CleanFluxError)
        assert issubclass(ConfigurationError, CleanFluxError)

    def test_catch_with_base_class(self):
        with pytest.raises(CleanFluxError):
            raise ConfigurationError("CleanFlux: API key is required")
