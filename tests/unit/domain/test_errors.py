import pytest

from quotafetch.domain.models.errors import (
    LimiterClosedError,
    RateLimiterError,
    RESTError,
    StatusError,
    TokenAcquisitionTimeoutError,
    TransportError,
)


def test_too_many_requests_message():
    assert str(StatusError(429)) == "too many requests to server"


@pytest.mark.parametrize("code", [204, 400, 403, 404, 500, 503])
def test_generic_status_message(code):
    error = StatusError(code)
    assert str(error) == f"non-success status {code}"
    assert error.code == code
    assert not error.is_quota_exceeded


def test_transport_error_mentions_url():
    error = TransportError("https://api.test/x", "connection refused")
    assert "https://api.test/x" in str(error)
    assert "connection refused" in str(error)


def test_hierarchy():
    assert issubclass(TransportError, RESTError)
    assert issubclass(StatusError, RESTError)
    assert issubclass(TokenAcquisitionTimeoutError, RateLimiterError)
    assert issubclass(LimiterClosedError, RateLimiterError)
    assert issubclass(RateLimiterError, RESTError)
