"""Error taxonomy of the retrieval subsystem.

Three kinds of failure can come out of a ``get`` call:

- ``TransportError``: the HTTP exchange could not be completed.
- ``StatusError``: a response arrived but its status is not acceptable.
- ``DecodeError``: the body is not JSON or does not fit the target.

Rate limiter failures (timeout, shutdown) have their own branch so callers
can tell "the server refused" apart from "we never asked".
"""

from typing import Optional

from quotafetch.domain.models.common import StatusCode, TOO_MANY_REQUESTS


class RESTError(Exception):
    """Base class for every error raised by a REST getter."""


class TransportError(RESTError):
    """The request could not be sent or the response could not be read.

    The underlying transport exception is kept as ``__cause__``.
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"GET {url} failed: {message}")


class StatusError(RESTError):
    """Response received with a status outside the accepted range, or 204."""

    def __init__(self, code: int, url: Optional[str] = None):
        self.code = StatusCode(code)
        self.url = url
        super().__init__(self._render(self.code))

    @staticmethod
    def _render(code: StatusCode) -> str:
        if code == TOO_MANY_REQUESTS:
            return "too many requests to server"
        return f"non-success status {code}"

    @property
    def is_quota_exceeded(self) -> bool:
        return self.code == TOO_MANY_REQUESTS


class DecodeError(RESTError, ValueError):
    """Body is not valid JSON or does not match the decode target.

    The decoder's exception is kept as ``__cause__``.
    """


# --- Rate limiter ---

class RateLimiterError(RESTError):
    """Base class for failures to obtain a rate limit token."""


class TokenAcquisitionTimeoutError(RateLimiterError):
    """Raised when a caller waited longer than allowed for a token."""

    def __init__(self, waited: float):
        self.waited = waited
        super().__init__(f"no rate limit token available after {waited:.3f}s")


class LimiterClosedError(RateLimiterError):
    """Raised to callers of a rate limiter that has been closed."""

    def __init__(self):
        super().__init__("rate limiter is closed")
