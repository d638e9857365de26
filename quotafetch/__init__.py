"""quotafetch: rate-limited JSON retrieval from quota-limited REST APIs."""

from quotafetch.domain.interfaces.rest_getter import RESTGetter
from quotafetch.domain.models.decoding import JSONDecodable, JSONDocument
from quotafetch.domain.models.errors import (
    RESTError,
    TransportError,
    StatusError,
    DecodeError,
    RateLimiterError,
    TokenAcquisitionTimeoutError,
    LimiterClosedError,
)
from quotafetch.infrastructure.http.simple_getter import SimpleRESTGetter
from quotafetch.infrastructure.http.static_getter import StaticRESTGetter
from quotafetch.infrastructure.resilience.rate_limiter import WindowRateLimiter
from quotafetch.infrastructure.resilience.rate_limited_getter import RateLimitedRESTGetter

__version__ = "0.1.0"

__all__ = [
    "RESTGetter",
    "JSONDecodable",
    "JSONDocument",
    "RESTError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "RateLimiterError",
    "TokenAcquisitionTimeoutError",
    "LimiterClosedError",
    "SimpleRESTGetter",
    "StaticRESTGetter",
    "WindowRateLimiter",
    "RateLimitedRESTGetter",
]
