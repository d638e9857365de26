"""RESTGetter decorator that keeps requests within a windowed quota.

Performs the same job as the getter it wraps, but takes a token from a
WindowRateLimiter before every request so that no more than ``limit``
requests start within any ``window`` seconds.
"""

import logging
from typing import Optional

from quotafetch.domain.interfaces.rest_getter import RESTGetter
from quotafetch.domain.models.common import URL
from quotafetch.domain.models.decoding import DecodeTarget, check_target
from quotafetch.infrastructure.config.settings import get_rate_limit, get_rate_window
from quotafetch.infrastructure.http.simple_getter import SimpleRESTGetter
from quotafetch.infrastructure.resilience.rate_limiter import WindowRateLimiter

logger = logging.getLogger(__name__)


class RateLimitedRESTGetter(RESTGetter):
    """Rate-limited decorator for any RESTGetter."""

    def __init__(
        self,
        limit: Optional[int] = None,
        window: Optional[float] = None,
        delegate: Optional[RESTGetter] = None,
        *,
        limiter: Optional[WindowRateLimiter] = None,
        max_wait: Optional[float] = None,
    ):
        """Initializes the decorator.

        Args:
            limit: Requests allowed per window. Read from configuration
                (rate_limit.limit) if None and no limiter is given.
            window: Window length in seconds. Read from configuration
                (rate_limit.window) if None and no limiter is given.
            delegate: Getter performing the requests. A SimpleRESTGetter
                is created if None.
            limiter: Existing limiter to share with other getters. Mutually
                exclusive with limit, window and max_wait.
            max_wait: Upper bound in seconds on the wait for a token.
        """
        if limiter is not None:
            if limit is not None or window is not None or max_wait is not None:
                raise ValueError("Pass either a limiter or limit/window/max_wait, not both.")
            self.limiter = limiter
        else:
            self.limiter = WindowRateLimiter(
                limit=limit if limit is not None else get_rate_limit(),
                window=window if window is not None else get_rate_window(),
                max_wait=max_wait,
            )
        self.delegate = delegate or SimpleRESTGetter()
        logger.debug(
            f"RateLimitedRESTGetter wraps {type(self.delegate).__name__} "
            f"({self.limiter.limit} requests / {self.limiter.window}s)"
        )

    def get(self, url: URL, target: DecodeTarget) -> None:
        """Acts like the delegate's get, after waiting for a rate limit token.

        The token is returned ``window`` seconds after it was taken, whether
        the delegated request succeeds or not.
        """
        check_target(target)
        waited = self.limiter.acquire()
        if waited > 0:
            logger.debug(f"Rate limit reached, waited {waited:.3f}s before GET {url}")
        self.delegate.get(url, target)

    def close(self) -> None:
        """Closes the limiter, waking callers still waiting for a token, then the delegate."""
        self.limiter.close()
        self.delegate.close()
