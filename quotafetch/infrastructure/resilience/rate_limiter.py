"""Implementation of a windowed rate limiter.

Controls how many requests may start within any trailing window so that an
externally imposed API quota is never exceeded.

The limiter is a pool of ``limit`` tokens. A token is taken before a request
is dispatched and comes back exactly ``window`` seconds after it was taken,
whatever happens to the request. Time is counted from acquisition, not from
completion: a slow server makes the limiter admit fewer requests than the
nominal quota, never more. Keep it that way, the quota measures requests
started.

Token returns live in one deadline queue per limiter. The window is fixed and
tokens are handed out one at a time under the lock, so deadlines are
non-decreasing and the queue only ever expires at its head. No timer or
thread is created per request.
"""

import collections
import logging
import threading
import time
from typing import Deque, Optional

from quotafetch.domain.models.errors import LimiterClosedError, TokenAcquisitionTimeoutError

logger = logging.getLogger(__name__)


class WindowRateLimiter:
    """Fixed-capacity token pool with tokens returned ``window`` seconds after acquisition.

    Safe to share between threads. Blocked callers are served in arrival order.
    """

    def __init__(self, limit: int, window: float, max_wait: Optional[float] = None):
        """Initializes the limiter.

        Args:
            limit: Maximum number of requests started within any window.
            window: Window length in seconds.
            max_wait: Default upper bound in seconds on how long acquire()
                blocks. None waits as long as needed.
        """
        if limit <= 0 or window <= 0:
            raise ValueError("Limit and window must be positive.")
        if max_wait is not None and max_wait < 0:
            raise ValueError("max_wait must not be negative.")

        self.limit = limit
        self.window = window
        self.max_wait = max_wait
        self._release_at: Deque[float] = collections.deque()
        self._waiters: Deque[object] = collections.deque()
        self._cond = threading.Condition()
        self._closed = False
        logger.debug(f"WindowRateLimiter initialized: {self.limit} requests / {self.window} seconds.")

    def _expire(self, now: float) -> None:
        """Returns to the pool every token whose window has elapsed."""
        while self._release_at and self._release_at[0] <= now:
            self._release_at.popleft()

    @property
    def in_flight(self) -> int:
        """Tokens acquired within the trailing window."""
        with self._cond:
            self._expire(time.monotonic())
            return len(self._release_at)

    @property
    def closed(self) -> bool:
        return self._closed

    def wait_time(self) -> float:
        """Seconds until a token is back in the pool, 0.0 if one is free now.

        Callers already queued in acquire() are not accounted for.
        """
        with self._cond:
            now = time.monotonic()
            self._expire(now)
            if len(self._release_at) < self.limit:
                return 0.0
            return max(0.0, self._release_at[0] - now)

    def acquire(self, timeout: Optional[float] = None) -> float:
        """Takes a token, blocking until one is available.

        Args:
            timeout: Maximum seconds to wait. Defaults to ``max_wait``.

        Returns:
            Seconds spent waiting for the token, 0.0 if it was free.

        Raises:
            TokenAcquisitionTimeoutError: If no token was obtained in time.
            LimiterClosedError: If the limiter is or gets closed.
        """
        if timeout is None:
            timeout = self.max_wait
        ticket = object()
        with self._cond:
            start = time.monotonic()
            deadline = None if timeout is None else start + timeout
            self._waiters.append(ticket)
            slept = False
            try:
                while True:
                    if self._closed:
                        raise LimiterClosedError()
                    now = time.monotonic()
                    self._expire(now)
                    pool_full = len(self._release_at) >= self.limit
                    if self._waiters[0] is ticket and not pool_full:
                        self._release_at.append(now + self.window)
                        return now - start if slept else 0.0
                    if deadline is not None and now >= deadline:
                        raise TokenAcquisitionTimeoutError(now - start)

                    # sleep until the oldest token comes back, the deadline
                    # passes, or the caller ahead of us leaves the queue
                    wait_for = self._release_at[0] - now if pool_full else None
                    if deadline is not None:
                        wait_for = deadline - now if wait_for is None else min(wait_for, deadline - now)
                    self._cond.wait(wait_for)
                    slept = True
            finally:
                self._waiters.remove(ticket)
                self._cond.notify_all()

    def close(self) -> None:
        """Wakes every blocked caller with LimiterClosedError and refuses new ones.

        Tokens still out simply expire; nothing has to be waited for.
        """
        with self._cond:
            if self._closed:
                return
            self._closed = True
            blocked = len(self._waiters)
            self._cond.notify_all()
        logger.debug(f"WindowRateLimiter closed ({blocked} blocked callers woken).")

    def __enter__(self) -> "WindowRateLimiter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
