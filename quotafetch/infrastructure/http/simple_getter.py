"""Unconditional implementation of the RESTGetter interface using requests.

One call is one HTTP GET and one decode attempt: no rate control, no retry,
no caching. Anything beyond that is composed on top (see
``infrastructure.resilience.rate_limited_getter``).
"""

import logging
from typing import Optional

import requests
import urllib3

from quotafetch.domain.interfaces.rest_getter import RESTGetter
from quotafetch.domain.models.common import URL, NO_CONTENT, FIRST_ERROR_STATUS
from quotafetch.domain.models.decoding import DecodeTarget, check_target, load_stream
from quotafetch.domain.models.errors import StatusError, TransportError
from quotafetch.infrastructure.config.settings import get_http_timeout

logger = logging.getLogger(__name__)


def is_accepted_status(code: int) -> bool:
    """True for statuses whose body gets decoded: below 400 and not 204."""
    return code < FIRST_ERROR_STATUS and code != NO_CONTENT


class SimpleRESTGetter(RESTGetter):
    """GETs the requested URL and, if the status is acceptable, decodes the JSON body."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        """Initializes the getter.

        Args:
            session: Session used for every request. A new one is created if None.
            timeout: Transport timeout in seconds (connect and read). Read from
                configuration (http.timeout) if None.
        """
        # a session passed in belongs to the caller and is left open by close()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else get_http_timeout()
        logger.debug(f"SimpleRESTGetter initialized (timeout={self.timeout}s)")

    def get(self, url: URL, target: DecodeTarget) -> None:
        """Performs a GET on ``url`` and decodes the body into ``target``."""
        check_target(target)
        try:
            response = self.session.get(url, stream=True, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f"GET {url} failed: {type(e).__name__}: {e}")
            raise TransportError(url, str(e)) from e

        # the body stream is released on every path below
        try:
            logger.debug(f"GET {url} -> {response.status_code}")
            if not is_accepted_status(response.status_code):
                raise StatusError(response.status_code, url=url)

            response.raw.decode_content = True
            try:
                load_stream(response.raw, target)
            except (requests.RequestException, urllib3.exceptions.HTTPError) as e:
                # body read interrupted after the headers arrived
                raise TransportError(url, str(e)) from e
        finally:
            response.close()

    def close(self) -> None:
        """Closes the session's pooled connections if this getter created it."""
        if self._owns_session:
            self.session.close()
