"""Interface for fetching JSON documents from a REST API.

Defines the single capability every fetcher provides: given a URL and a
decode target, either populate the target or raise. Decorators such as the
rate-limited getter are written against this contract, never against a
concrete fetcher.
"""

import abc

from quotafetch.domain.models.common import URL
from quotafetch.domain.models.decoding import DecodeTarget


class RESTGetter(abc.ABC):
    """Abstract Base Class for objects able to GET JSON data from a REST API."""

    @abc.abstractmethod
    def get(self, url: URL, target: DecodeTarget) -> None:
        """Fetches ``url`` and decodes the JSON body into ``target``.

        The URL is used as given. API keys, if the remote API needs them,
        are expected to be part of it already.

        Args:
            url: Absolute URL of the resource.
            target: Caller-owned dict, list or JSONDecodable to populate.

        Raises:
            TransportError: If the HTTP exchange could not be completed.
            StatusError: If the status is >= 400 or 204 (no content).
            DecodeError: If the body is not JSON or does not fit the target.
            RateLimiterError: If a rate-limited getter could not get a token.
        """
        pass

    def close(self) -> None:
        """Releases resources held by the getter. Nothing to release by default."""
        pass
