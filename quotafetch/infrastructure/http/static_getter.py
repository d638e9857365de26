"""Fixture-backed implementation of the RESTGetter interface.

Serves canned JSON documents from an in-memory mapping, so code written
against RESTGetter can be exercised without network access. Unknown URLs
answer like a missing resource (404).
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Union

from quotafetch.domain.interfaces.rest_getter import RESTGetter
from quotafetch.domain.models.common import URL, JSONPayload
from quotafetch.domain.models.decoding import DecodeTarget, check_target, decode_into, load_bytes
from quotafetch.domain.models.errors import StatusError

logger = logging.getLogger(__name__)

NOT_FOUND = 404


class StaticRESTGetter(RESTGetter):
    """Answers GETs from a fixed URL -> payload mapping."""

    def __init__(self, responses: Mapping[str, JSONPayload]):
        self.responses: Dict[str, JSONPayload] = dict(responses)
        self.requested: List[URL] = []

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "StaticRESTGetter":
        """Loads a fixture document ``{"responses": {url: payload, ...}}``.

        Raises:
            ValueError: If the file is not JSON or holds no responses.
        """
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        responses = data.get("responses") if isinstance(data, dict) else None
        if not isinstance(responses, dict) or not responses:
            raise ValueError(f"missing static responses in {path}")
        logger.debug(f"Loaded {len(responses)} static responses from {path}")
        return cls(responses)

    def get(self, url: URL, target: DecodeTarget) -> None:
        check_target(target)
        self.requested.append(url)
        if url not in self.responses:
            raise StatusError(NOT_FOUND, url=url)

        payload = self.responses[url]
        if isinstance(payload, (bytes, str)):
            load_bytes(payload, target)
        else:
            # copy so callers never share state with the fixture
            decode_into(target, json.loads(json.dumps(payload)))
