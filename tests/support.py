"""Helpers shared by the test modules."""

import io

import requests
from unittest.mock import MagicMock

from quotafetch.domain.models.decoding import JSONDecodable


class FakeRaw(io.BytesIO):
    """Stands in for urllib3's HTTPResponse as ``response.raw``."""
    decode_content = False


def make_response(status_code: int, body: bytes = b"") -> MagicMock:
    """Builds a mocked requests.Response with a readable raw body."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.raw = FakeRaw(body)
    return response


class Summoner(JSONDecodable):
    """Minimal typed decode target shaped {id: string}."""

    def __init__(self):
        self.id = None

    def load_json(self, payload):
        summoner_id = payload["id"]
        if not isinstance(summoner_id, str):
            raise TypeError(f"id must be a string, got {type(summoner_id).__name__}")
        self.id = summoner_id
