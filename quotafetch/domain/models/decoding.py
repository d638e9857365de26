"""Decode targets: anything a JSON document can be poured into.

A target is owned by the caller. The retrieval layer only needs to hand it a
decoded JSON value; how the value lands in the target is up to the target.
Plain ``dict`` and ``list`` objects are supported directly, any other
structure implements ``JSONDecodable``.
"""

import abc
import json
from typing import Any, BinaryIO, Union

from quotafetch.domain.models.common import JSONValue
from quotafetch.domain.models.errors import DecodeError


class JSONDecodable(abc.ABC):
    """Abstract Base Class for caller-owned structures populated from JSON."""

    @abc.abstractmethod
    def load_json(self, payload: JSONValue) -> None:
        """Populates this object from a decoded JSON document.

        Args:
            payload: The decoded document (dict, list or scalar).

        Raises:
            DecodeError, LookupError, TypeError, ValueError, AttributeError:
                If the document does not have the expected shape.
        """
        pass


DecodeTarget = Union[JSONDecodable, dict, list]


def check_target(target: Any) -> None:
    """Raises TypeError if ``target`` cannot receive a JSON document."""
    if not isinstance(target, (JSONDecodable, dict, list)):
        raise TypeError(
            f"decode target must be a dict, a list or a JSONDecodable, not {type(target).__name__}"
        )


def decode_into(target: DecodeTarget, payload: JSONValue) -> None:
    """Populates ``target`` from an already decoded JSON value.

    Dicts are cleared and updated, lists are cleared and extended. On failure
    the target may have been partially modified.
    """
    check_target(target)
    try:
        if isinstance(target, JSONDecodable):
            target.load_json(payload)
        elif isinstance(target, dict):
            if not isinstance(payload, dict):
                raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
            target.clear()
            target.update(payload)
        elif isinstance(target, list):
            if not isinstance(payload, list):
                raise TypeError(f"expected a JSON array, got {type(payload).__name__}")
            target[:] = payload
    except DecodeError:
        raise
    except (LookupError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError(f"document does not fit {type(target).__name__}: {e}") from e


def load_stream(stream: BinaryIO, target: DecodeTarget) -> None:
    """Decodes a JSON document from a binary stream into ``target``."""
    try:
        payload = json.load(stream)
    except (ValueError, RecursionError) as e:  # JSONDecodeError, UnicodeDecodeError, nesting too deep
        raise DecodeError(f"invalid JSON document: {e}") from e
    decode_into(target, payload)


def load_bytes(data: Union[bytes, str], target: DecodeTarget) -> None:
    """Decodes a JSON document held in memory into ``target``."""
    try:
        payload = json.loads(data)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"invalid JSON document: {e}") from e
    decode_into(target, payload)


class JSONDocument(JSONDecodable):
    """Target that keeps whatever document it receives, unchanged."""

    def __init__(self):
        self.value: JSONValue = None

    def load_json(self, payload: JSONValue) -> None:
        self.value = payload
