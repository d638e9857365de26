"""Defines common Value Objects used across the retrieval subsystem.

These objects represent simple values like URLs and status codes, keeping
signatures readable without adding runtime cost.
"""

from typing import Any, Dict, List, NewType, Union

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are plain values at runtime.
URL = NewType("URL", str)                # Absolute URL, API key included if the API needs one
StatusCode = NewType("StatusCode", int)  # HTTP status code of a received response

# === JSON ===

# Whatever json.load can produce.
JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

# Canned response body held by the static getter: raw bytes/text or decoded JSON.
JSONPayload = Union[bytes, str, JSONValue]

# === Status ranges ===

NO_CONTENT = StatusCode(204)
TOO_MANY_REQUESTS = StatusCode(429)
FIRST_ERROR_STATUS = StatusCode(400)
