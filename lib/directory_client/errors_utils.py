from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ErrorPayload:
    code: int = 0
    message: str = ""


def parse_api_error_body(data: bytes) -> tuple[ErrorPayload, Any | None]:
    """Decode an error body into its payload and the full envelope.

    Only top-level ``code`` and ``message`` are read; anything nested is left
    in the envelope untouched. An empty body or a JSON null yields an empty
    payload. Raises ``ValueError`` when any other body is not a JSON object
    with the expected field types.
    """
    if not data.strip():
        return ErrorPayload(), None
    envelope = json.loads(data)
    if envelope is None:
        return ErrorPayload(), None
    if not isinstance(envelope, dict):
        raise ValueError(f"error body is a JSON {type(envelope).__name__}, not an object")

    code = envelope.get("code", 0)
    message = envelope.get("message", "")
    if code is None:
        code = 0
    if message is None:
        message = ""
    if isinstance(code, bool) or not isinstance(code, int):
        raise ValueError(f"error code must be an integer, got {code!r}")
    if not isinstance(message, str):
        raise ValueError(f"error message must be a string, got {message!r}")
    return ErrorPayload(code=code, message=message), envelope
