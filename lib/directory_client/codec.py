from __future__ import annotations

import dataclasses
import json
import types
import typing
from typing import Any, ClassVar

from .errors import DecodingError, EncodingError


class JSONModel:
    """Mixin for resource types exchanged as JSON objects.

    ``JSON_KEYS`` maps attribute names to JSON object keys. Attributes not
    listed are neither sent nor populated.
    """

    JSON_KEYS: ClassVar[dict[str, str]] = {}

    def to_json(self) -> dict[str, Any]:
        return {key: getattr(self, attr) for attr, key in self.JSON_KEYS.items()}

    def load_json(self, data: Any) -> None:
        if not isinstance(data, dict):
            raise DecodingError(
                f"cannot decode JSON {type(data).__name__} into {type(self).__name__}"
            )
        hints = typing.get_type_hints(type(self))
        values = {}
        for attr, key in self.JSON_KEYS.items():
            value = data.get(key)
            # null leaves the current value in place
            if value is None:
                continue
            hint = hints.get(attr, Any)
            if not _matches(value, hint):
                raise DecodingError(
                    f"cannot decode JSON {type(value).__name__} into field {attr!r} "
                    f"of {type(self).__name__}"
                )
            values[attr] = value
        for attr, value in values.items():
            setattr(self, attr, value)


def _matches(value: Any, hint: Any) -> bool:
    if hint is Any:
        return True
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        return any(_matches(value, arg) for arg in typing.get_args(hint) if arg is not type(None))
    if origin is not None:
        hint = origin
    if not isinstance(hint, type):
        return True
    if isinstance(value, bool) and hint is not bool:
        return hint is object
    if hint is float:
        return isinstance(value, (int, float))
    return isinstance(value, hint)


def _default(obj: Any) -> Any:
    if isinstance(obj, JSONModel):
        return obj.to_json()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_body(body: Any) -> bytes:
    try:
        text = json.dumps(
            body,
            default=_default,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
        return (text + "\n").encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"cannot encode request body: {e}") from e


def decode_into(dest: Any, data: bytes) -> Any:
    """Populate ``dest`` from a JSON body and return it.

    An empty (or whitespace-only) body leaves ``dest`` untouched. Any other
    body that does not fit ``dest`` raises ``DecodingError``.
    """
    if not data.strip():
        return dest
    try:
        parsed = json.loads(data)
    except ValueError as e:
        raise DecodingError(f"cannot decode response body: {e}") from e

    if isinstance(dest, JSONModel):
        dest.load_json(parsed)
    elif isinstance(dest, dict):
        if not isinstance(parsed, dict):
            raise DecodingError(f"cannot decode JSON {type(parsed).__name__} into dict")
        dest.update(parsed)
    elif isinstance(dest, list):
        if not isinstance(parsed, list):
            raise DecodingError(f"cannot decode JSON {type(parsed).__name__} into list")
        dest[:] = parsed
    else:
        raise DecodingError(f"unsupported destination type {type(dest).__name__}")
    return dest
