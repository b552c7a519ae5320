from __future__ import annotations

from urllib.parse import SplitResult, urlsplit

from .errors import ParseError


def parse_reference(value: str) -> SplitResult:
    """Parse an absolute URL or a relative reference, rejecting malformed input."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        raise ParseError(value, "invalid control character in URL")
    if value.startswith(":"):
        raise ParseError(value, "missing protocol scheme")
    try:
        parts = urlsplit(value)
        _ = parts.port
    except ValueError as e:
        raise ParseError(value, str(e)) from e

    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if ":" in first_segment:
            raise ParseError(value, "first path segment in URL cannot contain colon")
    return parts


def is_absolute(parts: SplitResult) -> bool:
    return bool(parts.scheme) and bool(parts.netloc)
