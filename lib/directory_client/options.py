from __future__ import annotations

from typing import Any, ClassVar
from urllib.parse import parse_qsl, urlencode, urlunsplit

from .urls import parse_reference


class QueryOptions:
    """Optional per-call parameters sent as query-string values.

    Subclasses declare ``QUERY_KEYS``, mapping attribute names to the query
    keys they are sent under. Attributes holding ``None`` are left out.
    """

    QUERY_KEYS: ClassVar[dict[str, str]] = {}

    def query_params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        for attr, key in self.QUERY_KEYS.items():
            value = getattr(self, attr, None)
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                params.extend((key, _format_value(v)) for v in value if v is not None)
            else:
                params.append((key, _format_value(value)))
        return params


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def add_options(path: str, options: QueryOptions | None) -> str:
    if options is None:
        return path

    parts = parse_reference(path)
    params = options.query_params()
    if not params:
        return path

    existing = parse_qsl(parts.query, keep_blank_values=True)
    query = urlencode(sorted(existing + params, key=lambda kv: kv[0]))
    return urlunsplit(parts._replace(query=query))
