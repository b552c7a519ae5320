from __future__ import annotations

import pytest

from directory_client.errors import ParseError
from directory_client.urls import is_absolute, parse_reference


@pytest.mark.parametrize(
    "value",
    [":", "a b:c", "http://[::1", "http://host:port/", "foo\nbar"],
)
def test_parse_reference_rejects_malformed(value: str) -> None:
    with pytest.raises(ParseError):
        parse_reference(value)


@pytest.mark.parametrize("value", ["foo", "/foo", "employee/erick?fields=id", "http://fo.com/", "htt://localhost/"])
def test_parse_reference_accepts_references(value: str) -> None:
    parse_reference(value)


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_reference(":")


def test_is_absolute() -> None:
    assert is_absolute(parse_reference("http://fo.com/"))
    assert not is_absolute(parse_reference("fo.com/"))
    assert not is_absolute(parse_reference("/api/"))
