from __future__ import annotations

import json
from dataclasses import dataclass
from typing import ClassVar

import pytest

from directory_client import DecodingError, EncodingError, User
from directory_client.codec import JSONModel, decode_into, encode_body


def test_encode_body_uses_json_keys_and_trailing_newline() -> None:
    body = encode_body(User(core_id="c", full_name="f", status="s", id="i"))
    assert body == b'{"coreId":"c","fullName":"f","status":"s","id":"i"}\n'


@pytest.mark.parametrize(
    "value",
    [
        {"a": 1, "b": [1, 2, {"c": None}]},
        ["x", 1.5, True],
        "Ünïcode",
    ],
)
def test_encode_body_roundtrip(value) -> None:
    assert json.loads(encode_body(value)) == value


def test_encode_body_plain_dataclass() -> None:
    @dataclass
    class _Point:
        x: int
        y: int

    assert json.loads(encode_body(_Point(1, 2))) == {"x": 1, "y": 2}


def test_encode_body_rejects_unserializable() -> None:
    with pytest.raises(EncodingError):
        encode_body({"when": object()})


@pytest.mark.parametrize("value", [float("nan"), float("inf"), -float("inf")])
def test_encode_body_rejects_non_finite_floats(value: float) -> None:
    with pytest.raises(EncodingError):
        encode_body({"x": value})


def test_encode_body_rejects_lone_surrogate() -> None:
    with pytest.raises(EncodingError):
        encode_body({"name": "\ud800"})


def test_decode_into_model() -> None:
    user = decode_into(User(), b'{"coreId": "aeg095", "fullName": "Erick Guevara", "status": "A", "id": "erick"}')
    assert user == User(core_id="aeg095", full_name="Erick Guevara", status="A", id="erick")


def test_decode_into_model_ignores_unknown_keys() -> None:
    user = decode_into(User(), b'{"id": "erick", "extra": 1}')
    assert user == User(id="erick")


@pytest.mark.parametrize("data", [b"", b"  \n"])
def test_decode_into_empty_body_leaves_destination(data: bytes) -> None:
    user = User()
    assert decode_into(user, data) is user
    assert user == User()


def test_decode_into_dict_and_list() -> None:
    assert decode_into({}, b'{"A": "a"}') == {"A": "a"}
    items: list = ["stale"]
    assert decode_into(items, b"[1, 2]") == [1, 2]


@pytest.mark.parametrize(
    "dest,data",
    [
        (User(), b"not json"),
        (User(), b"[]"),
        (User(), b'{"id": 5}'),
        (User(), b'{"fullName": ["a"]}'),
        (User(), b'{"status": true}'),
        ({}, b"[1]"),
        ([], b"{}"),
        (object(), b"{}"),
    ],
)
def test_decode_into_mismatch_raises(dest, data: bytes) -> None:
    with pytest.raises(DecodingError):
        decode_into(dest, data)


def test_decode_into_model_null_keeps_default() -> None:
    user = User(full_name="kept")
    decode_into(user, b'{"id": "erick", "fullName": null}')
    assert user == User(full_name="kept", id="erick")


def test_decode_into_model_mismatch_leaves_model_untouched() -> None:
    user = User(id="before")
    with pytest.raises(DecodingError, match="core_id"):
        decode_into(user, b'{"id": "after", "coreId": 7}')
    assert user == User(id="before")


def test_decode_into_model_checks_optional_and_numeric_fields() -> None:
    @dataclass
    class _Stats(JSONModel):
        JSON_KEYS: ClassVar[dict[str, str]] = {"count": "count", "ratio": "ratio", "note": "note"}

        count: int = 0
        ratio: float = 0.0
        note: str | None = None

    stats = decode_into(_Stats(), b'{"count": 3, "ratio": 1, "note": "n"}')
    assert (stats.count, stats.ratio, stats.note) == (3, 1, "n")
    with pytest.raises(DecodingError):
        decode_into(_Stats(), b'{"count": true}')
    with pytest.raises(DecodingError):
        decode_into(_Stats(), b'{"note": 1}')
