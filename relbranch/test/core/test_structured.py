from __future__ import annotations

from relbranch.core.structured import (
    as_str_dict,
    get_bool,
    get_number,
    get_path,
    get_str,
    get_table,
)


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict(["a"]) is None


def test_get_str_strips_and_rejects_empty() -> None:
    table: dict[str, object] = {"a": " main ", "b": "   ", "c": 3}
    assert get_str(table, "a") == "main"
    assert get_str(table, "b") is None
    assert get_str(table, "c") is None
    assert get_str(table, "missing") is None


def test_get_bool() -> None:
    assert get_bool({"a": False}, "a") is False
    assert get_bool({"a": "false"}, "a") is None


def test_get_number_excludes_bools() -> None:
    assert get_number({"a": 5}, "a") == 5.0
    assert get_number({"a": 2.5}, "a") == 2.5
    assert get_number({"a": True}, "a") is None


def test_get_table() -> None:
    assert get_table({"t": {"k": "v"}}, "t") == {"k": "v"}
    assert get_table({"t": "v"}, "t") is None


def test_get_path() -> None:
    payload: dict[str, object] = {"release": {"tag_name": "1.0.0"}, "x": "y"}
    assert get_path(payload, "release", "tag_name") == "1.0.0"
    assert get_path(payload, "release", "missing") is None
    assert get_path(payload, "x", "deeper") is None
    assert get_path(payload) == payload
