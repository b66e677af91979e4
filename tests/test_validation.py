"""Tests for input checks and line resolution (no network)."""
from __future__ import annotations

import pytest

from theme_cart.client import find_line_item, resolve_line_index
from theme_cart.errors import InvalidArgument, NotFound
from theme_cart.validation import (
    Check,
    check_change_options,
    check_key,
    check_variant_id,
)


# ---------- check_key ----------

@pytest.mark.parametrize("key", ["1:abc", "383838383:282hd82hd", "a:b"])
def test_check_key_accepts_two_segments(key):
    result = check_key(key)
    assert result.ok is True
    assert result.error is None
    result.raise_for_error()


@pytest.mark.parametrize("key", [None, 123456, "123456", "1:2:3", ":", ":abc", "abc:", "", ["1", "abc"]])
def test_check_key_rejects_everything_else(key):
    result = check_key(key)
    assert result.ok is False
    assert isinstance(result.error, InvalidArgument)
    with pytest.raises(InvalidArgument, match="xxx:xxx"):
        result.raise_for_error()


def test_invalid_argument_is_a_type_error():
    """Callers catching TypeError keep working."""
    with pytest.raises(TypeError):
        check_key(42).raise_for_error()


# ---------- check_variant_id / check_change_options ----------

@pytest.mark.parametrize("variant_id,ok", [
    (123456, True),
    (12.0, True),
    ("123456", False),
    (None, False),
    (True, False),
])
def test_check_variant_id(variant_id, ok):
    assert check_variant_id(variant_id).ok is ok


@pytest.mark.parametrize("options,ok", [
    ({"quantity": 0}, True),
    ({"properties": {}}, True),
    ({"quantity": 1, "properties": {"a": "b"}}, True),
    ({}, False),
    ({"note": "x"}, False),
    (None, False),
    ([("quantity", 1)], False),
])
def test_check_change_options(options, ok):
    assert check_change_options(options).ok is ok


def test_check_failed_carries_message():
    result = Check.failed("nope")
    assert str(result.error) == "nope"
    assert Check.passed() == Check(ok=True)


# ---------- resolve_line_index / find_line_item ----------

STATE = {
    "items": [
        {"key": "1:abc", "quantity": 1},
        {"key": "2:def", "quantity": 4},
        {"key": "1:abc", "quantity": 7},
    ]
}


def test_resolve_line_index_last_duplicate_wins():
    assert resolve_line_index(STATE, "1:abc") == 2
    assert resolve_line_index(STATE, "2:def") == 1


def test_resolve_line_index_not_found():
    with pytest.raises(NotFound):
        resolve_line_index(STATE, "9:zzz")
    with pytest.raises(NotFound):
        resolve_line_index({"items": []}, "1:abc")


def test_find_line_item_last_duplicate_wins():
    assert find_line_item(STATE, "1:abc") == {"key": "1:abc", "quantity": 7}
    assert find_line_item(STATE, "9:zzz") is None
