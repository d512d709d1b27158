from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from freezegun import freeze_time

from assertkit.checks import (
    contains,
    ends_with,
    has_key,
    is_empty,
    is_expired,
    is_false,
    parse_rfc3339,
)


# contains

def test_contains_list():
    assert contains(["a", "b", "c"], "b") is True


def test_contains_set():
    assert contains({"a", "b", "c"}, "b") is True


def test_contains_subnets():
    subnets = ["10.1.0.0/20", "10.1.16.0/20", "10.1.32.0/24", "10.1.48.0/20"]
    assert contains(subnets, "10.1.0.0/20") is True
    assert contains(subnets, "172.1.0.0/21") is False


def test_contains_number():
    assert contains([1, 2, 3], 2) is True


def test_contains_bool():
    assert contains([True, False, True], True) is True


def test_contains_float():
    assert contains([1.0, 2.0, 3.0], 2.0) is True


def test_contains_negative():
    assert contains([-1, -2, -3], -2) is True


def test_contains_negative_float():
    assert contains([-1.0, -2.0, -3.0], -2.0) is True


def test_contains_mixed_numbers():
    assert contains([-1.0, -2, -3.0], -2) is True


def test_contains_mixed_numbers_trailing_zero():
    assert contains([-1.0, -2, -3.0], -2.0) is True


@pytest.mark.parametrize(
    "items, element",
    [
        (["a", "b", "c"], "x"),
        ([1, 2, 3], 45),
        ([True, True], False),
    ],
)
def test_contains_false_cases(items, element):
    assert contains(items, element) is False


def test_contains_number_against_string_form():
    assert contains(["2"], 2) is True
    assert contains([Decimal("2.50")], "2.5") is True


def test_contains_generator():
    assert contains((str(n) for n in range(5)), "4") is True


def test_contains_empty_list():
    assert contains([], "a") is False


@pytest.mark.parametrize("items", [None, "abc", 5, {"a": "b"}])
def test_contains_rejects_non_list(items):
    with pytest.raises(TypeError):
        contains(items, "a")


def test_contains_rejects_null_element():
    with pytest.raises(TypeError, match="must not be null"):
        contains(["a"], None)


# is_empty

def test_empty_string():
    assert is_empty("") is True


def test_not_empty_string():
    assert is_empty("notempty") is False


def test_whitespace_is_not_empty():
    assert is_empty("   ") is False


def test_trimmed_whitespace_is_empty():
    assert is_empty("".strip()) is True


def test_special_characters_not_empty():
    assert is_empty("!@#$%^&*()") is False


def test_empty_null_rejected():
    with pytest.raises(TypeError, match="argument must not be null"):
        is_empty(None)


def test_empty_list_rejected():
    with pytest.raises(TypeError, match="string required"):
        is_empty([])


# ends_with

def test_ends_with():
    assert ends_with("world", "hello world") is True


def test_ends_with_empty_suffix():
    assert ends_with("", "hello world") is True


def test_ends_with_space_prefixed_suffix():
    text = "hello world"
    assert ends_with(" world", text) is True


def test_ends_with_chained_bool():
    result = ends_with("world", "hello world")
    assert ends_with("ue", result) is True


def test_ends_with_false():
    assert ends_with("mars", "hello world") is False


def test_ends_with_null_rejected():
    with pytest.raises(TypeError):
        ends_with(None, "text")


# parse_rfc3339 / is_expired

def test_parse_utc():
    assert parse_rfc3339("2024-01-01T00:00:00Z") == datetime(
        2024, 1, 1, tzinfo=timezone.utc
    )


def test_parse_offset_and_fraction():
    parsed = parse_rfc3339("2024-03-05T10:20:30.123456789+02:00")
    assert parsed == datetime(
        2024, 3, 5, 10, 20, 30, 123456, tzinfo=timezone(timedelta(hours=2))
    )


def test_parse_negative_offset():
    parsed = parse_rfc3339("2024-01-01T00:00:00-05:30")
    assert parsed.utcoffset() == -timedelta(hours=5, minutes=30)


@pytest.mark.parametrize(
    "text",
    [
        "abc",
        "2100-00-00T00:00:00Z",
        "2024-01-01",
        "2024-01-01T00:00:00",
        "2024-01-01 00:00:00Z",
        "2024-13-01T00:00:00Z",
        "2024-01-01T24:00:00Z",
        "2024-01-01T00:00:60Z",
        "2024-01-01T00:00:00+01:60",
    ],
)
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_rfc3339(text)


@freeze_time("2025-06-01T12:00:00Z")
def test_expired():
    assert is_expired("2024-01-01T00:00:00Z") is True


@freeze_time("2025-06-01T12:00:00Z")
def test_not_expired_future():
    assert is_expired("2030-01-01T00:00:00Z") is False


@freeze_time("2025-06-01T12:00:00Z")
def test_expired_respects_offset():
    assert is_expired("2025-06-01T13:30:00+02:00") is True
    assert is_expired("2025-06-01T13:30:00+01:00") is False


def test_expired_invalid_dates_are_false():
    assert is_expired("2100-00-00T00:00:00Z") is False
    assert is_expired("abc") is False


# is_false

def test_false_of_false():
    assert is_false(False) is True


def test_false_of_comparison():
    assert is_false("abc" == "def") is True


def test_false_cases():
    assert is_false(True) is False
    assert is_false("abc" == "abc") is False


def test_false_accepts_bool_strings():
    assert is_false("false") is True
    assert is_false("true") is False


def test_false_rejects_other_strings():
    with pytest.raises(ValueError):
        is_false("nope")


@pytest.mark.parametrize("value", [None, 0, [False]])
def test_false_rejects_non_bool(value):
    with pytest.raises(TypeError):
        is_false(value)


# has_key

def test_key_present():
    my_map = {"key1": "value1", "key2": "value2"}
    assert has_key("key1", my_map) is True


def test_key_mixed_map():
    my_map = {"key1": True, "key2": "value2", 3: "value3", "4": "value4", 5: 5, "6": False}
    assert has_key("key1", my_map) is True
    assert has_key("3", my_map) is True


def test_key_nested_map():
    my_map = {"key1": {"nested": "value2"}}
    assert has_key("nested", my_map["key1"]) is True


def test_key_false_cases():
    assert has_key("key2", {"key1": "value1"}) is False
    assert has_key("nested2", {"key1": {"nested": "value2"}}["key1"]) is False


def test_key_missing_mapping():
    assert has_key("key1", None) is False


def test_key_rejects_non_mapping():
    with pytest.raises(TypeError):
        has_key("key1", ["key1"])


def test_key_rejects_null_key():
    with pytest.raises(TypeError):
        has_key(None, {"key1": "value1"})