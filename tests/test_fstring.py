import math

import pytest

from junglecore.fstring import (
    INDEX_NONE,
    SearchCase,
    SearchDir,
    contains,
    equals,
    find,
    from_int,
    sanitize_float,
    to_float,
)


def test_equals_is_case_sensitive_by_default():
    assert equals("Hello", "Hello") is True
    assert equals("Hello", "hello") is False


def test_equals_ignoring_case():
    assert equals("Hello", "hELLO", SearchCase.IGNORE_CASE) is True


def test_equals_different_lengths():
    assert equals("a", "ab") is False
    assert equals("", "a") is False
    assert equals("", "") is True


def test_equals_single_characters_are_compared():
    assert equals("a", "b") is False
    assert equals("a", "A", SearchCase.IGNORE_CASE) is True


def test_find_ignores_case_by_default():
    text = "Hello World"
    index = find(text, "world")
    assert index != INDEX_NONE
    assert text[index:index + 5].lower() == "world"


def test_find_case_sensitive_misses():
    assert find("Hello World", "world", SearchCase.CASE_SENSITIVE) == INDEX_NONE


def test_find_from_start_returns_first_match():
    text = "abcABCabc"
    assert find(text, "abc", SearchCase.CASE_SENSITIVE) == text.index("abc")
    assert find(text, "abc", SearchCase.IGNORE_CASE) == 0


def test_find_from_start_respects_start_position():
    text = "abcabcabc"
    assert find(text, "abc", start_position=1) == text.find("abc", 1)


def test_find_from_end_returns_last_match():
    text = "abcabcabc"
    assert find(text, "abc", search_dir=SearchDir.FROM_END) == text.rfind("abc")


def test_find_from_end_respects_start_position():
    text = "abcabcabc"
    index = find(text, "abc", search_dir=SearchDir.FROM_END, start_position=5)
    assert index == text.rfind("abc", 0, 5 + 3)


def test_find_empty_inputs_return_index_none():
    assert find("", "a") == INDEX_NONE
    assert find("abc", "") == INDEX_NONE


def test_find_substring_longer_than_text():
    assert find("ab", "abc") == INDEX_NONE
    assert find("ab", "abc", search_dir=SearchDir.FROM_END) == INDEX_NONE


def test_find_from_end_negative_start_finds_nothing():
    assert find("abcabc", "abc", search_dir=SearchDir.FROM_END, start_position=-3) == INDEX_NONE


def test_contains_both_directions():
    assert contains("The Quick Fox", "quick") is True
    assert contains("The Quick Fox", "fox", search_dir=SearchDir.FROM_END) is True
    assert contains("The Quick Fox", "dog") is False
    assert contains("The Quick Fox", "quick", SearchCase.CASE_SENSITIVE) is False


def test_from_int_integers():
    assert from_int(42) == "42"
    assert from_int(-7) == "-7"


def test_from_int_float_matches_sanitize_float():
    assert from_int(2.5) == sanitize_float(2.5)


def test_sanitize_float_uses_six_decimals():
    assert sanitize_float(1.5) == "1.500000"


def test_sanitize_float_round_trips_through_to_float():
    assert to_float(sanitize_float(2.25)) == 2.25


def test_to_float_parses_plain_number():
    assert to_float("2.25") == 2.25


def test_to_float_skips_whitespace_and_ignores_tail():
    assert to_float(" \t-7.5kg") == -7.5


def test_to_float_is_single_precision():
    value = to_float("0.1")
    assert value == pytest.approx(0.1, rel=1e-7)
    assert value != 0.1


def test_to_float_hex():
    assert to_float("0x1p3") == 8.0


def test_to_float_special_values():
    assert to_float("inf") == math.inf
    assert to_float("-Infinity") == -math.inf
    assert math.isnan(to_float("nan"))


@pytest.mark.parametrize("text", ["", "abc", "e5", "   ", "-"])
def test_to_float_rejects_non_numbers(text):
    with pytest.raises(ValueError):
        to_float(text)