"""Tests for converting dimension cells to inches."""

from __future__ import annotations

import pytest  # type: ignore

from palletflow.normalize.dimensions import to_inches


@pytest.mark.parametrize(
    "text, expected",
    [
        ("5'6\"", 66),
        ("6'", 72),
        ('14"', 14),
        ("14", 14),
        ("  48 in ", 48),
        ("1,200", 1200),
        ("0", 0),
    ],
)
def test_to_inches(text: str, expected: int) -> None:
    assert to_inches(text) == expected


def test_to_inches_without_digits_returns_sentinel() -> None:
    assert to_inches("abc") is None
    assert to_inches("") is None


def test_feet_found_anywhere_but_only_prefix_is_cut() -> None:
    # Feet from the first token even when it is not the prefix
    assert to_inches("approx 5' 3\"") == 63
    assert to_inches("x 2'") == 24


def test_inch_found_after_text() -> None:
    assert to_inches('H: 40"') == 40


def test_zero_tokens_fall_back_to_digits() -> None:
    # feet and inches both zero: digits of the remaining text are used
    assert to_inches("0'0\"") == 0


def test_oversized_digit_run_returns_sentinel() -> None:
    # Longer than the interpreter's int-from-string limit
    assert to_inches("9" * 5000) is None
    assert to_inches("9" * 5000 + "'") is None
