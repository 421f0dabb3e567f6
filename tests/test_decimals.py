from __future__ import annotations

import pytest

from toolchain_versions.decimals import compare_decimal, decrement_decimal


@pytest.mark.parametrize(
    ("x", "y", "want"),
    [
        ("9", "10", -1),
        ("10", "9", 1),
        ("12", "12", 0),
        ("123", "124", -1),
        ("", "0", -1),
        ("0", "", 1),
        ("", "", 0),
        ("99999999999999999999", "100000000000000000000", -1),
    ],
)
def test_compare_decimal(x: str, y: str, want: int) -> None:
    assert compare_decimal(x, y) == want


@pytest.mark.parametrize(
    ("decimal", "want"),
    [
        ("100", "99"),
        ("1", "0"),
        ("0", ""),
        ("10", "9"),
        ("20", "19"),
        ("1000", "999"),
        ("12345678901234567890", "12345678901234567889"),
    ],
)
def test_decrement_decimal(decimal: str, want: str) -> None:
    assert decrement_decimal(decimal) == want
