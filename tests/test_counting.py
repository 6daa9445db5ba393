"""Tests for population count strategies."""

import pytest

from wordbits.engine import counting
from wordbits.engine.models import PopcountMethod, WordOverflow


@pytest.mark.parametrize("method", list(PopcountMethod))
def test_popcount_known_values(method: PopcountMethod) -> None:
    assert counting.popcount(0b11100100, method=method) == 4
    assert counting.popcount(0xFFFFFFFF, method=method) == 32
    assert counting.popcount(0, method=method) == 0
    assert counting.popcount(1, method=method) == 1
    assert counting.popcount(0b101, method=method) == 2


def test_strategies_agree(words32: list[int], bytes8: range) -> None:
    for word in words32:
        assert counting.popcount_scan(word) == counting.popcount_kernighan(word) == bin(word).count("1")
    for word in bytes8:
        assert counting.popcount_scan(word, width=8) == counting.popcount_kernighan(word, width=8)


def test_popcount_full_width() -> None:
    for width in (1, 8, 16, 32, 64):
        assert counting.popcount((1 << width) - 1, width=width) == width


def test_popcount_rejects_oversized_word() -> None:
    with pytest.raises(WordOverflow):
        counting.popcount_scan(0x1FF, width=8)
    with pytest.raises(WordOverflow):
        counting.popcount(1 << 32)


def test_popcount_method_names() -> None:
    assert counting.popcount(0b1011, method="scan") == 3
    assert counting.popcount(0b1011, method="Kernighan") == 3
    with pytest.raises(ValueError, match="PopcountMethod"):
        counting.popcount(0b1011, method="table")
