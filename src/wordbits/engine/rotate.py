"""Circular shifts of fixed-width words."""
from __future__ import annotations

from .models import WORD_BITS
from .utils import check_word


def _effective_count(count: int, width: int) -> int:
    if count < 0:
        raise ValueError(f"rotation count must be non-negative, got {count}")
    return count % width


def rotate_left(word: int, count: int, width: int = WORD_BITS) -> int:
    """Rotate ``word`` left by ``count`` positions; bits leaving the top re-enter at bit 0.

    A count that is a multiple of ``width`` returns ``word`` unchanged without
    ever shifting by the full width.
    """
    fmt = check_word(word, width)
    count = _effective_count(count, fmt.width)
    if count == 0:
        return word
    return (word << count) & fmt.mask | word >> (fmt.width - count)


def rotate_right(word: int, count: int, width: int = WORD_BITS) -> int:
    fmt = check_word(word, width)
    count = _effective_count(count, fmt.width)
    if count == 0:
        return word
    return word >> count | (word << (fmt.width - count)) & fmt.mask
