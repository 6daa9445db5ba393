"""Population count strategies."""
from __future__ import annotations

import logging
from collections.abc import Callable

from .models import WORD_BITS, PopcountMethod
from .utils import check_word, resolve_method

logger = logging.getLogger(__name__)


def popcount_scan(word: int, width: int = WORD_BITS) -> int:
    """Count set bits by testing and shifting out every one of the ``width`` positions."""
    fmt = check_word(word, width)
    count = 0
    for _ in range(fmt.width):
        count += word & 1
        word >>= 1
    return count


def popcount_kernighan(word: int, width: int = WORD_BITS) -> int:
    """Count set bits by clearing the lowest set bit until nothing is left.

    ``word - 1`` flips the trailing zeros and the lowest set bit, so
    ``word & (word - 1)`` drops exactly that bit. The loop runs once per set
    bit rather than once per position.
    """
    check_word(word, width)
    count = 0
    while word:
        word &= word - 1
        count += 1
    return count


_COUNTERS: dict[PopcountMethod, Callable[[int, int], int]] = {
    PopcountMethod.SCAN: popcount_scan,
    PopcountMethod.KERNIGHAN: popcount_kernighan,
}


def popcount(
    word: int,
    width: int = WORD_BITS,
    method: PopcountMethod | str = PopcountMethod.KERNIGHAN,
) -> int:
    chosen = resolve_method(method, PopcountMethod)
    logger.debug("popcount width=%d method=%s", width, chosen.value)
    return _COUNTERS[chosen](word, width)
