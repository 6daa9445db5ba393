"""Swap two bits or remove one bit and close the gap."""
from __future__ import annotations

import logging
from collections.abc import Callable

from .masks import run_mask
from .models import WORD_BITS, SwapMethod
from .utils import check_word, resolve_method

logger = logging.getLogger(__name__)


def _swap_xor(word: int, index_a: int, index_b: int, mask: int) -> int:
    # The swapper is 1 at both positions only when the bits differ; XOR then flips both.
    differ = ((word >> index_a) ^ (word >> index_b)) & 1
    swapper = differ << index_a | differ << index_b
    return word ^ swapper


def _swap_shift(word: int, index_a: int, index_b: int, mask: int) -> int:
    low, high = sorted((index_a, index_b))
    distance = high - low
    low_bit = 1 << low
    high_bit = 1 << high
    kept = word & ~(low_bit | high_bit) & mask
    return kept | (word >> distance) & low_bit | (word << distance) & high_bit


_SWAPPERS: dict[SwapMethod, Callable[[int, int, int, int], int]] = {
    SwapMethod.XOR: _swap_xor,
    SwapMethod.SHIFT: _swap_shift,
}


def swap_bits(
    word: int,
    index_a: int,
    index_b: int,
    width: int = WORD_BITS,
    method: SwapMethod | str = SwapMethod.XOR,
) -> int:
    """Exchange the bits at ``index_a`` and ``index_b``.

    Both indices are checked before the equal-index shortcut, so
    ``swap_bits(w, 40, 40)`` still raises :class:`IndexOutOfRange`.
    """
    fmt = check_word(word, width)
    fmt.validate_index(index_a)
    fmt.validate_index(index_b)
    chosen = resolve_method(method, SwapMethod)
    if index_a == index_b:
        return word
    logger.debug("swap_bits %d<->%d width=%d method=%s", index_a, index_b, width, chosen.value)
    return _SWAPPERS[chosen](word, index_a, index_b, fmt.mask)


def remove_bit(word: int, index: int, width: int = WORD_BITS) -> int:
    """Drop bit ``index``: lower bits stay, higher bits move down one, the top bit becomes 0."""
    fmt = check_word(word, width)
    fmt.validate_index(index)
    low = word & run_mask(index, fmt.width)
    if index + 1 == fmt.width:
        return low
    high = (word >> (index + 1)) << index
    return low | high
