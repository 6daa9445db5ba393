"""Single-bit get/set/clear/toggle."""
from __future__ import annotations

import logging

from .masks import single_bit
from .models import WORD_BITS, ClearMethod
from .utils import check_word, check_word_and_index, resolve_method

logger = logging.getLogger(__name__)


def get_bit(word: int, index: int, width: int = WORD_BITS) -> bool:
    check_word_and_index(word, index, width)
    return (word >> index) & 1 == 1


def set_bit(word: int, index: int, width: int = WORD_BITS) -> int:
    check_word(word, width)
    return word | single_bit(index, width)


def _clear_not(word: int, bit: int, mask: int) -> int:
    return word & ~bit & mask


def _clear_xor(word: int, bit: int, mask: int) -> int:
    # word ^ bit differs from word only at `bit`; AND keeps every other bit as-is.
    return word & (word ^ bit)


def _clear_subtract(word: int, bit: int, mask: int) -> int:
    return (word | bit) - bit


_CLEARERS = {
    ClearMethod.NOT: _clear_not,
    ClearMethod.XOR: _clear_xor,
    ClearMethod.SUBTRACT: _clear_subtract,
}


def clear_bit(
    word: int,
    index: int,
    width: int = WORD_BITS,
    method: ClearMethod | str = ClearMethod.NOT,
) -> int:
    """Return ``word`` with bit ``index`` set to 0.

    All :class:`ClearMethod` strategies produce the same result; they differ
    only in which operators build it.
    """
    fmt = check_word(word, width)
    bit = single_bit(index, width)
    chosen = resolve_method(method, ClearMethod)
    logger.debug("clear_bit index=%d width=%d method=%s", index, width, chosen.value)
    return _CLEARERS[chosen](word, bit, fmt.mask)


def toggle_bit(word: int, index: int, width: int = WORD_BITS) -> int:
    check_word(word, width)
    return word ^ single_bit(index, width)
