"""Locate the most significant set bit of a word.

Three strategies are provided and must agree on every nonzero word:

- ``scan``: walk upward from bit 0, remembering the last set position.
- ``threshold``: start with a threshold of ``1 << (width - 1)`` and halve it
  while the word is smaller. A word whose highest set bit is ``p`` satisfies
  ``2**p <= word < 2**(p + 1)``, so the first threshold not above the word
  marks ``p``.
- ``power``: the same downward walk, but testing ``word & 2**i == 2**i``
  with the power rebuilt from the index each step instead of comparing
  magnitudes.

The zero word has no highest bit and raises :class:`EmptyInput`.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from .models import WORD_BITS, EmptyInput, HighestBitMethod, WordFormat
from .utils import check_word, resolve_method

logger = logging.getLogger(__name__)


def _require_nonzero(word: int, width: int) -> WordFormat:
    fmt = check_word(word, width)
    if word == 0:
        raise EmptyInput("the zero word has no highest set bit")
    return fmt


def highest_bit_scan(word: int, width: int = WORD_BITS) -> int:
    _require_nonzero(word, width)
    index = 0
    last = 0
    while word:
        if word & 1:
            last = index
        word >>= 1
        index += 1
    return last


def highest_bit_threshold(word: int, width: int = WORD_BITS) -> int:
    fmt = _require_nonzero(word, width)
    index = fmt.width - 1
    threshold = fmt.top_bit
    while word < threshold:
        threshold >>= 1
        index -= 1
    return index


def highest_bit_power(word: int, width: int = WORD_BITS) -> int:
    _require_nonzero(word, width)
    for index in range(width - 1, -1, -1):
        power = 1 << index
        if word & power == power:
            return index
    raise AssertionError("unreachable: nonzero word without a set bit")  # pragma: no cover


_LOCATORS: dict[HighestBitMethod, Callable[[int, int], int]] = {
    HighestBitMethod.SCAN: highest_bit_scan,
    HighestBitMethod.THRESHOLD: highest_bit_threshold,
    HighestBitMethod.POWER: highest_bit_power,
}


def highest_bit(
    word: int,
    width: int = WORD_BITS,
    method: HighestBitMethod | str = HighestBitMethod.THRESHOLD,
) -> int:
    chosen = resolve_method(method, HighestBitMethod)
    logger.debug("highest_bit width=%d method=%s", width, chosen.value)
    return _LOCATORS[chosen](word, width)
