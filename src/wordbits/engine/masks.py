"""Mask construction for fixed-width words."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import WORD_BITS, InvalidRunLength, WordOverflow
from .utils import check_word, word_format


def power_of_two(power: int, width: int = WORD_BITS) -> int:
    """Return ``2 ** power``, raising :class:`WordOverflow` if it needs more than ``width`` bits."""
    if not 0 <= power < word_format(width).width:
        raise WordOverflow(f"2**{power} does not fit in {width} unsigned bits")
    return 1 << power


def single_bit(index: int, width: int = WORD_BITS) -> int:
    word_format(width).validate_index(index)
    return 1 << index


def run_mask(count: int, width: int = WORD_BITS) -> int:
    """Mask with the lowest ``count`` bits set, ``count`` in ``[0, width]``.

    The top bit of the run is placed with a shift of ``count - 1`` so the
    full-width run never shifts by ``width``.
    """
    fmt = word_format(width)
    if not 0 <= count <= fmt.width:
        raise InvalidRunLength(count, fmt.width)
    if count == 0:
        return 0
    top = 1 << (count - 1)
    return top | (top - 1)


def range_mask(low_index: int, high_index: int, width: int = WORD_BITS) -> int:
    """Mask with bits ``low_index..high_index`` (inclusive) set."""
    fmt = word_format(width)
    fmt.validate_index(low_index)
    fmt.validate_index(high_index)
    if low_index > high_index:
        raise ValueError(f"low index {low_index} is above high index {high_index}")
    return run_mask(high_index + 1, width) & ~run_mask(low_index, width) & fmt.mask


def make_mask(indexes: Iterable[int], width: int = WORD_BITS) -> int:
    value = 0
    for idx in indexes:
        value |= single_bit(idx, width)
    return value


def iter_indexes(word: int, width: int = WORD_BITS) -> Iterator[int]:
    check_word(word, width)
    index = 0
    while word:
        if word & 1:
            yield index
        word >>= 1
        index += 1
