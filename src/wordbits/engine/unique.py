"""Recover the one value without a partner."""
from __future__ import annotations

from collections.abc import Iterable

from .models import WORD_BITS, EmptyInput
from .utils import word_format


def find_unique(values: Iterable[int], width: int = WORD_BITS) -> int:
    """XOR-fold ``values``; every value seen an even number of times cancels out.

    The caller guarantees exactly one value has odd multiplicity; that is not
    re-checked. An empty input raises :class:`EmptyInput`.
    """
    fmt = word_format(width)
    seen = False
    result = 0
    for value in values:
        result ^= fmt.validate_word(value)
        seen = True
    if not seen:
        raise EmptyInput("cannot find the unique value of an empty sequence")
    return result
