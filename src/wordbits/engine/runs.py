"""Count windows of consecutive set bits."""
from __future__ import annotations

from .masks import run_mask
from .models import WORD_BITS, InvalidRunLength
from .utils import check_word


def count_runs(word: int, run_length: int, width: int = WORD_BITS) -> int:
    """Count positions ``p`` in ``[0, width - run_length]`` where bits ``p..p+run_length-1`` are all 1.

    Windows overlap, so ``0b111`` holds two runs of length 2. The pattern is
    built once; the word is shifted under it instead of moving the pattern.

    Raises:
        InvalidRunLength: ``run_length`` is 0 or wider than the word.
    """
    fmt = check_word(word, width)
    if not 1 <= run_length <= fmt.width:
        raise InvalidRunLength(run_length, fmt.width)
    pattern = run_mask(run_length, fmt.width)
    matches = 0
    for shift in range(fmt.width - run_length + 1):
        if (word >> shift) & pattern == pattern:
            matches += 1
    return matches
