"""wordbits fixed-width bit manipulation toolkit."""

from collections.abc import Sequence

from .engine.access import clear_bit, get_bit, set_bit, toggle_bit
from .engine.counting import popcount
from .engine.highest import highest_bit
from .engine.masks import make_mask, power_of_two, range_mask, run_mask, single_bit
from .engine.models import (
    WORD_BITS,
    BitwiseError,
    EmptyInput,
    IndexOutOfRange,
    InvalidRunLength,
    WordOverflow,
)
from .engine.rearrange import remove_bit, swap_bits
from .engine.render import to_binary_string
from .engine.rotate import rotate_left, rotate_right
from .engine.runs import count_runs
from .engine.unique import find_unique


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`wordbits.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "WORD_BITS",
    "BitwiseError",
    "EmptyInput",
    "IndexOutOfRange",
    "InvalidRunLength",
    "WordOverflow",
    "clear_bit",
    "count_runs",
    "find_unique",
    "get_bit",
    "highest_bit",
    "main",
    "make_mask",
    "popcount",
    "power_of_two",
    "range_mask",
    "remove_bit",
    "rotate_left",
    "rotate_right",
    "run_mask",
    "set_bit",
    "single_bit",
    "swap_bits",
    "to_binary_string",
    "toggle_bit",
]
