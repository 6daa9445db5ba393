"""Data models shared across the wordbits engine."""
from __future__ import annotations

import enum
from dataclasses import dataclass

WORD_BITS = 32


class PopcountMethod(str, enum.Enum):
    SCAN = "scan"
    KERNIGHAN = "kernighan"


class HighestBitMethod(str, enum.Enum):
    SCAN = "scan"
    THRESHOLD = "threshold"
    POWER = "power"


class ClearMethod(str, enum.Enum):
    NOT = "not"
    XOR = "xor"
    SUBTRACT = "subtract"


class SwapMethod(str, enum.Enum):
    XOR = "xor"
    SHIFT = "shift"


class BitwiseError(ValueError):
    """Base class for every failure raised by wordbits operations."""


class IndexOutOfRange(BitwiseError):
    def __init__(self, index: int, width: int) -> None:
        super().__init__(f"bit index {index} outside [0, {width})")
        self.index = index
        self.width = width


class InvalidRunLength(BitwiseError):
    def __init__(self, run_length: int, width: int) -> None:
        super().__init__(f"invalid run length {run_length} for {width}-bit words")
        self.run_length = run_length
        self.width = width


class EmptyInput(BitwiseError):
    """Raised when an operation has no defined answer for its input."""


class WordOverflow(BitwiseError):
    """A value does not fit in the configured word width."""


@dataclass(frozen=True)
class WordFormat:
    """Width-derived constants for a fixed-width unsigned word.

    mask:    all ``width`` bits set
    top_bit: the most significant bit on its own (``1 << (width - 1)``)
    """

    width: int = WORD_BITS

    def __post_init__(self) -> None:
        if not isinstance(self.width, int) or self.width <= 0:
            raise ValueError(f"word width must be a positive integer, got {self.width!r}")

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def top_bit(self) -> int:
        return 1 << (self.width - 1)

    def validate_word(self, word: int) -> int:
        if word < 0 or word >> self.width:
            raise WordOverflow(f"value {word} does not fit in {self.width} unsigned bits")
        return word

    def validate_index(self, index: int) -> int:
        if not 0 <= index < self.width:
            raise IndexOutOfRange(index, self.width)
        return index
