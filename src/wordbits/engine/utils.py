"""Utility functions for option resolution and argument checks."""
from __future__ import annotations

import enum
from functools import lru_cache
from typing import TypeVar

from .models import WORD_BITS, WordFormat

E = TypeVar("E", bound=enum.Enum)


@lru_cache(maxsize=None)
def word_format(width: int = WORD_BITS) -> WordFormat:
    """Return the (shared, immutable) format for ``width``-bit words."""
    return WordFormat(width)


def resolve_method(method: E | str, choices: type[E]) -> E:
    """Resolve a strategy given as an enum member or its string value.

    Args:
        method: Enum member or its value (case-insensitive)
        choices: The enum type listing the valid strategies

    Returns:
        The matching enum member

    Examples:
        >>> resolve_method("Kernighan", PopcountMethod)
        <PopcountMethod.KERNIGHAN: 'kernighan'>
    """
    if isinstance(method, choices):
        return method
    try:
        return choices(str(method).lower())
    except ValueError:
        valid = ", ".join(member.value for member in choices)
        raise ValueError(f"unknown {choices.__name__} {method!r}; expected one of: {valid}") from None


def check_word(word: int, width: int) -> WordFormat:
    """Validate ``word`` against ``width`` and return the matching format."""
    fmt = word_format(width)
    fmt.validate_word(word)
    return fmt


def check_word_and_index(word: int, index: int, width: int) -> WordFormat:
    fmt = check_word(word, width)
    fmt.validate_index(index)
    return fmt
