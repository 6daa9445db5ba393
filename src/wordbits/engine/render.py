"""Binary digit rendering."""
from __future__ import annotations

from .models import WORD_BITS
from .utils import check_word


def to_binary_string(word: int, width: int = WORD_BITS, pad: bool = False) -> str:
    """Render ``word`` as ASCII ``0``/``1`` digits, most significant first.

    Leading zeros are dropped unless ``pad`` is true, in which case the result
    is exactly ``width`` characters. Zero renders as ``"0"``. No ``0b`` prefix.
    """
    fmt = check_word(word, width)
    digits: list[str] = []
    while True:
        digits.append("1" if word & 1 else "0")
        word >>= 1
        if word == 0:
            break
    if pad:
        digits.extend("0" * (fmt.width - len(digits)))
    return "".join(reversed(digits))
