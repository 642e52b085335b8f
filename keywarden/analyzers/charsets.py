"""
Character Class Registry
=========================

Fixed character-class definitions shared by the analyzer (presence
predicates, entropy pool size) and the generator (candidate alphabets).
"""

from __future__ import annotations

import string
from typing import NamedTuple

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
AMBIGUOUS = "il1Lo0O"

# Entropy pool contribution per class. The symbol class counts as 32
# even though SYMBOLS holds 26 characters.
_POOL_SIZES = {"lowercase": 26, "uppercase": 26, "numbers": 10, "symbols": 32}


def utf16_code_units(text: str) -> list[int]:
    """UTF-16 code units of *text*; astral characters yield a surrogate pair."""
    data = text.encode("utf-16-le", errors="surrogatepass")
    return [data[i] | (data[i + 1] << 8) for i in range(0, len(data), 2)]


def utf16_view(text: str) -> str:
    """*text* with every astral character split into its two surrogates.

    Lengths, entropy and structural patterns are measured on this view so
    that they count the same units as the breach hash.
    """
    return "".join(map(chr, utf16_code_units(text)))


class ClassPresence(NamedTuple):
    """Which of the four character classes occur in a string."""

    lowercase: bool
    uppercase: bool
    numbers: bool
    symbols: bool

    @property
    def count(self) -> int:
        return sum(self)


class CharsetRegistry:
    """Named access to the character classes.

    Usage::

        CharsetRegistry.classes_present("Abc1")   # (True, True, True, False)
        CharsetRegistry.pool_size("Abc1")         # 62
    """

    CLASSES: dict[str, str] = {
        "lowercase": LOWERCASE,
        "uppercase": UPPERCASE,
        "numbers": NUMBERS,
        "symbols": SYMBOLS,
    }

    @staticmethod
    def classes_present(text: str) -> ClassPresence:
        return ClassPresence(
            lowercase=any(c in LOWERCASE for c in text),
            uppercase=any(c in UPPERCASE for c in text),
            numbers=any(c in NUMBERS for c in text),
            symbols=any(c in SYMBOLS for c in text),
        )

    @classmethod
    def pool_size(cls, text: str) -> int:
        """Sum of pool sizes of the classes actually present in *text*."""
        presence = cls.classes_present(text)
        return sum(
            size for name, size in _POOL_SIZES.items() if getattr(presence, name)
        )

    @staticmethod
    def strip_ambiguous(chars: str) -> str:
        return "".join(c for c in chars if c not in AMBIGUOUS)
