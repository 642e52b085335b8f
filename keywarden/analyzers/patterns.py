"""
Structural Pattern Library
===========================

Regular expressions for predictable password shapes and the keyboard
sequences attackers try first.

Patterns are anchored: the repeated-character, repeated-block, year, date
and SSN-like checks must match the whole password; the two sequence checks
only need to match at its start. ``\\d`` is restricted to ASCII digits.

References:
    - Weir, M. et al. (2010). Testing Metrics for Password Creation
      Policies by Attacking Large Sets of Revealed Passwords. CCS.
"""

from __future__ import annotations

import re

_DIGIT_RUNS = "|".join(
    "".join(str((start + k) % 10) for k in range(3)) for start in range(9)
)
_LETTER_RUNS = "|".join(
    chr(c) + chr(c + 1) + chr(c + 2) for c in range(ord("a"), ord("x") + 1)
)

# Checked in this order; names are reported verbatim.
STRUCTURAL_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("Repeated characters", re.compile(r"\A(.)\1+\Z")),
    ("Sequential numbers", re.compile(rf"\A(?:{_DIGIT_RUNS})+")),
    ("Sequential letters", re.compile(rf"\A(?:{_LETTER_RUNS})+", re.IGNORECASE | re.ASCII)),
    ("Repeated pattern", re.compile(r"\A(.{1,3})\1+\Z")),
    ("Year pattern", re.compile(r"\A(?:19|20)\d{2}\Z", re.ASCII)),
    ("Date pattern", re.compile(r"\A\d{2}/\d{2}/\d{4}\Z", re.ASCII)),
    ("SSN-like pattern", re.compile(r"\A\d{3}-?\d{2}-?\d{4}\Z", re.ASCII)),
]

KEYBOARD_SEQUENCES: tuple[str, ...] = ("qwerty", "asdf", "1234", "zxcv")
KEYBOARD_PATTERN = "Keyboard pattern"


class PatternLibrary:
    """Detects structural and keyboard patterns in a password."""

    @staticmethod
    def structural_matches(text: str) -> list[str]:
        """Names of every structural pattern *text* matches, in check order."""
        return [name for name, regex in STRUCTURAL_PATTERNS if regex.search(text)]

    @staticmethod
    def keyboard_matches(text: str) -> list[str]:
        """One ``"Keyboard pattern"`` entry per keyboard sequence found."""
        lowered = text.lower()
        return [KEYBOARD_PATTERN for seq in KEYBOARD_SEQUENCES if seq in lowered]
