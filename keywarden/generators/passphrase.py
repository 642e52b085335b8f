"""
Passphrase Generator
=====================

Word-list passphrases: ``word_count`` words drawn uniformly with
replacement, followed by a number in ``[0, 1000)``, joined by a separator.
"""

from __future__ import annotations

from typing import Optional, Sequence

from keywarden.core.errors import ConfigError
from keywarden.generators.random_source import RandomSource, SecureRandomSource

WORD_LIST: tuple[str, ...] = (
    "apple", "banana", "cherry", "dragon", "elephant", "forest", "guitar", "harmony",
    "island", "jungle", "kitten", "ladder", "mountain", "notebook", "ocean", "penguin",
    "quartz", "rainbow", "sunset", "thunder", "umbrella", "village", "whisper", "xylophone",
    "yellow", "zebra", "adventure", "breeze", "cascade", "diamond", "enigma", "firefly",
    "galaxy", "horizon", "infinite", "journey", "kaleidoscope", "labyrinth", "miracle",
    "nebula", "odyssey", "paradise", "quantum", "radiance", "serenity", "tempest",
)

NUMBER_UPPER_BOUND = 1000


class PassphraseGenerator:
    """Generates ``word-word-...-NNN`` style passphrases."""

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        words: Sequence[str] = WORD_LIST,
    ) -> None:
        self.random_source = random_source or SecureRandomSource()
        self.words = tuple(words)

    def generate(self, word_count: int = 4, separator: str = "-") -> str:
        """Return a passphrase of *word_count* words plus a trailing number.

        Raises:
            ConfigError: *word_count* is below 1.
        """
        if word_count < 1:
            raise ConfigError("Passphrase must contain at least 1 word")

        tokens = [self.random_source.choice(self.words) for _ in range(word_count)]
        tokens.append(str(self.random_source.randbelow(NUMBER_UPPER_BOUND)))
        return separator.join(tokens)
