"""
Password Generator
===================

Builds random passwords from a :class:`GenerationConfig` policy:

1. The candidate alphabet is the concatenation of the enabled classes,
   minus the ambiguous glyphs ``il1Lo0O`` when requested.
2. With ``ensure_variety`` one character is drawn from each enabled class
   (ambiguous-filtered per class) so every requested class is represented.
3. The remainder is filled uniformly from the combined alphabet until the
   configured length is reached.
4. The characters are shuffled with a uniform Fisher-Yates pass so the
   seeded class representatives are not predictably placed.

The output length is ``max(length, enabled_classes)`` with variety seeding
and exactly ``length`` without it.
"""

from __future__ import annotations

from typing import Optional

from keywarden.analyzers.charsets import CharsetRegistry
from keywarden.core.errors import ConfigError
from keywarden.core.models import GenerationConfig
from keywarden.generators.random_source import RandomSource, SecureRandomSource

MIN_LENGTH = 4

_CLASS_FLAGS: list[tuple[str, str]] = [
    ("include_lowercase", "lowercase"),
    ("include_uppercase", "uppercase"),
    ("include_numbers", "numbers"),
    ("include_symbols", "symbols"),
]


class PasswordGenerator:
    """Policy-constrained random password generator.

    Usage::

        gen = PasswordGenerator(SecureRandomSource())
        gen.generate(GenerationConfig(length=20, include_symbols=False))

    Args:
        random_source: Randomness provider for every draw and the shuffle.
    """

    def __init__(self, random_source: Optional[RandomSource] = None) -> None:
        self.random_source = random_source or SecureRandomSource()

    @staticmethod
    def enabled_classes(config: GenerationConfig) -> list[str]:
        """Alphabets of the enabled classes, ambiguous glyphs removed if asked."""
        alphabets = [
            CharsetRegistry.CLASSES[name]
            for flag, name in _CLASS_FLAGS
            if getattr(config, flag)
        ]
        if config.exclude_ambiguous:
            alphabets = [CharsetRegistry.strip_ambiguous(a) for a in alphabets]
        return alphabets

    def charset(self, config: GenerationConfig) -> str:
        """The combined candidate alphabet for *config*."""
        return "".join(self.enabled_classes(config))

    def validate(self, config: GenerationConfig) -> str:
        """Check *config* and return its combined alphabet.

        Raises:
            ConfigError: length below 4, or no characters left to draw from.
        """
        if config.length < MIN_LENGTH:
            raise ConfigError(
                f"Password length must be at least {MIN_LENGTH} characters"
            )
        charset = self.charset(config)
        if not charset:
            raise ConfigError("No valid characters available with current options")
        return charset

    def generate(self, config: Optional[GenerationConfig] = None) -> str:
        """Generate one password satisfying *config*.

        Raises:
            ConfigError: The policy cannot be satisfied.
        """
        config = config or GenerationConfig()
        charset = self.validate(config)
        rng = self.random_source

        chars: list[str] = []
        if config.ensure_variety:
            chars.extend(rng.choice(alphabet) for alphabet in self.enabled_classes(config))

        while len(chars) < config.length:
            chars.append(rng.choice(charset))

        rng.shuffle(chars)
        return "".join(chars)
