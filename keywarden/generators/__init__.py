"""
Keywarden Generators
=====================

Password and passphrase generators plus the injectable randomness
providers they draw from.
"""

from keywarden.generators.passphrase import PassphraseGenerator
from keywarden.generators.password import PasswordGenerator
from keywarden.generators.random_source import (
    RandomSource,
    SecureRandomSource,
    SeededRandomSource,
)

__all__ = [
    "PassphraseGenerator",
    "PasswordGenerator",
    "RandomSource",
    "SecureRandomSource",
    "SeededRandomSource",
]
