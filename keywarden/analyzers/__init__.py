"""
Keywarden Analyzers
====================

Reference registries (character classes, structural patterns, common
passwords) and the strength analyzer that combines them.
"""

from keywarden.analyzers.charsets import CharsetRegistry
from keywarden.analyzers.common import CommonPasswordList
from keywarden.analyzers.patterns import PatternLibrary
from keywarden.analyzers.strength import StrengthAnalyzer

__all__ = [
    "CharsetRegistry",
    "CommonPasswordList",
    "PatternLibrary",
    "StrengthAnalyzer",
]
