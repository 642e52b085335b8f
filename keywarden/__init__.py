"""
Keywarden -- Password Strength Analysis & Generation Toolkit
=============================================================

Scores passwords from independent heuristic signals (length, character
variety, structural patterns, commonality, breach lookup) and generates
policy-constrained passwords and word-list passphrases.

Modules:
    - keywarden.core.engine: Toolkit facade and public API
    - keywarden.core.models: Pydantic data models
    - keywarden.core.history: Generation history and security report
    - keywarden.analyzers: Character classes, patterns, strength scoring
    - keywarden.collectors: Breach lookup table
    - keywarden.generators: Password and passphrase generators
    - keywarden.output: Console and report output
    - keywarden.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

__version__ = "1.0.0"
