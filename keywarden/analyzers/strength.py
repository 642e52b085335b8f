"""
Password Strength Analyzer
===========================

Weighted-heuristic strength scoring. Five independent signals are
evaluated for every password:

1. Length:       0 / 15 / 25 / 30 points at <8 / 8-11 / 12-15 / 16+ chars.
2. Variety:      7 points per character class present (max 28).
3. Patterns:     starts at 20, -5 per structural pattern, -3 per keyboard
                 sequence, floored at 0.
4. Commonality:  -10 when the password overlaps a known-weak password,
                 otherwise +15.
5. Breach:       lookup in the breach table; sets the compromise flag but
                 never changes the score.

The total score is the plain sum of the first four signals. It is not
clamped: strongly penalised passwords can score below zero and the scale
top of 100 is nominal.

Length is counted in UTF-16 code units, so a character outside the Basic
Multilingual Plane counts twice; structural patterns see the same units.

Entropy is ``length * log2(pool)`` where the pool is the summed size of
the character classes present (26/26/10/32). Time to crack assumes an
offline attacker who searches half the keyspace at a fixed guess rate.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Burr, W. E. et al. (2006). NIST SP 800-63 Appendix A.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from shared.math_utils import average_crack_seconds, charset_entropy, round_half_up

from keywarden.analyzers.charsets import CharsetRegistry, utf16_view
from keywarden.analyzers.common import CommonPasswordList
from keywarden.analyzers.patterns import PatternLibrary
from keywarden.core.errors import InvalidInputError
from keywarden.core.models import (
    AnalysisResult,
    BreachReport,
    Breakdown,
    CommonalityReport,
    LengthReport,
    PatternReport,
    StrengthLabel,
    VarietyReport,
)

if TYPE_CHECKING:
    from keywarden.collectors.breach import BreachLookup


_VARIETY_FEEDBACK: dict[int, str] = {
    0: "No recognised character types",
    1: "Only one character type - very weak",
    2: "Two character types - weak",
    3: "Three character types - good",
    4: "All character types - excellent",
}

# (lower bound, label), strongest first
_STRENGTH_THRESHOLDS: list[tuple[int, StrengthLabel]] = [
    (80, StrengthLabel.VERY_STRONG),
    (60, StrengthLabel.STRONG),
    (40, StrengthLabel.MODERATE),
    (20, StrengthLabel.WEAK),
]

# (upper bound in seconds, unit divisor, unit name)
_DURATION_UNITS: list[tuple[float, float, str]] = [
    (60, 1, "seconds"),
    (3600, 60, "minutes"),
    (86400, 3600, "hours"),
    (31_536_000, 86400, "days"),
    (31_536_000_000, 31_536_000, "years"),
]

RECOMMEND_LENGTH = "Increase password length to at least 12 characters"
RECOMMEND_PATTERNS = "Avoid predictable patterns and sequences"
RECOMMEND_COMMON = "Avoid common passwords and dictionary words"
RECOMMEND_ROTATE = "URGENT: Change this password immediately - it has been compromised"
RECOMMEND_2FA = "Excellent password! Consider enabling 2FA for additional security"


def classify(score: int) -> StrengthLabel:
    """Map a (possibly out-of-range) score to its strength label."""
    for bound, label in _STRENGTH_THRESHOLDS:
        if score >= bound:
            return label
    return StrengthLabel.VERY_WEAK


def format_crack_time(seconds: float) -> str:
    """Render *seconds* in the coarsest fitting unit, rounded half up."""
    if seconds < 1:
        return "Instantly"
    for upper, divisor, unit in _DURATION_UNITS:
        if seconds < upper:
            return f"{round_half_up(seconds / divisor)} {unit}"
    return "Millions of years"


class StrengthAnalyzer:
    """Scores a password from independent signals.

    Usage::

        analyzer = StrengthAnalyzer(breach_lookup=BreachLookup.seeded(rng))
        result = analyzer.analyze("MyP@ssw0rd2024!")
        result.strength, result.score, result.time_to_crack

    Args:
        breach_lookup: Breach table to consult; an empty table when omitted.
        common_passwords: Known-weak password list.
        guesses_per_second: Attacker throughput for the crack-time label.
    """

    def __init__(
        self,
        breach_lookup: Optional[BreachLookup] = None,
        common_passwords: Optional[CommonPasswordList] = None,
        guesses_per_second: float = 1e9,
    ) -> None:
        if breach_lookup is None:
            from keywarden.collectors.breach import BreachLookup

            breach_lookup = BreachLookup()
        self.breach_lookup = breach_lookup
        self.common_passwords = common_passwords or CommonPasswordList()
        self.guesses_per_second = guesses_per_second

    def analyze(self, password: str) -> AnalysisResult:
        """Analyse *password*.

        Raises:
            InvalidInputError: *password* is not a ``str`` or is empty.
        """
        if not isinstance(password, str) or not password:
            raise InvalidInputError("Password must be a non-empty string")

        units = utf16_view(password)
        breakdown = Breakdown(
            length=self.score_length(len(units)),
            variety=self.score_variety(password),
            patterns=self.score_patterns(units),
            commonality=self.score_commonality(password),
            breach=self.check_breach(password),
        )
        score = (
            breakdown.length.score
            + breakdown.variety.score
            + breakdown.patterns.score
            + breakdown.commonality.score
        )
        entropy = self.entropy(units)

        return AnalysisResult(
            password=password,
            length=len(units),
            score=score,
            strength=classify(score),
            breakdown=breakdown,
            entropy=entropy,
            time_to_crack=self.time_to_crack(entropy),
            is_compromised=breakdown.breach.is_compromised,
            breach_info=breakdown.breach.breach_info,
            recommendations=self.recommendations(breakdown),
        )

    # ------------------------------------------------------------------ #
    #  Sub-scorers
    # ------------------------------------------------------------------ #

    @staticmethod
    def score_length(length: int) -> LengthReport:
        if length < 8:
            score, feedback = 0, "Too short - minimum 8 characters recommended"
        elif length < 12:
            score, feedback = 15, "Adequate length but could be longer"
        elif length < 16:
            score, feedback = 25, "Good length"
        else:
            score, feedback = 30, "Excellent length"
        return LengthReport(score=score, feedback=feedback, length=length)

    @staticmethod
    def score_variety(password: str) -> VarietyReport:
        presence = CharsetRegistry.classes_present(password)
        return VarietyReport(
            score=presence.count * 7,
            feedback=_VARIETY_FEEDBACK[presence.count],
            has_lower=presence.lowercase,
            has_upper=presence.uppercase,
            has_numbers=presence.numbers,
            has_symbols=presence.symbols,
            variety_count=presence.count,
        )

    @staticmethod
    def score_patterns(password: str) -> PatternReport:
        structural = PatternLibrary.structural_matches(password)
        keyboard = PatternLibrary.keyboard_matches(password)
        detected = structural + keyboard

        score = max(0, 20 - 5 * len(structural) - 3 * len(keyboard))
        feedback = (
            f"Patterns detected: {', '.join(detected)}"
            if detected
            else "No common patterns detected"
        )
        return PatternReport(score=score, feedback=feedback, detected_patterns=tuple(detected))

    def score_commonality(self, password: str) -> CommonalityReport:
        is_common = self.common_passwords.is_common(password)
        return CommonalityReport(
            score=-10 if is_common else 15,
            feedback="Contains common password elements" if is_common else "Not a common password",
            is_common=is_common,
        )

    def check_breach(self, password: str) -> BreachReport:
        record = self.breach_lookup.lookup(password)
        if record is None:
            return BreachReport(feedback="Password not found in known breaches")
        return BreachReport(
            is_compromised=True,
            breach_info=record,
            feedback=(
                f"Password found in breach database "
                f"({record.breach_count:,} occurrences)"
            ),
        )

    # ------------------------------------------------------------------ #
    #  Entropy and crack time
    # ------------------------------------------------------------------ #

    @staticmethod
    def entropy(password: str) -> float:
        return charset_entropy(len(password), CharsetRegistry.pool_size(password))

    def time_to_crack(self, entropy_bits: float) -> str:
        return format_crack_time(
            average_crack_seconds(entropy_bits, self.guesses_per_second)
        )

    # ------------------------------------------------------------------ #
    #  Recommendations
    # ------------------------------------------------------------------ #

    @staticmethod
    def recommendations(breakdown: Breakdown) -> tuple[str, ...]:
        """Advice derived from the aggregate breakdown, most basic first."""
        advice: list[str] = []
        variety = breakdown.variety

        if breakdown.length.score < 25:
            advice.append(RECOMMEND_LENGTH)

        if variety.variety_count < 4:
            if not variety.has_upper:
                advice.append("Add uppercase letters")
            if not variety.has_lower:
                advice.append("Add lowercase letters")
            if not variety.has_numbers:
                advice.append("Add numbers")
            if not variety.has_symbols:
                advice.append("Add special symbols")

        if breakdown.patterns.detected_patterns:
            advice.append(RECOMMEND_PATTERNS)

        if breakdown.commonality.is_common:
            advice.append(RECOMMEND_COMMON)

        if breakdown.breach.is_compromised:
            advice.append(RECOMMEND_ROTATE)

        if not advice:
            advice.append(RECOMMEND_2FA)

        return tuple(advice)
