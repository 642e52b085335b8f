"""
Keywarden Core Data Models
===========================

Pydantic models for analysis results, breach records, generation
configuration, history entries and the aggregate security report.

Analysis results are frozen: once :meth:`StrengthAnalyzer.analyze` returns,
neither the result nor any of its sub-reports can be modified. Every model
serialises with ``model_dump(mode="json")`` for the JSON/HTML reporters.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from keywarden.core.errors import ERROR_TYPES, KeywardenError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def mask_password(password: str) -> str:
    """Show the first and last character with asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthLabel(str, enum.Enum):
    """Qualitative strength category, weakest first."""

    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    MODERATE = "Moderate"
    STRONG = "Strong"
    VERY_STRONG = "Very Strong"


# ===================================================================== #
#  Breach Models
# ===================================================================== #


class BreachRecord(BaseModel):
    """Simulated leak metadata for one password.

    Attributes:
        password: The leaked password in clear text.
        breach_count: Number of times it was observed in breaches.
        last_seen: Most recent sighting (UTC).
    """

    model_config = ConfigDict(frozen=True)

    password: str
    breach_count: int = Field(..., gt=0)
    last_seen: datetime


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class LengthReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    feedback: str
    length: int


class VarietyReport(BaseModel):
    """Which character classes are present and the resulting score."""

    model_config = ConfigDict(frozen=True)

    score: int
    feedback: str
    has_lower: bool = False
    has_upper: bool = False
    has_numbers: bool = False
    has_symbols: bool = False
    variety_count: int = 0


class PatternReport(BaseModel):
    """Pattern score plus every matched pattern name in check order."""

    model_config = ConfigDict(frozen=True)

    score: int
    feedback: str
    detected_patterns: tuple[str, ...] = ()


class CommonalityReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int
    feedback: str
    is_common: bool = False


class BreachReport(BaseModel):
    """Breach lookup outcome; carries no score."""

    model_config = ConfigDict(frozen=True)

    is_compromised: bool = False
    breach_info: Optional[BreachRecord] = None
    feedback: str = ""


class Breakdown(BaseModel):
    """Per-signal sub-reports of one analysis."""

    model_config = ConfigDict(frozen=True)

    length: LengthReport
    variety: VarietyReport
    patterns: PatternReport
    commonality: CommonalityReport
    breach: BreachReport


class AnalysisResult(BaseModel):
    """Complete password strength analysis.

    Attributes:
        password: The analysed password.
        length: Character count.
        score: Sum of the length, variety, pattern and commonality scores.
            Not clamped, so it may fall below 0 or exceed ``max_score``.
        max_score: Nominal top of the score scale.
        strength: Category derived from ``score``.
        breakdown: Independent per-signal sub-reports.
        entropy: Charset-size entropy estimate in bits.
        time_to_crack: Human-readable brute-force duration.
        is_compromised: Whether the password is in the breach table.
        breach_info: Breach metadata when compromised.
        recommendations: Ordered advice strings.
    """

    model_config = ConfigDict(frozen=True)

    password: str
    length: int
    score: int
    max_score: int = 100
    strength: StrengthLabel
    breakdown: Breakdown
    entropy: float = Field(..., ge=0.0)
    time_to_crack: str
    is_compromised: bool = False
    breach_info: Optional[BreachRecord] = None
    recommendations: tuple[str, ...] = ()

    @property
    def masked(self) -> str:
        return mask_password(self.password)


# ===================================================================== #
#  Generation Models
# ===================================================================== #


class GenerationConfig(BaseModel):
    """Password generation policy.

    Bounds are not enforced here: :class:`PasswordGenerator` validates the
    policy when asked to generate, raising ``ConfigError``.

    ``exclude_similar`` is accepted for compatibility and has no effect on
    the character pool.
    """

    model_config = ConfigDict(frozen=True)

    length: int = 16
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_ambiguous: bool = False
    exclude_similar: bool = True
    ensure_variety: bool = True


class HistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    password: str
    generated: datetime = Field(default_factory=_utcnow)
    options: GenerationConfig


class SecurityReport(BaseModel):
    """Aggregate view over the generation history.

    Attributes:
        timestamp: When the report was produced (UTC).
        total_analyzed: Number of history entries analysed.
        strength_distribution: Entry count per strength label; all five
            labels are always present.
        compromised_count: Entries found in the breach table.
        average_entropy: Mean entropy in bits, 0.0 for an empty history.
    """

    timestamp: datetime = Field(default_factory=_utcnow)
    total_analyzed: int = 0
    strength_distribution: dict[str, int] = Field(
        default_factory=lambda: {label.value: 0 for label in StrengthLabel}
    )
    compromised_count: int = 0
    average_entropy: float = 0.0


# ===================================================================== #
#  Tagged Outcome
# ===================================================================== #


class ErrorInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    message: str


class Outcome(BaseModel):
    """Tagged success/failure value returned at the toolkit boundary.

    Callers check ``ok`` before reading ``value``; ``unwrap()`` returns the
    value or re-raises the typed error.

    Usage::

        outcome = toolkit.analyze_password("")
        if not outcome.ok:
            print(outcome.error.kind, outcome.error.message)
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Any = None
    error: Optional[ErrorInfo] = None

    @classmethod
    def success(cls, value: Any) -> Outcome:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: KeywardenError) -> Outcome:
        return cls(ok=False, error=ErrorInfo(kind=exc.kind, message=exc.message))

    def unwrap(self) -> Any:
        if self.ok:
            return self.value
        error_type = ERROR_TYPES.get(self.error.kind, KeywardenError)
        raise error_type(self.error.message)

    @property
    def display(self) -> str:
        """The value as text, or the inline ``Error: ...`` marker."""
        if self.ok:
            return str(self.value)
        return f"Error: {self.error.message}"


class BulkEntry(BaseModel):
    """A password from a bulk check paired with its analysis outcome."""

    model_config = ConfigDict(frozen=True)

    password: Any
    analysis: Outcome
