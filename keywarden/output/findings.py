"""
Analysis-to-Findings Translation
=================================

Turns an :class:`AnalysisResult` into a list of
:class:`~shared.models.Finding` objects so the console findings table and
the HTML report share one severity-graded view of every signal.
"""

from __future__ import annotations

from shared.models import Finding, Severity

from keywarden.core.models import AnalysisResult, StrengthLabel

_STRENGTH_SEVERITY: dict[StrengthLabel, Severity] = {
    StrengthLabel.VERY_WEAK: Severity.CRITICAL,
    StrengthLabel.WEAK: Severity.HIGH,
    StrengthLabel.MODERATE: Severity.MEDIUM,
    StrengthLabel.STRONG: Severity.LOW,
    StrengthLabel.VERY_STRONG: Severity.INFO,
}


def strength_severity(strength: StrengthLabel) -> Severity:
    return _STRENGTH_SEVERITY.get(strength, Severity.MEDIUM)


def analysis_findings(result: AnalysisResult) -> list[Finding]:
    """Findings for *result*, most important first."""
    breakdown = result.breakdown
    findings: list[Finding] = [
        Finding(
            severity=strength_severity(result.strength),
            title=f"Password Strength: {result.strength.value}",
            description=(
                f"Score {result.score}/{result.max_score}. "
                f"Entropy {result.entropy:.1f} bits. "
                f"Estimated time to crack: {result.time_to_crack}."
            ),
            evidence={
                "length": breakdown.length.score,
                "variety": breakdown.variety.score,
                "patterns": breakdown.patterns.score,
                "commonality": breakdown.commonality.score,
            },
        )
    ]

    if result.is_compromised:
        findings.append(Finding(
            severity=Severity.CRITICAL,
            title="Password Found in Breach Database",
            description=breakdown.breach.feedback,
            evidence=(
                {"last_seen": result.breach_info.last_seen.isoformat()}
                if result.breach_info
                else ""
            ),
            recommendation="Change this password immediately.",
        ))

    if breakdown.commonality.is_common:
        findings.append(Finding(
            severity=Severity.HIGH,
            title="Common Password",
            description=breakdown.commonality.feedback,
            recommendation="Avoid common passwords and dictionary words.",
        ))

    for pattern in breakdown.patterns.detected_patterns:
        findings.append(Finding(
            severity=Severity.LOW,
            title=f"Pattern Detected: {pattern}",
            description=breakdown.patterns.feedback,
        ))

    if breakdown.length.score < 25:
        findings.append(Finding(
            severity=Severity.MEDIUM if breakdown.length.score == 0 else Severity.LOW,
            title="Length",
            description=f"{breakdown.length.feedback} ({result.length} characters).",
        ))

    if breakdown.variety.variety_count < 4:
        findings.append(Finding(
            severity=Severity.LOW,
            title="Character Variety",
            description=breakdown.variety.feedback,
        ))

    return findings
