import math

import pytest

from keywarden.analyzers.strength import (
    RECOMMEND_2FA,
    RECOMMEND_COMMON,
    RECOMMEND_LENGTH,
    RECOMMEND_PATTERNS,
    RECOMMEND_ROTATE,
    StrengthAnalyzer,
    classify,
    format_crack_time,
)
from keywarden.core.errors import InvalidInputError
from keywarden.core.models import StrengthLabel

PASSWORDS = [
    "password",
    "123456",
    "Tr0ub4dor&3",
    "aB3$fG7*kL9#xQ2!",
    "correct horse battery staple",
    "ééé",
    "qwertyQWERTY",
]


class TestScoring:
    def test_password_scenario(self, analyzer):
        result = analyzer.analyze("password")
        assert result.is_compromised
        assert result.breach_info.breach_count == 524_288
        assert result.breakdown.commonality.score == -10
        assert result.breakdown.commonality.is_common
        assert result.score == 15 + 7 + 20 - 10
        assert result.strength in (StrengthLabel.VERY_WEAK, StrengthLabel.WEAK)
        assert result.time_to_crack == "2 minutes"
        assert result.masked == "p******d"

    @pytest.mark.parametrize("password", PASSWORDS)
    def test_score_is_sum_of_sub_scores(self, analyzer, password):
        result = analyzer.analyze(password)
        b = result.breakdown
        assert result.score == (
            b.length.score + b.variety.score + b.patterns.score + b.commonality.score
        )
        assert result.strength == classify(result.score)
        assert result.max_score == 100

    def test_breach_never_changes_score(self, analyzer):
        unbreached = StrengthAnalyzer()
        a = analyzer.analyze("password")
        b = unbreached.analyze("password")
        assert a.is_compromised and not b.is_compromised
        assert a.score == b.score
        assert a.strength == b.strength

    def test_sequences_and_keyboard_penalties(self, analyzer):
        result = analyzer.analyze("123456")
        assert result.breakdown.patterns.detected_patterns == (
            "Sequential numbers",
            "Keyboard pattern",
        )
        assert result.breakdown.patterns.score == 20 - 5 - 3
        assert result.strength == StrengthLabel.VERY_WEAK

    def test_strong_password(self, analyzer):
        result = analyzer.analyze("aB3$fG7*kL9#xQ2!")
        assert result.score == 30 + 28 + 20 + 15
        assert result.strength == StrengthLabel.VERY_STRONG
        assert result.recommendations == (RECOMMEND_2FA,)
        assert result.time_to_crack == "Millions of years"

    def test_unrecognised_characters_have_zero_entropy(self, analyzer):
        result = analyzer.analyze("ééé")
        assert result.entropy == 0.0
        assert result.time_to_crack == "Instantly"
        assert result.breakdown.variety.variety_count == 0

    def test_entropy_matches_pool(self, analyzer):
        result = analyzer.analyze("Tr0ub4dor&3")
        assert result.entropy == pytest.approx(11 * math.log2(26 + 26 + 10 + 32))

    @pytest.mark.parametrize("password", PASSWORDS)
    def test_analysis_is_deterministic(self, analyzer, password):
        assert analyzer.analyze(password) == analyzer.analyze(password)

    def test_very_long_password_does_not_overflow(self, analyzer):
        result = analyzer.analyze("aB3$" * 200)
        assert result.time_to_crack == "Millions of years"

    def test_astral_characters_count_as_two_units(self):
        result = StrengthAnalyzer().analyze("\U0001F600" * 4)
        assert result.password == "\U0001F600" * 4
        assert result.length == 8
        assert result.breakdown.length.score == 15
        assert result.breakdown.patterns.detected_patterns == ("Repeated pattern",)
        assert result.score == 15 + 0 + 15 + 15
        assert result.strength == StrengthLabel.MODERATE

    def test_result_collections_are_immutable(self, analyzer):
        result = analyzer.analyze("123456")
        with pytest.raises(AttributeError):
            result.recommendations.append("extra")
        with pytest.raises(AttributeError):
            result.breakdown.patterns.detected_patterns.append("extra")


class TestRecommendations:
    def test_weak_password_recommendations(self, analyzer):
        result = analyzer.analyze("password")
        assert result.recommendations == (
            RECOMMEND_LENGTH,
            "Add uppercase letters",
            "Add numbers",
            "Add special symbols",
            RECOMMEND_COMMON,
            RECOMMEND_ROTATE,
        )

    def test_pattern_recommendation(self, analyzer):
        result = analyzer.analyze("qwertyQWERTY")
        assert RECOMMEND_PATTERNS in result.recommendations
        assert RECOMMEND_COMMON in result.recommendations

    def test_only_length_recommendation(self, analyzer):
        assert analyzer.analyze("Tr0ub4dor&3").recommendations == (RECOMMEND_LENGTH,)


@pytest.mark.parametrize("bad", ["", None, 12345, b"bytes"])
def test_invalid_input_raises(analyzer, bad):
    with pytest.raises(InvalidInputError):
        analyzer.analyze(bad)


@pytest.mark.parametrize(
    "score, label",
    [
        (150, StrengthLabel.VERY_STRONG),
        (80, StrengthLabel.VERY_STRONG),
        (79, StrengthLabel.STRONG),
        (60, StrengthLabel.STRONG),
        (40, StrengthLabel.MODERATE),
        (20, StrengthLabel.WEAK),
        (19, StrengthLabel.VERY_WEAK),
        (-10, StrengthLabel.VERY_WEAK),
    ],
)
def test_classify_thresholds(score, label):
    assert classify(score) == label


@pytest.mark.parametrize(
    "seconds, text",
    [
        (0.4, "Instantly"),
        (1, "1 seconds"),
        (59.5, "60 seconds"),
        (90, "2 minutes"),
        (3600, "1 hours"),
        (86400 * 3, "3 days"),
        (31_536_000 * 5, "5 years"),
        (1e12, "Millions of years"),
    ],
)
def test_format_crack_time(seconds, text):
    assert format_crack_time(seconds) == text
