import threading

import pytest

from keywarden.core.engine import SAMPLE_PASSWORDS, KeywardenToolkit
from keywarden.core.errors import ConfigError, InvalidInputError
from keywarden.core.history import PasswordHistory
from keywarden.core.models import (
    GenerationConfig,
    HistoryEntry,
    Outcome,
    StrengthLabel,
)
from keywarden.generators.random_source import SeededRandomSource


class TestAnalyze:
    def test_success_outcome(self, toolkit):
        outcome = toolkit.analyze_password("password")
        assert outcome.ok
        assert outcome.error is None
        assert outcome.value.is_compromised
        assert outcome.unwrap() == outcome.value

    @pytest.mark.parametrize("bad", ["", None, 7])
    def test_invalid_input_is_a_failure_outcome(self, toolkit, bad):
        outcome = toolkit.analyze_password(bad)
        assert not outcome.ok
        assert outcome.value is None
        assert outcome.error.kind == "InvalidInputError"
        assert outcome.display.startswith("Error: ")
        with pytest.raises(InvalidInputError):
            outcome.unwrap()

    def test_bulk_preserves_order_and_isolates_failures(self, toolkit):
        entries = toolkit.check_passwords_in_bulk(["password", "", "Tr0ub4dor&3"])
        assert [e.password for e in entries] == ["password", "", "Tr0ub4dor&3"]
        assert [e.analysis.ok for e in entries] == [True, False, True]
        assert entries[2].analysis.value.strength == StrengthLabel.STRONG

    def test_samples(self, toolkit):
        entries = toolkit.analyze_samples()
        assert [e.password for e in entries] == list(SAMPLE_PASSWORDS)
        assert all(e.analysis.ok for e in entries)


class TestGeneration:
    def test_generate_records_history(self, toolkit):
        pw = toolkit.generate_password()
        assert len(pw) == 16
        history = toolkit.get_password_history()
        assert [h.password for h in history] == [pw]
        assert history[0].options == GenerationConfig()

    def test_overrides(self, toolkit):
        pw = toolkit.generate_password(length=24, include_symbols=False)
        assert len(pw) == 24
        assert toolkit.get_password_history()[-1].options.include_symbols is False

    def test_generate_raises_config_error(self, toolkit):
        with pytest.raises(ConfigError):
            toolkit.generate_password(length=2)
        assert toolkit.get_password_history() == []

    def test_multiple_passwords(self, toolkit):
        outcomes = toolkit.generate_multiple_passwords(5, length=12)
        assert len(outcomes) == 5
        assert all(o.ok and len(o.value) == 12 for o in outcomes)
        assert len(toolkit.export_history()) == 5

    def test_multiple_with_invalid_config(self, toolkit):
        outcomes = toolkit.generate_multiple_passwords(3, length=1)
        assert len(outcomes) == 3
        assert all(not o.ok for o in outcomes)
        assert all(o.error.kind == "ConfigError" for o in outcomes)
        assert outcomes[0].display == "Error: Password length must be at least 4 characters"

    def test_passphrase_defaults_from_config(self, toolkit):
        assert len(toolkit.generate_passphrase().split("-")) == 5
        assert len(toolkit.generate_passphrase(2, "_").split("_")) == 3

    def test_passphrase_zero_words(self, toolkit):
        with pytest.raises(ConfigError):
            toolkit.generate_passphrase(0)

    def test_seeded_toolkits_agree(self, config, analyzer, quiet_logger):
        a = KeywardenToolkit(
            config, analyzer=analyzer, random_source=SeededRandomSource(11), logger=quiet_logger
        )
        b = KeywardenToolkit(
            config, analyzer=analyzer, random_source=SeededRandomSource(11), logger=quiet_logger
        )
        assert a.generate_password() == b.generate_password()


class TestHistory:
    def test_window_of_ten(self, toolkit):
        passwords = [toolkit.generate_password() for _ in range(12)]
        recent = toolkit.get_password_history()
        assert len(recent) == 10
        assert [h.password for h in recent] == passwords[-10:]
        assert len(toolkit.export_history()) == 12

    def test_bounded_history_drops_oldest(self):
        history = PasswordHistory(max_entries=3)
        for i in range(5):
            history.append(HistoryEntry(password=f"pw{i}", options=GenerationConfig()))
        assert len(history) == 3
        assert [h.password for h in history] == ["pw2", "pw3", "pw4"]
        assert history.max_entries == 3

    def test_zero_limit_is_unbounded(self):
        history = PasswordHistory(0)
        assert history.max_entries is None

    def test_concurrent_appends(self):
        history = PasswordHistory()

        def worker():
            for _ in range(200):
                history.append(HistoryEntry(password="x" * 8, options=GenerationConfig()))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(history) == 800

    def test_recent_with_non_positive_count(self):
        history = PasswordHistory()
        history.append(HistoryEntry(password="abcd", options=GenerationConfig()))
        assert history.recent(0) == []


class TestSecurityReport:
    def test_empty_history(self, toolkit):
        report = toolkit.generate_security_report()
        assert report.total_analyzed == 0
        assert report.compromised_count == 0
        assert report.average_entropy == 0.0
        assert report.strength_distribution == {label.value: 0 for label in StrengthLabel}

    def test_report_over_generated_passwords(self, toolkit):
        for _ in range(4):
            toolkit.generate_password(length=20)
        report = toolkit.generate_security_report()
        assert report.total_analyzed == 4
        assert sum(report.strength_distribution.values()) == 4
        assert report.average_entropy == pytest.approx(20 * 6.554588851677638)

    def test_report_counts_compromised(self, toolkit):
        toolkit.history.append(HistoryEntry(password="password", options=GenerationConfig()))
        report = toolkit.generate_security_report()
        assert report.compromised_count == 1
        assert report.strength_distribution[StrengthLabel.WEAK.value] == 1


def test_outcome_success_display():
    assert Outcome.success("abc").display == "abc"
