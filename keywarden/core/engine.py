"""
Keywarden Toolkit Engine
=========================

:class:`KeywardenToolkit` is the facade over the analyzer, the generators
and the generation history. It exposes the public functional API and is
the single place where component exceptions become tagged
:class:`~keywarden.core.models.Outcome` values:

- analysis of user input never raises; invalid input yields a failure
  outcome of kind ``InvalidInputError``;
- batch generation converts a ``ConfigError`` into a failure outcome at
  that position and carries on;
- single-shot generation raises ``ConfigError`` directly.

Collaborators are injected; any left unset are built from the
configuration, including a breach table seeded from the shared random
source.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from shared.config import KeywardenConfig
from shared.logger import WardenLogger

from keywarden.analyzers.strength import StrengthAnalyzer
from keywarden.collectors.breach import BreachLookup
from keywarden.core.errors import ConfigError, InvalidInputError
from keywarden.core.history import PasswordHistory, build_security_report
from keywarden.core.models import (
    AnalysisResult,
    BulkEntry,
    GenerationConfig,
    HistoryEntry,
    Outcome,
    SecurityReport,
    mask_password,
)
from keywarden.generators.passphrase import PassphraseGenerator
from keywarden.generators.password import PasswordGenerator
from keywarden.generators.random_source import RandomSource, default_random_source

# Reference passwords spanning the strength scale, used by ``samples``.
SAMPLE_PASSWORDS: tuple[str, ...] = (
    "password",
    "Password123",
    "MyP@ssw0rd!",
    "Tr0ub4dor&3",
    "correct horse battery staple",
    "!@#$%^&*()",
    "aB3$fG7*kL9#",
)


class KeywardenToolkit:
    """Password analysis and generation facade.

    Usage::

        toolkit = KeywardenToolkit()
        outcome = toolkit.analyze_password("MyP@ssw0rd2024!")
        if outcome.ok:
            print(outcome.value.strength)
        pw = toolkit.generate_password(length=20, include_symbols=False)
        report = toolkit.generate_security_report()

    Attributes:
        config: Loaded configuration.
        analyzer: Strength analyzer (with its breach table).
        generator: Password generator.
        passphrase_generator: Passphrase generator.
        history: Log of generated passwords.
    """

    def __init__(
        self,
        config: Optional[KeywardenConfig] = None,
        *,
        analyzer: Optional[StrengthAnalyzer] = None,
        generator: Optional[PasswordGenerator] = None,
        passphrase_generator: Optional[PassphraseGenerator] = None,
        history: Optional[PasswordHistory] = None,
        random_source: Optional[RandomSource] = None,
        logger: Optional[WardenLogger] = None,
    ) -> None:
        self.config = config or KeywardenConfig()
        gen_cfg = self.config.generator
        self.logger = logger or WardenLogger.from_config("engine", self.config)

        rng = random_source or default_random_source(secure=gen_cfg.secure_random)
        self.analyzer = analyzer or StrengthAnalyzer(
            breach_lookup=BreachLookup.seeded(rng),
            guesses_per_second=self.config.analyzer.guesses_per_second,
        )
        self.generator = generator or PasswordGenerator(rng)
        self.passphrase_generator = passphrase_generator or PassphraseGenerator(rng)
        self.history = history if history is not None else PasswordHistory(
            gen_cfg.history_limit or None
        )
        self.history_window = gen_cfg.history_window

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze_password(self, password: Any) -> Outcome:
        """Analyse *password*; invalid input yields a failure outcome."""
        with self.logger.operation("analyze"):
            try:
                result: AnalysisResult = self.analyzer.analyze(password)
            except InvalidInputError as exc:
                self.logger.debug("Rejected analysis input: %s", exc.message)
                return Outcome.failure(exc)

            self.logger.debug(
                "Analysed %s: %s (%d)",
                result.masked,
                result.strength.value,
                result.score,
            )
            return Outcome.success(result)

    def check_passwords_in_bulk(self, passwords: Iterable[Any]) -> list[BulkEntry]:
        """Analyse each password, preserving input order."""
        with self.logger.operation("bulk_check"):
            entries = [
                BulkEntry(password=pwd, analysis=self.analyze_password(pwd))
                for pwd in passwords
            ]
            self.logger.info("Checked %d passwords", len(entries))
            return entries

    @staticmethod
    def sample_passwords() -> list[str]:
        return list(SAMPLE_PASSWORDS)

    def analyze_samples(self) -> list[BulkEntry]:
        """Analyse the built-in reference passwords."""
        return self.check_passwords_in_bulk(self.sample_passwords())

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def default_generation_config(self) -> GenerationConfig:
        """GenerationConfig populated from the ``[generator]`` section."""
        cfg = self.config.generator
        return GenerationConfig(
            length=cfg.length,
            include_lowercase=cfg.include_lowercase,
            include_uppercase=cfg.include_uppercase,
            include_numbers=cfg.include_numbers,
            include_symbols=cfg.include_symbols,
            exclude_ambiguous=cfg.exclude_ambiguous,
            exclude_similar=cfg.exclude_similar,
            ensure_variety=cfg.ensure_variety,
        )

    def _resolve_config(
        self, config: Optional[GenerationConfig], overrides: dict[str, Any]
    ) -> GenerationConfig:
        base = config or self.default_generation_config()
        if not overrides:
            return base
        return GenerationConfig.model_validate({**base.model_dump(), **overrides})

    def generate_password(
        self, config: Optional[GenerationConfig] = None, **overrides: Any
    ) -> str:
        """Generate one password and record it in the history.

        Keyword *overrides* replace individual fields of *config* (or of
        the configured defaults), e.g. ``generate_password(length=20)``.

        Raises:
            ConfigError: The policy cannot be satisfied.
        """
        options = self._resolve_config(config, overrides)
        with self.logger.operation("generate"):
            password = self.generator.generate(options)
            self.history.append(HistoryEntry(password=password, options=options))
            self.logger.debug(
                "Generated %s (length %d)", mask_password(password), len(password)
            )
            return password

    def generate_multiple_passwords(
        self, count: int = 5, config: Optional[GenerationConfig] = None, **overrides: Any
    ) -> list[Outcome]:
        """Generate *count* passwords independently.

        A failed generation becomes a failure outcome at its position
        (``outcome.display`` renders ``"Error: <message>"``).
        """
        options = self._resolve_config(config, overrides)
        results: list[Outcome] = []
        for _ in range(count):
            try:
                results.append(Outcome.success(self.generate_password(options)))
            except ConfigError as exc:
                self.logger.warning("Generation failed: %s", exc.message)
                results.append(Outcome.failure(exc))
        return results

    def generate_passphrase(
        self, word_count: Optional[int] = None, separator: Optional[str] = None
    ) -> str:
        """Generate a word-list passphrase.

        Raises:
            ConfigError: *word_count* is below 1.
        """
        cfg = self.config.generator
        word_count = cfg.passphrase_words if word_count is None else word_count
        separator = cfg.passphrase_separator if separator is None else separator
        with self.logger.operation("passphrase"):
            return self.passphrase_generator.generate(word_count, separator)

    # ------------------------------------------------------------------ #
    #  History and reporting
    # ------------------------------------------------------------------ #

    def get_password_history(self) -> list[HistoryEntry]:
        """The most recent generated passwords (window from config)."""
        return self.history.recent(self.history_window)

    def export_history(self) -> list[HistoryEntry]:
        """Every retained history entry."""
        return self.history.entries()

    def generate_security_report(self) -> SecurityReport:
        """Re-analyse the generation history and aggregate the results."""
        with self.logger.operation("report"), self.logger.timed("security report"):
            report = build_security_report(self.history, self.analyzer)
        self.logger.info(
            "Security report: %d analysed, %d compromised",
            report.total_analyzed,
            report.compromised_count,
        )
        return report
