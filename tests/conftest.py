"""Shared fixtures: a fixed breach table, seeded randomness, a quiet toolkit."""

from datetime import datetime, timezone

import pytest

from shared.config import KeywardenConfig
from shared.logger import WardenLogger

from keywarden.analyzers.strength import StrengthAnalyzer
from keywarden.collectors.breach import BreachLookup
from keywarden.core.engine import KeywardenToolkit
from keywarden.core.models import BreachRecord
from keywarden.generators.random_source import SeededRandomSource

FIXED_NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


@pytest.fixture
def breach_lookup():
    return BreachLookup.from_records([
        BreachRecord(password="password", breach_count=524_288, last_seen=FIXED_NOW),
        BreachRecord(password="letmein123", breach_count=4_096, last_seen=FIXED_NOW),
    ])


@pytest.fixture
def rng():
    return SeededRandomSource(1337)


@pytest.fixture
def analyzer(breach_lookup):
    return StrengthAnalyzer(breach_lookup=breach_lookup)


@pytest.fixture
def quiet_logger():
    return WardenLogger("tests", console_output=False)


@pytest.fixture
def config():
    return KeywardenConfig()


@pytest.fixture
def toolkit(config, analyzer, rng, quiet_logger):
    return KeywardenToolkit(
        config,
        analyzer=analyzer,
        random_source=rng,
        logger=quiet_logger,
    )
