import logging

import pytest

from shared import config as config_module
from shared.config import KeywardenConfig, get_config
from shared.logger import WardenLogger
from shared.math_utils import average_crack_seconds, charset_entropy, mean_or_zero, round_half_up

from keywarden.core.engine import KeywardenToolkit


def test_defaults():
    cfg = KeywardenConfig()
    assert cfg.global_settings.log_level == "INFO"
    assert cfg.analyzer.guesses_per_second == 1e9
    assert cfg.generator.length == 16
    assert cfg.generator.exclude_similar is True
    assert cfg.generator.history_window == 10
    assert cfg.generator.history_limit == 0


def test_load_partial_file(tmp_path):
    path = tmp_path / "keywarden.toml"
    path.write_text(
        '[generator]\nlength = 24\nhistory_limit = 50\nunknown_key = "ignored"\n'
        "[analyzer]\nguesses_per_second = 1e6\n",
        encoding="utf-8",
    )
    cfg = KeywardenConfig.load(path)
    assert cfg.generator.length == 24
    assert cfg.generator.history_limit == 50
    assert cfg.generator.include_symbols is True
    assert cfg.analyzer.guesses_per_second == 1e6
    assert cfg.to_dict()["generator"]["length"] == 24


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        KeywardenConfig.load(tmp_path / "absent.toml")


def test_get_config_caches(tmp_path, monkeypatch):
    monkeypatch.setattr(config_module, "_cached_config", None)
    path = tmp_path / "keywarden.toml"
    path.write_text("[generator]\nlength = 30\n", encoding="utf-8")
    first = get_config(path)
    assert first.generator.length == 30
    assert get_config() is first


def test_toolkit_uses_config_sections(tmp_path, quiet_logger):
    path = tmp_path / "keywarden.toml"
    path.write_text(
        "[generator]\nlength = 20\nhistory_limit = 2\nsecure_random = false\n",
        encoding="utf-8",
    )
    toolkit = KeywardenToolkit(KeywardenConfig.load(path), logger=quiet_logger)
    for _ in range(3):
        assert len(toolkit.generate_password()) == 20
    assert len(toolkit.export_history()) == 2
    assert toolkit.history.max_entries == 2


def test_logger_writes_json_lines(tmp_path):
    log_file = tmp_path / "logs" / "keywarden.log"
    log = WardenLogger("unit", log_file=log_file, json_logs=True, console_output=False)
    with log.operation("generate"):
        log.info("Generated %d passwords", 3, length=16)
    for handler in log.underlying.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert '"component": "unit"' in line
    assert '"operation": "generate"' in line
    assert "Generated 3 passwords" in line
    assert log.underlying.name == "keywarden.unit"
    assert log.underlying.level == logging.INFO


class TestMathUtils:
    def test_entropy(self):
        assert charset_entropy(0, 94) == 0.0
        assert charset_entropy(8, 0) == 0.0
        assert charset_entropy(4, 16) == 16.0

    def test_crack_seconds(self):
        assert average_crack_seconds(1, 1) == 1.0
        assert average_crack_seconds(-3, 1) == 0.5

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(1.49) == 1

    def test_mean_or_zero(self):
        assert mean_or_zero([]) == 0.0
        assert mean_or_zero([1.0, 2.0, 6.0]) == 3.0
