"""
Keywarden Configuration Management
===================================

Centralized configuration for the Keywarden toolkit using Python
dataclasses and TOML-based persistence.

Every section maps one-to-one onto a TOML table (``[global]``,
``[analyzer]``, ``[generator]``). Keys missing from the file fall back to
the dataclass defaults and unknown keys are ignored, so partial config
files are always valid.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "keywarden.toml"


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Configuration for the strength analyzer.

    The attack model behind the time-to-crack label is a single offline
    brute-force rate; the default of one billion guesses per second
    approximates a fast unsalted hash on commodity GPU hardware.
    """

    guesses_per_second: float = 1e9


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults for password and passphrase generation plus history sizing.

    ``history_limit`` of ``0`` keeps the history unbounded; any positive
    value turns it into a ring buffer holding that many entries.
    """

    length: int = 16
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_ambiguous: bool = False
    exclude_similar: bool = True
    ensure_variety: bool = True
    secure_random: bool = True
    history_window: int = 10
    history_limit: int = 0
    passphrase_words: int = 4
    passphrase_separator: str = "-"


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log sinks and output location."""

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class KeywardenConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = KeywardenConfig.load()                  # default path
        >>> config = KeywardenConfig.load("custom.toml")     # explicit path
        >>> config.generator.length
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> KeywardenConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``keywarden.toml`` in the
        project root and silently returns defaults when it is absent.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`KeywardenConfig` instance.

        Raises:
            FileNotFoundError: If *path* was given explicitly and does not
                exist.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares."""
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

_cached_config: KeywardenConfig | None = None


def get_config(path: str | Path | None = None) -> KeywardenConfig:
    """Return the process-wide configuration, loading it on first use.

    Passing *path* always reloads from that file and replaces the cache.
    """
    global _cached_config
    if _cached_config is None or path is not None:
        _cached_config = KeywardenConfig.load(path)
    return _cached_config
