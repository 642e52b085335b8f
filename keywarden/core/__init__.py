"""
Keywarden Core Module
======================

Data models, error types and the toolkit engine. The engine itself is
imported from :mod:`keywarden.core.engine` so that the models can be
loaded without pulling in every component.
"""

from keywarden.core.errors import ConfigError, InvalidInputError, KeywardenError
from keywarden.core.models import (
    AnalysisResult,
    BreachRecord,
    BulkEntry,
    GenerationConfig,
    HistoryEntry,
    Outcome,
    SecurityReport,
    StrengthLabel,
)

__all__ = [
    "AnalysisResult",
    "BreachRecord",
    "BulkEntry",
    "ConfigError",
    "GenerationConfig",
    "HistoryEntry",
    "InvalidInputError",
    "KeywardenError",
    "Outcome",
    "SecurityReport",
    "StrengthLabel",
]
