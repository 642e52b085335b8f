"""
Generation History and Security Report
=======================================

:class:`PasswordHistory` is the append-only log of generated passwords
owned by one toolkit instance. It is unbounded by default; a positive
``max_entries`` turns it into a ring buffer that discards the oldest
entries. Reads and appends hold a lock so a toolkit shared between threads
never observes a partially updated log.

:func:`build_security_report` re-analyses every retained entry and
aggregates strength labels, breach hits and mean entropy.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import TYPE_CHECKING, Iterator, Optional

from shared.math_utils import mean_or_zero

from keywarden.core.models import HistoryEntry, SecurityReport

if TYPE_CHECKING:
    from keywarden.analyzers.strength import StrengthAnalyzer

DEFAULT_WINDOW = 10


class PasswordHistory:
    """Thread-safe log of :class:`HistoryEntry` records.

    Args:
        max_entries: Capacity of the ring buffer; ``None`` or ``0`` for
            an unbounded log.
    """

    def __init__(self, max_entries: Optional[int] = None) -> None:
        self._entries: deque[HistoryEntry] = deque(maxlen=max_entries or None)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> Optional[int]:
        return self._entries.maxlen

    def append(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def recent(self, count: int = DEFAULT_WINDOW) -> list[HistoryEntry]:
        """The last *count* entries, oldest first."""
        if count <= 0:
            return []
        with self._lock:
            return list(self._entries)[-count:]

    def entries(self) -> list[HistoryEntry]:
        """Snapshot of every retained entry, oldest first."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self.entries())


def build_security_report(
    history: PasswordHistory, analyzer: StrengthAnalyzer
) -> SecurityReport:
    """Re-analyse *history* and summarise the results."""
    entries = history.entries()
    report = SecurityReport(total_analyzed=len(entries))
    entropies: list[float] = []

    for entry in entries:
        analysis = analyzer.analyze(entry.password)
        report.strength_distribution[analysis.strength.value] += 1
        if analysis.is_compromised:
            report.compromised_count += 1
        entropies.append(analysis.entropy)

    report.average_entropy = mean_or_zero(entropies)
    return report
