"""
Breach Lookup
==============

Maps a password to simulated breach metadata. Entries are keyed by a
32-bit polynomial rolling hash (``h = h * 31 + code``) of the password's
UTF-16 code units, wrapped to a signed 32-bit integer, made non-negative
and hex-encoded.

The table stands in for a compromised-credential service. It is built once
(:meth:`BreachLookup.seeded` for the simulated data set,
:meth:`BreachLookup.from_records` for fixtures) and then only read.

References:
    - Hunt, T. Have I Been Pwned: Pwned Passwords.
      https://haveibeenpwned.com/Passwords
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterable, Iterator, Optional

from keywarden.analyzers.charsets import utf16_code_units
from keywarden.analyzers.common import COMMON_PASSWORDS
from keywarden.core.models import BreachRecord
from keywarden.generators.random_source import RandomSource

VARIANT_SUFFIXES: tuple[str, ...] = ("1", "!", "123", "2023", "2024", "2025")

_DAY_SECONDS = 24 * 60 * 60


def rolling_hash(text: str) -> str:
    """Hex digest of the signed 32-bit ``h * 31 + code`` hash of *text*.

    Characters outside the Basic Multilingual Plane contribute their two
    UTF-16 surrogate code units.
    """
    value = 0
    for code in utf16_code_units(text):
        value = (value * 31 + code) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return format(abs(value), "x")


class BreachLookup:
    """Read-only hash-to-record table.

    Usage::

        lookup = BreachLookup.from_records([record])
        lookup.lookup("password")      # BreachRecord or None
    """

    def __init__(self, records: Optional[dict[str, BreachRecord]] = None) -> None:
        self._table: dict[str, BreachRecord] = dict(records or {})

    @classmethod
    def from_records(cls, records: Iterable[BreachRecord]) -> BreachLookup:
        """Index *records* by the hash of their password; later ones win."""
        return cls({rolling_hash(r.password): r for r in records})

    @classmethod
    def seeded(
        cls,
        random_source: RandomSource,
        *,
        now: Optional[datetime] = None,
        passwords: Iterable[str] = COMMON_PASSWORDS,
        suffixes: Iterable[str] = VARIANT_SUFFIXES,
    ) -> BreachLookup:
        """Build the simulated breach table.

        Every common password gets 1,000 to 1,000,999 occurrences and a
        last sighting within the past year. Every suffixed variant gets
        100 to 100,099 occurrences within the past 180 days.

        Args:
            random_source: Provider for counts and timestamps.
            now: Reference time for ``last_seen``; defaults to UTC now.
            passwords: Base passwords.
            suffixes: Suffixes appended to form variants.
        """
        now = now or datetime.now(timezone.utc)
        base = list(passwords)
        suffix_list = list(suffixes)
        records: list[BreachRecord] = []

        for pwd in base:
            records.append(cls._random_record(random_source, pwd, now, 1000, 1_000_000, 365))

        for pwd in base:
            for suffix in suffix_list:
                records.append(
                    cls._random_record(random_source, pwd + suffix, now, 100, 100_000, 180)
                )

        return cls.from_records(records)

    @staticmethod
    def _random_record(
        random_source: RandomSource,
        password: str,
        now: datetime,
        min_count: int,
        count_span: int,
        max_age_days: int,
    ) -> BreachRecord:
        age = timedelta(seconds=random_source.random() * max_age_days * _DAY_SECONDS)
        return BreachRecord(
            password=password,
            breach_count=random_source.randrange(min_count, min_count + count_span),
            last_seen=now - age,
        )

    # ------------------------------------------------------------------ #
    #  Queries
    # ------------------------------------------------------------------ #

    def lookup(self, password: str) -> Optional[BreachRecord]:
        return self._table.get(rolling_hash(password))

    def __contains__(self, password: object) -> bool:
        return isinstance(password, str) and rolling_hash(password) in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[BreachRecord]:
        return iter(self._table.values())
