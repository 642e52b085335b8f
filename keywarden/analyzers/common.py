"""
Common Password Reference List
===============================

Known-weak passwords. The same list seeds the simulated breach table in
:mod:`keywarden.collectors.breach`.
"""

from __future__ import annotations

COMMON_PASSWORDS: tuple[str, ...] = (
    "password", "123456", "123456789", "qwerty", "abc123", "password123",
    "admin", "letmein", "welcome", "monkey", "1234567890", "dragon",
    "master", "shadow", "qwerty123", "football", "baseball", "superman",
    "hello", "freedom", "whatever", "ninja", "mustang", "maggie",
)


class CommonPasswordList:
    """Case-insensitive containment check against :data:`COMMON_PASSWORDS`."""

    def __init__(self, passwords: tuple[str, ...] = COMMON_PASSWORDS) -> None:
        self._passwords = tuple(p.lower() for p in passwords)

    def is_common(self, text: str) -> bool:
        """True when *text* contains a listed password or is contained by one."""
        lowered = text.lower()
        return any(common in lowered or lowered in common for common in self._passwords)

    def __iter__(self):
        return iter(self._passwords)

    def __len__(self) -> int:
        return len(self._passwords)
