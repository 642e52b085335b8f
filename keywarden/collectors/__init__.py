"""
Keywarden Collectors
=====================

Lookup collaborators that stand in for external intelligence sources.
"""

from keywarden.collectors.breach import BreachLookup, rolling_hash

__all__ = ["BreachLookup", "rolling_hash"]
