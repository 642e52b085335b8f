"""
Keywarden Mathematical Utilities
=================================

Numeric helpers shared by the analyzer and the history report: the
charset-size entropy heuristic, brute-force duration estimates and
NumPy-backed aggregation.

References:
    [1] Burr, W. E. et al. (2006). NIST SP 800-63 Appendix A,
        Estimating Password Entropy and Strength.
    [2] Harris, C. R. et al. (2020). Array programming with NumPy.
        Nature, 585, 357-362.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

# Exponent cap for 2**bits; past this every realistic attack rate already
# saturates the coarsest duration label.
_MAX_KEYSPACE_BITS = 1000.0


def charset_entropy(length: int, pool_size: int) -> float:
    """Return ``length * log2(pool_size)`` in bits.

    This is the entropy of a string drawn uniformly from a pool of
    *pool_size* symbols, used here as a coarse strength proxy [1].
    A pool of zero (no recognised character class) yields 0.0.

    Args:
        length: Number of characters.
        pool_size: Size of the implied character pool.

    Returns:
        Entropy estimate in bits, never negative.
    """
    if length <= 0 or pool_size <= 0:
        return 0.0
    return length * math.log2(pool_size)


def average_crack_seconds(entropy_bits: float, guesses_per_second: float) -> float:
    """Expected brute-force time: half the keyspace at a fixed guess rate.

    Args:
        entropy_bits: Keyspace size expressed in bits.
        guesses_per_second: Attacker throughput.

    Returns:
        Average seconds to find the password.
    """
    keyspace = 2.0 ** min(max(entropy_bits, 0.0), _MAX_KEYSPACE_BITS)
    return keyspace / (2 * guesses_per_second)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return int(math.floor(value + 0.5))


def mean_or_zero(values: Sequence[float]) -> float:
    """Arithmetic mean of *values*, or 0.0 for an empty sequence [2]."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=np.float64)))
