"""Deterministic pseudo-random values from a minimal-standard generator."""

from __future__ import annotations

_MULTIPLIER = 48271
_MODULUS = 2147483647


def minstd(index: int) -> int:
    """Value produced by a fresh generator after skipping ``index`` draws."""
    if index < 0:
        raise ValueError("index must be non-negative")
    return pow(_MULTIPLIER, index + 1, _MODULUS)


def uniform_distribution(begin: int, end: int) -> list[int]:
    """One generator value for each index in ``range(begin, end)``."""
    return [minstd(i) for i in range(begin, end)]