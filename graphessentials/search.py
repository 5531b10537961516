"""Binary searches over sorted key sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Sequence


def execute(keys: Sequence[Any], key: Any, begin: int, end: int) -> int:
    """Upper-bound search of ``key`` within ``keys[begin:end]``.

    Returns the first position in the range whose key is greater than ``key``.
    """
    if begin >= end:
        return begin
    return bisect_right(keys, key, begin, end)


def lower_bound(keys: Sequence[Any], key: Any, size: int) -> int:
    """First position in ``keys[:size]`` whose key is not less than ``key``."""
    return bisect_left(keys, key, 0, size)


def upper_bound(keys: Sequence[Any], key: Any, size: int) -> int:
    """First position in ``keys[:size]`` whose key is greater than ``key``."""
    return bisect_right(keys, key, 0, size)


def rightmost(keys: Sequence[Any], key: Any, count: int) -> int:
    """Position of the last key in ``keys[:count]`` not greater than ``key``.

    Returns -1 when every key is greater than ``key``.
    """
    return bisect_right(keys, key, 0, count) - 1