"""Conversions between compressed offsets and uncompressed indices."""

from __future__ import annotations

from bisect import bisect_left
from itertools import accumulate, pairwise
from typing import Sequence


def offsets_to_indices(offsets: Sequence[int], size_of_indices: int) -> list[int]:
    """Expand row offsets into one row index per nonzero entry."""
    indices = [0] * size_of_indices
    for row, (start, stop) in enumerate(pairwise(offsets)):
        if start != stop:
            indices[start] = row
    return list(accumulate(indices, max))


def indices_to_offsets(indices: Sequence[int], size_of_offsets: int) -> list[int]:
    """Compress sorted row indices into ``size_of_offsets`` offsets."""
    return [bisect_left(indices, row) for row in range(size_of_offsets)]