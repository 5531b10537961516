"""Frontiers: the active set of vertices or edges an operator works on."""

from __future__ import annotations

from enum import Enum
from typing import Iterator


class FrontierKind(Enum):
    """Whether a frontier holds edges, vertices or both."""

    EDGE = "edge"
    VERTEX = "vertex"
    VERTEX_EDGE = "vertex_edge"


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class Frontier:
    """Growable array of active elements with a separate reserved capacity."""

    def __init__(self, size: int = 0, resizing_factor: float = 1.0) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self._storage: list[int] = [0] * size
        self._size = 0
        self.kind = FrontierKind.VERTEX
        self.resizing_factor = resizing_factor

    @property
    def number_of_elements(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._storage)

    def set_number_of_elements(self, elements: int) -> None:
        """Declare how many stored elements are active."""
        if not 0 <= elements <= self.capacity:
            raise ValueError(
                f"cannot hold {elements} elements with capacity {self.capacity}"
            )
        self._size = elements

    def is_empty(self) -> bool:
        return self._size == 0

    def push_back(self, value: int) -> None:
        if self._size < len(self._storage):
            self._storage[self._size] = value
        else:
            self._storage.append(value)
        self._size += 1

    def fill(self, value: int) -> None:
        """Set every active element to ``value``."""
        self._storage[: self._size] = [value] * self._size

    def sequence(self, initial_value: int, size: int) -> None:
        """Make the frontier ``initial_value, initial_value + 1, ...`` of ``size``."""
        if self.capacity < size:
            self.reserve(size)
        self.set_number_of_elements(size)
        self._storage[:size] = range(initial_value, initial_value + size)

    def reserve(self, size: int) -> None:
        """Grow the capacity to at least ``size`` times the resizing factor."""
        wanted = int(size * self.resizing_factor)
        if wanted > len(self._storage):
            self._storage.extend([0] * (wanted - len(self._storage)))

    def sort(self, order: SortOrder = SortOrder.ASCENDING) -> None:
        self._storage[: self._size] = sorted(
            self._storage[: self._size], reverse=order is SortOrder.DESCENDING
        )

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return iter(self._storage[: self._size])

    def _check(self, index: int) -> int:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("frontier index out of range")
        return index

    def __getitem__(self, index: int) -> int:
        return self._storage[self._check(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._storage[self._check(index)] = value

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)