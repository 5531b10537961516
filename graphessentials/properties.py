"""Graph properties, sparse-view flags and vertex/edge pair types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import NamedTuple


class View(IntFlag):
    """Sparse representations a graph can expose."""

    INVALID = 1 << 0
    CSR = 1 << 1
    CSC = 1 << 2
    COO = 1 << 3


@dataclass
class GraphProperties:
    """Whether a graph is directed and whether its edges carry weights."""

    directed: bool = False
    weighted: bool = False


class VertexPair(NamedTuple):
    """Source and destination of an edge."""

    source: int
    destination: int


class EdgePair(NamedTuple):
    """A pair of edge identifiers."""

    x: int
    y: int


def set_view(lhs: View, rhs: View) -> View:
    """Return ``lhs`` with the flags of ``rhs`` switched on."""
    return View(lhs | rhs)


def unset_view(lhs: View, rhs: View) -> View:
    """Return ``lhs`` with the flags of ``rhs`` switched off."""
    return View(lhs & ~rhs)


def has_view(lhs: View, rhs: View) -> bool:
    """True when every flag of ``rhs`` is set in ``lhs``."""
    return (lhs & rhs) == rhs


def toggle_view(lhs: View, rhs: View) -> View:
    """Return ``lhs`` with the flags of ``rhs`` flipped."""
    return View(lhs ^ rhs)