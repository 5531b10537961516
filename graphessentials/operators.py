"""Graph operators: advance over a frontier and parallel-for over a graph."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, Optional

from graphessentials.frontier import Frontier
from graphessentials.graph import Graph
from graphessentials.properties import View

#: Marker written into an output frontier for neighbours the operator rejected.
INVALID_VERTEX = -1

AdvanceOp = Callable[[int, int, int, Any], bool]


class LoadBalance(Enum):
    """Load-balancing technique used by advance."""

    THREAD_MAPPED = auto()
    WARP_MAPPED = auto()
    BLOCK_MAPPED = auto()
    BUCKETING = auto()
    MERGE_PATH = auto()
    WORK_STEALING = auto()


class AdvanceIOType(Enum):
    """Kind of input or output frontier of advance."""

    GRAPH = auto()
    VERTICES = auto()
    EDGES = auto()
    NONE = auto()


class AdvanceDirection(Enum):
    """Push (forward), pull (backward) or direction-optimized advance."""

    FORWARD = auto()
    BACKWARD = auto()
    OPTIMIZED = auto()


class FilterAlgorithm(Enum):
    """Underlying algorithm used by filter."""

    REMOVE = auto()
    PREDICATED = auto()
    COMPACT = auto()
    BYPASS = auto()


class UniquifyAlgorithm(Enum):
    """Underlying algorithm used by uniquify."""

    UNIQUE = auto()
    UNIQUE_COPY = auto()


class ParallelForEach(Enum):
    """What parallel-for iterates over."""

    VERTEX = auto()
    EDGE = auto()
    WEIGHT = auto()


_SUPPORTED_LOAD_BALANCE = {
    LoadBalance.MERGE_PATH,
    LoadBalance.THREAD_MAPPED,
    LoadBalance.BLOCK_MAPPED,
}


def is_valid(value: int) -> bool:
    """False for the invalid-vertex marker."""
    return value != INVALID_VERTEX


def advance(
    graph: Graph,
    op: AdvanceOp,
    input_frontier: Optional[Frontier],
    output_frontier: Optional[Frontier],
    load_balance: LoadBalance = LoadBalance.MERGE_PATH,
    direction: AdvanceDirection = AdvanceDirection.FORWARD,
    input_type: AdvanceIOType = AdvanceIOType.VERTICES,
    output_type: AdvanceIOType = AdvanceIOType.VERTICES,
) -> None:
    """Visit the neighbours of every input item and call ``op(src, dst, edge, weight)``.

    Unless ``output_type`` is ``NONE``, the output frontier receives one slot per
    visited edge, holding the neighbour when ``op`` returned true and
    ``INVALID_VERTEX`` otherwise.
    """
    if load_balance not in _SUPPORTED_LOAD_BALANCE:
        raise NotImplementedError("Advance type not supported.")
    if direction is AdvanceDirection.OPTIMIZED:
        raise NotImplementedError("Direction-optimized not yet implemented.")

    view = graph.view(View.CSR if direction is AdvanceDirection.FORWARD else View.CSC)

    if input_type is AdvanceIOType.GRAPH:
        sources = list(range(graph.number_of_vertices))
    else:
        if input_frontier is None:
            raise ValueError("an input frontier is required")
        sources = list(input_frontier)

    segments = [
        view.number_of_neighbors(v) if is_valid(v) else 0 for v in sources
    ]
    size_of_output = sum(segments)

    writes_output = output_type is not AdvanceIOType.NONE
    if writes_output:
        if output_frontier is None:
            raise ValueError("an output frontier is required")
        if size_of_output <= 0:
            output_frontier.set_number_of_elements(0)
            return
        if output_frontier.capacity < size_of_output:
            output_frontier.reserve(size_of_output)
        output_frontier.set_number_of_elements(size_of_output)

    idx = 0
    for v, degree in zip(sources, segments):
        if not is_valid(v):
            continue
        start_edge = view.starting_edge(v)
        for e in range(start_edge, start_edge + degree):
            n = view.destination_vertex(e)
            w = view.edge_weight(e)
            keep = op(v, n, e, w)
            if writes_output:
                output_frontier[idx] = n if keep else INVALID_VERTEX
            idx += 1


def parallel_for(
    graph: Graph,
    op: Callable[[int], Any],
    kind: ParallelForEach = ParallelForEach.VERTEX,
) -> None:
    """Call ``op`` on every vertex, or on every edge for the other kinds."""
    size = (
        graph.number_of_vertices
        if kind is ParallelForEach.VERTEX
        else graph.number_of_edges
    )
    for x in range(size):
        op(x)