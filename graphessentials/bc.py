"""Betweenness centrality by forward counting and backward accumulation."""

from __future__ import annotations

import threading
from typing import MutableSequence, NamedTuple

from graphessentials import batch
from graphessentials.frontier import Frontier
from graphessentials.graph import Graph
from graphessentials.operators import AdvanceIOType, advance
from graphessentials.timing import Timer

_UNVISITED = -1
_ACCUMULATE = threading.Lock()


class BcResult(NamedTuple):
    """Centrality of every vertex and the summed time of all runs in milliseconds."""

    values: list[float]
    elapsed: float


def run(graph: Graph, single_source: int, bc_values: MutableSequence[float]) -> float:
    """Add the (halved) dependencies of ``single_source`` to ``bc_values``.

    Returns elapsed milliseconds.
    """
    n_vertices = graph.number_of_vertices
    if not 0 <= single_source < n_vertices:
        raise IndexError(f"vertex {single_source} outside 0..{n_vertices - 1}")
    if len(bc_values) < n_vertices:
        raise ValueError("bc_values must hold one entry per vertex")

    timer = Timer()
    timer.start()

    labels = [_UNVISITED] * n_vertices
    sigmas = [0.0] * n_vertices
    deltas = [0.0] * n_vertices
    contributions = [0.0] * n_vertices
    labels[single_source] = 0
    sigmas[single_source] = 1.0

    def forward_op(src: int, dst: int, edge: int, weight: float) -> bool:
        new_label = labels[src] + 1
        old_label = labels[dst]
        if old_label == _UNVISITED:
            labels[dst] = new_label
        elif new_label != old_label:
            return False
        sigmas[dst] += sigmas[src]
        return old_label == _UNVISITED

    def backward_op(src: int, dst: int, edge: int, weight: float) -> bool:
        if src == single_source:
            return False
        if labels[src] + 1 != labels[dst]:
            return False
        update = sigmas[src] / sigmas[dst] * (1 + deltas[dst])
        deltas[src] += update
        contributions[src] += 0.5 * update
        return False

    frontiers = [Frontier()]
    frontiers[0].push_back(single_source)
    depth = 0

    while True:
        if len(frontiers) <= depth + 1:
            frontiers.append(Frontier())
        advance(graph, forward_op, frontiers[depth], frontiers[depth + 1])
        depth += 1
        if frontiers[depth].is_empty():
            break

    while True:
        advance(
            graph,
            backward_op,
            frontiers[depth],
            None,
            output_type=AdvanceIOType.NONE,
        )
        depth -= 1
        if depth == 0:
            break

    with _ACCUMULATE:
        for vertex, contribution in enumerate(contributions):
            if contribution:
                bc_values[vertex] += contribution

    return timer.end()


def run_all(graph: Graph) -> BcResult:
    """Betweenness centrality of every vertex, one concurrent run per source."""
    values = [0.0] * graph.number_of_vertices
    elapsed = batch.execute(
        lambda job: run(graph, job, values), graph.number_of_vertices
    )
    return BcResult(values, elapsed)