"""Sequential reference implementations used to check graph algorithm results."""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import pairwise
from time import perf_counter
from typing import Any, NamedTuple, Sequence

from graphessentials.formats import Csr
from graphessentials.random import uniform_distribution

#: Distance given to vertices that breadth-first search cannot reach.
INFINITE_DISTANCE = 2**31 - 1
#: Distance given to vertices that shortest-path search cannot reach.
INFINITE_WEIGHT = 3.4028234663852886e38
#: Colour of a vertex that has not been coloured.
UNCOLORED = -1


class ReferenceRun(NamedTuple):
    """Values computed by a reference run and the time it took in milliseconds."""

    values: list
    elapsed: float


def _elapsed_ms(start: float) -> float:
    return (perf_counter() - start) * 1000.0


def _check_vertex(vertex: int, n_vertices: int) -> None:
    if not 0 <= vertex < n_vertices:
        raise IndexError(f"vertex {vertex} outside 0..{n_vertices - 1}")


def bfs(csr: Csr, source: int) -> ReferenceRun:
    """Hop distances from ``source``; unreachable vertices get ``INFINITE_DISTANCE``."""
    offsets, columns = csr.row_offsets, csr.column_indices
    n_vertices = csr.number_of_rows
    _check_vertex(source, n_vertices)
    distances = [INFINITE_DISTANCE] * n_vertices

    start = perf_counter()
    distances[source] = 0
    heap = [(0, source)]
    while heap:
        distance, node = heappop(heap)
        new_distance = distance + 1
        for neighbor in columns[offsets[node] : offsets[node + 1]]:
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                heappush(heap, (new_distance, neighbor))
    return ReferenceRun(distances, _elapsed_ms(start))


def sssp(csr: Csr, source: int) -> ReferenceRun:
    """Weighted shortest distances from ``source`` (Dijkstra)."""
    offsets, columns = csr.row_offsets, csr.column_indices
    weights = csr.nonzero_values
    n_vertices = csr.number_of_rows
    _check_vertex(source, n_vertices)
    distances = [INFINITE_WEIGHT] * n_vertices

    start = perf_counter()
    distances[source] = 0.0
    heap = [(0.0, source)]
    while heap:
        distance, node = heappop(heap)
        first, last = offsets[node], offsets[node + 1]
        for neighbor, weight in zip(columns[first:last], weights[first:last]):
            new_distance = distance + weight
            if new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                heappush(heap, (new_distance, neighbor))
    return ReferenceRun(distances, _elapsed_ms(start))


def color(csr: Csr) -> ReferenceRun:
    """Graph colouring by repeated selection of local random maxima and minima."""
    offsets, columns = csr.row_offsets, csr.column_indices

    start = perf_counter()
    n_vertices = csr.number_of_rows
    colors = [UNCOLORED] * n_vertices
    randoms = uniform_distribution(0, n_vertices)

    current = 0
    n_left = n_vertices
    while n_left > 0:
        for v in range(n_vertices):
            if colors[v] != UNCOLORED:
                continue

            colormax = True
            colormin = True
            for u in columns[offsets[v] : offsets[v + 1]]:
                cu = colors[u]
                if (
                    cu != UNCOLORED and cu != current + 1 and cu != current + 2
                ) or v == u:
                    continue
                if randoms[v] <= randoms[u]:
                    colormax = False
                if randoms[v] >= randoms[u]:
                    colormin = False

            if colormax:
                colors[v] = current + 1
                n_left -= 1
            elif colormin:
                colors[v] = current + 2
                n_left -= 1

        current += 2

    return ReferenceRun(colors, _elapsed_ms(start))


def ppr(csr: Csr, n_seeds: int, alpha: float, epsilon: float) -> ReferenceRun:
    """Personalized PageRank by frontier-based push for seeds ``0..n_seeds-1``.

    The result holds one list of scores per seed.
    """
    offsets, columns = csr.row_offsets, csr.column_indices
    n_nodes = csr.number_of_rows
    if not 0 <= n_seeds <= n_nodes:
        raise ValueError(f"n_seeds must lie in 0..{n_nodes}")

    start = perf_counter()
    degrees = [stop - first for first, stop in pairwise(offsets)]
    keep = (2 * alpha) / (1 + alpha)
    spread = (1 - alpha) / (1 + alpha)

    all_p: list[list[float]] = []
    for seed in range(n_seeds):
        p = [0.0] * n_nodes
        r = [0.0] * n_nodes
        r_prime = [0.0] * n_nodes
        r[seed] = 1.0
        r_prime[seed] = 1.0
        frontier = [seed]

        while frontier:
            for node in frontier:
                p[node] += keep * r[node]
                r_prime[node] = 0.0

            next_frontier: list[int] = []
            for src in frontier:
                degree = degrees[src]
                if degree == 0:
                    continue
                update = spread * (r[src] / degree)
                first = offsets[src]
                for dst in columns[first : first + degree]:
                    old = r_prime[dst]
                    new = old + update
                    threshold = degrees[dst] * epsilon
                    r_prime[dst] = new
                    if old < threshold <= new:
                        next_frontier.append(dst)

            r = r_prime.copy()
            frontier = next_frontier

        all_p.append(p)

    return ReferenceRun(all_p, _elapsed_ms(start))


def _paired(computed: Sequence[Any], expected: Sequence[Any]) -> zip:
    if len(computed) < len(expected):
        raise ValueError("computed result is shorter than the expected result")
    return zip(computed, expected)


def count_mismatches(computed: Sequence[Any], expected: Sequence[Any]) -> int:
    """Number of positions where ``computed`` differs from ``expected``."""
    return sum(1 for got, want in _paired(computed, expected) if got != want)


def count_close_mismatches(
    computed: Sequence[float], expected: Sequence[float], tolerance: float = 1e-6
) -> int:
    """Number of positions where the values differ by more than ``tolerance``."""
    return sum(
        1 for got, want in _paired(computed, expected) if abs(got - want) > tolerance
    )


def count_color_conflicts(csr: Csr, colors: Sequence[int]) -> int:
    """Edges whose endpoints share a colour or whose source is uncoloured."""
    offsets, columns = csr.row_offsets, csr.column_indices
    conflicts = 0
    for v, (first, last) in enumerate(pairwise(offsets)):
        for u in columns[first:last]:
            if colors[u] == colors[v] or colors[v] == UNCOLORED:
                conflicts += 1
    return conflicts