"""Graph views over sparse storage (CSR, CSC, COO) and a graph builder."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Sequence, Union

from graphessentials.convert import indices_to_offsets, offsets_to_indices
from graphessentials.properties import GraphProperties, VertexPair, View, has_view
from graphessentials.search import execute as _upper_bound_in_range


@dataclass
class CsrView:
    """Row-compressed view: ``indices[e]`` is the destination of edge ``e``."""

    number_of_vertices: int
    number_of_edges: int
    offsets: list[int]
    indices: list[int]
    values: list[float]

    def number_of_neighbors(self, v: int) -> int:
        """Out-degree of ``v``."""
        return self.offsets[v + 1] - self.offsets[v]

    def source_vertex(self, e: int) -> int:
        """Row that owns edge ``e``."""
        return bisect_right(self.offsets, e, 0, self.number_of_vertices) - 1

    def destination_vertex(self, e: int) -> int:
        return self.indices[e]

    def starting_edge(self, v: int) -> int:
        return self.offsets[v]

    def source_and_destination_vertices(self, e: int) -> VertexPair:
        return VertexPair(self.source_vertex(e), self.destination_vertex(e))

    def edge(self, source: int, destination: int) -> int:
        """Edge from ``source`` to ``destination`` (columns sorted per row)."""
        return (
            _upper_bound_in_range(
                self.indices,
                destination,
                self.offsets[source],
                self.offsets[source + 1],
            )
            - 1
        )

    def edge_weight(self, e: int) -> float:
        return self.values[e]


@dataclass
class CscView:
    """Column-compressed view: ``indices[e]`` is the source of edge ``e``."""

    number_of_vertices: int
    number_of_edges: int
    offsets: list[int]
    indices: list[int]
    values: list[float]

    def number_of_neighbors(self, v: int) -> int:
        """In-degree of ``v``."""
        return self.offsets[v + 1] - self.offsets[v]

    def source_vertex(self, e: int) -> int:
        return self.indices[e]

    def destination_vertex(self, e: int) -> int:
        """Column that owns edge ``e``."""
        return bisect_right(self.offsets, e, 0, self.number_of_vertices) - 1

    def starting_edge(self, v: int) -> int:
        return self.offsets[v]

    def source_and_destination_vertices(self, e: int) -> VertexPair:
        return VertexPair(self.source_vertex(e), self.destination_vertex(e))

    def edge(self, source: int, destination: int) -> int:
        """Edge from ``source`` to ``destination`` (rows sorted per column)."""
        return (
            _upper_bound_in_range(
                self.indices,
                source,
                self.offsets[destination],
                self.offsets[destination + 1],
            )
            - 1
        )

    def edge_weight(self, e: int) -> float:
        return self.values[e]


@dataclass
class CooView:
    """Coordinate view with rows sorted: one row and column index per edge."""

    number_of_vertices: int
    number_of_edges: int
    row_indices: list[int]
    column_indices: list[int]
    values: list[float]

    def number_of_neighbors(self, v: int) -> int:
        return bisect_right(self.row_indices, v) - bisect_left(self.row_indices, v)

    def source_vertex(self, e: int) -> int:
        return self.row_indices[e]

    def destination_vertex(self, e: int) -> int:
        return self.column_indices[e]

    def starting_edge(self, v: int) -> int:
        return bisect_left(self.row_indices, v)

    def source_and_destination_vertices(self, e: int) -> VertexPair:
        return VertexPair(self.source_vertex(e), self.destination_vertex(e))

    def edge(self, source: int, destination: int) -> int:
        start = bisect_left(self.row_indices, source)
        stop = bisect_right(self.row_indices, source)
        return _upper_bound_in_range(self.column_indices, destination, start, stop) - 1

    def edge_weight(self, e: int) -> float:
        return self.values[e]


AnyView = Union[CsrView, CscView, CooView]

_PREFERENCE = (View.CSR, View.CSC, View.COO)


@dataclass
class Graph:
    """A graph exposing one or more sparse views of the same edges."""

    number_of_vertices: int = 0
    number_of_edges: int = 0
    views: dict[View, AnyView] = field(default_factory=dict)
    properties: GraphProperties = field(default_factory=GraphProperties)

    @property
    def is_directed(self) -> bool:
        return self.properties.directed

    def view(self, kind: View) -> AnyView:
        """Return the view of the given kind; ``KeyError`` if absent."""
        try:
            return self.views[View(kind)]
        except KeyError:
            raise KeyError(f"graph has no {View(kind).name} view") from None

    def contains(self, kind: View) -> bool:
        return View(kind) in self.views

    def _primary(self) -> AnyView:
        for kind in _PREFERENCE:
            if kind in self.views:
                return self.views[kind]
        raise KeyError("graph has no views")

    def number_of_neighbors(self, v: int) -> int:
        return self._primary().number_of_neighbors(v)

    def source_vertex(self, e: int) -> int:
        return self._primary().source_vertex(e)

    def destination_vertex(self, e: int) -> int:
        return self._primary().destination_vertex(e)

    def starting_edge(self, v: int) -> int:
        return self._primary().starting_edge(v)

    def edge(self, source: int, destination: int) -> int:
        return self._primary().edge(source, destination)

    def edge_weight(self, e: int) -> float:
        return self._primary().edge_weight(e)


def from_csr(
    rows: int,
    columns: int,
    row_offsets: Sequence[int],
    column_indices: Sequence[int],
    values: Sequence[float],
    views: View = View.CSR,
) -> Graph:
    """Build a graph with the requested views from CSR arrays.

    CSR and CSC views cannot be requested together.
    """
    views = View(views)
    nnz = len(column_indices)
    if len(values) != nnz:
        raise ValueError("values must hold one entry per column index")
    if len(row_offsets) != rows + 1:
        raise ValueError("row_offsets must hold rows + 1 entries")
    if has_view(views, View.CSC) and has_view(views, View.CSR):
        raise NotImplementedError("CSC & CSR view not yet supported together.")

    offsets = list(row_offsets)
    cols = list(column_indices)
    vals = list(values)
    row_indices: list[int] = []

    if has_view(views, View.CSC) or has_view(views, View.COO):
        row_indices = offsets_to_indices(offsets, nnz)

    column_offsets: list[int] = []
    if has_view(views, View.CSC):
        order = sorted(range(nnz), key=cols.__getitem__)
        cols = [cols[e] for e in order]
        row_indices = [row_indices[e] for e in order]
        vals = [vals[e] for e in order]
        column_offsets = indices_to_offsets(cols, rows + 1)

    graph = Graph(number_of_vertices=rows, number_of_edges=nnz)
    if has_view(views, View.CSR):
        graph.views[View.CSR] = CsrView(rows, nnz, offsets, cols, vals)
    if has_view(views, View.CSC):
        graph.views[View.CSC] = CscView(rows, nnz, column_offsets, row_indices, vals)
    if has_view(views, View.COO):
        graph.views[View.COO] = CooView(rows, nnz, row_indices, cols, vals)
    return graph