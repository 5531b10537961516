import pytest

from graphessentials.graph import CooView, CscView, CsrView, from_csr
from graphessentials.properties import View

ROWS = 3
OFFSETS = [0, 2, 3, 4]
COLUMNS = [1, 2, 2, 0]
VALUES = [1.0, 2.0, 3.0, 4.0]
TRIPLES = [(0, 1, 1.0), (0, 2, 2.0), (1, 2, 3.0), (2, 0, 4.0)]


def _triples(view, nnz):
    return [
        (view.source_vertex(e), view.destination_vertex(e), view.edge_weight(e))
        for e in range(nnz)
    ]


def _build(views):
    return from_csr(ROWS, ROWS, OFFSETS, COLUMNS, VALUES, views)


def test_csr_view_edges_match_input():
    graph = _build(View.CSR)
    view = graph.view(View.CSR)
    assert isinstance(view, CsrView)
    assert _triples(view, len(COLUMNS)) == TRIPLES


def test_csr_neighbors_and_starting_edges_cover_edges():
    view = _build(View.CSR).view(View.CSR)
    for e in range(len(COLUMNS)):
        s = view.source_vertex(e)
        start = view.starting_edge(s)
        assert start <= e < start + view.number_of_neighbors(s)
    assert sum(view.number_of_neighbors(v) for v in range(ROWS)) == len(COLUMNS)


def test_csr_edge_lookup_round_trip():
    view = _build(View.CSR).view(View.CSR)
    for e in range(len(COLUMNS)):
        assert view.edge(view.source_vertex(e), view.destination_vertex(e)) == e


def test_csc_view_holds_same_edges():
    view = _build(View.CSC).view(View.CSC)
    assert isinstance(view, CscView)
    assert sorted(_triples(view, len(COLUMNS))) == sorted(TRIPLES)
    assert view.offsets == [0, 1, 2, 4]


def test_csc_destinations_sorted_and_edge_round_trip():
    view = _build(View.CSC).view(View.CSC)
    destinations = [view.destination_vertex(e) for e in range(len(COLUMNS))]
    assert destinations == sorted(destinations)
    for e in range(len(COLUMNS)):
        pair = view.source_and_destination_vertices(e)
        assert view.edge(pair.source, pair.destination) == e


def test_coo_view_holds_same_edges():
    graph = _build(View.COO)
    view = graph.view(View.COO)
    assert isinstance(view, CooView)
    assert _triples(view, len(COLUMNS)) == TRIPLES
    for v in range(ROWS):
        assert view.number_of_neighbors(v) == OFFSETS[v + 1] - OFFSETS[v]
        assert view.starting_edge(v) == OFFSETS[v]


def test_csr_and_coo_together():
    graph = _build(View.CSR | View.COO)
    assert graph.contains(View.CSR)
    assert graph.contains(View.COO)
    assert not graph.contains(View.CSC)
    assert _triples(graph.view(View.CSR), 4) == _triples(graph.view(View.COO), 4)


def test_csr_and_csc_together_rejected():
    with pytest.raises(NotImplementedError):
        _build(View.CSR | View.CSC)


def test_missing_view_raises():
    graph = _build(View.CSR)
    with pytest.raises(KeyError):
        graph.view(View.COO)


def test_graph_sizes_and_delegation():
    graph = _build(View.CSR)
    assert graph.number_of_vertices == ROWS
    assert graph.number_of_edges == len(COLUMNS)
    assert graph.is_directed is False
    assert graph.destination_vertex(3) == COLUMNS[3]
    assert graph.edge_weight(1) == VALUES[1]


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        from_csr(ROWS, ROWS, OFFSETS, COLUMNS, VALUES[:2], View.CSR)
    with pytest.raises(ValueError):
        from_csr(ROWS, ROWS, OFFSETS[:2], COLUMNS, VALUES, View.CSR)