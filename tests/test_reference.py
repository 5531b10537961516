import pytest

from graphessentials.formats import Coo, Csr
from graphessentials.reference import (
    INFINITE_DISTANCE,
    INFINITE_WEIGHT,
    UNCOLORED,
    bfs,
    color,
    count_close_mismatches,
    count_color_conflicts,
    count_mismatches,
    ppr,
    sssp,
)


def make_csr(n, edges):
    coo = Coo(
        number_of_rows=n,
        number_of_columns=n,
        number_of_nonzeros=len(edges),
        row_indices=[u for u, _, _ in edges],
        column_indices=[v for _, v, _ in edges],
        nonzero_values=[w for _, _, w in edges],
    )
    return Csr.from_coo(coo)


def symmetric(n, pairs, weight=1.0):
    edges = []
    for u, v in pairs:
        edges.append((u, v, weight))
        edges.append((v, u, weight))
    return make_csr(n, edges)


RING = symmetric(7, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 0), (0, 3), (2, 6)])


def test_bfs_path():
    csr = make_csr(4, [(0, 1, 1.0), (1, 2, 1.0), (2, 3, 1.0)])
    assert bfs(csr, 0).values == [0, 1, 2, 3]


def test_bfs_unreachable_vertex():
    csr = make_csr(3, [(0, 1, 1.0)])
    distances = bfs(csr, 0).values
    assert distances[2] == INFINITE_DISTANCE
    assert distances[0] == 0


def test_bfs_edge_invariant():
    distances = bfs(RING, 0).values
    for v in range(RING.number_of_rows):
        for u in RING.column_indices[RING.row_offsets[v] : RING.row_offsets[v + 1]]:
            assert distances[u] <= distances[v] + 1


def test_bfs_matches_unit_weight_sssp():
    hops = bfs(RING, 2).values
    weighted = sssp(RING, 2).values
    assert [float(h) for h in hops] == weighted


def test_bfs_bad_source():
    with pytest.raises(IndexError):
        bfs(RING, RING.number_of_rows)


def test_sssp_prefers_cheaper_path():
    csr = make_csr(3, [(0, 1, 4.0), (0, 2, 1.0), (2, 1, 1.0)])
    assert sssp(csr, 0).values == [0.0, 2.0, 1.0]


def test_sssp_edge_invariant_and_unreachable():
    csr = make_csr(
        5, [(0, 1, 2.5), (1, 2, 0.5), (0, 2, 4.0), (2, 3, 1.0), (3, 1, 0.25)]
    )
    run = sssp(csr, 0)
    distances = run.values
    assert distances[4] == INFINITE_WEIGHT
    for v in range(4):
        first, last = csr.row_offsets[v], csr.row_offsets[v + 1]
        for u, w in zip(csr.column_indices[first:last], csr.nonzero_values[first:last]):
            assert distances[u] <= distances[v] + w
    assert run.elapsed >= 0.0


def test_color_has_no_conflicts():
    colors = color(RING).values
    assert UNCOLORED not in colors
    assert count_color_conflicts(RING, colors) == 0


def test_color_is_deterministic():
    first = color(RING).values
    second = color(RING).values
    assert len(first) == RING.number_of_rows
    assert all(value >= 1 for value in first)
    assert first == second


def test_color_conflicts_counted_for_uniform_colors():
    uniform = [1] * RING.number_of_rows
    assert count_color_conflicts(RING, uniform) == RING.number_of_nonzeros


def test_color_conflicts_counted_for_uncolored():
    uncolored = [UNCOLORED] * RING.number_of_rows
    assert count_color_conflicts(RING, uncolored) == RING.number_of_nonzeros


def test_ppr_shape_and_mass():
    n_seeds = 3
    scores = ppr(RING, n_seeds, 0.15, 1e-4).values
    assert len(scores) == n_seeds
    for seed, p in enumerate(scores):
        assert len(p) == RING.number_of_rows
        assert all(value >= 0.0 for value in p)
        assert sum(p) <= 1.0 + 1e-9
        assert p[seed] == max(p)


def test_ppr_smaller_epsilon_pushes_more_mass():
    coarse = sum(ppr(RING, 1, 0.15, 1e-2).values[0])
    fine = sum(ppr(RING, 1, 0.15, 1e-5).values[0])
    assert fine >= coarse


def test_ppr_rejects_too_many_seeds():
    with pytest.raises(ValueError):
        ppr(RING, RING.number_of_rows + 1, 0.15, 1e-4)


def test_count_mismatches():
    assert count_mismatches([1, 2, 3], [1, 0, 3]) == 1
    assert count_mismatches([4, 5], [4, 5]) == 0


def test_count_close_mismatches_tolerance():
    expected = [1.0, 2.0, 3.0]
    nearly = [value + 1e-9 for value in expected]
    far = [value + 1.0 for value in expected]
    assert count_close_mismatches(nearly, expected) == 0
    assert count_close_mismatches(far, expected) == len(expected)


def test_mismatch_on_short_result():
    with pytest.raises(ValueError):
        count_mismatches([1], [1, 2])