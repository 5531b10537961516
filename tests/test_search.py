import pytest

from graphessentials.search import execute, lower_bound, rightmost, upper_bound

KEYS = [1, 2, 2, 2, 5, 7, 7, 9]


@pytest.mark.parametrize("key", [0, 1, 2, 3, 5, 7, 8, 9, 10])
def test_execute_is_upper_bound(key):
    pos = execute(KEYS, key, 0, len(KEYS))
    assert all(k <= key for k in KEYS[:pos])
    assert all(k > key for k in KEYS[pos:])


def test_execute_respects_range():
    pos = execute(KEYS, 2, 2, 5)
    assert 2 <= pos <= 5
    assert all(k <= 2 for k in KEYS[2:pos])
    assert all(k > 2 for k in KEYS[pos:5])


def test_execute_empty_range_returns_begin():
    assert execute(KEYS, 5, 4, 4) == 4


@pytest.mark.parametrize("key", [0, 1, 2, 6, 7, 9, 10])
def test_lower_bound_invariant(key):
    pos = lower_bound(KEYS, key, len(KEYS))
    assert all(k < key for k in KEYS[:pos])
    assert all(k >= key for k in KEYS[pos:])


@pytest.mark.parametrize("key", [0, 2, 6, 7, 10])
def test_upper_bound_invariant(key):
    pos = upper_bound(KEYS, key, len(KEYS))
    assert all(k <= key for k in KEYS[:pos])
    assert all(k > key for k in KEYS[pos:])


def test_lower_and_upper_bound_bracket_duplicates():
    lo = lower_bound(KEYS, 2, len(KEYS))
    hi = upper_bound(KEYS, 2, len(KEYS))
    assert hi - lo == KEYS.count(2)
    assert set(KEYS[lo:hi]) == {2}


@pytest.mark.parametrize("key", [2, 7, 9])
def test_rightmost_finds_last_occurrence(key):
    pos = rightmost(KEYS, key, len(KEYS))
    assert KEYS[pos] == key
    assert pos == len(KEYS) - 1 or KEYS[pos + 1] > key


def test_rightmost_below_all_keys():
    assert rightmost(KEYS, 0, len(KEYS)) == -1


def test_rightmost_respects_count():
    pos = rightmost(KEYS, 7, 5)
    assert pos == 4
    assert KEYS[pos] <= 7