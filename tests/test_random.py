import pytest

from graphessentials.random import minstd, uniform_distribution


def test_first_draw():
    assert minstd(0) == 48271


def test_ten_thousandth_draw():
    assert minstd(9999) == 399268537


def test_uniform_distribution_matches_indices():
    values = uniform_distribution(3, 8)
    assert values == [minstd(i) for i in range(3, 8)]


def test_uniform_distribution_is_deterministic():
    values = uniform_distribution(0, 50)
    assert values[:2] == [48271, 182605794]
    assert len(values) == 50
    assert uniform_distribution(0, 50) == values


def test_values_in_generator_range():
    values = uniform_distribution(0, 200)
    assert all(1 <= v < 2147483647 for v in values)
    assert len(set(values)) == len(values)


def test_empty_range():
    assert uniform_distribution(5, 5) == []


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        minstd(-1)