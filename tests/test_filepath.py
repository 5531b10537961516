import pytest

from graphessentials.filepath import (
    extract_dataset,
    extract_filename,
    is_binary_csr,
    is_market,
)


def test_extract_filename_takes_last_component():
    assert extract_filename("data/graphs/road.mtx") == "road.mtx"


def test_extract_filename_without_slash_is_unchanged():
    assert extract_filename("road.mtx") == "road.mtx"


def test_extract_dataset_drops_last_extension():
    assert extract_dataset("road.usa.mtx") == "road.usa"


def test_extract_dataset_without_dot_is_unchanged():
    assert extract_dataset("road") == "road"


def test_filename_then_dataset():
    assert extract_dataset(extract_filename("a/b/chesapeake.mtx")) == "chesapeake"


@pytest.mark.parametrize(
    "name, expected",
    [("g.mtx", True), ("g.mmio", True), ("g.csr", False), ("graph.txt", False)],
)
def test_is_market(name, expected):
    assert is_market(name) is expected


@pytest.mark.parametrize("name, expected", [("g.csr", True), ("g.mtx", False)])
def test_is_binary_csr(name, expected):
    assert is_binary_csr(name) is expected


@pytest.mark.parametrize("name", ["ab", "x.mt"])
def test_is_market_rejects_short_names(name):
    with pytest.raises(ValueError):
        is_market(name)


def test_is_binary_csr_rejects_short_names():
    with pytest.raises(ValueError):
        is_binary_csr("csr")