"""Helpers for dataset file names."""

from __future__ import annotations

_MARKET_SUFFIX = ".mtx"
_MMIO_SUFFIX = ".mmio"
_CSR_SUFFIX = ".csr"


def extract_filename(path: str) -> str:
    """Return the part of ``path`` after the last slash."""
    return path.rpartition("/")[2]


def extract_dataset(filename: str) -> str:
    """Return ``filename`` without its last extension."""
    head, dot, _ = filename.rpartition(".")
    return head if dot else filename


def _require_length(filename: str, length: int) -> None:
    if len(filename) < length:
        raise ValueError(f"file name too short to carry an extension: {filename!r}")


def is_market(filename: str) -> bool:
    """True for Matrix Market files (``.mtx`` or ``.mmio``)."""
    _require_length(filename, len(_MARKET_SUFFIX))
    if filename.endswith(_MARKET_SUFFIX):
        return True
    _require_length(filename, len(_MMIO_SUFFIX))
    return filename.endswith(_MMIO_SUFFIX)


def is_binary_csr(filename: str) -> bool:
    """True for binary CSR files (``.csr``)."""
    _require_length(filename, len(_CSR_SUFFIX))
    return filename.endswith(_CSR_SUFFIX)