"""Coordinate (COO) and compressed sparse row (CSR) sparse-matrix formats."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from itertools import accumulate
from typing import BinaryIO, Union

#: struct codes used by the binary CSR layout (native byte order, standard sizes).
INDEX_FORMAT = "i"
OFFSET_FORMAT = "i"
VALUE_FORMAT = "f"

_PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Coo:
    """Sparse matrix as parallel lists of row, column and value per nonzero.

    When the lists are left empty they are allocated as zeros of length
    ``number_of_nonzeros``.
    """

    number_of_rows: int = 0
    number_of_columns: int = 0
    number_of_nonzeros: int = 0
    row_indices: list[int] = field(default_factory=list)
    column_indices: list[int] = field(default_factory=list)
    nonzero_values: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.number_of_nonzeros < 0:
            raise ValueError("number_of_nonzeros must be non-negative")
        if not (self.row_indices or self.column_indices or self.nonzero_values):
            nnz = self.number_of_nonzeros
            self.row_indices = [0] * nnz
            self.column_indices = [0] * nnz
            self.nonzero_values = [0.0] * nnz
        lengths = {
            len(self.row_indices),
            len(self.column_indices),
            len(self.nonzero_values),
        }
        if lengths != {self.number_of_nonzeros}:
            raise ValueError("COO lists must all hold number_of_nonzeros entries")


@dataclass
class Csr:
    """Sparse matrix as row offsets, column indices and nonzero values.

    When the lists are left empty and the matrix is not empty they are
    allocated as zeros: ``number_of_rows + 1`` offsets and
    ``number_of_nonzeros`` columns and values.
    """

    number_of_rows: int = 0
    number_of_columns: int = 0
    number_of_nonzeros: int = 0
    row_offsets: list[int] = field(default_factory=list)
    column_indices: list[int] = field(default_factory=list)
    nonzero_values: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.number_of_rows < 0 or self.number_of_nonzeros < 0:
            raise ValueError("sizes must be non-negative")
        empty = not (self.row_offsets or self.column_indices or self.nonzero_values)
        if empty and (self.number_of_rows or self.number_of_nonzeros):
            self.row_offsets = [0] * (self.number_of_rows + 1)
            self.column_indices = [0] * self.number_of_nonzeros
            self.nonzero_values = [0.0] * self.number_of_nonzeros

    @classmethod
    def from_coo(cls, coo: Coo) -> "Csr":
        """Build a CSR matrix from a COO matrix, keeping entry order within rows.

        Duplicate entries are kept.
        """
        rows = coo.number_of_rows
        nnz = coo.number_of_nonzeros

        counts = [0] * rows
        for row in coo.row_indices:
            if not 0 <= row < rows:
                raise IndexError(f"row index {row} outside 0..{rows - 1}")
            counts[row] += 1

        row_offsets = list(accumulate(counts, initial=0))
        row_offsets[rows] = nnz

        cursor = row_offsets[:rows]
        column_indices = [0] * nnz
        nonzero_values: list[float] = [0.0] * nnz
        for row, column, value in zip(
            coo.row_indices, coo.column_indices, coo.nonzero_values
        ):
            destination = cursor[row]
            column_indices[destination] = column
            nonzero_values[destination] = value
            cursor[row] += 1

        return cls(
            number_of_rows=rows,
            number_of_columns=coo.number_of_columns,
            number_of_nonzeros=nnz,
            row_offsets=row_offsets,
            column_indices=column_indices,
            nonzero_values=nonzero_values,
        )

    @classmethod
    def read_binary(cls, filename: _PathLike) -> "Csr":
        """Read a matrix written by :meth:`write_binary`."""
        with open(filename, "rb") as stream:
            rows, columns, nnz = _read(
                stream, INDEX_FORMAT * 2 + OFFSET_FORMAT, 1, "header"
            )
            if rows < 0 or nnz < 0:
                raise ValueError("binary CSR header holds negative sizes")
            row_offsets = _read(stream, OFFSET_FORMAT, rows + 1, "row offsets")
            column_indices = _read(stream, INDEX_FORMAT, nnz, "column indices")
            nonzero_values = _read(stream, VALUE_FORMAT, nnz, "nonzero values")
        return cls(
            number_of_rows=rows,
            number_of_columns=columns,
            number_of_nonzeros=nnz,
            row_offsets=row_offsets,
            column_indices=column_indices,
            nonzero_values=nonzero_values,
        )

    def write_binary(self, filename: _PathLike) -> None:
        """Write the sizes followed by offsets, columns and values."""
        rows, nnz = self.number_of_rows, self.number_of_nonzeros
        if len(self.row_offsets) != rows + 1:
            raise ValueError("row_offsets must hold number_of_rows + 1 entries")
        if len(self.column_indices) != nnz or len(self.nonzero_values) != nnz:
            raise ValueError("column and value lists must hold number_of_nonzeros entries")
        with open(filename, "wb") as stream:
            stream.write(
                struct.pack(
                    "=" + INDEX_FORMAT * 2 + OFFSET_FORMAT,
                    rows,
                    self.number_of_columns,
                    nnz,
                )
            )
            stream.write(struct.pack(f"={rows + 1}{OFFSET_FORMAT}", *self.row_offsets))
            stream.write(struct.pack(f"={nnz}{INDEX_FORMAT}", *self.column_indices))
            stream.write(struct.pack(f"={nnz}{VALUE_FORMAT}", *self.nonzero_values))


def _read(stream: BinaryIO, code: str, count: int, what: str) -> list:
    layout = f"={count}{code}" if len(code) == 1 else "=" + code
    size = struct.calcsize(layout)
    data = stream.read(size)
    if len(data) < size:
        raise ValueError(f"binary CSR file truncated while reading {what}")
    return list(struct.unpack(layout, data))