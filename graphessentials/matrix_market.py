"""Reading Matrix Market (``.mtx``) files into coordinate format."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Iterator, Optional, TextIO, Union

from graphessentials.filepath import extract_dataset, extract_filename
from graphessentials.formats import Coo

MAX_LINE_LENGTH = 1025
MAX_TOKEN_LENGTH = 64
BANNER = "%%MatrixMarket"

COULD_NOT_READ_FILE = 11
PREMATURE_EOF = 12
NOT_MTX = 13
NO_HEADER = 14
UNSUPPORTED_TYPE = 15
LINE_TOO_LONG = 16
COULD_NOT_WRITE_FILE = 17


class MatrixMarketError(Exception):
    """A Matrix Market file could not be read; ``code`` tells why."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code


class MatrixMarketFormat(Enum):
    """Sparse coordinate or dense array layout."""

    COORDINATE = "coordinate"
    ARRAY = "array"


class MatrixMarketData(Enum):
    """Type of the stored values."""

    REAL = "real"
    COMPLEX = "complex"
    PATTERN = "pattern"
    INTEGER = "integer"


class MatrixMarketScheme(Enum):
    """Symmetry of the stored matrix."""

    GENERAL = "general"
    HERMITIAN = "hermitian"
    SYMMETRIC = "symmetric"
    SKEW = "skew-symmetric"


_STORAGE_CODES = {"coordinate": "C", "array": "A"}
_DATA_CODES = {"real": "R", "complex": "C", "pattern": "P", "integer": "I"}
_SCHEME_CODES = {"general": "G", "symmetric": "S", "hermitian": "H", "skew-symmetric": "K"}


def _invert(mapping: dict[str, str]) -> dict[str, str]:
    return {code: name for name, code in mapping.items()}


@dataclass(frozen=True)
class TypeCode:
    """Four-letter type code: object, storage, data type and scheme."""

    object: str = " "
    storage: str = " "
    data: str = " "
    scheme: str = "G"

    @property
    def is_matrix(self) -> bool:
        return self.object == "M"

    @property
    def is_coordinate(self) -> bool:
        return self.storage == "C"

    @property
    def is_array(self) -> bool:
        return self.storage == "A"

    @property
    def is_complex(self) -> bool:
        return self.data == "C"

    @property
    def is_real(self) -> bool:
        return self.data == "R"

    @property
    def is_pattern(self) -> bool:
        return self.data == "P"

    @property
    def is_integer(self) -> bool:
        return self.data == "I"

    @property
    def is_symmetric(self) -> bool:
        return self.scheme == "S"

    @property
    def is_general(self) -> bool:
        return self.scheme == "G"

    @property
    def is_skew(self) -> bool:
        return self.scheme == "K"

    @property
    def is_hermitian(self) -> bool:
        return self.scheme == "H"

    @property
    def is_valid(self) -> bool:
        """False for combinations the format does not allow."""
        if not self.is_matrix:
            return False
        if self.is_array and self.is_pattern:
            return False
        if self.is_real and self.is_hermitian:
            return False
        if self.is_pattern and (self.is_hermitian or self.is_skew):
            return False
        return True

    def __str__(self) -> str:
        try:
            parts = [
                {"M": "matrix"}[self.object],
                _invert(_STORAGE_CODES)[self.storage],
                _invert(_DATA_CODES)[self.data],
                _invert(_SCHEME_CODES)[self.scheme],
            ]
        except KeyError as exc:
            raise ValueError(f"incomplete type code: {self!r}") from exc
        return " ".join(parts)


def read_banner(stream: TextIO) -> TypeCode:
    """Parse the ``%%MatrixMarket`` banner line of ``stream``."""
    line = stream.readline()
    tokens = line.split()
    if len(tokens) < 5:
        raise MatrixMarketError(PREMATURE_EOF, "incomplete Matrix Market banner")
    banner, obj, storage, data, scheme = (token.lower() for token in tokens[:5])
    if not tokens[0].startswith(BANNER):
        raise MatrixMarketError(NO_HEADER, "missing Matrix Market banner")
    if obj != "matrix":
        raise MatrixMarketError(UNSUPPORTED_TYPE, f"unsupported object: {obj}")
    try:
        return TypeCode(
            "M",
            _STORAGE_CODES[storage],
            _DATA_CODES[data],
            _SCHEME_CODES[scheme],
        )
    except KeyError as exc:
        raise MatrixMarketError(
            UNSUPPORTED_TYPE, f"unsupported type: {exc.args[0]}"
        ) from exc


def read_size(stream: TextIO) -> tuple[int, int, int]:
    """Skip comments and read the rows, columns and nonzeros line."""
    numbers: list[int] = []
    while len(numbers) < 3:
        line = stream.readline()
        if not line:
            raise MatrixMarketError(PREMATURE_EOF, "missing size line")
        if not numbers and line.lstrip().startswith("%"):
            continue
        for token in line.split():
            try:
                numbers.append(int(token))
            except ValueError as exc:
                raise MatrixMarketError(
                    PREMATURE_EOF, f"invalid size entry: {token!r}"
                ) from exc
    if len(numbers) > 3:
        raise MatrixMarketError(PREMATURE_EOF, "size line holds extra entries")
    rows, columns, nonzeros = numbers
    return rows, columns, nonzeros


def _take(tokens: Iterator[str], count: int) -> list[str]:
    taken = list(islice(tokens, count))
    if len(taken) < count:
        raise MatrixMarketError(PREMATURE_EOF, "file ended before all entries were read")
    return taken


def _index(token: str) -> int:
    try:
        return int(token) - 1
    except ValueError as exc:
        raise MatrixMarketError(NOT_MTX, f"invalid index: {token!r}") from exc


def _value(token: str) -> float:
    try:
        return float(token)
    except ValueError as exc:
        raise MatrixMarketError(NOT_MTX, f"invalid value: {token!r}") from exc


@dataclass
class MatrixMarket:
    """Loader that records what it learnt about the last file it read."""

    filename: str = ""
    dataset: str = ""
    code: Optional[TypeCode] = None
    format: Optional[MatrixMarketFormat] = None
    data: Optional[MatrixMarketData] = None
    scheme: Optional[MatrixMarketScheme] = None

    def load(self, filename: Union[str, "os.PathLike[str]"]) -> Coo:
        """Read a coordinate ``.mtx`` file into 0-based COO form.

        Symmetric files have each off-diagonal entry mirrored.
        """
        self.filename = os.fspath(filename)
        self.dataset = extract_dataset(extract_filename(self.filename))

        try:
            stream = open(self.filename, "r", encoding="utf-8")
        except OSError as exc:
            raise MatrixMarketError(
                COULD_NOT_READ_FILE, f"file could not be opened: {self.filename}"
            ) from exc

        with stream:
            code = read_banner(stream)
            self.code = code
            rows, columns, nonzeros = read_size(stream)

            self.format = (
                MatrixMarketFormat.COORDINATE
                if code.is_coordinate
                else MatrixMarketFormat.ARRAY
            )

            tokens = iter(stream.read().split())
            if code.is_pattern:
                self.data = MatrixMarketData.PATTERN
                width = 2
            elif code.is_real or code.is_integer:
                self.data = (
                    MatrixMarketData.REAL if code.is_real else MatrixMarketData.INTEGER
                )
                width = 3
            else:
                raise MatrixMarketError(
                    UNSUPPORTED_TYPE, "unrecognized matrix market data type"
                )

            row_indices: list[int] = []
            column_indices: list[int] = []
            values: list[float] = []
            for _ in range(nonzeros):
                entry = _take(tokens, width)
                row_indices.append(_index(entry[0]))
                column_indices.append(_index(entry[1]))
                values.append(1.0 if width == 2 else _value(entry[2]))

        self.scheme = {
            "S": MatrixMarketScheme.SYMMETRIC,
            "H": MatrixMarketScheme.HERMITIAN,
            "K": MatrixMarketScheme.SKEW,
        }.get(code.scheme, MatrixMarketScheme.GENERAL)

        if code.is_symmetric:
            row_indices, column_indices, values = _mirror(
                row_indices, column_indices, values
            )

        return Coo(
            number_of_rows=rows,
            number_of_columns=columns,
            number_of_nonzeros=len(row_indices),
            row_indices=row_indices,
            column_indices=column_indices,
            nonzero_values=values,
        )


def _mirror(
    rows: list[int], columns: list[int], values: list[float]
) -> tuple[list[int], list[int], list[float]]:
    new_rows: list[int] = []
    new_columns: list[int] = []
    new_values: list[float] = []
    for row, column, value in zip(rows, columns, values):
        new_rows.append(row)
        new_columns.append(column)
        new_values.append(value)
        if row != column:
            new_rows.append(column)
            new_columns.append(row)
            new_values.append(value)
    return new_rows, new_columns, new_values