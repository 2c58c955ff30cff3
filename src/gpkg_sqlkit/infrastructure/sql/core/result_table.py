"""
Tabular query result accessor.

A ResultTable wraps the flattened, row-major text buffer produced by a
tabular query: the first ``column_count`` cells are the column names,
followed by ``row_count`` rows of ``column_count`` cells each. Cells are
``Optional[str]``; ``None`` is the engine's NULL.

Lifecycle:
    UNINITIALIZED -> INITIALIZED -> POPULATED -> RELEASED

Construction initializes the table. ``populate`` is called once by the
engine wrapper. ``release`` drops the buffer; using the table context
manager releases it on every exit path.

Example:
    >>> table = ResultTable()
    >>> table.populate(2, 2, ["col1", "col2", "1", "x", "2", "y"])
    >>> table.get_cell(1, 1)
    'y'
    >>> table.get_cell_as_integer(0, 1)
    2
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from .status import SQLStatus

CellValue = Optional[str]

_WHITESPACE = " \t\n\v\f\r"


class ResultTableState(Enum):
    """Ownership state of a result buffer."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    POPULATED = "populated"
    RELEASED = "released"


def parse_integer_prefix(text: CellValue) -> int:
    """
    Parse the leading base-10 integer of a cell value.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Returns 0 for None or when no digit follows.

    Examples:
        >>> parse_integer_prefix("  42abc")
        42
        >>> parse_integer_prefix("-7")
        -7
        >>> parse_integer_prefix("abc")
        0
    """
    if text is None:
        return 0

    length = len(text)
    i = 0
    while i < length and text[i] in _WHITESPACE:
        i += 1

    negative = False
    if i < length and text[i] in "+-":
        negative = text[i] == "-"
        i += 1

    start = i
    while i < length and "0" <= text[i] <= "9":
        i += 1

    if i == start:
        return 0
    value = int(text[start:i])
    return -value if negative else value


class ResultTable:
    """
    Read-only view over a flattened query result.

    Attributes:
        column_count: Number of columns
        row_count: Number of data rows (header row excluded)
        cells: Flattened header + data cells
        status: Engine status of the query that populated the table
        error: Engine error message, None on success
        state: Current ResultTableState
    """

    def __init__(self) -> None:
        self.state = ResultTableState.UNINITIALIZED
        self.column_count = 0
        self.row_count = 0
        self.cells: List[CellValue] = []
        self.status = SQLStatus.OK
        self.error: Optional[str] = None
        self.state = ResultTableState.INITIALIZED

    def __enter__(self) -> "ResultTable":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self.state is not ResultTableState.RELEASED:
            self.release()

    def __repr__(self) -> str:
        return (
            f"ResultTable(columns={self.column_count}, rows={self.row_count}, "
            f"status={self.status.name}, state={self.state.value})"
        )

    def populate(
        self,
        column_count: int,
        row_count: int,
        cells: Sequence[CellValue],
        status: SQLStatus = SQLStatus.OK,
        error: Optional[str] = None,
    ) -> None:
        """
        Fill the table from an engine response.

        Args:
            column_count: Number of columns
            row_count: Number of data rows
            cells: Flattened header + data cells
            status: Engine status
            error: Engine error message

        Raises:
            ValueError: If a successful response violates the buffer layout
        """
        assert self.state is ResultTableState.INITIALIZED, (
            f"populate() requires an initialized table, state is {self.state.value}"
        )
        if column_count < 0 or row_count < 0:
            raise ValueError(
                f"Counts must be non-negative, got columns={column_count}, rows={row_count}"
            )
        expected = column_count * (row_count + 1)
        if status is SQLStatus.OK and len(cells) != expected:
            raise ValueError(
                f"Expected {expected} cells for {column_count} columns and "
                f"{row_count} rows, got {len(cells)}"
            )

        self.column_count = column_count
        self.row_count = row_count
        self.cells = list(cells)
        self.status = status
        self.error = error
        self.state = ResultTableState.POPULATED

    def release(self) -> None:
        """Drop the cell buffer and error message."""
        assert self.state in (
            ResultTableState.INITIALIZED,
            ResultTableState.POPULATED,
        ), f"release() called on a {self.state.value} table"
        self.cells = []
        self.error = None
        self.state = ResultTableState.RELEASED

    @property
    def ok(self) -> bool:
        return self.status is SQLStatus.OK

    @property
    def failed(self) -> bool:
        return self.status is not SQLStatus.OK

    @property
    def column_names(self) -> List[CellValue]:
        self._check_populated()
        return self.cells[: self.column_count]

    def get_cell(self, column: int, row: int) -> CellValue:
        """
        Return the cell at a zero-based column and row.

        Indices outside ``[0, column_count)`` / ``[0, row_count)`` are a
        programmer error and fail an assertion.
        """
        self._check_populated()
        assert 0 <= column < self.column_count, (
            f"column {column} out of range [0, {self.column_count})"
        )
        assert 0 <= row < self.row_count, f"row {row} out of range [0, {self.row_count})"
        return self.cells[self.column_count + row * self.column_count + column]

    def get_cell_as_integer(self, column: int, row: int) -> int:
        """Return the cell parsed as an integer, 0 for NULL or non-numeric text."""
        return parse_integer_prefix(self.get_cell(column, row))

    def rows(self) -> Iterator[Tuple[CellValue, ...]]:
        """Yield each data row as a tuple of cells."""
        self._check_populated()
        width = self.column_count
        for row in range(self.row_count):
            start = width + row * width
            yield tuple(self.cells[start : start + width])

    def _check_populated(self) -> None:
        assert self.state is ResultTableState.POPULATED, (
            f"table must be populated, state is {self.state.value}"
        )
