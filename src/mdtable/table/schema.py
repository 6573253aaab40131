"""Pydantic model for the editable table.

The model_validator guarantees the structural invariants every edit must
preserve: at least one column and one data row, and every data row plus the
alignment list exactly as wide as the header.  Editing operations in
``mdtable.table.operations`` mutate a TableModel in place and check their
arguments before touching it, so a model that passed validation once stays
valid.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from mdtable import config
from mdtable.table.errors import OutOfRange

# Zero-width space a view may use to keep an empty cell focusable.  It is a
# rendering detail and never stored in a TableModel.
PLACEHOLDER = "\u200b"

# Row index that addresses the header instead of a data row
HEADER_ROW = -1


class Alignment(str, Enum):
    """Per-column Markdown alignment directive."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TableModel(BaseModel):
    """Headers, data rows, and per-column alignment of a single table."""

    headers: list[str]
    rows: list[list[str]]
    alignments: list[Alignment] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def default_alignments(cls, data):
        """Fill in ``left`` for every column when alignments are omitted."""
        if isinstance(data, dict) and not data.get("alignments") and data.get("headers"):
            data = dict(data)
            data["alignments"] = [Alignment.LEFT] * len(data["headers"])
        return data

    @model_validator(mode="after")
    def validate_shape(self) -> "TableModel":
        """Ensure C >= 1, R >= 1, and every row and the alignments have C entries."""
        n_cols = len(self.headers)
        if n_cols < 1:
            raise ValueError("A table needs at least one column")
        if len(self.rows) < 1:
            raise ValueError("A table needs at least one data row")
        if len(self.alignments) != n_cols:
            raise ValueError(f"Got {len(self.alignments)} alignments, expected {n_cols} (matching headers)")
        for i, row in enumerate(self.rows):
            if len(row) != n_cols:
                raise ValueError(f"Row {i} has {len(row)} cells, expected {n_cols} (matching headers)")
        return self

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def has_cell(self, row: int, col: int) -> bool:
        """True if (row, col) addresses a header cell (row == -1) or a data cell."""
        return HEADER_ROW <= row < self.row_count and 0 <= col < self.column_count

    def check_cell(self, row: int, col: int) -> None:
        """Raise OutOfRange unless (row, col) addresses an existing cell."""
        if not self.has_cell(row, col):
            raise OutOfRange(f"Cell ({row}, {col}) does not exist in a {self.row_count}x{self.column_count} table")

    def get_cell(self, row: int, col: int) -> str:
        """Return the text at (row, col); row -1 is the header."""
        self.check_cell(row, col)
        if row == HEADER_ROW:
            return self.headers[col]
        return self.rows[row][col]

    def snapshot(self) -> "TableModel":
        """Deep copy for handing to a view without sharing mutable lists."""
        return self.model_copy(deep=True)


def default_table(columns: int | None = None, rows: int | None = None) -> TableModel:
    """Build the empty, left-aligned table shown at startup."""
    n_cols = max(1, columns if columns is not None else config.DEFAULT_COLUMNS)
    n_rows = max(1, rows if rows is not None else config.DEFAULT_ROWS)
    return TableModel(
        headers=[""] * n_cols,
        rows=[[""] * n_cols for _ in range(n_rows)],
        alignments=[Alignment.LEFT] * n_cols,
    )
