"""Editing operations on a TableModel.

Every operation mutates the table in place and returns it.  All argument
checks happen before the first mutation, so an operation that raises leaves
the table exactly as it was.  Row index -1 addresses the header throughout.
"""

import logging

from mdtable.table.errors import IncompatibleSwap, InvalidAlignment, MinimumExceeded, OutOfRange
from mdtable.table.schema import HEADER_ROW, PLACEHOLDER, Alignment, TableModel

logger = logging.getLogger(__name__)


# ─── Columns ─────────────────────────────────────────────────────────────────


def add_column(table: TableModel, after_index: int) -> TableModel:
    """Insert an empty, left-aligned column at ``after_index + 1`` (-1 prepends)."""
    if not -1 <= after_index < table.column_count:
        raise OutOfRange(f"Cannot insert a column after column {after_index}")
    position = after_index + 1
    table.headers.insert(position, "")
    table.alignments.insert(position, Alignment.LEFT)
    for row in table.rows:
        row.insert(position, "")
    logger.debug("Added column at %d (now %d columns)", position, table.column_count)
    return table


def remove_column(table: TableModel, index: int) -> TableModel:
    """Delete the header, alignment, and every cell of column *index*."""
    if table.column_count == 1:
        raise MinimumExceeded("At least one column is required")
    if not 0 <= index < table.column_count:
        raise OutOfRange(f"Column {index} does not exist")
    del table.headers[index]
    del table.alignments[index]
    for row in table.rows:
        del row[index]
    logger.debug("Removed column %d (now %d columns)", index, table.column_count)
    return table


# ─── Rows ────────────────────────────────────────────────────────────────────


def add_row(table: TableModel, after_index: int) -> TableModel:
    """Insert a row of empty cells at ``after_index + 1``.

    The header is not a data row, so ``after_index == -1`` is rejected.
    """
    if not 0 <= after_index < table.row_count:
        raise OutOfRange(f"Cannot insert a row after row {after_index}")
    table.rows.insert(after_index + 1, [""] * table.column_count)
    logger.debug("Added row at %d (now %d rows)", after_index + 1, table.row_count)
    return table


def remove_row(table: TableModel, index: int) -> TableModel:
    """Delete data row *index*."""
    if table.row_count == 1:
        raise MinimumExceeded("At least one row is required")
    if not 0 <= index < table.row_count:
        raise OutOfRange(f"Row {index} does not exist")
    del table.rows[index]
    logger.debug("Removed row %d (now %d rows)", index, table.row_count)
    return table


# ─── Cells ───────────────────────────────────────────────────────────────────


def clear_table(table: TableModel) -> TableModel:
    """Empty every header and data cell; shape and alignments are kept."""
    table.headers[:] = [""] * table.column_count
    for row in table.rows:
        row[:] = [""] * table.column_count
    logger.debug("Cleared %dx%d table", table.row_count, table.column_count)
    return table


def set_cell_value(table: TableModel, row: int, col: int, text: str) -> TableModel:
    """Write *text* into the header (row -1) or a data cell.

    Any text is accepted; escaping happens at serialization.  The view's
    placeholder character is dropped so it never ends up in the model.
    """
    table.check_cell(row, col)
    text = text.replace(PLACEHOLDER, "")
    if row == HEADER_ROW:
        table.headers[col] = text
    else:
        table.rows[row][col] = text
    return table


def set_alignment(table: TableModel, col: int, alignment: Alignment | str) -> TableModel:
    """Overwrite the alignment of column *col*."""
    if not 0 <= col < table.column_count:
        raise OutOfRange(f"Column {col} does not exist")
    try:
        alignment = Alignment(alignment)
    except ValueError as exc:
        raise InvalidAlignment(f"Unknown alignment {alignment!r}; use left, center, or right") from exc
    table.alignments[col] = alignment
    logger.debug("Column %d aligned %s", col, alignment.value)
    return table


def swap_cells(table: TableModel, r1: int, c1: int, r2: int, c2: int) -> TableModel:
    """Exchange the text of two cells.

    Header cells only swap with header cells and data cells only with data
    cells.  Swapping a cell with itself does nothing.
    """
    table.check_cell(r1, c1)
    table.check_cell(r2, c2)
    if (r1 == HEADER_ROW) != (r2 == HEADER_ROW):
        raise IncompatibleSwap("Header cells can only be swapped with other header cells")
    if (r1, c1) == (r2, c2):
        return table
    first = table.get_cell(r1, c1)
    second = table.get_cell(r2, c2)
    set_cell_value(table, r1, c1, second)
    set_cell_value(table, r2, c2, first)
    logger.debug("Swapped (%d, %d) with (%d, %d)", r1, c1, r2, c2)
    return table
