"""Parse a GitHub-flavored Markdown pipe table back into a TableModel.

Inverse of ``mdtable.table.formatting.render_markdown``: rendering a parsed
table reproduces the rendered text.  Used by the CLI to normalise table
files and to load a table into the editor.
"""

import logging
import re

from mdtable.table.errors import TableParseError
from mdtable.table.schema import Alignment, TableModel

logger = logging.getLogger(__name__)

# One separator cell: dashes with optional leading and trailing colons
SEPARATOR_CELL_RE = re.compile(r"^:?-+:?$")


def split_row(line: str) -> list[str]:
    """Split one table line into raw cell strings, honouring ``\\|`` escapes."""
    line = line.strip()
    if line.startswith("|"):
        line = line[1:]
    if line.endswith("|") and not line.endswith("\\|"):
        line = line[:-1]

    cells: list[str] = []
    current: list[str] = []
    for i, char in enumerate(line):
        if char == "|" and (i == 0 or line[i - 1] != "\\"):
            cells.append("".join(current))
            current = []
        else:
            current.append(char)
    cells.append("".join(current))
    return cells


def _unescape(cell: str) -> str:
    """Turn a rendered cell back into model text."""
    return cell.strip().replace("\\|", "|")


def _alignment_of(cell: str) -> Alignment:
    """Map a separator cell (``---``, ``:---:``, ``---:``, ``:---``) to its alignment."""
    cell = cell.strip()
    if cell.startswith(":") and cell.endswith(":"):
        return Alignment.CENTER
    if cell.endswith(":"):
        return Alignment.RIGHT
    return Alignment.LEFT


def parse_markdown(text: str) -> TableModel:
    """Read the first pipe table in *text*.

    Leading non-table lines are skipped; the table ends at the first line
    without a pipe.  Short rows are padded and long rows truncated to the
    header width.  A header-only table gets one empty data row.
    """
    lines = text.splitlines()

    # ── 1. Locate the header line ────────────────────────────────────────
    start = next((i for i, line in enumerate(lines) if "|" in line), None)
    if start is None or start + 1 >= len(lines):
        raise TableParseError("No Markdown table found (need a header line and a separator line)")

    headers = [_unescape(cell) for cell in split_row(lines[start])]
    separator = [cell.strip() for cell in split_row(lines[start + 1])]

    # ── 2. Validate the separator ────────────────────────────────────────
    if len(separator) != len(headers):
        raise TableParseError(f"Separator has {len(separator)} cells, expected {len(headers)} (matching header)")
    if not all(SEPARATOR_CELL_RE.match(cell) for cell in separator):
        raise TableParseError(f"Invalid separator line: {lines[start + 1].strip()!r}")
    alignments = [_alignment_of(cell) for cell in separator]

    # ── 3. Collect data rows until the table ends ────────────────────────
    n_cols = len(headers)
    rows: list[list[str]] = []
    for line in lines[start + 2 :]:
        if "|" not in line or not line.strip():
            break
        cells = [_unescape(cell) for cell in split_row(line)]
        rows.append((cells + [""] * n_cols)[:n_cols])

    if not rows:
        rows.append([""] * n_cols)

    logger.debug("Parsed %dx%d table", len(rows), n_cols)
    return TableModel(headers=headers, rows=rows, alignments=alignments)
