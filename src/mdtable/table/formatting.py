"""Markdown rendering of a TableModel.

Produces a GitHub-flavored pipe table: header line, separator line carrying
the column alignments, then one line per data row.  Rendering is pure and
deterministic, and every emitted cell is non-empty so column boundaries
stay parseable.
"""

import re

from mdtable.table.schema import PLACEHOLDER, Alignment, TableModel

# Separator cell per alignment tag
SEPARATORS: dict[Alignment, str] = {
    Alignment.LEFT: "---",
    Alignment.CENTER: ":---:",
    Alignment.RIGHT: "---:",
}

# A line break (and the spaces around it) inside a cell
_LINE_BREAK_RE = re.compile(r"\s*[\r\n]+\s*")


def clean_cell(text: str) -> str:
    """Prepare one cell's text for a table line.

    Drops the placeholder character, trims, folds line breaks into a space,
    escapes ``|`` as ``\\|``, and returns a single space for empty text.
    """
    cleaned = text.replace(PLACEHOLDER, "").strip()
    cleaned = _LINE_BREAK_RE.sub(" ", cleaned)
    cleaned = cleaned.replace("|", "\\|")
    return cleaned or " "


def _render_line(cells: list[str]) -> str:
    """Join already-cleaned cells into one ``| a | b |`` line."""
    return "| " + " | ".join(cells) + " |\n"


def render_markdown(table: TableModel) -> str:
    """Convert a TableModel into a Markdown table string (trailing newline included)."""
    if table.column_count == 0:
        return ""

    # Header row + separator
    markdown = _render_line([clean_cell(header) for header in table.headers])
    markdown += _render_line([SEPARATORS.get(alignment, "---") for alignment in table.alignments])

    # Data rows
    for row in table.rows:
        markdown += _render_line([clean_cell(cell) for cell in row])

    return markdown
