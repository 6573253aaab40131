"""Editor session state: table, cursor, mode, and pending drag.

One EditorState is owned per editing session and passed explicitly into
every handler; nothing here is module-global.
"""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel

from mdtable.table.formatting import render_markdown
from mdtable.table.schema import TableModel, default_table


class Mode(str, Enum):
    """Normal: navigation and structural commands.  Insert: the cursor cell takes text."""

    NORMAL = "normal"
    INSERT = "insert"


@dataclass(frozen=True)
class Cursor:
    """Focused cell; ``row == -1`` is the header row."""

    row: int
    col: int


@dataclass
class EditorState:
    table: TableModel = field(default_factory=default_table)
    mode: Mode = Mode.NORMAL
    cursor: Cursor | None = None
    drag_source: Cursor | None = None

    @property
    def editing(self) -> Cursor | None:
        """The cell currently open for text entry, if any."""
        if self.mode is Mode.INSERT:
            return self.cursor
        return None

    def clear_cursor(self) -> None:
        """Drop focus and fall back to Normal mode."""
        self.cursor = None
        self.mode = Mode.NORMAL
        self.drag_source = None

    def reset(self, table: TableModel | None = None) -> None:
        """Start over with *table* (default: the startup table)."""
        self.table = table if table is not None else default_table()
        self.clear_cursor()

    def snapshot(self) -> "Snapshot":
        return Snapshot(
            headers=list(self.table.headers),
            rows=[list(row) for row in self.table.rows],
            alignments=[alignment.value for alignment in self.table.alignments],
            mode=self.mode.value,
            cursor=(self.cursor.row, self.cursor.col) if self.cursor else None,
            editing=(self.editing.row, self.editing.col) if self.editing else None,
            markdown=render_markdown(self.table),
        )


class Snapshot(BaseModel):
    """Read-only copy of the state handed to a view after every event."""

    headers: list[str]
    rows: list[list[str]]
    alignments: list[str]
    mode: str
    cursor: tuple[int, int] | None
    editing: tuple[int, int] | None
    markdown: str
