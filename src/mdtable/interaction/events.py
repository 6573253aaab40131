"""Typed input events reported by a view.

A view turns every user gesture (key press, click, text input, drag, button
press) into one Event and hands it to ``mdtable.interaction.machine.dispatch``.
The same model is the request schema of the web API.
"""

from enum import Enum

from pydantic import BaseModel


class EventKind(str, Enum):
    """Every gesture the state machine understands."""

    KEY = "key"
    CLICK = "click"
    INPUT = "input"
    BLUR = "blur"
    DRAG_START = "drag_start"
    DROP = "drop"
    DRAG_END = "drag_end"
    ADD_ROW = "add_row"
    ADD_COLUMN = "add_column"
    REMOVE_ROW = "remove_row"
    REMOVE_COLUMN = "remove_column"
    CLEAR = "clear"
    ALIGN = "align"
    COPY = "copy"
    COPY_RESULT = "copy_result"


class Event(BaseModel):
    """One user gesture.

    ``row``/``col`` address a cell (row -1 is the header), ``text`` carries
    the cell's new content for input/blur or the alignment for ``align``,
    ``key`` is a DOM-style key name (``ArrowLeft``, ``Tab``, ``Escape``,
    ``Enter``, ``c``...).  ``confirm`` acknowledges a destructive command and
    ``ok`` reports the outcome of a client-side clipboard write.
    """

    kind: EventKind
    row: int | None = None
    col: int | None = None
    text: str | None = None
    key: str | None = None
    shift: bool = False
    ctrl: bool = False
    meta: bool = False
    confirm: bool = False
    ok: bool | None = None

    @property
    def coordinate(self) -> tuple[int, int] | None:
        if self.row is None or self.col is None:
            return None
        return self.row, self.col
