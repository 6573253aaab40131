"""Normal/Insert state machine over an EditorState.

``dispatch`` is the single entry point: it routes one Event to its handler,
recovers any TableEditError as a user-facing warning, and re-renders the
Markdown only after the event has been fully applied.

Normal mode
  arrows, Tab / Shift+Tab  move the cursor one cell (clamped, no wraparound)
  Enter, i, F2             open the cursor cell for editing (Insert mode)
  Ctrl/Cmd+C               copy the Markdown
  drag and drop            swap two cells
Insert mode
  Escape                   back to Normal
  input / blur             write the cell text into the model
Both modes
  click                    move the cursor (the clicked cell stays editable in Insert mode)
  structural buttons       add/remove row or column, clear, align, copy
"""

import logging
from dataclasses import dataclass
from typing import Callable, Protocol

from mdtable.clipboard import Notification, copied_notification, copy_failed_notification
from mdtable.interaction.events import Event, EventKind
from mdtable.interaction.state import Cursor, EditorState, Mode
from mdtable.table import operations
from mdtable.table.errors import ClipboardUnavailable, OutOfRange, TableEditError
from mdtable.table.formatting import render_markdown
from mdtable.table.schema import HEADER_ROW

logger = logging.getLogger(__name__)

CLEAR_PROMPT = "Clear the table contents?"

# Keys that open the cursor cell for editing
EDIT_KEYS = {"Enter", "i", "F2"}

# Key -> (row step, col step)
MOVES: dict[str, tuple[int, int]] = {
    "ArrowLeft": (0, -1),
    "ArrowRight": (0, 1),
    "ArrowUp": (-1, 0),
    "ArrowDown": (1, 0),
}


class ClipboardLike(Protocol):  # pylint: disable=too-few-public-methods
    def write_text(self, text: str) -> Notification: ...


@dataclass
class DispatchResult:
    """Outcome of one event.

    ``changed`` is True when the table text or shape changed.  ``warning`` is
    the message of a rejected operation.  ``copy_requested`` asks a view
    without a server-side clipboard to copy ``markdown`` itself.  ``confirm``
    is a question the view must ask before resending the event with
    ``confirm=True``.
    """

    changed: bool = False
    markdown: str = ""
    warning: str | None = None
    notification: Notification | None = None
    copy_requested: bool = False
    confirm: str | None = None


Handler = Callable[[EditorState, Event, ClipboardLike | None], DispatchResult]


# ─── Helpers ─────────────────────────────────────────────────────────────────


def _require_coordinate(state: EditorState, event: Event) -> Cursor:
    """Return the event's cell, checking it exists in the table."""
    if event.coordinate is None:
        raise OutOfRange(f"A {event.kind.value} event needs a row and a column")
    row, col = event.coordinate
    state.table.check_cell(row, col)
    return Cursor(row, col)


def _target_row(state: EditorState, event: Event) -> int:
    """Row a row command acts on: the event's, the cursor's, else the last row.

    An explicit event row is passed through unchanged, so row -1 is rejected
    by the operation.  A cursor on the header falls back to the last row.
    """
    if event.row is not None:
        return event.row
    if state.cursor is not None and state.cursor.row != HEADER_ROW:
        return state.cursor.row
    return state.table.row_count - 1


def _target_column(state: EditorState, event: Event) -> int:
    """Column a column command acts on: the event's, the cursor's, else the last column."""
    if event.col is not None:
        return event.col
    if state.cursor is not None:
        return state.cursor.col
    return state.table.column_count - 1


def move_cursor(state: EditorState, d_row: int, d_col: int) -> bool:
    """Step the cursor; a step that would leave the table is ignored.

    With no cursor the first header cell gets focus.  Returns True if the
    cursor changed.
    """
    if state.cursor is None:
        state.cursor = Cursor(HEADER_ROW, 0)
        return True
    row = state.cursor.row + d_row
    col = state.cursor.col + d_col
    if not state.table.has_cell(row, col):
        return False
    state.cursor = Cursor(row, col)
    return True


# ─── Handlers ────────────────────────────────────────────────────────────────


def _copy(state: EditorState, clipboard: ClipboardLike | None) -> DispatchResult:
    """Hand the Markdown to the clipboard, or ask the view to copy it."""
    if clipboard is None:
        return DispatchResult(copy_requested=True)
    markdown = render_markdown(state.table)
    try:
        notification = clipboard.write_text(markdown)
    except ClipboardUnavailable as exc:
        logger.error("Copy failed: %s", exc)
        return DispatchResult(warning=str(exc), notification=copy_failed_notification())
    return DispatchResult(notification=notification)


def _on_key(state: EditorState, event: Event, clipboard: ClipboardLike | None) -> DispatchResult:
    key = event.key or ""

    if state.mode is Mode.INSERT:
        if key == "Escape":
            state.mode = Mode.NORMAL
            logger.debug("Insert -> Normal at %s", state.cursor)
        # Everything else belongs to the text widget
        return DispatchResult()

    if (event.ctrl or event.meta) and key.lower() == "c":
        return _copy(state, clipboard)

    if key == "Tab":
        move_cursor(state, 0, -1 if event.shift else 1)
    elif key in MOVES:
        move_cursor(state, *MOVES[key])
    elif key in EDIT_KEYS and state.cursor is not None:
        state.mode = Mode.INSERT
        state.drag_source = None
        logger.debug("Normal -> Insert at %s", state.cursor)
    return DispatchResult()


def _on_click(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    state.cursor = _require_coordinate(state, event)
    return DispatchResult()


def _on_text(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    """Commit cell text typed in Insert mode (every keystroke and on blur)."""
    if state.mode is not Mode.INSERT:
        logger.debug("Ignoring %s outside Insert mode", event.kind.value)
        return DispatchResult()
    cell = _require_coordinate(state, event)
    if event.kind is EventKind.INPUT and cell != state.cursor:
        logger.debug("Ignoring input for %s; cursor is at %s", cell, state.cursor)
        return DispatchResult()
    before = state.table.get_cell(cell.row, cell.col)
    operations.set_cell_value(state.table, cell.row, cell.col, event.text or "")
    return DispatchResult(changed=state.table.get_cell(cell.row, cell.col) != before)


def _on_drag_start(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    if state.mode is Mode.INSERT:
        logger.debug("Drag refused while editing %s", state.cursor)
        return DispatchResult()
    state.drag_source = _require_coordinate(state, event)
    return DispatchResult()


def _on_drop(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    source, state.drag_source = state.drag_source, None
    if source is None:
        return DispatchResult()
    target = _require_coordinate(state, event)
    if target == source:
        return DispatchResult()
    operations.swap_cells(state.table, source.row, source.col, target.row, target.col)
    return DispatchResult(changed=True)


def _on_drag_end(state: EditorState, _event: Event, _clipboard) -> DispatchResult:
    state.drag_source = None
    return DispatchResult()


def _on_add_row(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    after = _target_row(state, event)
    operations.add_row(state.table, after)
    state.drag_source = None
    if state.cursor is not None and state.cursor.row > after:
        state.cursor = Cursor(state.cursor.row + 1, state.cursor.col)
    return DispatchResult(changed=True)


def _on_add_column(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    after = _target_column(state, event)
    operations.add_column(state.table, after)
    state.drag_source = None
    if state.cursor is not None and state.cursor.col > after:
        state.cursor = Cursor(state.cursor.row, state.cursor.col + 1)
    return DispatchResult(changed=True)


def _on_remove_row(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    index = _target_row(state, event)
    operations.remove_row(state.table, index)
    state.drag_source = None
    cursor = state.cursor
    if cursor is not None:
        if cursor.row == index:
            state.clear_cursor()
        elif cursor.row > index:
            state.cursor = Cursor(cursor.row - 1, cursor.col)
    return DispatchResult(changed=True)


def _on_remove_column(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    index = _target_column(state, event)
    operations.remove_column(state.table, index)
    state.drag_source = None
    cursor = state.cursor
    if cursor is not None:
        if cursor.col == index:
            state.clear_cursor()
        elif cursor.col > index:
            state.cursor = Cursor(cursor.row, cursor.col - 1)
    return DispatchResult(changed=True)


def _on_clear(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    if not event.confirm:
        return DispatchResult(confirm=CLEAR_PROMPT)
    operations.clear_table(state.table)
    return DispatchResult(changed=True)


def _on_align(state: EditorState, event: Event, _clipboard) -> DispatchResult:
    if event.col is None and state.cursor is None:
        raise OutOfRange("Select a column to align")
    col = _target_column(state, event)
    before = state.table.alignments[col] if 0 <= col < state.table.column_count else None
    operations.set_alignment(state.table, col, event.text or "")
    return DispatchResult(changed=state.table.alignments[col] != before)


def _on_copy(state: EditorState, _event: Event, clipboard: ClipboardLike | None) -> DispatchResult:
    return _copy(state, clipboard)


def _on_copy_result(_state: EditorState, event: Event, _clipboard) -> DispatchResult:
    """A view that copied client-side reports whether it worked."""
    if event.ok:
        return DispatchResult(notification=copied_notification())
    return DispatchResult(warning="Copy failed", notification=copy_failed_notification())


HANDLERS: dict[EventKind, Handler] = {
    EventKind.KEY: _on_key,
    EventKind.CLICK: _on_click,
    EventKind.INPUT: _on_text,
    EventKind.BLUR: _on_text,
    EventKind.DRAG_START: _on_drag_start,
    EventKind.DROP: _on_drop,
    EventKind.DRAG_END: _on_drag_end,
    EventKind.ADD_ROW: _on_add_row,
    EventKind.ADD_COLUMN: _on_add_column,
    EventKind.REMOVE_ROW: _on_remove_row,
    EventKind.REMOVE_COLUMN: _on_remove_column,
    EventKind.CLEAR: _on_clear,
    EventKind.ALIGN: _on_align,
    EventKind.COPY: _on_copy,
    EventKind.COPY_RESULT: _on_copy_result,
}


# ─── Entry point ─────────────────────────────────────────────────────────────


def dispatch(state: EditorState, event: Event, clipboard: ClipboardLike | None = None) -> DispatchResult:
    """Apply one event to *state* and return the outcome with freshly rendered Markdown.

    Rejected operations (MinimumExceeded, OutOfRange, IncompatibleSwap...)
    leave the table untouched and come back as ``result.warning``.
    """
    handler = HANDLERS[event.kind]
    try:
        result = handler(state, event, clipboard)
    except TableEditError as exc:
        logger.warning("%s rejected: %s", event.kind.value, exc)
        result = DispatchResult(warning=str(exc))
    result.markdown = render_markdown(state.table)
    return result
