"""Errors raised by table edits, parsing, and the clipboard chain.

None of these are fatal.  The interaction layer catches them at the point of
the attempted operation and reports ``str(exc)`` to the user; the model is
left as it was before the call.
"""


class TableEditError(Exception):
    """Base class for a rejected edit.  The message is shown to the user."""


class MinimumExceeded(TableEditError):
    """Deleting the last remaining row or column."""


class OutOfRange(TableEditError):
    """A row/column index that does not address an existing cell."""


class IncompatibleSwap(TableEditError):
    """Swapping a header cell with a data cell."""


class InvalidAlignment(TableEditError):
    """An alignment value other than left, center, or right."""


class ClipboardUnavailable(Exception):
    """Both the primary and the fallback clipboard writers failed."""


class TableParseError(ValueError):
    """Text that is not a GitHub-flavored Markdown pipe table."""
