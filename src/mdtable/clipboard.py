"""Clipboard collaborator: copy the rendered Markdown with a legacy fallback.

A writer is any callable that takes the text and raises on failure.  The
primary writer is tried first; if it raises, the fallback gets one attempt;
if that also fails ``ClipboardUnavailable`` is raised.  There is no retry.

System writers:
  command_writer -- pipes the text into pbcopy / wl-copy / xclip / xsel / clip
  tk_writer      -- tkinter's clipboard (legacy fallback)
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import Callable

from mdtable import config
from mdtable.table.errors import ClipboardUnavailable

logger = logging.getLogger(__name__)

ClipboardWriter = Callable[[str], None]

# Clipboard commands in order of preference; the first one on PATH wins
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


# ─── Notifications ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Notification:
    """Transient message for the view.  ``duration`` is in seconds; 0 means until dismissed."""

    message: str
    level: str = "info"
    duration: float = 0.0


def copied_notification() -> Notification:
    return Notification("Copied to clipboard", "info", config.NOTIFICATION_SECONDS)


def copy_failed_notification() -> Notification:
    return Notification("Copy failed", "error", 0.0)


# ─── Writers ─────────────────────────────────────────────────────────────────


def command_writer(commands: list[list[str]] | None = None) -> ClipboardWriter | None:
    """Return a writer for the first clipboard command found on PATH, or None."""
    for cmd in commands if commands is not None else CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            logger.debug("Using clipboard command %s", cmd[0])
            return lambda text, cmd=cmd: subprocess.run(cmd, input=text, text=True, check=True)
    return None


def tk_writer(text: str) -> None:
    """Copy through a hidden Tk root window."""
    import tkinter  # pylint: disable=import-outside-toplevel

    root = tkinter.Tk()
    try:
        root.withdraw()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
    finally:
        root.destroy()


def _missing_command(_text: str) -> None:
    raise ClipboardUnavailable("No clipboard command found on PATH")


# ─── Copy chain ──────────────────────────────────────────────────────────────


def copy_markdown(text: str, primary: ClipboardWriter, fallback: ClipboardWriter | None = None) -> Notification:
    """Write *text* with *primary*, then *fallback*; return the "copied" notification.

    Raises ClipboardUnavailable when every writer failed.
    """
    try:
        primary(text)
        logger.info("Copied %d characters to the clipboard", len(text))
        return copied_notification()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.warning("Primary clipboard write failed: %s", exc)
        if fallback is None:
            raise ClipboardUnavailable("Copy failed") from exc

    try:
        fallback(text)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.error("Fallback clipboard write failed: %s", exc)
        raise ClipboardUnavailable("Copy failed") from exc
    logger.info("Copied %d characters to the clipboard (fallback)", len(text))
    return copied_notification()


class Clipboard:
    """A primary/fallback writer pair usable as the dispatcher's clipboard."""

    def __init__(self, primary: ClipboardWriter, fallback: ClipboardWriter | None = None):
        self.primary = primary
        self.fallback = fallback

    def write_text(self, text: str) -> Notification:
        """Copy *text*; raises ClipboardUnavailable on failure."""
        return copy_markdown(text, self.primary, self.fallback)


def system_clipboard() -> Clipboard:
    """Clipboard backed by an OS command, falling back to tkinter."""
    return Clipboard(command_writer() or _missing_command, tk_writer)
