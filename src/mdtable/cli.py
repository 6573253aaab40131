"""Command-line entry point.

Usage:
    mdtable serve [--host HOST] [--port PORT]   # start the web editor
    mdtable render FILE [--copy]                # normalise the first table in FILE
    mdtable copy FILE                           # copy the normalised table to the clipboard

FILE may be ``-`` to read standard input.
"""

import argparse
import logging
import sys
from pathlib import Path

from mdtable import config
from mdtable.clipboard import system_clipboard
from mdtable.table.errors import ClipboardUnavailable, TableParseError
from mdtable.table.formatting import render_markdown
from mdtable.table.parsing import parse_markdown

logger = logging.getLogger(__name__)


def _read_source(source: str) -> str:
    """Read table text from a file path or ``-`` for stdin."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _copy(markdown: str) -> int:
    """Copy through the system clipboard; returns a process exit code."""
    try:
        notification = system_clipboard().write_text(markdown)
    except ClipboardUnavailable as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(notification.message, file=sys.stderr)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    try:
        table = parse_markdown(_read_source(args.file))
    except (OSError, TableParseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    markdown = render_markdown(table)
    sys.stdout.write(markdown)
    if args.copy:
        return _copy(markdown)
    return 0


def cmd_copy(args: argparse.Namespace) -> int:
    try:
        table = parse_markdown(_read_source(args.file))
    except (OSError, TableParseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return _copy(render_markdown(table))


def cmd_serve(args: argparse.Namespace) -> int:
    from mdtable.web.app import main as serve  # pylint: disable=import-outside-toplevel

    serve(host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mdtable", description="Build and normalise GitHub-flavored Markdown tables")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Start the web editor")
    serve.add_argument("--host", default=config.HOST, help=f"Bind address (default: {config.HOST})")
    serve.add_argument("--port", type=int, default=config.PORT, help=f"Port (default: {config.PORT})")
    serve.set_defaults(func=cmd_serve)

    render = sub.add_parser("render", help="Parse a Markdown table and print it normalised")
    render.add_argument("file", help="File containing a Markdown table, or - for stdin")
    render.add_argument("--copy", action="store_true", help="Also copy the result to the clipboard")
    render.set_defaults(func=cmd_render)

    copy = sub.add_parser("copy", help="Copy a normalised Markdown table to the clipboard")
    copy.add_argument("file", help="File containing a Markdown table, or - for stdin")
    copy.set_defaults(func=cmd_copy)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.debug("Running %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
