"""Unit tests for the clipboard chain (primary writer, legacy fallback, failure)."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from mdtable import clipboard
from mdtable.clipboard import Clipboard, command_writer, copy_markdown
from mdtable.table.errors import ClipboardUnavailable


class Recorder:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[str] = []

    def __call__(self, text: str) -> None:
        self.calls.append(text)
        if self.fail:
            raise RuntimeError("writer failed")


class TestCopyMarkdown:

    def test_primary_success(self):
        primary, fallback = Recorder(), Recorder()
        notification = copy_markdown("| a |", primary, fallback)
        assert primary.calls == ["| a |"]
        assert fallback.calls == []
        assert notification.message == "Copied to clipboard"
        assert notification.level == "info"
        assert notification.duration > 0

    def test_falls_back_once(self):
        primary, fallback = Recorder(fail=True), Recorder()
        notification = copy_markdown("| a |", primary, fallback)
        assert primary.calls == ["| a |"]
        assert fallback.calls == ["| a |"]
        assert notification.message == "Copied to clipboard"

    def test_both_fail(self):
        primary, fallback = Recorder(fail=True), Recorder(fail=True)
        with pytest.raises(ClipboardUnavailable):
            copy_markdown("| a |", primary, fallback)
        assert len(primary.calls) == 1
        assert len(fallback.calls) == 1

    def test_no_fallback(self):
        with pytest.raises(ClipboardUnavailable):
            copy_markdown("| a |", Recorder(fail=True))

    def test_clipboard_object(self):
        primary = Recorder()
        Clipboard(primary).write_text("x")
        assert primary.calls == ["x"]


class TestCommandWriter:

    def test_none_when_nothing_installed(self, monkeypatch):
        monkeypatch.setattr(clipboard.shutil, "which", lambda _name: None)
        assert command_writer() is None

    def test_first_available_command(self, monkeypatch):
        monkeypatch.setattr(clipboard.shutil, "which", lambda name: "/usr/bin/xclip" if name == "xclip" else None)
        calls = []
        monkeypatch.setattr(clipboard.subprocess, "run", lambda cmd, **kwargs: calls.append((cmd, kwargs)))
        writer = command_writer()
        writer("hello")
        assert calls == [(["xclip", "-selection", "clipboard"], {"input": "hello", "text": True, "check": True})]

    def test_system_clipboard_without_command_uses_fallback(self, monkeypatch):
        monkeypatch.setattr(clipboard.shutil, "which", lambda _name: None)
        fallback = Recorder()
        monkeypatch.setattr(clipboard, "tk_writer", fallback)
        clipboard.system_clipboard().write_text("| a |")
        assert fallback.calls == ["| a |"]
