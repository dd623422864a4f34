import subprocess
from unittest import mock

import pytest

from easyedit.clipboard import ClipboardError, copy_to_clipboard, paste_from_clipboard


def test_copy_uses_wl_copy_under_wayland(monkeypatch):
    monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
    with mock.patch("easyedit.clipboard.subprocess.run") as run:
        result = copy_to_clipboard("text")
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0] == ["wl-copy"]
    assert run.call_args.kwargs["input"] == b"text"


def test_copy_uses_xclip_otherwise(monkeypatch):
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    with mock.patch("easyedit.clipboard.subprocess.run") as run:
        result = copy_to_clipboard("text")
    assert result is None
    assert run.call_count == 1
    assert run.call_args.args[0] == ["xclip", "-selection", "clipboard"]
    assert run.call_args.kwargs["input"] == b"text"


def test_copy_missing_helper_raises(monkeypatch):
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    with mock.patch(
        "easyedit.clipboard.subprocess.run", side_effect=FileNotFoundError()
    ):
        with pytest.raises(ClipboardError, match="xclip"):
            copy_to_clipboard("text")


def test_paste_stops_at_nul():
    done = subprocess.CompletedProcess(["wl-paste"], 0, stdout=b"abc\x00rest")
    with mock.patch("easyedit.clipboard.subprocess.run", return_value=done) as run:
        assert paste_from_clipboard() == "abc"
    assert run.call_args.args[0] == ["wl-paste"]


def test_paste_returns_full_text():
    done = subprocess.CompletedProcess(["wl-paste"], 0, stdout=b"line\n")
    with mock.patch("easyedit.clipboard.subprocess.run", return_value=done):
        assert paste_from_clipboard() == "line\n"


def test_paste_missing_helper_returns_empty():
    with mock.patch(
        "easyedit.clipboard.subprocess.run", side_effect=FileNotFoundError()
    ):
        assert paste_from_clipboard() == ""