"""Copying to and pasting from the desktop clipboard via helper programs."""

from __future__ import annotations

import os
import subprocess

_COPY_ERROR = (
    "ERROR COPYING TO CLIPBOARD -- "
    "Only Wayland and Xorg (through xclip) works currently."
)


class ClipboardError(RuntimeError):
    """The clipboard helper program could not be run."""


def _copy_command() -> list[str]:
    if os.environ.get("WAYLAND_DISPLAY") is not None:
        return ["wl-copy"]
    return ["xclip", "-selection", "clipboard"]


def copy_to_clipboard(text: str) -> None:
    """Hand ``text`` to wl-copy under Wayland, otherwise to xclip."""
    try:
        subprocess.run(
            _copy_command(),
            input=text.encode("utf-8", errors="surrogateescape"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise ClipboardError(_COPY_ERROR) from exc


def paste_from_clipboard() -> str:
    """Return the clipboard text from wl-paste, or "" if there is none."""
    try:
        result = subprocess.run(
            ["wl-paste"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return ""
    data = result.stdout or b""
    return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")