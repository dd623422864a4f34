"""Terminal control: raw mode and the window size."""

from __future__ import annotations

import os
import re
import termios
from types import TracebackType
from typing import Optional

STDIN_FILENO = 0
STDOUT_FILENO = 1

_REPORT = re.compile(rb"\s*([+-]?\d+);\s*([+-]?\d+)")


class RawMode:
    """Context manager that puts a terminal into raw mode and back.

    On leaving, the saved settings are restored and the cursor shape is
    reset to a block.
    """

    def __init__(self, fd: Optional[int] = None, out_fd: Optional[int] = None):
        self.fd = STDIN_FILENO if fd is None else fd
        self.out_fd = STDOUT_FILENO if out_fd is None else out_fd
        self._saved: Optional[list] = None

    def __enter__(self) -> "RawMode":
        self._saved = termios.tcgetattr(self.fd)
        raw = termios.tcgetattr(self.fd)
        raw[0] &= ~(
            termios.IXON
            | termios.ICRNL
            | termios.BRKINT
            | termios.INPCK
            | termios.ISTRIP
        )
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        cc = list(raw[6])
        cc[termios.VMIN] = 0
        cc[termios.VTIME] = 1
        raw[6] = cc
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        return self

    def __exit__(
        self,
        *args: "tuple[Optional[type], Optional[BaseException], Optional[TracebackType]]",
    ) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._saved)
            self._saved = None
        os.write(self.out_fd, b"\x1b[2 q")


def parse_cursor_report(data: bytes) -> tuple[int, int]:
    """Parse a ``ESC [ rows ; cols R`` cursor position report."""
    if not data.startswith(b"\x1b["):
        raise ValueError(f"not a cursor position report: {data!r}")
    match = _REPORT.match(data, 2)
    if match is None:
        raise ValueError(f"not a cursor position report: {data!r}")
    return int(match[1]), int(match[2])


def _cursor_position() -> tuple[int, int]:
    if os.write(STDOUT_FILENO, b"\x1b[6n") != 4:
        raise OSError("could not request the cursor position")
    buf = bytearray()
    while len(buf) < 31:
        ch = os.read(STDIN_FILENO, 1)
        if len(ch) != 1 or ch == b"R":
            break
        buf += ch
    return parse_cursor_report(bytes(buf))


def get_window_size() -> tuple[int, int]:
    """Return the terminal size as ``(rows, cols)``.

    When the size cannot be queried directly, the cursor is pushed to the
    bottom-right corner and its position is asked for instead.
    """
    try:
        size: Optional[os.terminal_size] = os.get_terminal_size(STDOUT_FILENO)
    except OSError:
        size = None
    if size is None or size.columns == 0:
        move = b"\x1b[999C\x1b[999B"
        if os.write(STDOUT_FILENO, move) != len(move):
            raise OSError("could not move the cursor")
        return _cursor_position()
    return size.lines, size.columns