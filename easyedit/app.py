"""The editor's main loop and its command prompt."""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional, Sequence

from .commands import CommandRegistry, QuitRequested, default_registry
from .editor import BAR_CHAR_LIMIT, Editor
from .keys import Key, process_key, read_key
from .render import refresh_screen
from .terminal import STDIN_FILENO, STDOUT_FILENO, RawMode, get_window_size

DEFAULT_FILE = "MainMenu.txt"
_MAX_COMMAND = BAR_CHAR_LIMIT - 2


def _is_typeable(key: int) -> bool:
    return 32 <= key < 256 and key != Key.BACKSPACE


def command_prompt(
    editor: Editor,
    registry: CommandRegistry,
    read: Callable[[], int],
    refresh: Callable[[], None],
) -> None:
    """Read a ``:`` command with ``read`` and run it through ``registry``.

    Enter runs the command, Escape abandons it, Backspace edits it.
    ``refresh`` is called whenever the prompt text changes.
    """
    command = ""
    editor.set_status(":")
    refresh()
    while True:
        key = read()
        if key == Key.ENTER:
            registry.execute(editor, command)
            return
        if key == Key.ESCAPE:
            editor.set_status("")
            return
        if key in (Key.BACKSPACE, Key.CTRL_H):
            if command:
                command = command[:-1]
                editor.set_status(f":{command}")
                refresh()
        elif _is_typeable(key) and len(command) < _MAX_COMMAND:
            command += chr(key)
            editor.set_status(f":{command}")
            refresh()


def _write(text: str) -> None:
    data = memoryview(text.encode("utf-8", errors="surrogateescape"))
    while data:
        written = os.write(STDOUT_FILENO, data)
        data = data[written:]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Edit the file named on the command line, or the default file."""
    args = list(sys.argv[1:] if argv is None else argv)
    filename = args[0] if args else DEFAULT_FILE

    rows, cols = get_window_size()
    editor = Editor(screen_rows=rows - 2, screen_cols=cols)
    registry = default_registry()

    def refresh() -> None:
        _write(refresh_screen(editor))

    def prompt() -> None:
        command_prompt(editor, registry, lambda: read_key(STDIN_FILENO), refresh)

    with RawMode():
        editor.open(filename)
        editor.set_status(
            'For a list of keybinds and information, enter the command: ":h"'
        )
        try:
            while True:
                refresh()
                process_key(editor, read_key(STDIN_FILENO), prompt)
        except QuitRequested:
            _write("\x1b[2J\x1b[H")
    return 0