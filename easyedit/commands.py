"""Colon commands: a registry of named handlers and the built-in ones."""

from __future__ import annotations

import contextlib
import os
from typing import Callable, Optional

from .editor import BACKUP_CREATE, Editor

MAX_COMMANDS = 100

Handler = Callable[[Editor, bool, Optional[str]], None]

_INVALID_ARGS = "Invalid number of arguments"


class QuitRequested(Exception):
    """Raised by a command when the editor should exit."""


class CommandRegistry:
    """Maps command names to handlers and runs typed command lines."""

    def __init__(self) -> None:
        self._handlers: dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Add ``handler`` under ``name``; the registry holds at most 100."""
        if name not in self._handlers and len(self._handlers) >= MAX_COMMANDS:
            raise OverflowError("Command registry is full.")
        self._handlers[name] = handler

    def execute(self, editor: Editor, line: str) -> None:
        """Run a command line such as ``w``, ``!q`` or ``e notes.txt``.

        A leading ``!`` forces the command; everything after the first
        space is handed to the handler as its arguments.
        """
        force = line.startswith("!")
        if force:
            line = line[1:]
        name, sep, rest = line.partition(" ")
        args = rest if sep else None
        handler = self._handlers.get(name)
        if handler is None:
            editor.set_status(f"Unsupported command: {name}")
            return
        handler(editor, force, args)


def save(editor: Editor, force: bool, args: Optional[str]) -> None:
    """Write the buffer to its file through a temporary file.

    Unless forced, an existing file is first renamed to ``<name>.bak``.
    """
    if args:
        editor.set_status(_INVALID_ARGS)
        return
    if editor.filename is None:
        editor.set_status("Error saving: no file name")
        return

    path = editor.filename
    tmp_path = f"{path}.tmp"
    data = editor.to_text().encode("utf-8", errors="surrogateescape")
    backup_created = False

    if not force and BACKUP_CREATE and os.path.exists(path):
        try:
            os.rename(path, f"{path}.bak")
        except OSError as exc:
            editor.set_status(
                "Error saving: Unable to write backup - "
                f"{exc.strerror or exc}. To save without a backup, "
                'use the command: "!w"'
            )
            return
        backup_created = True

    try:
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        editor.set_status(
            f"Error saving: Unable to write temp file - {exc.strerror or exc}"
        )
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        return

    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
    except OSError as exc:
        editor.set_status(f"Error saving: Write failed - {exc.strerror or exc}")
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        return

    try:
        os.rename(tmp_path, path)
    except OSError as exc:
        editor.set_status(
            f"Error saving: Failed to rename temp file - {exc.strerror or exc}"
        )
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        return

    editor.modified = 0
    editor.new_file = False
    note = "(Backup Created)" if backup_created else "(No Backup)"
    editor.set_status(
        f"{len(data)} bytes written at {os.path.realpath(path)}. {note}"
    )


def quit_editor(editor: Editor, force: bool, args: Optional[str]) -> None:
    """Ask to leave the editor, refusing while there are unsaved changes."""
    if args is not None:
        editor.set_status(_INVALID_ARGS)
        return
    if editor.modified and not force:
        editor.set_status(
            "You have unsaved modifications. "
            'To exit without saving, use ":!q"'
        )
        return
    raise QuitRequested()


def save_quit(editor: Editor, force: bool, args: Optional[str]) -> None:
    """Save, then quit if nothing is left unsaved."""
    save(editor, force, args)
    quit_editor(editor, False, None)


def edit_file(editor: Editor, force: bool, args: Optional[str]) -> None:
    """Open another file in place of the current buffer."""
    if args is None:
        editor.set_status(_INVALID_ARGS)
        return
    filename = args.lstrip(" ")
    if editor.modified and not force:
        editor.set_status(
            "You have unsaved modifications, to edit another file "
            'without saving, use: ":!e"'
        )
        return
    editor.open(filename)


def undo_command(editor: Editor, force: bool, args: Optional[str]) -> None:
    """Step back one undo point."""
    if args is not None:
        editor.set_status(_INVALID_ARGS)
        return
    editor.undo()


def redo_command(editor: Editor, force: bool, args: Optional[str]) -> None:
    """Step forward one undone point."""
    if args is not None:
        editor.set_status(_INVALID_ARGS)
        return
    editor.redo()


def default_registry() -> CommandRegistry:
    """A registry holding the editor's built-in commands."""
    registry = CommandRegistry()
    for name, handler in (
        ("w", save),
        ("!w", save),
        ("q", quit_editor),
        ("!q", quit_editor),
        ("e", edit_file),
        ("!e", edit_file),
        ("wq", save_quit),
        ("!wq", save_quit),
        ("u", undo_command),
        ("r", redo_command),
    ):
        registry.register(name, handler)
    return registry