"""Reading keys from the terminal and acting on them."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Callable, Optional

from .clipboard import ClipboardError, copy_to_clipboard, paste_from_clipboard
from .editor import UNDO_LINEAR, Editor, Mode


def _ctrl(letter: str) -> int:
    return ord(letter) & 0x1F


class Key(IntEnum):
    """Key codes beyond plain characters, plus a few named control keys."""

    CTRL_H = 8
    ENTER = 13
    CTRL_Y = 25
    ESCAPE = 27
    BACKSPACE = 127
    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DEL_KEY = 1004
    HOME_KEY = 1005
    END_KEY = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


_TILDE_KEYS = {
    b"1": Key.HOME_KEY,
    b"3": Key.DEL_KEY,
    b"4": Key.END_KEY,
    b"5": Key.PAGE_UP,
    b"6": Key.PAGE_DOWN,
    b"7": Key.HOME_KEY,
    b"8": Key.END_KEY,
}

_BRACKET_KEYS = {
    b"A": Key.ARROW_UP,
    b"B": Key.ARROW_DOWN,
    b"C": Key.ARROW_RIGHT,
    b"D": Key.ARROW_LEFT,
    b"H": Key.HOME_KEY,
    b"F": Key.END_KEY,
}

_O_KEYS = {
    b"H": Key.HOME_KEY,
    b"F": Key.END_KEY,
}

_LEFT = {ord("h"), ord("A"), Key.ARROW_LEFT}
_RIGHT = {ord("l"), ord("D"), Key.ARROW_RIGHT}
_UP = {ord("k"), ord("W"), Key.ARROW_UP}
_DOWN = {ord("j"), ord("S"), Key.ARROW_DOWN}
_ARROWS = {Key.ARROW_LEFT, Key.ARROW_RIGHT, Key.ARROW_UP, Key.ARROW_DOWN}


def decode_key(read: Callable[[], bytes]) -> Optional[int]:
    """Decode one keypress from ``read``, which returns one byte or b"".

    Returns None when no byte is available yet. Escape sequences for the
    arrow, home, end, delete and page keys become :class:`Key` members;
    an unrecognised or cut-off sequence becomes ``Key.ESCAPE``.
    """
    first = read()[:1]
    if not first:
        return None
    if first[0] != Key.ESCAPE:
        return first[0]

    seq0 = read()[:1]
    if not seq0:
        return Key.ESCAPE
    seq1 = read()[:1]
    if not seq1:
        return Key.ESCAPE

    if seq0 == b"[":
        if seq1.isdigit():
            seq2 = read()[:1]
            if not seq2:
                return Key.ESCAPE
            if seq2 == b"~":
                return _TILDE_KEYS.get(seq1, Key.ESCAPE)
        else:
            return _BRACKET_KEYS.get(seq1, Key.ESCAPE)
    elif seq0 == b"O":
        return _O_KEYS.get(seq1, Key.ESCAPE)
    return Key.ESCAPE


def _read_byte(fd: int) -> bytes:
    try:
        return os.read(fd, 1)
    except BlockingIOError:
        return b""


def read_key(fd: int) -> int:
    """Wait for and return the next keypress on ``fd``."""
    while True:
        key = decode_key(lambda: _read_byte(fd))
        if key is not None:
            return key


def move_cursor(editor: Editor, key: int) -> None:
    """Move the cursor for a movement key, keeping it inside the text."""
    rows = editor.rows
    row = rows[editor.cy] if editor.cy < len(rows) else None

    if key in _LEFT:
        if editor.cx != 0:
            editor.cx -= 1
        elif editor.cy > 0:
            editor.cy -= 1
            editor.cx = rows[editor.cy].size
    elif key in _RIGHT:
        if row is not None and editor.cx < row.size:
            editor.cx += 1
        elif row is not None and editor.cx == row.size:
            editor.cy += 1
            editor.cx = 0
    elif key in _UP:
        if editor.cy != 0:
            editor.cy -= 1
    elif key in _DOWN:
        if editor.cy < len(rows) - 1:
            editor.cy += 1

    row_len = rows[editor.cy].size if editor.cy < len(rows) else 0
    if editor.cx > row_len:
        editor.cx = row_len


def _copy_selection(editor: Editor) -> None:
    text = editor.selection_text()
    if not text:
        editor.set_status("Nothing selected to copy.")
        return
    try:
        copy_to_clipboard(text)
    except ClipboardError as exc:
        editor.set_status(str(exc))


def _end_selection(editor: Editor) -> None:
    editor.selecting = False
    editor.cy = editor.sel_sy
    editor.cx = editor.sel_sx


def _process_insert(editor: Editor, key: int) -> None:
    if key == Key.ESCAPE:
        editor.mode = Mode.NORMAL
    elif key in _ARROWS:
        move_cursor(editor, key)
    elif key in (Key.BACKSPACE, Key.CTRL_H, Key.DEL_KEY):
        if key == Key.DEL_KEY:
            move_cursor(editor, Key.ARROW_RIGHT)
        editor.delete_char()
    elif key == Key.ENTER:
        editor.insert_newline()
    elif key < Key.ARROW_LEFT:
        editor.insert_char(chr(key))


def _process_normal(
    editor: Editor, key: int, command_prompt: Callable[[], None]
) -> None:
    multi_delete = editor.undo_type != UNDO_LINEAR

    if key == Key.END_KEY:
        editor.cx = 0
    elif key == Key.HOME_KEY:
        if editor.cy < editor.num_rows:
            editor.cx = editor.rows[editor.cy].size
    elif key in (Key.PAGE_UP, Key.PAGE_DOWN):
        if key == Key.PAGE_UP:
            editor.cy = editor.rowoff
            step = Key.ARROW_UP
        else:
            editor.cy = min(
                editor.rowoff + editor.screen_rows - 1, editor.num_rows
            )
            step = Key.ARROW_DOWN
        for _ in range(editor.screen_rows):
            move_cursor(editor, step)
    elif key == ord("i"):
        editor.push_undo(False)
        editor.mode = Mode.INSERT
    elif key == ord(":"):
        command_prompt()
    elif key in (ord("h"), ord("l"), ord("j"), ord("k")):
        move_cursor(editor, key)
    elif key == ord("v"):
        if not editor.selecting:
            editor.selecting = True
            editor.sel_sx = editor.cx
            editor.sel_sy = editor.cy
        else:
            _end_selection(editor)
    elif key == Key.ESCAPE:
        editor.selecting = False
    elif key == ord("y"):
        if editor.selecting:
            _copy_selection(editor)
    elif key == _ctrl("y"):
        if editor.selecting:
            _copy_selection(editor)
            _end_selection(editor)
    elif key == ord("d"):
        if editor.selecting:
            editor.push_undo(multi_delete)
            editor.delete_selection()
            editor.selecting = False
    elif key == ord("x"):
        if editor.selecting:
            editor.push_undo(multi_delete)
            _copy_selection(editor)
            editor.delete_selection()
            editor.selecting = False
    elif key == ord("p"):
        editor.paste(paste_from_clipboard())
    elif key in _ARROWS:
        if editor.selecting:
            move_cursor(editor, key)


def process_key(
    editor: Editor, key: int, command_prompt: Callable[[], None]
) -> None:
    """Act on one keypress according to the editor's mode.

    ``command_prompt`` is called when ``:`` is pressed in normal mode.
    """
    if editor.mode is Mode.INSERT:
        _process_insert(editor, key)
    elif editor.mode is Mode.NORMAL:
        _process_normal(editor, key, command_prompt)