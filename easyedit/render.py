"""Drawing the editor onto a terminal with escape sequences."""

from __future__ import annotations

import time

from .editor import BAR_CHAR_LIMIT, VERSION, Editor, Mode

INVERT = "\x1b[7m"
RESET = "\x1b[m"
CLEAR_LINE = "\x1b[K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
HOME = "\x1b[H"
BAR_CURSOR = "\x1b[6 q"
BLOCK_CURSOR = "\x1b[2 q"


def scroll(editor: Editor) -> None:
    """Update the render column and scroll offsets to keep the cursor visible."""
    editor.rx = 0
    if editor.cy < editor.num_rows:
        editor.rx = editor.rows[editor.cy].cx_to_rx(editor.cx)

    if editor.cy < editor.rowoff:
        editor.rowoff = editor.cy
    if editor.cy >= editor.rowoff + editor.screen_rows:
        editor.rowoff = editor.cy - editor.screen_rows + 1
    if editor.rx < editor.coloff:
        editor.coloff = editor.rx
    if editor.rx >= editor.coloff + editor.screen_cols:
        editor.coloff = editor.rx - editor.screen_cols + 1


def _welcome_line(editor: Editor) -> str:
    welcome = f"Easy C -- version {VERSION}"[: BAR_CHAR_LIMIT - 1]
    welcome = welcome[: max(editor.screen_cols, 0)]
    padding = (editor.screen_cols - len(welcome)) // 2
    line = ""
    if padding > 0:
        line = "~"
        padding -= 1
    return line + " " * max(padding, 0) + welcome


def _text_line(editor: Editor, file_row: int) -> str:
    render = editor.rows[file_row].render
    visible = render[editor.coloff : editor.coloff + max(editor.screen_cols, 0)]
    pieces: list[str] = []
    run: list[str] = []
    for offset, ch in enumerate(visible):
        if editor.is_selected(file_row, offset + editor.coloff):
            if run:
                pieces.append("".join(run))
                run = []
            pieces.append(f"{INVERT}{ch}{RESET}")
        else:
            run.append(ch)
    if run:
        pieces.append("".join(run))
    return "".join(pieces)


def draw_rows(editor: Editor) -> str:
    """Return the text area: one line per screen row, selection inverted."""
    lines: list[str] = []
    for y in range(editor.screen_rows):
        file_row = y + editor.rowoff
        if file_row >= editor.num_rows:
            if editor.num_rows == 0 and y == editor.screen_rows // 3:
                line = _welcome_line(editor)
            else:
                line = "~"
        else:
            line = _text_line(editor, file_row)
        lines.append(line + CLEAR_LINE + "\r\n")
    return "".join(lines)


def draw_status_bar(editor: Editor) -> str:
    """Return the inverted status bar with file details and cursor position."""
    mode_name = "-- NORMAL --" if editor.mode is Mode.NORMAL else "-- INSERT --"
    new_file = "[ NEW ] " if editor.new_file else ""
    name = editor.filename if editor.filename else "[No Name]"
    modified = "(modified)" if editor.modified else ""
    status = (
        f'{mode_name} | {new_file}"{name[:20]}" -- '
        f"{editor.num_rows} Lines {modified}"
    )[: BAR_CHAR_LIMIT - 1]

    if editor.cy < editor.num_rows:
        row = editor.rows[editor.cy]
        line_no, row_width = row.index + 1, row.rsize + 1
    else:
        line_no, row_width = editor.cy + 1, 1
    rstatus = f"{line_no}/{editor.num_rows}:{editor.rx + 1}/{row_width}"[
        : BAR_CHAR_LIMIT - 1
    ]

    cols = max(editor.screen_cols, 0)
    length = min(len(status), cols)
    remaining = cols - length
    if remaining >= len(rstatus):
        right = " " * (remaining - len(rstatus)) + rstatus
    else:
        right = " " * remaining
    return INVERT + status[:length] + right + RESET + "\r\n"


def draw_message_bar(editor: Editor) -> str:
    """Return the message bar: the status message with the time it was set."""
    message = editor.status_msg[: max(editor.screen_cols, 0)]
    if not message:
        return CLEAR_LINE
    stamp = time.strftime("[%H:%M:%S] -- ", time.localtime(editor.status_time))
    return CLEAR_LINE + stamp + message


def cursor_shape(editor: Editor) -> str:
    """The escape sequence for the cursor shape: a bar while typing or selecting."""
    if editor.mode is Mode.INSERT or editor.selecting:
        return BAR_CURSOR
    return BLOCK_CURSOR


def refresh_screen(editor: Editor) -> str:
    """Scroll, then return everything to write to redraw the whole screen."""
    scroll(editor)
    position = (
        f"\x1b[{editor.cy - editor.rowoff + 1};{editor.rx - editor.coloff + 1}H"
    )
    return "".join(
        (
            cursor_shape(editor),
            HIDE_CURSOR,
            HOME,
            draw_rows(editor),
            draw_status_bar(editor),
            draw_message_bar(editor),
            position,
            SHOW_CURSOR,
        )
    )