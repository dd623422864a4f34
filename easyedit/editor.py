"""The editor state: the text buffer, cursor, selection and undo history."""

from __future__ import annotations

import time
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

from .row_undo import RowChange, RowUndo
from .rows import Row
from .undo import LinearUndo

VERSION = "0.01"
BAR_CHAR_LIMIT = 80
BACKUP_CREATE = True
UNDO_LINEAR = 1
UNDO_ROWS = 2
UNDO_REDO_TYPE = UNDO_LINEAR


class Mode(Enum):
    """The editing mode the keyboard is in."""

    INSERT = auto()
    NORMAL = auto()
    VISUAL = auto()


class Editor:
    """A text buffer with a cursor, a selection and undo history.

    ``screen_rows`` is the number of screen lines available for text,
    not counting the status and message bars.
    """

    def __init__(
        self,
        screen_rows: int = 22,
        screen_cols: int = 80,
        undo_type: int = UNDO_REDO_TYPE,
    ) -> None:
        if undo_type == UNDO_LINEAR:
            self.history: Union[LinearUndo, RowUndo] = LinearUndo()
        elif undo_type == UNDO_ROWS:
            self.history = RowUndo()
        else:
            raise ValueError(f"unknown undo type: {undo_type!r}")
        self.undo_type = undo_type
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols
        self.cx = 0
        self.cy = 0
        self.rx = 0
        self.rowoff = 0
        self.coloff = 0
        self.rows: list[Row] = []
        self.filename: Optional[str] = None
        self.status_msg = ""
        self.status_time = 0.0
        self.modified = 0
        self.selecting = False
        self.sel_sx = 0
        self.sel_sy = 0
        self.select_buf = ""
        self.new_file = False
        self.mode = Mode.NORMAL

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def _reindex(self) -> None:
        for index, row in enumerate(self.rows):
            row.index = index

    # Row operations

    def insert_row(self, at: int, text: str) -> None:
        """Insert a new row holding ``text`` before position ``at``."""
        if at < 0 or at > len(self.rows):
            return
        self.rows.insert(at, Row(text, at))
        self._reindex()

    def delete_row(self, at: int) -> None:
        """Remove the row at ``at``; out-of-range positions are ignored."""
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self._reindex()

    # Editing at the cursor

    def insert_char(self, c: str) -> None:
        """Insert ``c`` at the cursor and move the cursor past it."""
        if self.cy == len(self.rows):
            self.insert_row(len(self.rows), "")
        self.rows[self.cy].insert_char(self.cx, c)
        self.modified += 1
        self.cx += 1

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at column 0."""
        if self.cy == len(self.rows):
            return
        if self.cx == 0 and self.cy == 0:
            return
        row = self.rows[self.cy]
        if self.cx > 0:
            row.delete_char(self.cx - 1)
            self.modified += 1
            self.cx -= 1
        else:
            previous = self.rows[self.cy - 1]
            self.cx = previous.size
            previous.append(row.chars)
            self.modified += 1
            self.delete_row(self.cy)
            self.cy -= 1

    def insert_newline(self) -> None:
        """Split the current line at the cursor."""
        if self.cx == 0:
            self.insert_row(self.cy, "")
        else:
            row = self.rows[self.cy]
            self.insert_row(self.cy + 1, row.chars[self.cx :])
            row.chars = row.chars[: self.cx]
            self.modified += 1
        self.cy += 1
        self.cx = 0

    # Selection

    def _ordered_selection(self) -> tuple[tuple[int, int], tuple[int, int]]:
        start = (self.sel_sy, self.sel_sx)
        end = (self.cy, self.cx)
        return (end, start) if start > end else (start, end)

    def is_selected(self, row: int, col: int) -> bool:
        """Whether the rendered cell at ``row``, ``col`` is in the selection."""
        if not self.selecting:
            return False
        (start_y, start_x), (end_y, end_x) = self._ordered_selection()
        if start_y < row < end_y:
            return True
        if row == start_y == end_y:
            return start_x <= col < end_x
        if row == start_y and row < end_y:
            return col >= start_x
        if row == end_y and row > start_y:
            return col < end_x
        return False

    def delete_selection(self) -> None:
        """Remove the selected text; rows left empty are removed entirely."""
        (start_y, start_x), (end_y, _) = self._ordered_selection()
        last = min(end_y, len(self.rows) - 1)
        kept = {
            y: "".join(
                ch
                for x, ch in enumerate(self.rows[y].render)
                if not self.is_selected(y, x)
            )
            for y in range(max(start_y, 0), last + 1)
        }
        for y in sorted(kept, reverse=True):
            if kept[y]:
                self.rows[y].chars = kept[y]
            else:
                del self.rows[y]
        self.cy = start_y
        self.cx = start_x
        self.modified += 1
        self._reindex()

    def selection_text(self) -> str:
        """Collect the selected text, one line per row that has some."""
        if not self.selecting:
            self.set_status("No active selection to copy.")
            return ""
        lines = []
        for y, row in enumerate(self.rows):
            picked = "".join(
                ch for x, ch in enumerate(row.render) if self.is_selected(y, x)
            )
            if picked:
                lines.append(picked + "\n")
        self.select_buf = "".join(lines)
        if not self.select_buf:
            self.set_status("No selection to copy.")
        return self.select_buf

    def paste(self, text: str) -> None:
        """Type ``text`` in at the cursor, dropping one trailing newline."""
        if text.endswith("\n"):
            text = text[:-1]
        for ch in text:
            if ch == "\n":
                self.insert_newline()
            else:
                self.insert_char(ch)

    # Files

    def open(self, filename: str) -> None:
        """Load ``filename`` into the buffer, creating it if it is missing."""
        self.history.clear()
        self.rows.clear()
        self.cx = 0
        self.cy = 0
        self.filename = filename
        self.modified = 0
        self.new_file = False

        path = Path(filename)
        try:
            data = path.read_text(encoding="utf-8", errors="surrogateescape")
        except FileNotFoundError:
            path.touch()
            data = ""
            self.new_file = True

        lines = data.split("\n")
        if data.endswith("\n") or not data:
            lines.pop()
        for line in lines:
            self.insert_row(len(self.rows), line.rstrip("\r\n"))
        if not self.rows:
            self.insert_row(0, "")

    def to_text(self) -> str:
        """The whole buffer, every row ending in a newline."""
        return "".join(row.chars + "\n" for row in self.rows)

    # Status line

    def set_status(self, message: str) -> None:
        """Show ``message`` in the message bar, stamped with the current time."""
        self.status_msg = message[: BAR_CHAR_LIMIT - 1]
        self.status_time = time.time()

    # Undo

    def push_undo(self, multi_delete: bool) -> None:
        """Record an undo point before an edit."""
        if isinstance(self.history, LinearUndo):
            self.history.push(self)
        elif multi_delete:
            self.history.push_selection(self)
        else:
            old = self.rows[self.cy].chars if 0 <= self.cy < len(self.rows) else None
            self.history.push([RowChange(self.cy, old)], self.cx, self.cy)

    def undo(self) -> bool:
        """Step back one undo point; returns whether there was one."""
        return self.history.undo(self)

    def redo(self) -> bool:
        """Step forward one undone point; returns whether there was one."""
        return self.history.redo(self)