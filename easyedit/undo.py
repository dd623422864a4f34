"""Whole-buffer undo: every step is a full snapshot of the text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .rows import Row


@dataclass(frozen=True)
class Snapshot:
    """The text of every row and the cursor position at one moment."""

    rows: tuple[str, ...]
    cx: int
    cy: int


def _capture(editor: Any) -> Snapshot:
    return Snapshot(tuple(row.chars for row in editor.rows), editor.cx, editor.cy)


def _restore(editor: Any, snapshot: Snapshot) -> None:
    editor.rows = [Row(text, index) for index, text in enumerate(snapshot.rows)]
    editor.cx = snapshot.cx
    editor.cy = snapshot.cy


class LinearUndo:
    """Undo and redo stacks of whole-buffer snapshots."""

    def __init__(self) -> None:
        self.undo_stack: list[Snapshot] = []
        self.redo_stack: list[Snapshot] = []

    def push(self, editor: Any) -> None:
        """Record the editor's current state as an undo point."""
        self.undo_stack.append(_capture(editor))

    def undo(self, editor: Any) -> bool:
        """Return to the last undo point; returns whether there was one."""
        if not self.undo_stack:
            return False
        snapshot = self.undo_stack.pop()
        self.redo_stack.append(_capture(editor))
        _restore(editor, snapshot)
        return True

    def redo(self, editor: Any) -> bool:
        """Reapply the last undone state; returns whether there was one."""
        if not self.redo_stack:
            return False
        snapshot = self.redo_stack.pop()
        self.undo_stack.append(_capture(editor))
        _restore(editor, snapshot)
        return True

    def clear(self) -> None:
        """Forget all undo and redo history."""
        self.undo_stack.clear()
        self.redo_stack.clear()