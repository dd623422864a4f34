"""Row-level undo: each step records only the rows it touched."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


@dataclass
class RowChange:
    """The text of one row before and after an edit."""

    row_index: int
    old_content: Optional[str]
    new_content: Optional[str] = None


@dataclass
class UndoStep:
    """A group of row changes with the cursor position to return to."""

    changes: list[RowChange] = field(default_factory=list)
    cx: int = 0
    cy: int = 0


def _apply(editor: Any, step: UndoStep, *, backwards: bool) -> None:
    rows = editor.rows
    for change in step.changes:
        if not 0 <= change.row_index < len(rows):
            continue
        target = change.old_content if backwards else change.new_content
        if target is None:
            continue
        row = rows[change.row_index]
        current = row.chars
        row.chars = target
        if backwards:
            change.new_content = current
        else:
            change.old_content = current
        editor.modified += 1
    editor.cx = step.cx
    editor.cy = step.cy


class RowUndo:
    """Undo and redo stacks of per-row changes."""

    def __init__(self) -> None:
        self.undo_stack: list[UndoStep] = []
        self.redo_stack: list[UndoStep] = []

    def push(self, changes: Iterable[RowChange], cx: int, cy: int) -> None:
        """Record a step made of copies of ``changes``."""
        copied = [
            RowChange(c.row_index, c.old_content, c.new_content) for c in changes
        ]
        self.undo_stack.append(UndoStep(copied, cx, cy))

    def push_selection(self, editor: Any) -> None:
        """Record every row spanned by the editor's selection and drop redo."""
        start = min(editor.cy, editor.sel_sy)
        end = max(editor.cy, editor.sel_sy)
        rows = editor.rows
        changes = [
            RowChange(
                index,
                rows[index].chars if 0 <= index < len(rows) else None,
            )
            for index in range(start, end + 1)
        ]
        self.push(changes, editor.cx, editor.cy)
        self.redo_stack.clear()

    def undo(self, editor: Any) -> bool:
        """Restore the rows of the last step; returns whether there was one."""
        if not self.undo_stack:
            return False
        step = self.undo_stack.pop()
        _apply(editor, step, backwards=True)
        self.redo_stack.append(step)
        return True

    def redo(self, editor: Any) -> bool:
        """Reapply the last undone step; returns whether there was one."""
        if not self.redo_stack:
            return False
        step = self.redo_stack.pop()
        _apply(editor, step, backwards=False)
        self.undo_stack.append(step)
        return True

    def clear(self) -> None:
        """Forget all undo and redo history."""
        self.undo_stack.clear()
        self.redo_stack.clear()