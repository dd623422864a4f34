"""A single line of the text buffer and its tab-expanded rendering."""

from __future__ import annotations

TAB_STOP = 8


def _expand_tabs(chars: str) -> str:
    """Return ``chars`` with each tab widened to the next tab stop."""
    pieces: list[str] = []
    column = 0
    for ch in chars:
        if ch == "\t":
            width = TAB_STOP - column % TAB_STOP
            pieces.append(" " * width)
            column += width
        else:
            pieces.append(ch)
            column += 1
    return "".join(pieces)


class Row:
    """One line of text together with how it is drawn on screen."""

    __slots__ = ("_chars", "_render", "index")

    def __init__(self, chars: str = "", index: int = 0) -> None:
        self._chars = chars
        self._render = _expand_tabs(chars)
        self.index = index

    @property
    def chars(self) -> str:
        """The raw text of the row."""
        return self._chars

    @chars.setter
    def chars(self, value: str) -> None:
        self._chars = value
        self._render = _expand_tabs(value)

    @property
    def render(self) -> str:
        """The row as displayed, with tabs expanded to spaces."""
        return self._render

    @property
    def size(self) -> int:
        return len(self._chars)

    @property
    def rsize(self) -> int:
        return len(self._render)

    def cx_to_rx(self, cx: int) -> int:
        """Convert a position in ``chars`` to a column in ``render``."""
        rx = 0
        for ch in self._chars[: max(cx, 0)]:
            if ch == "\t":
                rx += (TAB_STOP - 1) - (rx % TAB_STOP)
            rx += 1
        return rx

    def insert_char(self, at: int, c: str) -> None:
        """Insert one character at ``at``; out-of-range positions append."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if at < 0 or at > self.size:
            at = self.size
        self.chars = self._chars[:at] + c + self._chars[at:]

    def delete_char(self, at: int) -> bool:
        """Delete the character at ``at``; at the end of the row, the last one.

        Returns whether anything was removed.
        """
        if at < 0 or at > self.size:
            return False
        if at == self.size:
            at -= 1
        if at < 0:
            return False
        self.chars = self._chars[:at] + self._chars[at + 1 :]
        return True

    def append(self, text: str) -> None:
        """Append ``text`` to the end of the row."""
        self.chars = self._chars + text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._chars == other._chars

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Row({self._chars!r}, index={self.index})"