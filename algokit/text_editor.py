"""A text editor buffer with a cursor, backed by two stacks."""

from __future__ import annotations

_PREVIEW_LENGTH = 10


class TextEditor:
    """Text buffer supporting typing, backspace and cursor movement."""

    def __init__(self) -> None:
        self._left: list[str] = []
        # Characters to the right of the cursor, nearest one last.
        self._right: list[str] = []

    def __str__(self) -> str:
        return "".join(self._left) + "".join(reversed(self._right))

    def add_text(self, text: str) -> None:
        """Insert ``text`` at the cursor; the cursor ends up after it."""
        self._left.extend(text)

    def delete_text(self, k: int) -> int:
        """Delete up to ``k`` characters left of the cursor; return how many went."""
        count = max(0, min(k, len(self._left)))
        if count:
            del self._left[-count:]
        return count

    def cursor_left(self, k: int) -> str:
        """Move the cursor up to ``k`` places left; return the text preview."""
        count = max(0, min(k, len(self._left)))
        if count:
            moved = self._left[-count:]
            del self._left[-count:]
            self._right.extend(reversed(moved))
        return self._preview()

    def cursor_right(self, k: int) -> str:
        """Move the cursor up to ``k`` places right; return the text preview."""
        count = max(0, min(k, len(self._right)))
        if count:
            moved = self._right[-count:]
            del self._right[-count:]
            self._left.extend(reversed(moved))
        return self._preview()

    def _preview(self) -> str:
        """The last (at most ten) characters left of the cursor."""
        return "".join(self._left[-_PREVIEW_LENGTH:])