"""Cursor position and vertical scroll state."""

from dataclasses import dataclass

from .buffer import LineBuffer


@dataclass
class CursorModel:
    """Cursor (line, column) plus the index of the first visible line.

    Moves clamp at the document edges. Vertical moves keep the column
    as is; `normalize` truncates it to the new line's length, so there
    is no remembered "desired column".
    """
    line: int = 0
    column: int = 0
    scroll_offset: int = 0

    def move_left(self) -> None:
        if self.column > 0:
            self.column -= 1

    def move_right(self, buffer: LineBuffer) -> None:
        if self.column < len(buffer.line_at(self.line)):
            self.column += 1

    def move_up(self) -> None:
        if self.line > 0:
            self.line -= 1

    def move_down(self, buffer: LineBuffer) -> None:
        if self.line < buffer.line_count() - 1:
            self.line += 1

    def set_position(self, line: int, column: int) -> None:
        self.line = line
        self.column = column

    def normalize(self, buffer: LineBuffer, viewport_height: int) -> None:
        """Clamp the cursor into the buffer and scroll just enough to show it."""
        self.line = max(0, min(self.line, buffer.line_count() - 1))
        self.column = max(0, min(self.column, len(buffer.line_at(self.line))))

        height = max(1, viewport_height)
        if self.line >= self.scroll_offset + height:
            self.scroll_offset = self.line - height + 1
        if self.line < self.scroll_offset:
            self.scroll_offset = self.line
        self.scroll_offset = max(0, self.scroll_offset)
