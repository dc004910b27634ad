"""Viewport computation: which lines are visible and where the cursor goes."""

from dataclasses import dataclass
from typing import Tuple

from .buffer import LineBuffer
from .cursor import CursorModel
from .modes import CommandMode, Mode


@dataclass(frozen=True)
class Frame:
    """Everything the terminal needs to paint one screen.

    `lines` holds one entry per text row, already clipped to the
    terminal width; rows past the end of the document are empty.
    The cursor position is in screen cells.
    """
    lines: Tuple[str, ...]
    status: str
    cursor_x: int
    cursor_y: int
    command_line: bool = False

    @property
    def status_row(self) -> int:
        return len(self.lines)


class ViewportRenderer:
    """Computes frames for a terminal of a given size."""

    def text_height(self, rows: int) -> int:
        """Rows available for text; the last row is the status line."""
        return max(1, rows - 1)

    def render(self, buffer: LineBuffer, cursor: CursorModel, mode: Mode,
               columns: int, rows: int) -> Frame:
        """Build the frame for a normalized cursor.

        Args:
            buffer: Document lines
            cursor: Cursor state, already normalized for this height
            mode: Active mode, which decides the status row content
            columns: Terminal width
            rows: Terminal height, including the status row
        """
        height = self.text_height(rows)
        width = max(0, columns)
        visible = []
        for row in range(height):
            index = row + cursor.scroll_offset
            if index < buffer.line_count():
                # A tab occupies one cell so cursor_x matches the column
                visible.append(buffer.line_at(index)[:width].replace('\t', ' '))
            else:
                visible.append("")

        if isinstance(mode, CommandMode):
            # Cursor sits just after the typed text, past the ':' prompt
            return Frame(lines=tuple(visible), status=mode.status,
                         cursor_x=len(mode.text) + 1, cursor_y=height,
                         command_line=True)

        return Frame(lines=tuple(visible), status=mode.status,
                     cursor_x=cursor.column,
                     cursor_y=cursor.line - cursor.scroll_offset)
