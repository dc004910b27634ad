"""Line buffer holding the document text.

The document is a list of lines without their terminators. Every edit
works on a single line (or a line and its neighbour), so each operation
costs O(length of the lines involved) plus the list shift for inserted
or removed lines.
"""

from typing import Iterator, List, Optional


class LineBuffer:
    """Ordered sequence of text lines, never empty."""

    def __init__(self, lines: Optional[List[str]] = None):
        self.lines: List[str] = list(lines) if lines else [""]

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        """Split file content into lines the way a line scanner does.

        A final newline does not produce a trailing empty line and a
        carriage return before each newline is dropped.
        """
        if not text:
            return cls()
        lines = text.split('\n')
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        return cls([line[:-1] if line.endswith('\r') else line for line in lines])

    def to_text(self) -> str:
        """Join lines with newlines; no trailing newline is added."""
        return '\n'.join(self.lines)

    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        return self.lines[index]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def split_at(self, line: int, column: int) -> None:
        """Break `line` at `column`, moving the suffix to a new line below."""
        text = self.lines[line]
        self.lines[line] = text[:column]
        self.lines.insert(line + 1, text[column:])

    def join_with_next(self, line: int) -> None:
        """Append the following line onto `line` and remove it.

        Raises:
            IndexError: if `line` is the last line.
        """
        if line + 1 >= len(self.lines):
            raise IndexError(f"no line after {line} to join")
        self.lines[line] += self.lines.pop(line + 1)

    def insert_char(self, line: int, column: int, ch: str) -> bool:
        """Insert `ch` at `column`. Returns False when `column` is out of range."""
        text = self.lines[line]
        if not 0 <= column <= len(text):
            return False
        self.lines[line] = text[:column] + ch + text[column:]
        return True

    def delete_char(self, line: int, column: int) -> bool:
        """Remove the character at `column`. Past end of line is a no-op."""
        text = self.lines[line]
        if not 0 <= column < len(text):
            return False
        self.lines[line] = text[:column] + text[column + 1:]
        return True

    def open_line_after(self, line: int) -> None:
        self.lines.insert(line + 1, "")

    def delete_line(self, line: int) -> None:
        """Remove a line; deleting the only line leaves one empty line."""
        del self.lines[line]
        if not self.lines:
            self.lines.append("")
