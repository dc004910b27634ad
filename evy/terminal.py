"""Terminal interface using Blessed for display and Curtsies for input."""

import blessed
from collections import deque
from typing import Optional

from curtsies.events import PasteEvent

from .view import Frame


class TerminalError(Exception):
    """The terminal could not be set up or stopped delivering key events."""


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        # Keys from a paste that have not been handed out yet
        self._pending: deque[str] = deque()
        # Last painted frame, for minimal updates
        self._last_lines: list[str] | None = None
        self._last_status: str | None = None
        self._last_size: tuple[int, int] | None = None

    def setup(self):
        """Enter fullscreen and raw input mode.

        Raises:
            TerminalError: if raw keyboard input cannot be initialized
        """
        # Ctrl-C arrives as an ordinary (ignored) key event instead of SIGINT
        try:
            from curtsies import Input  # type: ignore
            self._curtsies_input = Input(keynames='curtsies', sigint_event=True)  # type: ignore
            self._curtsies_input.__enter__()
        except Exception as e:
            # curtsies raises a mix of termios, OS and its own errors when
            # stdin is not a usable terminal
            self._curtsies_input = None
            raise TerminalError(f"cannot put terminal into raw mode: {e}") from e
        print(self.term.enter_fullscreen, end='')
        print(self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        self.invalidate_frame()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            print(self.term.normal + self.term.exit_fullscreen, end='')
            print(self.term.normal_cursor, end='', flush=True)
            self.is_fullscreen = False
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)  # type: ignore
            finally:
                self._curtsies_input = None

    def invalidate_frame(self) -> None:
        """Forget the last painted frame so the next paint does a full clear."""
        self._last_lines = None
        self._last_status = None
        self._last_size = None

    def paint(self, frame: Frame) -> None:
        """Diff against the last frame and write only changed rows.

        Falls back to a full clear on first paint or when the size changes.
        """
        width = self.term.width
        size = (width, self.term.height)
        if self._last_lines is None or self._last_size != size or len(self._last_lines) != len(frame.lines):
            print(self.term.home + self.term.clear, end='')
            self._last_lines = ["" for _ in frame.lines]
            self._last_status = None
            self._last_size = size

        for y, line in enumerate(frame.lines):
            if line != self._last_lines[y]:
                print(self.term.move(y, 0) + line + self.term.clear_eol, end='')
                self._last_lines[y] = line

        if frame.status != self._last_status:
            if frame.command_line:
                status_text = frame.status[:width]
            else:
                status_text = self.term.reverse + frame.status[:width] + self.term.normal
            print(self.term.move(frame.status_row, 0) + status_text + self.term.clear_eol, end='')
            self._last_status = frame.status

        print(self.term.move(frame.cursor_y, frame.cursor_x) + self.term.normal_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if no key arrived in time. A
            paste is returned one key per call.

        Raises:
            TerminalError: if input is not set up or the input stream failed
        """
        if self._pending:
            return self._pending.popleft()
        if self._curtsies_input is None:
            raise TerminalError("keyboard input is not initialized")
        try:
            # send() returns queued events first and None on timeout
            evt = self._curtsies_input.send(timeout)  # type: ignore
        except (OSError, StopIteration) as e:
            raise TerminalError(f"keyboard input failed: {e}") from e
        if isinstance(evt, PasteEvent):
            # curtsies batches fast input into one event; replay it key by key
            self._pending.extend(str(key) for key in evt.events)
            return self._pending.popleft() if self._pending else None
        return str(evt) if evt is not None else None

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows, including the status line."""
        return self.term.height
