"""Main editor controller."""

import logging
import os
import select
import signal
from typing import Optional

from .buffer import LineBuffer
from .commands import ModeController
from .constants import EditorConstants
from .cursor import CursorModel
from .interpreter import CommandInterpreter
from .keyboard import KeyboardHandler, KeyEvent
from .modes import Mode, NormalMode
from .storage import read_lines
from .terminal import TerminalError, TerminalInterface
from .view import Frame, ViewportRenderer

logger = logging.getLogger(__name__)


class Editor:
    """The single editor instance: buffer, cursor, mode and the event loop."""

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 interpreter: Optional[CommandInterpreter] = None):
        """Initialize the editor components.

        The terminal is only created when `run` is called, so an editor
        can be driven with synthetic key events without a TTY.
        """
        self.terminal = terminal
        self.buffer = LineBuffer()
        self.cursor = CursorModel()
        self.mode: Mode = NormalMode()
        self.controller = ModeController()
        self.interpreter = interpreter or CommandInterpreter()
        self.renderer = ViewportRenderer()
        self.running = False
        self.columns = EditorConstants.DEFAULT_COLUMNS
        self.rows = EditorConstants.DEFAULT_ROWS

    @property
    def text_height(self) -> int:
        return self.renderer.text_height(self.rows)

    def resize(self, columns: int, rows: int) -> None:
        """Record a new viewport size and keep the cursor visible in it."""
        self.columns = columns
        self.rows = rows
        self.cursor.normalize(self.buffer, self.text_height)

    def load_file(self, filename: str):
        """Load a file into the editor.

        A missing or unreadable file leaves an empty document.

        Args:
            filename: Path to file to load
        """
        self.buffer = LineBuffer(read_lines(filename))
        self.cursor = CursorModel()

    def handle_key_event(self, key_event: KeyEvent) -> bool:
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information

        Returns:
            True if the buffer was modified
        """
        modified = self.controller.dispatch(self, key_event)
        self.cursor.normalize(self.buffer, self.text_height)
        return modified

    def frame(self) -> Frame:
        """Compute the frame to paint for the current state."""
        self.cursor.normalize(self.buffer, self.text_height)
        return self.renderer.render(self.buffer, self.cursor, self.mode,
                                    self.columns, self.rows)

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop until a quit command.

        Raises:
            TerminalError: if the terminal cannot be initialized or input fails
        """
        if self.terminal is None:
            self.terminal = TerminalInterface()
        keyboard = KeyboardHandler(self.terminal)
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)
        try:
            self.terminal.setup()
            self.running = True
            while self.running:
                self.resize(self.terminal.width, self.terminal.height)
                self.terminal.paint(self.frame())

                # Wait for input on stdin or resize pipe
                ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
                if self._resize_pipe_r in ready:
                    os.read(self._resize_pipe_r, 1024)
                    self.terminal.invalidate_frame()
                    continue
                key_event = keyboard.get_key_event(timeout=0)
                # Drain keys already buffered, e.g. the rest of a paste
                while key_event:
                    self.handle_key_event(key_event)
                    if not self.running:
                        break
                    key_event = keyboard.get_key_event(timeout=0)
        except OSError as e:
            raise TerminalError(f"terminal I/O failed: {e}") from e
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self.terminal.cleanup()
