"""Ex-style command line interpreter (':w', ':q', ':wq')."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, TYPE_CHECKING

from .constants import EditorConstants
from .storage import write_text

if TYPE_CHECKING:
    from .editor import Editor

logger = logging.getLogger(__name__)

Writer = Callable[[str, str], None]


class ExCommand(ABC):
    """Base class for commands typed on the command line."""

    @abstractmethod
    def run(self, editor: 'Editor', args: List[str]) -> None:
        """Run the command.

        Args:
            editor: Editor instance
            args: Words following the command name
        """
        pass


class QuitExCommand(ExCommand):
    """Stop the editor. Unsaved changes are not checked."""

    def run(self, editor, args):
        editor.running = False


class WriteExCommand(ExCommand):
    """Write the buffer to the given path or the default save path.

    Write failures are logged and otherwise ignored; the buffer is
    never touched by a save.
    """

    def __init__(self, writer: Writer):
        self.writer = writer

    def run(self, editor, args):
        filename = args[0] if args else EditorConstants.DEFAULT_SAVE_PATH
        try:
            self.writer(filename, editor.buffer.to_text())
        except OSError as e:
            logger.warning(f"Could not write {filename}: {e}")
        else:
            logger.info(f"Wrote {editor.buffer.line_count()} lines to {filename}")


class WriteQuitExCommand(ExCommand):
    def __init__(self, write: WriteExCommand, quit_command: QuitExCommand):
        self.write = write
        self.quit_command = quit_command

    def run(self, editor, args):
        self.write.run(editor, args)
        self.quit_command.run(editor, args)


class CommandInterpreter:
    """Registry mapping command names to ExCommands."""

    def __init__(self, writer: Optional[Writer] = None):
        self.writer = writer or write_text
        self._commands: Dict[str, ExCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        write = WriteExCommand(self.writer)
        quit_command = QuitExCommand()
        self.register("q", quit_command)
        self.register("w", write)
        self.register("wq", WriteQuitExCommand(write, quit_command))

    def register(self, name: str, command: ExCommand):
        """Register a command under a name."""
        self._commands[name] = command

    def get_command(self, name: str) -> Optional[ExCommand]:
        return self._commands.get(name)

    def execute(self, editor: 'Editor', command_line: str) -> bool:
        """Parse and run a committed command line.

        Returns:
            True if a command was recognized and run
        """
        words = command_line.split()
        if not words:
            return False
        name, args = words[0], words[1:]
        command = self.get_command(name)
        if command is None:
            logger.debug(f"Ignoring unknown command {name!r}")
            return False
        command.run(editor, args)
        return True
