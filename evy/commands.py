"""Command pattern implementation for modal key handling."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple, Type, TYPE_CHECKING
from .keyboard import KeyType
from .modes import CommandMode, InsertMode, Mode, NormalMode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the buffer
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the buffer."""
        self._move(editor)
        return False

    @abstractmethod
    def _move(self, editor: 'Editor'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    def _move(self, editor):
        editor.cursor.move_left()


class RightCharCommand(MovementCommand):
    def _move(self, editor):
        editor.cursor.move_right(editor.buffer)


class UpLineCommand(MovementCommand):
    def _move(self, editor):
        editor.cursor.move_up()


class DownLineCommand(MovementCommand):
    def _move(self, editor):
        editor.cursor.move_down(editor.buffer)


class EditCommand(EditorCommand):
    """Base class for buffer editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return self._edit(editor, key_event)

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Perform the edit, returning True if the buffer changed."""
        pass


class ModeCommand(EditorCommand):
    """Base class for commands that only switch mode."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.mode = self._next_mode(editor)
        return False

    @abstractmethod
    def _next_mode(self, editor: 'Editor') -> Mode:
        pass


# --- Normal mode ---

class EnterInsertCommand(ModeCommand):
    def _next_mode(self, editor):
        return InsertMode()


class EnterCommandLineCommand(ModeCommand):
    def _next_mode(self, editor):
        return CommandMode()


class OpenLineBelowCommand(EditCommand):
    def _edit(self, editor, key_event):
        line = editor.cursor.line
        editor.buffer.open_line_after(line)
        editor.cursor.set_position(line + 1, 0)
        editor.mode = InsertMode()
        return True


class DeleteCharUnderCursorCommand(EditCommand):
    def _edit(self, editor, key_event):
        # No-op on an empty line or with the cursor past the last character
        return editor.buffer.delete_char(editor.cursor.line, editor.cursor.column)


# --- Insert mode ---

class LeaveToNormalCommand(ModeCommand):
    def _next_mode(self, editor):
        return NormalMode()


class SplitLineCommand(EditCommand):
    def _edit(self, editor, key_event):
        line = editor.cursor.line
        editor.buffer.split_at(line, editor.cursor.column)
        editor.cursor.set_position(line + 1, 0)
        return True


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        if cursor.column > 0:
            editor.buffer.delete_char(cursor.line, cursor.column - 1)
            cursor.column -= 1
            return True
        if cursor.line > 0:
            previous = cursor.line - 1
            join_point = len(editor.buffer.line_at(previous))
            editor.buffer.join_with_next(previous)
            cursor.set_position(previous, join_point)
            return True
        return False


class InsertCharCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        if not editor.buffer.insert_char(cursor.line, cursor.column, key_event.value):
            return False
        cursor.column += len(key_event.value)
        return True


# --- Command mode ---

class CommitCommandLineCommand(EditorCommand):
    """Run the typed command line, then return to Normal mode."""

    def execute(self, editor, key_event):
        text = editor.mode.text
        editor.mode = NormalMode()
        editor.interpreter.execute(editor, text)
        return False


class CommandLineBackspaceCommand(EditorCommand):
    """Drop the last typed character; on an empty line leave Command mode."""

    def execute(self, editor, key_event):
        if editor.mode.text:
            editor.mode = editor.mode.backspace()
        else:
            editor.mode = NormalMode()
        return False


class AppendCommandLineCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.mode = editor.mode.append(key_event.value)
        return False


KeyBinding = Tuple[KeyType, str]


class ModeController:
    """Routes key events to the commands bound in the active mode.

    Each mode has its own key map plus an optional command for literal
    characters that have no binding of their own. Keys with neither are
    ignored.
    """

    def __init__(self):
        self._keymaps: Dict[Type, Dict[KeyBinding, EditorCommand]] = {
            NormalMode: {},
            InsertMode: {},
            CommandMode: {},
        }
        self._text_commands: Dict[Type, EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default key bindings for every mode."""
        left, right = LeftCharCommand(), RightCharCommand()
        up, down = UpLineCommand(), DownLineCommand()
        arrows = {'left': left, 'right': right, 'up': up, 'down': down}

        # Normal mode
        for name, command in arrows.items():
            self.register(NormalMode, (KeyType.SPECIAL, name), command)
        self.register(NormalMode, (KeyType.REGULAR, 'h'), left)
        self.register(NormalMode, (KeyType.REGULAR, 'j'), down)
        self.register(NormalMode, (KeyType.REGULAR, 'k'), up)
        self.register(NormalMode, (KeyType.REGULAR, 'l'), right)
        self.register(NormalMode, (KeyType.REGULAR, 'i'), EnterInsertCommand())
        self.register(NormalMode, (KeyType.REGULAR, 'o'), OpenLineBelowCommand())
        self.register(NormalMode, (KeyType.REGULAR, 'x'), DeleteCharUnderCursorCommand())
        self.register(NormalMode, (KeyType.REGULAR, ':'), EnterCommandLineCommand())

        # Insert mode
        for name, command in arrows.items():
            self.register(InsertMode, (KeyType.SPECIAL, name), command)
        self.register(InsertMode, (KeyType.SPECIAL, 'escape'), LeaveToNormalCommand())
        self.register(InsertMode, (KeyType.SPECIAL, 'enter'), SplitLineCommand())
        self.register(InsertMode, (KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register_text(InsertMode, InsertCharCommand())

        # Command mode
        self.register(CommandMode, (KeyType.SPECIAL, 'escape'), LeaveToNormalCommand())
        self.register(CommandMode, (KeyType.SPECIAL, 'enter'), CommitCommandLineCommand())
        self.register(CommandMode, (KeyType.SPECIAL, 'backspace'), CommandLineBackspaceCommand())
        self.register_text(CommandMode, AppendCommandLineCommand())

    def register(self, mode: Type, key: KeyBinding, command: EditorCommand):
        """Register a command for a key in one mode."""
        self._keymaps[mode][key] = command

    def register_text(self, mode: Type, command: EditorCommand):
        """Register the command that receives unbound literal characters."""
        self._text_commands[mode] = command

    def get_command(self, mode: Mode, key_event: 'KeyEvent') -> Optional[EditorCommand]:
        """Get the command for a key event in the given mode."""
        mode_type = type(mode)
        command = self._keymaps[mode_type].get((key_event.key_type, key_event.value))
        if command is None and key_event.is_char:
            command = self._text_commands.get(mode_type)
        return command

    def dispatch(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command bound to the event in the editor's mode.

        Returns:
            True if the buffer was modified
        """
        command = self.get_command(editor.mode, key_event)
        if command is None:
            return False
        return command.execute(editor, key_event)
