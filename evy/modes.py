"""Editor modes.

Each mode is its own type so that mode-specific data only exists while
that mode is active: the command line text lives on `CommandMode` and
disappears when the editor leaves it.
"""

from dataclasses import dataclass
from typing import Union

from .constants import EditorConstants


@dataclass(frozen=True)
class NormalMode:
    """Navigation and single-key commands."""

    @property
    def status(self) -> str:
        return EditorConstants.NORMAL_STATUS


@dataclass(frozen=True)
class InsertMode:
    """Text entry."""

    @property
    def status(self) -> str:
        return EditorConstants.INSERT_STATUS


@dataclass(frozen=True)
class CommandMode:
    """Ex-style command line being typed after ':'."""
    text: str = ""

    @property
    def status(self) -> str:
        return EditorConstants.COMMAND_PROMPT + self.text

    def append(self, ch: str) -> "CommandMode":
        return CommandMode(self.text + ch)

    def backspace(self) -> "CommandMode":
        return CommandMode(self.text[:-1])


Mode = Union[NormalMode, InsertMode, CommandMode]
