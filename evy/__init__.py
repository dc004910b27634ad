"""evy - A minimal modal text editor for the terminal."""

from .buffer import LineBuffer
from .cursor import CursorModel
from .modes import CommandMode, InsertMode, Mode, NormalMode
from .view import Frame, ViewportRenderer

__all__ = [
    'LineBuffer',
    'CursorModel',
    'Mode',
    'NormalMode',
    'InsertMode',
    'CommandMode',
    'Frame',
    'ViewportRenderer',
]
