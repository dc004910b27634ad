"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"  # A literal character to insert or type
    CTRL = "ctrl"
    SPECIAL = "special"  # A named key such as 'escape' or 'left'


@dataclass(frozen=True)
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The character, or the key name (e.g., 'left', 'backspace')
    raw: str  # The token as delivered by the terminal

    @property
    def is_char(self) -> bool:
        return self.key_type == KeyType.REGULAR

    def is_named(self, name: str) -> bool:
        return self.key_type == KeyType.SPECIAL and self.value == name


# Control letters that terminals send in place of a named key
_CTRL_ALIASES = {
    'j': 'enter',
    'm': 'enter',
    'h': 'backspace',
    '[': 'escape',
}

_NAMED_KEYS = {
    'left', 'right', 'up', 'down', 'enter', 'backspace', 'delete',
    'home', 'end', 'page_up', 'page_down', 'insert',
}


class KeyboardHandler:
    """Turns terminal key tokens into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, or None if no key arrived."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> Optional[KeyEvent]:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: token such as 'a', '<LEFT>', '<Ctrl-j>' or '<SPACE>'

        Returns:
            Parsed KeyEvent, or None for an empty token
        """
        key_str = str(key)
        if not key_str:
            return None

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower().replace('+', '-')
            parts = name.split('-')
            base = parts[-1] or '-'
            mods = set(parts[:-1])

            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'

            # Space and Tab are typed text, not commands
            if base in ('space', 'spacebar', 'spc') and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
            if base == 'tab' and not mods:
                return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
            if base in ('esc', 'escape') and not mods:
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if 'ctrl' in mods and len(base) == 1:
                if base in _CTRL_ALIASES:
                    return KeyEvent(key_type=KeyType.SPECIAL, value=_CTRL_ALIASES[base], raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str)
            if base in _NAMED_KEYS and not mods:
                return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
            # Unknown or modified token: a named key no mode acts on
            return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o == 0x1b:
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if o in (0x7f, 0x08):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if key_str in ('\r', '\n'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if 1 <= o <= 26 and key_str != '\t':
                return KeyEvent(key_type=KeyType.CTRL, value=chr(ord('a') + o - 1), raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

