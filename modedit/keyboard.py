"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


# Named keys that never collide with literal characters
SPECIAL_KEYS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'escape',
    'f1', 'f2', 'f3', 'f4', 'f5', 'f6', 'f7', 'f8', 'f9', 'f10', 'f11', 'f12',
}


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str = ""  # The raw token from curtsies
    is_alt: bool = False
    is_ctrl: bool = False

    @property
    def key(self) -> tuple[KeyType, str]:
        """Lookup key used by mode keymaps."""
        return (self.key_type, self.value)

    @property
    def is_printable(self) -> bool:
        return self.key_type == KeyType.REGULAR and self.value.isprintable()

    @classmethod
    def char(cls, ch: str) -> "KeyEvent":
        return cls(key_type=KeyType.REGULAR, value=ch, raw=ch)

    @classmethod
    def special(cls, name: str) -> "KeyEvent":
        if name not in SPECIAL_KEYS:
            raise ValueError(f"Unknown special key '{name}'")
        return cls(key_type=KeyType.SPECIAL, value=name, raw=f"<{name.upper()}>")


class KeyboardHandler:
    """Turns terminal key tokens into ``KeyEvent`` objects."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Get next key event, blocking when ``timeout`` is None."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        return parse_key(key)


def parse_key(key) -> KeyEvent:
    """Parse a curtsies key token into a KeyEvent.

    Args:
        key: Token such as ``'j'``, ``'<DOWN>'``, ``'<Ctrl-x>'`` or
            ``'<Esc+b>'``

    Returns:
        Parsed KeyEvent
    """
    key_str = str(key)

    # Curtsies-style key names like '<LEFT>', '<Ctrl-x>', '<Esc+b>'
    if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
        name = key_str[1:-1]
        lower = name.lower()
        # Support both '-' and '+' as modifier separators (e.g., '<Esc+u>')
        lower = lower.replace('+', '-')
        parts = lower.split('-') if '-' in lower else [lower]
        mods = set()
        base = parts[-1]
        if len(parts) > 1:
            mods = set(parts[:-1])
            # Keep the literal case of a modified character ('<Esc+G>')
            if len(base) == 1:
                base = name[-1]
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')
        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'
        elif base in ('esc', 'escape'):
            base = 'escape'

        # Named whitespace tokens are regular characters
        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=key_str)
        if base == 'tab' and not mods:
            return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
        if 'ctrl' in mods and len(base) == 1:
            # Ctrl-J / Ctrl-M are what terminals send for Enter
            if base.lower() in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            return KeyEvent(key_type=KeyType.CTRL, value=base.lower(), raw=key_str, is_ctrl=True)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
        if base in SPECIAL_KEYS:
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)
        # Unknown token: keep it as a named key so it cannot shadow a character
        return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)

    if len(key_str) == 1:
        o = ord(key_str)
        if o == 9:
            return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
        if o in (10, 13):
            return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
        if o in (8, 127):
            return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
        if o == 27:
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
        if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
            ch = chr(ord('a') + o - 1)
            return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

    # Regular character
    return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)
