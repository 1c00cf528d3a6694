"""Editor modes and their keymaps."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Optional, Tuple, Union

from .keyboard import KeyEvent, KeyType, parse_key

if TYPE_CHECKING:
    from .commands import Command


class EditorMode(Enum):
    """The modes the editor can be in. Values are the mode-line names."""
    COMMAND = "CMD"
    INSERT = "INSERT"
    SEARCH = "SEARCH"


class Mode:
    """A named mapping from key events to commands.

    ``fallback`` is consulted for keys with no binding. It receives the
    key event and returns a command or None. None of the default modes
    set it; it is where behaviour such as self-inserting characters in
    insert mode would plug in.
    """

    def __init__(self, editor_mode: EditorMode,
                 fallback: Optional[Callable[[KeyEvent], Optional["Command"]]] = None):
        self.editor_mode = editor_mode
        self.name = editor_mode.value
        self.keymap: Dict[Tuple[KeyType, str], "Command"] = {}
        self.fallback = fallback

    def add_command(self, keys: Iterable[Union[str, KeyEvent]], command: "Command"):
        """Bind every key in ``keys`` to ``command``.

        Keys are curtsies tokens (``'j'``, ``'<DOWN>'``) or KeyEvents.
        """
        for key in keys:
            event = key if isinstance(key, KeyEvent) else parse_key(key)
            self.keymap[event.key] = command

    def lookup(self, key_event: KeyEvent) -> Optional["Command"]:
        command = self.keymap.get(key_event.key)
        if command is None and self.fallback is not None:
            command = self.fallback(key_event)
        return command

    def __repr__(self) -> str:
        return f"Mode({self.name!r}, {len(self.keymap)} bindings)"
