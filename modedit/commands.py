"""Editor commands and the registry of modes that bind them.

Commands are small immutable values. ``execute_command`` is the one
place that knows what each of them does, so the same command value can
be bound to any number of keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Union

from .modes import EditorMode, Mode

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class MoveCursor:
    dy: int
    dx: int


@dataclass(frozen=True)
class MoveToLineEdge:
    to_end: bool


@dataclass(frozen=True)
class MoveToFileEdge:
    to_end: bool


@dataclass(frozen=True)
class MovePage:
    direction: int  # +1 forward, -1 backward


@dataclass(frozen=True)
class ToggleLineNumbers:
    pass


@dataclass(frozen=True)
class OpenFile:
    pass


@dataclass(frozen=True)
class BeginSearch:
    pass


@dataclass(frozen=True)
class EnterMode:
    mode: EditorMode


Command = Union[
    Quit,
    MoveCursor,
    MoveToLineEdge,
    MoveToFileEdge,
    MovePage,
    ToggleLineNumbers,
    OpenFile,
    BeginSearch,
    EnterMode,
]


def execute_command(editor: 'Editor', command: Command) -> EditorMode:
    """Run ``command`` against ``editor``.

    Returns:
        The mode the editor should be in afterwards.
    """
    if isinstance(command, Quit):
        editor.quit = True
        return editor.mode
    if isinstance(command, MoveCursor):
        editor.move_point(command.dy, command.dx)
        return editor.mode
    if isinstance(command, MoveToLineEdge):
        editor.move_to_line_edge(command.to_end)
        return editor.mode
    if isinstance(command, MoveToFileEdge):
        editor.move_to_file_edge(command.to_end)
        return editor.mode
    if isinstance(command, MovePage):
        editor.move_page(command.direction)
        return editor.mode
    if isinstance(command, ToggleLineNumbers):
        editor.line_number_show = not editor.line_number_show
        editor.mark_redisplay()
        return editor.mode
    if isinstance(command, OpenFile):
        editor.open_file()
        return EditorMode.COMMAND
    if isinstance(command, BeginSearch):
        editor.begin_search()
        return EditorMode.SEARCH
    if isinstance(command, EnterMode):
        return command.mode
    raise TypeError(f"Unknown command: {command!r}")


class ModeRegistry:
    """Registry of the editor's modes and their default key bindings."""

    def __init__(self):
        self._modes: Dict[EditorMode, Mode] = {}
        self._setup_default_modes()

    def _setup_default_modes(self):
        """Set up the default modes and key mappings."""
        cmd_mode = Mode(EditorMode.COMMAND)
        cmd_mode.add_command(['q'], Quit())

        # Cursor movement
        cmd_mode.add_command(['j', '<DOWN>'], MoveCursor(dy=1, dx=0))
        cmd_mode.add_command(['k', '<UP>'], MoveCursor(dy=-1, dx=0))
        cmd_mode.add_command(['l', '<RIGHT>'], MoveCursor(dy=0, dx=1))
        cmd_mode.add_command(['h', '<LEFT>'], MoveCursor(dy=0, dx=-1))
        cmd_mode.add_command(['^', '0', '<HOME>'], MoveToLineEdge(to_end=False))
        cmd_mode.add_command(['$', '<END>'], MoveToLineEdge(to_end=True))
        cmd_mode.add_command(['g'], MoveToFileEdge(to_end=False))
        cmd_mode.add_command(['G'], MoveToFileEdge(to_end=True))

        # Paging
        cmd_mode.add_command(['<SPACE>', '<PAGEDOWN>'], MovePage(direction=1))
        cmd_mode.add_command(['<PAGEUP>'], MovePage(direction=-1))

        # Display, files, search
        cmd_mode.add_command(['.'], ToggleLineNumbers())
        cmd_mode.add_command(['o'], OpenFile())
        cmd_mode.add_command(['/'], BeginSearch())

        # Insert and search have no editing bindings; Escape leaves them
        insert_mode = Mode(EditorMode.INSERT)
        insert_mode.add_command(['<ESC>'], EnterMode(EditorMode.COMMAND))
        search_mode = Mode(EditorMode.SEARCH)
        search_mode.add_command(['<ESC>'], EnterMode(EditorMode.COMMAND))

        for mode in (cmd_mode, insert_mode, search_mode):
            self.register(mode)

    def register(self, mode: Mode):
        """Register (or replace) the keymap for ``mode.editor_mode``."""
        self._modes[mode.editor_mode] = mode

    def get_mode(self, editor_mode: EditorMode) -> Mode:
        return self._modes[editor_mode]

    def lookup(self, editor_mode: EditorMode, key_event: 'KeyEvent') -> Optional[Command]:
        """Get the command bound to ``key_event`` in ``editor_mode``."""
        command = self._modes[editor_mode].lookup(key_event)
        if command is None:
            logger.debug("Unbound key %r in %s mode", key_event.raw, editor_mode.value)
        return command
