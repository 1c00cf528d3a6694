"""Terminal interface using Blessed for display and Curtsies for input."""

import select
import sys
from contextlib import contextmanager
from typing import Optional

import blessed
from curtsies import Input

from .keyboard import KeyboardHandler, KeyType


class TerminalInterface:
    """Owns the full-screen terminal for the lifetime of the editor.

    Use it as a context manager: entering sets up fullscreen and raw
    input, leaving restores the terminal on every exit path.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self.echoing = False
        self._input: Optional[Input] = None

    def setup(self):
        """Enter fullscreen mode and start reading raw keys."""
        print(self.term.enter_fullscreen + self.term.clear, end='', flush=True)
        self.is_fullscreen = True
        if self._input is None:
            self._input = Input(keynames='curtsies')
            self._input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        try:
            if self._input is not None:
                self._input.__exit__(None, None, None)
        finally:
            self._input = None
            if self.is_fullscreen:
                print(self.term.exit_fullscreen + self.term.normal_cursor, end='', flush=True)
                self.is_fullscreen = False

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()
        return False

    @contextmanager
    def echo(self):
        """Echo typed characters while active, then restore the previous state."""
        previous = self.echoing
        self.echoing = True
        try:
            yield
        finally:
            self.echoing = previous

    def move(self, y: int, x: int) -> str:
        """Return the sequence that moves the cursor to row ``y``, column ``x``."""
        return self.term.move_yx(y, x)

    def write(self, text: str):
        print(text, end='')

    def flush(self):
        sys.stdout.flush()

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key token, or None on timeout.
        """
        if self._input is None:
            raise RuntimeError("terminal input is not active; call setup() first")
        if timeout is None:
            return str(next(self._input))  # blocks
        r, _, _ = select.select([sys.stdin], [], [], float(timeout))
        if not r:
            return None
        return str(next(self._input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows."""
        return self.term.height


class Window:
    """A rectangular region of the terminal with its own coordinates."""

    def __init__(self, terminal, nlines: int, ncols: int, begin_y: int = 0, begin_x: int = 0,
                 keyboard: Optional[KeyboardHandler] = None):
        self.terminal = terminal
        self.keyboard = keyboard or KeyboardHandler(terminal)
        self.nlines = max(0, nlines)
        self.ncols = max(0, ncols)
        self.begin_y = begin_y
        self.begin_x = begin_x
        self.cursor_y = 0
        self.cursor_x = 0

    def get_height(self) -> int:
        return self.nlines

    def get_width(self) -> int:
        return self.ncols

    def move_cursor(self, y: int, x: int):
        self.cursor_y = y
        self.cursor_x = x
        self.terminal.write(self.terminal.move(self.begin_y + y, self.begin_x + x))

    def display_line(self, y: int, x: int, text: str):
        """Write ``text`` at row ``y``, column ``x`` of this window."""
        self.move_cursor(y, x)
        self.display_str(text)

    def display_str(self, text: str):
        """Write ``text`` at the current position, clipped to the window."""
        if not 0 <= self.cursor_y < self.nlines:
            return
        visible = text[:max(0, self.ncols - self.cursor_x)]
        if visible:
            self.terminal.write(visible)
            self.cursor_x += len(visible)

    def clear(self):
        blank = ' ' * self.ncols
        for y in range(self.nlines):
            self.terminal.write(self.terminal.move(self.begin_y + y, self.begin_x) + blank)
        self.move_cursor(0, 0)

    def refresh(self):
        self.terminal.flush()

    def wait_for_key(self):
        """Block until one key is pressed and return its event."""
        event = None
        while event is None:
            event = self.keyboard.get_key_event()
        return event

    def read_line(self, prompt: str) -> str:
        """Prompt on the first row and read a line of text.

        Enter accepts, Escape cancels (returns an empty string),
        Backspace removes the last character.
        """
        self.clear()
        self.display_line(0, 0, prompt)
        self.refresh()
        chars: list[str] = []
        with self.terminal.echo():
            while True:
                event = self.wait_for_key()
                if event.key_type == KeyType.SPECIAL and event.value == 'enter':
                    break
                if event.key_type == KeyType.SPECIAL and event.value == 'escape':
                    chars = []
                    break
                if event.key_type == KeyType.SPECIAL and event.value == 'backspace':
                    if chars:
                        chars.pop()
                        self.clear()
                        self.display_line(0, 0, prompt + ''.join(chars))
                elif event.is_printable:
                    chars.append(event.value)
                    if self.terminal.echoing:
                        self.display_str(event.value)
                self.refresh()
        self.clear()
        return ''.join(chars)
