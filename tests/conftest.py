"""Shared fixtures: a fake terminal that records a character grid."""

import re
from contextlib import contextmanager

import pytest

from modedit.editor import Editor
from modedit.model import Buffer, Line

MOVE_RE = re.compile(r'\x1b\[(\d+);(\d+)H')


class FakeTerminal:
    """Stands in for TerminalInterface.

    Keys are curtsies-style tokens popped from a queue. Output is applied
    to an in-memory screen so tests can read rows back.
    """

    def __init__(self, height=11, width=80, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.echoing = False
        self.setup_calls = 0
        self.cleanup_calls = 0
        self.flushes = 0
        self.y = 0
        self.x = 0
        self.grid = [[' '] * width for _ in range(height)]

    def setup(self):
        self.setup_calls += 1

    def cleanup(self):
        self.cleanup_calls += 1

    def __enter__(self):
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.cleanup()
        return False

    @contextmanager
    def echo(self):
        previous = self.echoing
        self.echoing = True
        try:
            yield
        finally:
            self.echoing = previous

    def move(self, y, x):
        return f'\x1b[{y};{x}H'

    def write(self, text):
        parts = MOVE_RE.split(text)
        self._put(parts[0])
        for i in range(1, len(parts), 3):
            self.y = int(parts[i])
            self.x = int(parts[i + 1])
            self._put(parts[i + 2])

    def _put(self, text):
        for ch in text:
            if 0 <= self.y < self.height and 0 <= self.x < self.width:
                self.grid[self.y][self.x] = ch
            self.x += 1

    def flush(self):
        self.flushes += 1

    def get_key(self, timeout=None):
        if not self.keys:
            raise AssertionError("no more keys queued")
        return self.keys.pop(0)

    def row(self, y):
        return ''.join(self.grid[y]).rstrip()


def make_buffer(lines, path="test.txt"):
    return Buffer(path, [Line(i, text) for i, text in enumerate(lines)])


@pytest.fixture
def make_editor():
    """Factory for an Editor on a FakeTerminal.

    ``height`` is the full screen; the buffer window is one row shorter.
    """
    def _make(lines=("",), height=11, width=80, keys=(), buffer=None, settings=None):
        terminal = FakeTerminal(height=height, width=width, keys=keys)
        return Editor(buffer or make_buffer(lines), terminal=terminal, settings=settings)
    return _make
