"""Lines, buffers and the buffer registry."""

from __future__ import annotations

import logging
import os
from typing import Iterator, Optional

from .gapline import GapLine

logger = logging.getLogger(__name__)


class BufferLoadError(Exception):
    """Raised when a file exists but cannot be read into a buffer."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


class Line:
    """One line of a buffer, backed by a gap buffer."""

    def __init__(self, line_number: int, text: str = ""):
        self.line_number = line_number
        self.store = GapLine.from_str(text)

    @property
    def text(self) -> str:
        return self.store.to_string()

    def size(self) -> int:
        """Number of characters (Unicode scalar values) in the line."""
        return len(self.store)

    def __repr__(self) -> str:
        return f"Line({self.line_number}, {self.text!r})"


class Buffer:
    """An ordered list of lines loaded from a file."""

    def __init__(self, file_path: str, lines: Optional[list[Line]] = None,
                 buffer_name: Optional[str] = None):
        self.file_path = file_path
        self.buffer_name = buffer_name if buffer_name is not None else file_path
        self.lines: list[Line] = lines if lines else [Line(0)]
        self.modified = False

    @classmethod
    def load(cls, path: str) -> "Buffer":
        """Read ``path`` into a new buffer, one ``Line`` per text line.

        Args:
            path: File to read (UTF-8).

        Returns:
            The loaded buffer.

        Raises:
            FileNotFoundError: If the file does not exist.
            BufferLoadError: For any other read or decode failure.
        """
        lines = []
        try:
            with open(path, 'r', encoding='utf-8') as f:
                for i, raw in enumerate(f):
                    text = raw[:-1] if raw.endswith('\n') else raw
                    if text.endswith('\r'):
                        text = text[:-1]
                    logger.info("%s", text)
                    lines.append(Line(i, text))
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise BufferLoadError(path, e) from e
        return cls(os.fspath(path), lines)

    @classmethod
    def empty(cls, path: str) -> "Buffer":
        """Create a buffer with a single blank line for ``path``."""
        return cls(os.fspath(path), [Line(0)])

    @classmethod
    def open(cls, path: str) -> "Buffer":
        """Load ``path``, or start an empty buffer if it does not exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            logger.info("New file: %s", path)
            return cls.empty(path)

    def line_count(self) -> int:
        return len(self.lines)

    def line(self, index: int) -> Line:
        """Return line ``index``; callers must keep it below ``line_count()``."""
        if not 0 <= index < len(self.lines):
            raise IndexError(f"line {index} out of range (0..{len(self.lines) - 1})")
        return self.lines[index]

    def insert_text(self, index: int, column: int, text: str) -> int:
        """Insert ``text`` into line ``index`` at ``column``.

        Returns:
            The column just after the inserted text.
        """
        new_column = self.line(index).store.insert_at(column, text)
        self.modified = True
        return new_column

    def delete_char(self, index: int, column: int) -> bool:
        """Delete the character before ``column`` on line ``index``.

        Returns:
            True if a character was removed.
        """
        removed = self.line(index).store.delete_before(column)
        if removed:
            self.modified = True
        return bool(removed)


class BufferList:
    """Registry of open buffers with one current selection.

    The list is created with its first buffer and never becomes empty.
    """

    def __init__(self, first_buffer: Buffer):
        self.buffers: list[Buffer] = [first_buffer]
        self.current_index = 0

    def append(self, buffer: Buffer):
        """Add ``buffer`` and make it current."""
        self.buffers.append(buffer)
        self.current_index = len(self.buffers) - 1

    def current(self) -> Buffer:
        return self.buffers[self.current_index]

    def __len__(self) -> int:
        return len(self.buffers)

    def __iter__(self) -> Iterator[Buffer]:
        return iter(self.buffers)
