"""Gap buffer storage for a single line of text."""

from .constants import EditorConstants


class GapLine:
    """A single line of text stored as a gap buffer.

    The backing list holds the text before the gap, the gap itself
    (placeholder cells), and the text after the gap. Insertions and
    deletions happen at the gap, which is moved to the edit point first.
    """

    DEFAULT_GAP_SIZE = EditorConstants.DEFAULT_GAP_SIZE
    PLACEHOLDER = EditorConstants.GAP_PLACEHOLDER

    def __init__(self, capacity: int = 0):
        """Allocate an empty line.

        Args:
            capacity: Number of cells to allocate; never less than the
                default gap size.
        """
        capacity = max(capacity, self.DEFAULT_GAP_SIZE)
        self.buf: list[str] = [self.PLACEHOLDER] * capacity
        self.gap_start = 0
        self.gap_end = capacity

    @classmethod
    def from_str(cls, text: str) -> "GapLine":
        """Build a line holding ``text`` with the gap at its end."""
        line = cls(len(text) + cls.DEFAULT_GAP_SIZE)
        for ch in text:
            line.insert_char(ch)
        return line

    @property
    def capacity(self) -> int:
        return len(self.buf)

    def _expand(self):
        old_size = len(self.buf)
        new_size = old_size * 2 if old_size else self.DEFAULT_GAP_SIZE
        old_tail_len = old_size - self.gap_end
        new_tail_start = new_size - old_tail_len

        new_buf = [self.PLACEHOLDER] * new_size
        new_buf[:self.gap_start] = self.buf[:self.gap_start]
        new_buf[new_tail_start:] = self.buf[self.gap_end:]

        self.buf = new_buf
        self.gap_end = new_tail_start

    def insert_char(self, ch: str):
        """Write one character at the gap and advance the gap start."""
        # Keep at least one free cell after the write
        if self.gap_start + 1 >= self.gap_end:
            self._expand()
        self.buf[self.gap_start] = ch
        self.gap_start += 1

    def move_gap(self, index: int) -> int:
        """Move the gap so that it starts at ``index``.

        Only the characters between the old and the new gap position are
        copied, which is the shorter side of the move.

        Args:
            index: Logical character index; clamped to ``[0, len]``.

        Returns:
            The index the gap now starts at.
        """
        index = max(0, min(index, len(self)))
        if index < self.gap_start:
            count = self.gap_start - index
            new_gap_end = self.gap_end - count
            self.buf[new_gap_end:self.gap_end] = self.buf[index:self.gap_start]
            self.gap_start = index
            self.gap_end = new_gap_end
            self._clear_gap()
        elif index > self.gap_start:
            count = index - self.gap_start
            self.buf[self.gap_start:index] = self.buf[self.gap_end:self.gap_end + count]
            self.gap_start = index
            self.gap_end += count
            self._clear_gap()
        return self.gap_start

    def _clear_gap(self):
        # Source and destination may overlap, so reset the gap after copying
        self.buf[self.gap_start:self.gap_end] = [self.PLACEHOLDER] * (self.gap_end - self.gap_start)

    def insert_at(self, index: int, text: str) -> int:
        """Insert ``text`` at ``index`` and return the index after it."""
        self.move_gap(index)
        for ch in text:
            self.insert_char(ch)
        return self.gap_start

    def delete_before(self, index: int, count: int = 1) -> int:
        """Delete up to ``count`` characters before ``index``.

        Returns:
            Number of characters actually removed.
        """
        self.move_gap(index)
        removed = max(0, min(count, self.gap_start))
        for i in range(self.gap_start - removed, self.gap_start):
            self.buf[i] = self.PLACEHOLDER
        self.gap_start -= removed
        return removed

    def delete_after(self, index: int, count: int = 1) -> int:
        """Delete up to ``count`` characters starting at ``index``.

        Returns:
            Number of characters actually removed.
        """
        self.move_gap(index)
        removed = max(0, min(count, len(self.buf) - self.gap_end))
        for i in range(self.gap_end, self.gap_end + removed):
            self.buf[i] = self.PLACEHOLDER
        self.gap_end += removed
        return removed

    def to_string(self) -> str:
        return "".join(self.buf[:self.gap_start]) + "".join(self.buf[self.gap_end:])

    def gap_info(self) -> tuple[int, int, int]:
        """Return ``(gap_start, gap_end, capacity)`` for diagnostics."""
        return self.gap_start, self.gap_end, len(self.buf)

    def format_gap_info(self) -> str:
        gap_start, gap_end, size = self.gap_info()
        return f"[gap_start: {gap_start}, gap_end: {gap_end}, size: {size}]"

    def __len__(self) -> int:
        return self.gap_start + (len(self.buf) - self.gap_end)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"GapLine({self.to_string()!r}, gap={self.gap_info()})"
