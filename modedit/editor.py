"""Main editor controller: modes, cursor, viewport and the input loop."""

import logging
from typing import Optional

from .commands import ModeRegistry, execute_command
from .constants import EditorConstants
from .keyboard import KeyboardHandler, KeyEvent
from .model import Buffer, BufferList, BufferLoadError
from .modes import EditorMode
from .settings import EditorSettings
from .terminal import TerminalInterface, Window

logger = logging.getLogger(__name__)


class Editor:
    """Modal editor over a list of buffers.

    The cursor row is relative to the viewport (``start_line`` is the
    index of the first visible line); the column is an index into the
    current line.
    """

    def __init__(self, initial_buffer: Buffer, terminal=None,
                 settings: Optional[EditorSettings] = None):
        """Initialize the editor components.

        Args:
            initial_buffer: Buffer shown first.
            terminal: Display surface; a TerminalInterface by default.
            settings: User settings; defaults when omitted.
        """
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        settings = settings or EditorSettings()

        height = self.terminal.height
        width = self.terminal.width
        padding = EditorConstants.MODE_PADDING
        self.buffer_window = Window(self.terminal, height - padding, width, 0, 0,
                                    keyboard=self.keyboard)
        self.mode_window = Window(self.terminal, padding, width, height - padding, 0,
                                  keyboard=self.keyboard)

        self.modes = ModeRegistry()
        self.mode = EditorMode.COMMAND
        self.buffers = BufferList(initial_buffer)
        self.redisplay = True
        self.quit = False
        self.cursor_row = 0
        self.cursor_col = 0
        self.start_line = 0
        self.line_number_show = settings.show_line_numbers
        self.search_query: Optional[str] = None

    @property
    def cursor(self) -> tuple[int, int]:
        return self.cursor_row, self.cursor_col

    @property
    def window_height(self) -> int:
        return self.buffer_window.get_height()

    def run(self):
        """Run the main editor loop until a command sets ``quit``."""
        with self.terminal:
            while not self.quit:
                if self.redisplay:
                    self.display_buffer()
                    self.redisplay = False
                self.display_mode_line()
                self.display_cursor()

                key_event = self.keyboard.get_key_event()
                if key_event is None:
                    continue
                self.run_cmd(key_event)

    def run_cmd(self, key_event: KeyEvent):
        """Execute the command bound to ``key_event`` in the current mode.

        Unbound keys are ignored.
        """
        command = self.modes.lookup(self.mode, key_event)
        if command is None:
            return
        next_mode = execute_command(self, command)
        if next_mode != self.mode:
            logger.info("Mode %s -> %s", self.mode.value, next_mode.value)
            self.mode = next_mode
            self.mark_redisplay()

    # --- Display ---

    def display_mode_line(self):
        buffer = self.buffers.current()
        modified_char = "*" if buffer.modified else "-"
        mode_name = self.modes.get_mode(self.mode).name
        mode_line = f"[{modified_char}] {buffer.buffer_name} ------ [{mode_name}]"

        self.mode_window.clear()
        self.mode_window.display_line(0, 0, mode_line)
        self.mode_window.refresh()

    def display_buffer(self):
        self.buffer_window.clear()
        buffer = self.buffers.current()
        window_height = self.window_height

        for i, line_idx in enumerate(range(self.start_line, buffer.line_count())):
            if i >= window_height:
                break
            line = buffer.lines[line_idx]
            if self.line_number_show:
                display_text = f"{line_idx + 1:{EditorConstants.LINE_NUMBER_WIDTH}}: " \
                               f"{line.text} {line.store.format_gap_info()}"
            else:
                display_text = line.text
            self.buffer_window.display_line(i, 0, display_text)
        self.buffer_window.refresh()

    def display_cursor(self):
        gutter = EditorConstants.LINE_NUMBER_GUTTER if self.line_number_show else 0
        # Clipped lines: stay on the last visible column
        x = min(self.cursor_col + gutter, max(0, self.buffer_window.get_width() - 1))
        self.buffer_window.move_cursor(self.cursor_row, x)
        self.buffer_window.refresh()

    def mark_redisplay(self):
        self.redisplay = True

    def mode_read_input(self, prompt: str) -> str:
        """Prompt in the mode window; the buffer must be redrawn afterwards."""
        answer = self.mode_window.read_line(prompt)
        self.mark_redisplay()
        return answer

    # --- Commands that talk to the user ---

    def open_file(self):
        """Prompt for a path and open it as the current buffer.

        Failures are shown in the mode window until a key is pressed.
        """
        path = self.mode_read_input(EditorConstants.OPEN_FILE_PROMPT)
        if not path:
            return
        try:
            new_buffer = Buffer.load(path)
        except (FileNotFoundError, BufferLoadError) as e:
            cause = e.cause if isinstance(e, BufferLoadError) else e
            logger.warning("Could not open %s: %s", path, cause)
            self.mode_window.clear()
            self.mode_window.display_line(0, 0, EditorConstants.OPEN_FILE_ERROR_MESSAGE.format(cause))
            self.mode_window.refresh()
            self.mode_window.wait_for_key()
        else:
            self.buffers.append(new_buffer)
            self.cursor_row = 0
            self.cursor_col = 0
            self.start_line = 0
        self.mark_redisplay()

    def begin_search(self):
        """Prompt for a search string and remember it.

        Matching is not implemented; only the query is kept. An empty
        answer leaves the previous query untouched.
        """
        query = self.mode_read_input(EditorConstants.SEARCH_PROMPT)
        if not query:
            return
        self.search_query = query
        logger.info("Search query: %r", query)

    # --- Navigation ---

    def get_current_line_idx(self) -> int:
        return self.start_line + self.cursor_row

    def get_current_line_len(self) -> int:
        buffer = self.buffers.current()
        idx = self.get_current_line_idx()
        if idx < buffer.line_count():
            return buffer.line(idx).size()
        return 0

    def move_point(self, dy: int, dx: int):
        """Move the cursor, clamped to the window and to the buffer's content."""
        num_lines = self.buffers.current().line_count()
        window_height = self.window_height

        new_y = max(0, min(self.cursor_row + dy, window_height - 1))
        if self.start_line + new_y >= num_lines:
            new_y = num_lines - 1 - self.start_line
        self.cursor_row = max(0, new_y)

        line_len = self.get_current_line_len()
        self.cursor_col = max(0, min(self.cursor_col + dx, line_len))

    def move_to_line_edge(self, to_end: bool):
        if to_end:
            self.cursor_col = self.get_current_line_len()
        else:
            self.cursor_col = 0

    def move_to_file_edge(self, to_end: bool):
        if to_end:
            num_lines = self.buffers.current().line_count()
            self.start_line = max(0, num_lines - self.window_height)
            self.cursor_row = max(0, num_lines - 1 - self.start_line)
        else:
            self.start_line = 0
            self.cursor_row = 0
        self.mark_redisplay()

    def move_page(self, direction: int):
        """Scroll the viewport by one window height.

        Paging forward stops with the last line at the top of the window,
        so fewer than a full page may remain visible.
        """
        num_lines = self.buffers.current().line_count()
        page_size = self.window_height

        if direction > 0:
            self.start_line = min(self.start_line + page_size, max(0, num_lines - 1))
        else:
            self.start_line = max(0, self.start_line - page_size)
        self.mark_redisplay()
