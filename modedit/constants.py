"""Constants and configuration for the modedit editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Line storage
    DEFAULT_GAP_SIZE = 16  # Initial gap cells for a new line store
    GAP_PLACEHOLDER = "\0"  # Value of unused cells inside the gap

    # Screen layout
    MODE_PADDING = 1  # Rows reserved at the bottom for the mode line
    LINE_NUMBER_WIDTH = 5  # Digits shown for line numbers
    LINE_NUMBER_GUTTER = 7  # Width of "{:5}: " prefix

    # Prompts
    OPEN_FILE_PROMPT = "File: "
    SEARCH_PROMPT = "Search Forward: "

    # Status messages
    OPEN_FILE_ERROR_MESSAGE = "Error opening file: {}"
    LOAD_ERROR_MESSAGE = "Error loading file '{}': {}"
    USAGE_MESSAGE = "Usage: {} <filename>"

    # Logging
    DEFAULT_LOG_FILE = "modedit-debug.log"
    DEFAULT_LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    LOG_FILE_ENV_VAR = "MODEDIT_LOG_FILE"
