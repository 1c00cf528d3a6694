"""modedit CLI entry point.

Allows running via `python -m modedit` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .constants import EditorConstants
from .model import Buffer, BufferLoadError
from .settings import EditorSettings, SettingsStore
from .version import get_version_string

logger = logging.getLogger("modedit")


def configure_logging(settings: EditorSettings) -> None:
    """Send log records to the debug log file; the terminal belongs to the editor."""
    logging.basicConfig(
        filename=settings.log_file,
        level=getattr(logging, settings.log_level, logging.INFO),
        format=EditorConstants.LOG_FORMAT,
    )


def main(argv: Optional[list[str]] = None) -> None:
    # Very small arg parsing: version flag and one filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return
    if not args:
        print(EditorConstants.USAGE_MESSAGE.format("modedit"), file=sys.stderr)
        return

    settings = SettingsStore().load()
    configure_logging(settings)
    logger.info("modedit: started")

    filename = args[0]
    try:
        initial_buffer = Buffer.open(filename)
    except BufferLoadError as e:
        logger.error("Error loading %s: %s", filename, e.cause)
        print(EditorConstants.LOAD_ERROR_MESSAGE.format(filename, e.cause), file=sys.stderr)
        sys.exit(1)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    editor = Editor(initial_buffer, settings=settings)
    editor.run()

    logger.info("modedit: ended")


if __name__ == "__main__":  # pragma: no cover
    main()
