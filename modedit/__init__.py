"""modedit - the editing core of a modal terminal text editor."""

__version__ = "0.1.0"

from .gapline import GapLine
from .model import Buffer, BufferList, BufferLoadError, Line
from .modes import EditorMode, Mode

__all__ = [
    'GapLine',
    'Line',
    'Buffer',
    'BufferList',
    'BufferLoadError',
    'EditorMode',
    'Mode',
]
