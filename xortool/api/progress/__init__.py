"""Progress reporting API module."""

from .ConsoleRenderTarget import ConsoleRenderTarget
from .format_completion_line import format_completion_line
from .format_progress_line import format_progress_line
from .progress_bar import progress_bar
from .ProgressReporter import ProgressReporter
from .ProgressState import ProgressState
from .RenderTarget import RenderTarget

__all__ = [
    "ConsoleRenderTarget",
    "ProgressReporter",
    "ProgressState",
    "RenderTarget",
    "format_completion_line",
    "format_progress_line",
    "progress_bar",
]
