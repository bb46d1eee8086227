"""Stream processing API module."""

from .FileTask import FileTask
from .process_file import process_file
from .ProcessError import ProcessError

__all__ = ["FileTask", "ProcessError", "process_file"]
