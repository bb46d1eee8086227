"""Path API module."""

from .display_name import display_name
from .PathResolutionError import PathResolutionError
from .resolve_input_path import resolve_input_path
from .resolve_output_path import resolve_output_path
from .shorten_path import shorten_path

__all__ = [
    "PathResolutionError",
    "display_name",
    "resolve_input_path",
    "resolve_output_path",
    "shorten_path",
]
