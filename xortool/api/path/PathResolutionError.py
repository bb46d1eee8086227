"""Path resolution error."""

from pathlib import Path

from ..XorToolError import XorToolError


class PathResolutionError(XorToolError):
    """Raised when a path cannot be canonicalized or has no parent directory."""

    def __init__(self, path: Path, cause: Exception | str):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to resolve path {path}: {cause}")
