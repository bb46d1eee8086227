"""Directory traversal error."""

from pathlib import Path

from ..XorToolError import XorToolError


class TraversalError(XorToolError):
    """Raised when a directory cannot be enumerated."""

    def __init__(self, path: Path, cause: Exception | str):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read directory {path}: {cause}")
