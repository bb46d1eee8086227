"""File processing error."""

from pathlib import Path

from ..XorToolError import XorToolError


class ProcessError(XorToolError):
    """Raised when opening, reading, writing or flushing a file fails."""

    def __init__(self, path: Path, cause: Exception | str, operation: str = "process"):
        self.path = path
        self.cause = cause
        self.operation = operation
        super().__init__(f"Failed to {operation} {path}: {cause}")
