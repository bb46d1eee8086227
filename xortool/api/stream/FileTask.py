"""One file to transform."""

from dataclasses import dataclass
from pathlib import Path

from ..path.resolve_output_path import resolve_output_path
from .ProcessError import ProcessError


@dataclass(frozen=True)
class FileTask:
    """Input file, its mirrored output path, and its size when the task was created."""

    input_path: Path
    output_path: Path
    total_size: int

    @classmethod
    def from_input(cls, input_path: Path, output_dir_name: str) -> "FileTask":
        """Resolve the output path and read the input size.

        Raises:
            PathResolutionError: If the input cannot be canonicalized
            ProcessError: If the input metadata cannot be read
        """
        output_path = resolve_output_path(input_path, output_dir_name)
        try:
            total_size = input_path.stat().st_size
        except OSError as e:
            raise ProcessError(input_path, e, "read metadata of") from e
        return cls(input_path=input_path, output_path=output_path, total_size=total_size)
