"""Root of a directory walk."""

from dataclasses import dataclass
from pathlib import Path

from ...constants import DEFAULT_OUTPUT_DIR_NAME


@dataclass(frozen=True)
class TraversalRoot:
    """Directory to walk, whether to recurse, and the reserved output name to skip."""

    root_path: Path
    recursive: bool = False
    output_dir_name: str = DEFAULT_OUTPUT_DIR_NAME
