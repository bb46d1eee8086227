"""Directory entry produced by listers and the tree walker."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

FileKind = Literal["file", "dir", "other"]


@dataclass(frozen=True)
class FileEntry:
    """A path together with its (non-followed) file type."""

    path: Path
    kind: FileKind

    @property
    def is_dir(self) -> bool:
        return self.kind == "dir"
