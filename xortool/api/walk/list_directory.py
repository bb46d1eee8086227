"""List one directory level as file entries."""

import os
from pathlib import Path

from .FileEntry import FileEntry, FileKind
from .TraversalError import TraversalError


def list_directory(path: Path) -> list[FileEntry]:
    """List the entries of ``path`` without following symlinks.

    Raises:
        TraversalError: If the directory cannot be opened or read
    """
    entries: list[FileEntry] = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                kind: FileKind
                if entry.is_dir(follow_symlinks=False):
                    kind = "dir"
                elif entry.is_file(follow_symlinks=False):
                    kind = "file"
                else:
                    kind = "other"
                entries.append(FileEntry(path=Path(entry.path), kind=kind))
    except OSError as e:
        raise TraversalError(path, e) from e
    return entries
