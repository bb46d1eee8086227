"""Enumerate the files under a traversal root."""

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from ...utils.logger import get_logger
from .FileEntry import FileEntry
from .list_directory import list_directory
from .should_include import should_include
from .TraversalRoot import TraversalRoot

logger = get_logger("walk")

Lister = Callable[[Path], Iterable[FileEntry]]


def walk_tree(root: TraversalRoot, lister: Lister = list_directory) -> Iterator[FileEntry]:
    """Lazily yield the files under ``root`` in deterministic order.

    The walk is depth-first; within a directory, entries are visited in
    name order. Directory listings are taken when the walker enters the
    directory, so files written while walking do not change what a
    listing already returned.

    Args:
        root: Directory, recursion flag and reserved output name
        lister: Callable returning the entries of one directory

    Yields:
        FileEntry for every included file

    Raises:
        TraversalError: On the first directory that cannot be listed
    """
    root_path = root.root_path
    if not should_include(root_path, True, root_path, root.recursive, root.output_dir_name):
        return
    yield from _walk_dir(root_path, root, lister)


def _walk_dir(directory: Path, root: TraversalRoot, lister: Lister) -> Iterator[FileEntry]:
    entries = sorted(lister(directory), key=lambda e: e.path.name)
    for entry in entries:
        if entry.kind == "other":
            logger.debug(f"Skipping non-regular entry: {entry.path}")
            continue
        if not should_include(entry.path, entry.is_dir, root.root_path, root.recursive, root.output_dir_name):
            logger.debug(f"Skipping excluded entry: {entry.path}")
            continue
        if entry.is_dir:
            yield from _walk_dir(entry.path, root, lister)
        else:
            yield entry
