"""Tree walk API module."""

from .FileEntry import FileEntry, FileKind
from .list_directory import list_directory
from .should_include import should_include
from .TraversalError import TraversalError
from .TraversalRoot import TraversalRoot
from .walk_tree import walk_tree

__all__ = [
    "FileEntry",
    "FileKind",
    "TraversalError",
    "TraversalRoot",
    "list_directory",
    "should_include",
    "walk_tree",
]
