"""Decide whether the tree walker visits an entry."""

from pathlib import Path


def should_include(path: Path, is_dir: bool, root: Path, recursive: bool, output_dir_name: str) -> bool:
    """Return True if the walker should yield (file) or descend into (directory) ``path``.

    ``root/<output_dir_name>`` and everything under it is excluded, so a run
    never reads back the outputs written beside the root's own files. A
    directory with the same name deeper in the tree is ordinary user data.
    Directories other than the root are only entered when ``recursive`` is set.
    Pure function: it never touches the filesystem.
    """
    try:
        relative = path.relative_to(root)
    except ValueError:
        return False

    if relative.parts[:1] == (output_dir_name,):
        return False

    if is_dir:
        return recursive or path == root
    return True
