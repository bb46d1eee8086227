"""Derive the mirrored output path for an input file."""

from pathlib import Path

from .PathResolutionError import PathResolutionError
from .resolve_input_path import resolve_input_path


def resolve_output_path(input_path: Path, output_dir_name: str) -> Path:
    """Place the output of ``input_path`` in the reserved directory beside it.

    The input is canonicalized first, so the result is
    ``<canonical parent>/<output_dir_name>/<file name>``.

    Args:
        input_path: File to be transformed
        output_dir_name: Reserved output directory name

    Returns:
        Absolute output path

    Raises:
        PathResolutionError: If the input cannot be canonicalized or is a filesystem root

    Examples:
        >>> resolve_output_path(Path("/data/sub/f.txt"), "xor")
        Path("/data/sub/xor/f.txt")
    """
    canonical = resolve_input_path(input_path)
    parent = canonical.parent
    if parent == canonical or not canonical.name:
        raise PathResolutionError(canonical, "path has no parent directory")
    return parent / output_dir_name / canonical.name
