"""Canonicalize a user-supplied input path."""

from pathlib import Path

from .PathResolutionError import PathResolutionError


def resolve_input_path(path: str | Path) -> Path:
    """Expand ``~`` and resolve symlinks, requiring the path to exist."""
    candidate = Path(path).expanduser()
    try:
        return candidate.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        # RuntimeError: symlink loop on older interpreters
        raise PathResolutionError(candidate, e) from e
