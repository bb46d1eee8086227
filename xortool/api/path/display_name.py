"""Short, human-readable name for a file on progress lines."""

from pathlib import Path

from .shorten_path import shorten_path


def display_name(path: Path, max_len: int, cwd: Path | None = None) -> str:
    """Path relative to ``cwd`` (or unchanged when outside it), shortened to ``max_len``.

    ``path`` is expected to be canonical, so the default working directory
    is resolved too before comparing.
    """
    if cwd is None:
        cwd = Path.cwd().resolve()
    try:
        shown = path.relative_to(cwd)
    except ValueError:
        shown = path
    return shorten_path(str(shown), max_len)
