"""Transform a file or a directory tree."""

import time
from collections.abc import Iterator
from pathlib import Path

from ...utils.display.Display import Display
from ...utils.logger import get_logger
from ..config.XorConfig import XorConfig
from ..path.display_name import display_name
from ..path.resolve_input_path import resolve_input_path
from ..progress.ProgressReporter import ProgressReporter
from ..progress.RenderTarget import RenderTarget
from ..stream.FileTask import FileTask
from ..stream.process_file import process_file
from ..walk.TraversalRoot import TraversalRoot
from ..walk.walk_tree import walk_tree
from .RunSummary import FileResult, RunSummary

logger = get_logger("run")


def run_xor(
    input_path: str | Path,
    key: bytes,
    recursive: bool,
    config: XorConfig,
    target: RenderTarget,
    display: Display | None = None,
    cwd: Path | None = None,
) -> RunSummary:
    """Transform ``input_path`` (a file, or every file of a directory) with ``key``.

    Files are processed one at a time in walk order. The first error aborts
    the run and propagates to the caller.

    Args:
        input_path: File or directory to transform
        key: Transform key (empty means identity copies)
        recursive: Descend into subdirectories when ``input_path`` is a directory
        config: Output directory name, chunk size and display settings
        target: Where progress lines are drawn
        display: Optional display for warnings
        cwd: Base for display names (defaults to the working directory)

    Returns:
        RunSummary listing every transformed file

    Raises:
        PathResolutionError: If the input or a file's output path cannot be resolved
        TraversalError: If a directory cannot be listed
        ProcessError: If a file cannot be read or written
    """
    start = time.monotonic()
    resolved = resolve_input_path(input_path)
    summary = RunSummary(input_path=resolved, recursive=recursive)
    if not key:
        message = "Empty key: outputs will be identical copies of their inputs"
        logger.warning(message)
        if display is not None:
            display.warning(message)

    for file_path in _iter_inputs(resolved, recursive, config.output_dir_name):
        task = FileTask.from_input(file_path, config.output_dir_name)
        reporter = ProgressReporter(
            display_name(file_path, config.display_name_width, cwd),
            target,
            interval_secs=config.progress_interval_secs,
            bar_width=config.bar_width,
        )
        size = process_file(task, key, reporter, chunk_size=config.chunk_size)
        summary.files.append(FileResult(input_path=task.input_path, output_path=task.output_path, size=size))
        summary.total_bytes += size

    summary.elapsed_secs = time.monotonic() - start
    return summary


def _iter_inputs(resolved: Path, recursive: bool, output_dir_name: str) -> Iterator[Path]:
    if resolved.is_dir():
        root = TraversalRoot(root_path=resolved, recursive=recursive, output_dir_name=output_dir_name)
        for entry in walk_tree(root):
            yield entry.path
    else:
        yield resolved
