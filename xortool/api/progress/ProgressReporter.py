"""Throttled per-file progress display."""

import time
from collections.abc import Callable

from ...constants import DEFAULT_BAR_WIDTH, DEFAULT_PROGRESS_INTERVAL_SECS
from .format_completion_line import format_completion_line
from .format_progress_line import format_progress_line
from .ProgressState import ProgressState
from .RenderTarget import RenderTarget


class ProgressReporter:
    """Report bytes processed for one file on a render target.

    ``update`` redraws at most once per ``interval_secs``, and always when the
    file is fully processed. Targets without inline redraw get no live
    line at all, only the completion line from ``complete``.
    """

    def __init__(
        self,
        display_name: str,
        target: RenderTarget,
        interval_secs: float = DEFAULT_PROGRESS_INTERVAL_SECS,
        bar_width: int = DEFAULT_BAR_WIDTH,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.display_name = display_name
        self.target = target
        self.interval_secs = interval_secs
        self.bar_width = bar_width
        self._clock = clock
        self.state = ProgressState(start_time=clock())

    def elapsed(self) -> float:
        """Seconds since the reporter was created."""
        return self._clock() - self.state.start_time

    def update(self, processed: int, total: int) -> None:
        self.state.bytes_processed = processed
        self.state.bytes_total = total
        if not self.target.supports_inline_redraw:
            return

        now = self._clock()
        if processed != total and now - self.state.last_render_time < self.interval_secs:
            return

        self.state.last_render_time = now
        self.state.render_count += 1
        line = format_progress_line(
            self.display_name,
            processed,
            total,
            now - self.state.start_time,
            self.bar_width,
        )
        self.target.redraw(line)

    def complete(self, total: int) -> None:
        self.state.bytes_processed = total
        self.state.bytes_total = total
        self.target.commit(format_completion_line(self.display_name, total, self.elapsed()))
