"""Mutable progress bookkeeping for one file."""

from dataclasses import dataclass


@dataclass
class ProgressState:
    """Counters owned by a single ProgressReporter."""

    start_time: float
    bytes_processed: int = 0
    bytes_total: int = 0
    last_render_time: float = 0.0
    render_count: int = 0

    def __post_init__(self) -> None:
        # First redraw is due one interval after start
        if not self.last_render_time:
            self.last_render_time = self.start_time
