"""Render target backed by a Rich console."""

from rich.console import Console
from rich.live import Live
from rich.text import Text

from .RenderTarget import RenderTarget


class ConsoleRenderTarget(RenderTarget):
    """Draw progress on a Rich console.

    On a terminal the live line is a manually refreshed, transient
    ``rich.live.Live`` so no background refresh thread runs. Anywhere else
    (pipes, files, captured output) lines are only appended.
    """

    def __init__(self, console: Console):
        self.console = console
        self._live: Live | None = None

    @property
    def supports_inline_redraw(self) -> bool:
        return self.console.is_terminal

    def redraw(self, line: Text) -> None:
        if not self.supports_inline_redraw:
            return
        if self._live is None:
            self._live = Live(
                line,
                console=self.console,
                auto_refresh=False,
                transient=True,
                redirect_stdout=False,
                redirect_stderr=False,
            )
            self._live.start(refresh=True)
        else:
            self._live.update(line, refresh=True)

    def commit(self, line: Text) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
        self.console.print(line)

    def close(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None
