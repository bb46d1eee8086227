"""CLI display implementation using Rich library."""

import sys

from rich.console import Console
from rich.markup import escape

from ...api.progress.ConsoleRenderTarget import ConsoleRenderTarget
from ...utils.display.Display import Display


class CLIDisplay(Display):
    """Rich console output: results on stdout, problems on stderr."""

    def __init__(self, stdout=None, stderr=None):
        self.console = Console(file=stdout or sys.stdout, soft_wrap=True)
        self.stderr_console = Console(file=stderr or sys.stderr, soft_wrap=True)

    def render_target(self) -> ConsoleRenderTarget:
        """Progress target drawing on the stdout console."""
        return ConsoleRenderTarget(self.console)

    def error(self, message: str) -> None:
        self.stderr_console.print(f"[red]✗[/red] {escape(message)}")

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str) -> None:
        self.console.print(escape(message))
