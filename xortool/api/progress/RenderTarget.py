"""Abstract destination for progress lines."""

from abc import ABC, abstractmethod

from rich.text import Text


class RenderTarget(ABC):
    """Where a ProgressReporter draws.

    Targets that cannot reposition the cursor report
    ``supports_inline_redraw = False``; reporters then only append lines.
    """

    @property
    @abstractmethod
    def supports_inline_redraw(self) -> bool:
        """True if ``redraw`` can replace the current line in place."""

    @abstractmethod
    def redraw(self, line: Text) -> None:
        """Replace the live progress line with ``line``.

        Args:
            line: Rendered progress line
        """

    @abstractmethod
    def commit(self, line: Text) -> None:
        """Write a final line, replacing the live progress line if there is one.

        Args:
            line: Rendered summary line
        """

    def close(self) -> None:
        """Release the live line without writing anything (used when a run aborts)."""
        return None
