"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod


class Display(ABC):
    """Where user-facing messages go, kept apart from the progress line."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Report a failure that ends the run."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Report something suspicious that does not stop the run."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Print a plain line of output."""
