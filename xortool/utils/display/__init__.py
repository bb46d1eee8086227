"""Display abstraction shared by the CLI and the API."""

from .Display import Display

__all__ = ["Display"]
