"""API module for xortool.

Functions defined here are the single source of truth for the CLI: key
parsing, the byte transform, path resolution, tree walking, streaming and
progress reporting.
"""

from .XorToolError import XorToolError

__all__ = ["XorToolError"]
