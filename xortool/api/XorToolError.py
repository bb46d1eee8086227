"""Base class for xortool errors."""


class XorToolError(Exception):
    """Raised for any failure that aborts an xortool run."""
