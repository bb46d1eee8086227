"""Get xortool package version (cached)."""

import importlib.metadata as importlib_metadata

# Package version - cached for performance
_VERSION_CACHE = None


def get_package_version() -> str:
    """Get xortool package version (cached)."""
    global _VERSION_CACHE
    if _VERSION_CACHE is None:
        try:
            _VERSION_CACHE = importlib_metadata.version("xortool")
        except importlib_metadata.PackageNotFoundError:
            from ... import __version__

            _VERSION_CACHE = __version__
    return _VERSION_CACHE
