"""Locate the directory holding xortool's config file and log."""

import os
from pathlib import Path

from ...constants import XORTOOL_HOME_EXT


def get_home_dir() -> Path:
    """``$XORTOOL_HOME`` when set, otherwise ``~/.xortool``. The directory may not exist yet."""
    override = os.environ.get("XORTOOL_HOME")
    if override:
        return Path(override).expanduser().resolve()
    return Path.home() / XORTOOL_HOME_EXT
