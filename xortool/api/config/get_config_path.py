"""Get path to the xortool config file."""

from pathlib import Path

from .get_home_dir import get_home_dir


def get_config_path() -> Path:
    return get_home_dir() / "config.json"
