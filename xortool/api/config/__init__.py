"""Config API module."""

from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .XorConfig import XorConfig

__all__ = ["XorConfig", "get_config_path", "get_home_dir", "get_package_version"]
