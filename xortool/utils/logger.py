import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(xortool_home: Path | None = None, level: str = "INFO") -> None:
    """Configure xortool file logging.

    The terminal belongs to the progress display, so log records only go to
    a rotating file under the xortool home directory.

    Args:
        xortool_home: Path to xortool home directory. If None, derived from environment.
        level: Logging level name (DEBUG, INFO, WARN, ERROR)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if xortool_home is None:
        from xortool.api.config.get_home_dir import get_home_dir

        xortool_home = get_home_dir()

    # Ensure directory exists
    xortool_home.mkdir(parents=True, exist_ok=True)
    log_file = xortool_home / "xortool.log"

    root_logger = logging.getLogger("xortool")
    root_logger.setLevel(_level_number(level))
    root_logger.propagate = False

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"xortool.{name}")


def _level_number(level: str) -> int:
    # "WARN" is the spelling used in config files
    if level.upper() == "WARN":
        return logging.WARNING
    return logging.getLevelName(level.upper())
