"""Unit tests for xortool.utils.logger module."""

import logging
from logging.handlers import RotatingFileHandler

from xortool.utils.logger import configure_logging, get_logger


def _file_handlers(logger: logging.Logger) -> list[RotatingFileHandler]:
    return [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]


def test_get_logger_namespace():
    assert get_logger("walk").name == "xortool.walk"


def test_configure_logging_writes_to_home(xortool_logger, tmp_path):
    home = tmp_path / "home"

    configure_logging(home, "DEBUG")
    get_logger("test").debug("hello log")
    for handler in xortool_logger.handlers:
        handler.flush()

    assert xortool_logger.level == logging.DEBUG
    assert len(_file_handlers(xortool_logger)) == 1
    assert "hello log" in (home / "xortool.log").read_text()


def test_configure_logging_once(xortool_logger, tmp_path):
    configure_logging(tmp_path, "INFO")
    configure_logging(tmp_path, "INFO")

    assert len(_file_handlers(xortool_logger)) == 1


def test_logger_starts_unconfigured(xortool_logger):
    assert _file_handlers(xortool_logger) == []
    assert xortool_logger.propagate


def test_warn_level_alias(xortool_logger, tmp_path):
    configure_logging(tmp_path, "WARN")
    assert xortool_logger.level == logging.WARNING


def test_default_home_from_environment(xortool_logger, xortool_home):
    configure_logging()
    assert (xortool_home / "xortool.log").exists()
