"""Key API module."""

from .KeyParseError import KeyParseError
from .parse_hex_key import parse_hex_key

__all__ = ["KeyParseError", "parse_hex_key"]
