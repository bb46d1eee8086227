"""Decode a hex key string into transform key bytes."""

import string

from .KeyParseError import KeyParseError

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_hex_key(key_text: str) -> bytes:
    """Decode a hex string, optionally prefixed with 0x or 0X, into key bytes.

    An empty digit string (for example a bare ``0x``) decodes to an empty key,
    which makes the transform an identity.

    Args:
        key_text: Hex string as typed by the user (e.g. "1a2b3c4d" or "0xFF")

    Returns:
        Immutable key bytes

    Raises:
        KeyParseError: If the digits have odd length or contain a non-hex character
    """
    digits = key_text.strip()
    if digits[:2] in ("0x", "0X"):
        digits = digits[2:]

    invalid = sorted({ch for ch in digits if ch not in _HEX_DIGITS})
    if invalid:
        raise KeyParseError(key_text, f"non-hex characters {''.join(invalid)!r}")
    if len(digits) % 2:
        raise KeyParseError(key_text, f"odd number of hex digits ({len(digits)})")

    return bytes.fromhex(digits)
