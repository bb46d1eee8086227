"""Key parsing error."""

from ..XorToolError import XorToolError


class KeyParseError(XorToolError):
    """Raised when a transform key is not a valid hex string."""

    def __init__(self, key_text: str, reason: str):
        self.key_text = key_text
        self.reason = reason
        super().__init__(f"Invalid hex key {key_text!r}: {reason}")
