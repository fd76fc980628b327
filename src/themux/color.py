"""RGB color values — hex/byte conversion and perceived brightness."""

import math
import string
from dataclasses import dataclass

# Perceived brightness below this value counts as a dark color.
DARK_THRESHOLD = 130

_HEX_DIGITS = frozenset(string.hexdigits)


class ParseError(ValueError):
    """Raised when a hex string or byte buffer is not a valid color."""


@dataclass(frozen=True)
class Rgb:
    """An immutable 24-bit color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel value out of range: {channel}")

    @classmethod
    def from_hex(cls, s: str) -> "Rgb":
        """Parse a ``RRGGBB`` string (no leading ``#``, any letter case)."""
        if len(s) != 6:
            raise ParseError(f"Expected 6 hex digits, got {s!r}")
        if not _HEX_DIGITS.issuperset(s):
            raise ParseError(f"Invalid hex color {s!r}")
        return cls(int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))

    @classmethod
    def from_bytes(cls, buf: bytes) -> "Rgb":
        if len(buf) != 3:
            raise ParseError(f"Expected 3 bytes, got {len(buf)}")
        return cls(buf[0], buf[1], buf[2])

    def to_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()

    def brightness(self) -> int:
        """Perceived brightness, floored.

        See https://www.nbdtech.com/Blog/archive/2008/04/27/Calculating-the-Perceived-Brightness-of-a-Color.aspx
        """
        # The weights sum to 1.0; rounding keeps pure grays at their own value.
        weighted = round(0.241 * self.r**2 + 0.691 * self.g**2 + 0.068 * self.b**2, 6)
        return math.floor(math.sqrt(weighted))

    def is_dark(self) -> bool:
        return self.brightness() < DARK_THRESHOLD
