"""Color model and CSS color decoding."""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """An RGBA color with channels in the 0.0-1.0 range."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def white(cls, white: float, alpha: float = 1.0) -> Color:
        """Build a gray level color."""
        return cls(white, white, white, alpha)

    def to_hex(self) -> str:
        """Render as ``#rrggbb``, or ``#rrggbbaa`` when not fully opaque."""
        channels = [self.red, self.green, self.blue]
        if self.alpha < 1.0:
            channels.append(self.alpha)
        return "#" + "".join(f"{round(c * 255):02x}" for c in channels)

    def to_rgb255(self) -> tuple[int, int, int]:
        return (round(self.red * 255), round(self.green * 255), round(self.blue * 255))


# Returned for any color value that cannot be decoded.
GRAY = Color.white(0.5)

NAMED_COLORS: dict[str, Color] = {
    "white": Color.white(1.0),
    "black": Color.white(0.0),
    "red": Color(1.0, 0.0, 0.0),
    "green": Color(0.0, 0.5, 0.0),
    "blue": Color(0.0, 0.0, 1.0),
    "navy": Color(0.0, 0.0, 0.5),
}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _scan_hex(digits: str) -> int:
    """Read the leading hex digits of *digits*; no leading digit reads as 0."""
    end = 0
    while end < len(digits) and digits[end] in _HEX_DIGITS:
        end += 1
    return int(digits[:end], 16) if end else 0


def color_from_spec(value: str) -> Color:
    """Decode a CSS color value.

    Supports ``#rgb``, ``#rrggbb``, ``#rrggbbaa`` and a handful of named
    colors. Hex values of any other length and unknown names decode to
    :data:`GRAY`. Hex components that are not hex digits read as zero.
    """
    spec = value.strip()

    if not spec.startswith("#"):
        color = NAMED_COLORS.get(spec)
        if color is None:
            logger.debug("Unknown color name %r, using gray", spec)
            return GRAY
        return color

    digits = spec[1:]
    if len(digits) not in (3, 6, 8):
        logger.debug("Malformed hex color %r, using gray", spec)
        return GRAY

    if len(digits) == 3:
        r, g, b = (_scan_hex(d) for d in digits)
        return Color(r / 15.0, g / 15.0, b / 15.0)

    r = _scan_hex(digits[0:2])
    g = _scan_hex(digits[2:4])
    b = _scan_hex(digits[4:6])
    alpha = 1.0
    if len(digits) == 8:
        alpha = _scan_hex(digits[6:8]) / 255.0
    return Color(r / 255.0, g / 255.0, b / 255.0, alpha)
