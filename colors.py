from collections import namedtuple
from enum import Enum

from rich.color import Color as RichColor

# Normalised RGBA, every channel in [0, 1]
Color = namedtuple("Color", ["r", "g", "b", "a"])

CLEAR = Color(0.0, 0.0, 0.0, 0.0)
GRAY = Color(0.5, 0.5, 0.5, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)

DEFAULT_HEX = "FFFF00"

HEX_DIGITS = "0123456789ABCDEF"


def _scan_hex(chunk):
    """Read the leading hex digits of chunk; no digits at all reads as 0."""
    value = 0
    for ch in chunk:
        digit = HEX_DIGITS.find(ch)
        if digit < 0:
            break
        value = value * 16 + digit
    return value


def resolve(hex_string):
    """
    Turn "FFFFFF", "0XFFFFFF" or "#FFFFFF" into a Color.

    Never raises: an empty string is transparent, anything that is not
    six characters after the prefix is gray.
    """
    colorhex = "" if hex_string is None else str(hex_string)
    colorhex = colorhex.strip().upper()
    if not colorhex:
        return CLEAR
    if len(colorhex) < 6:
        return GRAY

    if colorhex.startswith("0X"):
        colorhex = colorhex[2:]
    elif colorhex.startswith("#"):
        colorhex = colorhex[1:]

    if len(colorhex) != 6:
        return GRAY

    r, g, b = (_scan_hex(colorhex[i:i + 2]) for i in (0, 2, 4))
    return Color(r / 255.0, g / 255.0, b / 255.0, 1.0)


def is_clear(color):
    return color is None or color.a == 0


def to_rich(color):
    """rich colour for a Color, or None when it is fully transparent."""
    if is_clear(color):
        return None
    return RichColor.from_rgb(round(color.r * 255), round(color.g * 255), round(color.b * 255))


class BackgroundType(Enum):
    """Background of the whole view: see-through, or one plain colour."""
    CLEAR = "clear"
    COLORED = "colored"

    def pick(self, color):
        if self is BackgroundType.CLEAR:
            return CLEAR
        return color


def resolve_background(background):
    """
    background is None or a (BackgroundType, hex-or-None) pair.
    A missing colour string falls back to the default yellow.
    """
    try:
        kind, hex_string = background
    except (TypeError, ValueError):
        return CLEAR
    if not isinstance(kind, BackgroundType):
        return CLEAR
    return kind.pick(resolve(hex_string if hex_string is not None else DEFAULT_HEX))
