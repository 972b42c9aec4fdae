import math
from enum import Enum

from grid import Rect
from log import log

DEFAULT_FONT = "HelveticaNeue-Thin"
DEFAULT_FONT_SIZE = 17.0
FALLBACK_FONT_SIZE = 19.0
DEFAULT_GLYPH = "T"


class CellType(Enum):
    """
    What every active cell of the view shows.

    Each draw_* method only acts for its own member; calling the wrong one
    logs and does nothing. Colors are a (fill, border) pair.
    """
    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TEXT = "text"

    def _guard(self, expected, what):
        if self is expected:
            return True
        log(f"[yellow]⚠️ {what} was not applied to a {expected.value} CellType (mode is {self.value})[/]")
        return False

    def draw_line(self, ctx, to, colors):
        """Vertical trail segment from the current point down to `to`."""
        if not self._guard(CellType.LINE, "draw_line"):
            return
        fill, border = colors
        ctx.set_stroke(border)
        ctx.set_fill(fill)
        ctx.add_line_to(*to)

    def draw_rect(self, ctx, rect, colors):
        if not self._guard(CellType.RECTANGLE, "draw_rect"):
            return
        fill, border = colors
        ctx.set_stroke(border)
        ctx.set_fill(fill)
        ctx.add_rect(rect.x, rect.y, rect.width, rect.height)

    def draw_circle(self, ctx, center, radius, colors):
        if not self._guard(CellType.CIRCLE, "draw_circle"):
            return
        fill, border = colors
        ctx.set_stroke(border)
        ctx.set_fill(fill)
        ctx.add_arc(center[0], center[1], radius, 0.0, 2.0 * math.pi)

    def draw_text(self, ctx, pos, write, colors):
        """
        pos is (x, y), write is (glyph, font_name, font_size).
        The glyph sits centred in a font_size x font_size box at pos.
        """
        if not self._guard(CellType.TEXT, "draw_text"):
            return
        fill, border = colors
        glyph, font_name, font_size = write
        font = ctx.resolve_font(font_name, font_size)
        if font is None:
            font = ctx.resolve_font(DEFAULT_FONT, FALLBACK_FONT_SIZE)
        box = Rect(pos[0], pos[1], font_size, font_size)
        ctx.draw_text(glyph or DEFAULT_GLYPH, box, font=font,
                      foreground=border, stroke=border, background=fill, align="center")
