"""
Terminal host for MatrixView, built on rich.

One terminal cell is one pixel. TerminalContext collects a path the way a
2D drawing context does and rasterises it on draw_path(); TerminalSurface
hands a fresh context to the view on every invalidate() and shows the
result in a rich Live panel.
"""
import math
from collections import namedtuple

from rich.align import Align
from rich.live import Live
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

import colors
from log import log

Font = namedtuple("Font", ["name", "size", "style"])

# Font names this host knows, and the rich style each one maps to
FONTS = {
    "HelveticaNeue-Thin": "dim",
    "HelveticaNeue": "",
    "HelveticaNeue-Bold": "bold",
    "Menlo": "",
    "Courier": "",
    "Courier-Bold": "bold",
    "Georgia-Italic": "italic",
}

LINE_CHAR = "│"
SHAPE_CHAR = "█"


def _style(foreground=None, background=None, extra=""):
    base = Style.parse(extra) if extra else Style()
    return base + Style(color=colors.to_rich(foreground), bgcolor=colors.to_rich(background))


class TerminalContext:
    def __init__(self, width, height, background=None):
        self.width = int(width)
        self.height = int(height)
        self.background = background or colors.CLEAR
        self.pixels = [[None] * self.width for _ in range(self.height)]
        self.stroke = colors.BLACK
        self.fill = colors.BLACK
        self.path = []
        self.current = None
        self.subpath_start = None
        self.segments = 0

    # --- state ---
    def set_stroke(self, color):
        self.stroke = color

    def set_fill(self, color):
        self.fill = color

    def resolve_font(self, name, size):
        if name not in FONTS:
            return None
        return Font(name, size, FONTS[name])

    # --- path construction ---
    def begin_path(self):
        self.path = []
        self.current = None
        self.subpath_start = None
        self.segments = 0

    def move_to(self, x, y):
        self.current = (x, y)
        self.subpath_start = (x, y)
        self.segments = 0

    def add_line_to(self, x, y):
        if self.current is None:
            self.move_to(x, y)
            return
        self.path.append(("line", self.current, (x, y)))
        self.current = (x, y)
        self.segments += 1

    def add_rect(self, x, y, width, height):
        self.path.append(("rect", x, y, width, height))
        self.move_to(x, y)

    def add_arc(self, cx, cy, radius, start, end):
        self.path.append(("arc", cx, cy, radius, start, end))
        self.current = (cx + radius * math.cos(end), cy + radius * math.sin(end))

    def close_path(self):
        # a lone segment closed on itself would only retrace it
        if self.segments > 1 and self.current != self.subpath_start:
            self.path.append(("line", self.current, self.subpath_start))
        self.current = self.subpath_start
        self.segments = 0

    # --- painting ---
    def _put(self, x, y, char, style):
        x, y = int(math.floor(x)), int(math.floor(y))
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y][x] = (char, style)

    def _line_points(self, start, end):
        (x0, y0), (x1, y1) = start, end
        steps = int(max(abs(x1 - x0), abs(y1 - y0)))
        if steps == 0:
            return [(x0, y0)]
        # end point excluded so a segment stays inside its own cell
        return [(x0 + (x1 - x0) * k / steps, y0 + (y1 - y0) * k / steps) for k in range(steps)]

    def _rect_points(self, x, y, width, height):
        w, h = max(int(width), 1), max(int(height), 1)
        for py in range(int(y), int(y) + h):
            for px in range(int(x), int(x) + w):
                edge = px in (int(x), int(x) + w - 1) or py in (int(y), int(y) + h - 1)
                yield px, py, edge

    def _arc_points(self, cx, cy, radius):
        r = max(radius, 0)
        for py in range(int(math.floor(cy - r)), int(math.ceil(cy + r)) + 1):
            for px in range(int(math.floor(cx - r)), int(math.ceil(cx + r)) + 1):
                dist = math.hypot(px - cx, py - cy)
                if dist <= r:
                    yield px, py, dist > r - 1

    def draw_path(self, mode="fill_stroke"):
        do_fill = mode in ("fill", "fill_stroke")
        do_stroke = mode in ("stroke", "fill_stroke")
        fill_style = _style(background=self.fill)
        stroke_style = _style(foreground=self.stroke, background=self.fill if do_fill else None)

        for element in self.path:
            kind = element[0]
            if kind == "line":
                if do_stroke:
                    for px, py in self._line_points(element[1], element[2]):
                        self._put(px, py, LINE_CHAR, stroke_style)
                continue
            if kind == "rect":
                points = self._rect_points(*element[1:5])
            else:
                points = self._arc_points(*element[1:4])
            for px, py, edge in points:
                if do_stroke and edge:
                    self._put(px, py, SHAPE_CHAR, stroke_style)
                elif do_fill:
                    self._put(px, py, " ", fill_style)
        self.begin_path()

    def draw_text(self, text, box, font=None, foreground=None, stroke=None, background=None, align="center"):
        width = max(int(box.width), 1)
        if align == "center":
            x = box.x + (width - len(text)) // 2
        else:
            x = box.x
        style = _style(foreground or stroke, background, font.style if font else "")
        for offset, ch in enumerate(text):
            self._put(x + offset, box.y, ch, style)

    # --- output ---
    def pixel_at(self, x, y):
        return self.pixels[y][x]

    def render(self):
        blank = _style(background=self.background)
        out = Text()
        for row_index, row in enumerate(self.pixels):
            for pixel in row:
                if pixel is None:
                    out.append(" ", style=blank)
                else:
                    out.append(pixel[0], style=pixel[1])
            if row_index < self.height - 1:
                out.append("\n")
        return out


class TerminalSurface:
    """Drawing surface for a MatrixView inside a rich Live display."""

    def __init__(self, width, height, background=None, console=None, title="📟 MATRIX"):
        self.width = int(width)
        self.height = int(height)
        self.background = background or colors.CLEAR
        self.console = console
        self.title = title
        self.visible = False
        self.frame = None
        self.live = None

    def __enter__(self):
        self.live = Live(refresh_per_second=15, transient=False, auto_refresh=False, console=self.console)
        self.live.__enter__()
        return self

    def __exit__(self, *exc):
        live, self.live = self.live, None
        if live is not None:
            live.__exit__(*exc)
        return False

    def set_visible(self, flag):
        self.visible = flag
        self._publish()

    def invalidate(self, view):
        ctx = TerminalContext(self.width, self.height, self.background)
        view.redraw(ctx)
        self.frame = ctx
        self._publish()

    def render(self):
        body = self.frame.render() if (self.frame is not None and self.visible) else Text("")
        return Panel(Align.center(body), title=self.title, border_style="green", padding=(0, 1))

    def _publish(self):
        if self.live is None:
            return
        try:
            self.live.update(self.render(), refresh=True)
        except Exception as e:
            log(f"[red]❌ Failed to refresh terminal: {e}[/]")
