import math
import random
import threading

import colors
import grid as grid_layout
from anim_timer import scheduled_timer
from cells import CellType, DEFAULT_FONT, DEFAULT_FONT_SIZE, DEFAULT_GLYPH
from log import log
from scroll_state import ScrollState

TICK_INTERVAL = 0.1


def _unpack(value, default):
    """value as a tuple shaped like default, or default when it is not."""
    try:
        items = tuple(value)
    except TypeError:
        return default
    if len(items) != len(default) or isinstance(value, str):
        return default
    return items


def _font_size(size):
    if size is None:
        return DEFAULT_FONT_SIZE
    try:
        size = float(size)
    except (TypeError, ValueError):
        log(f"[yellow]⚠️ Font size {size!r} is not a number, using {DEFAULT_FONT_SIZE}[/]")
        return DEFAULT_FONT_SIZE
    if not math.isfinite(size) or size < 0:
        return DEFAULT_FONT_SIZE
    return size


def _interval(interval):
    try:
        interval = float(interval)
    except (TypeError, ValueError):
        return TICK_INTERVAL
    return interval if math.isfinite(interval) and interval > 0 else TICK_INTERVAL


class RenderConfig:
    """Everything that decides how a cell looks. Fixed for the view's lifetime."""

    def __init__(self, mode=None, background=None, colors_hex=None, write=None):
        self.mode = mode if isinstance(mode, CellType) else CellType.RECTANGLE
        fill_hex, border_hex = _unpack(colors_hex, (None, None))
        self.fill = colors.resolve(fill_hex if fill_hex is not None else colors.DEFAULT_HEX)
        self.border = colors.resolve(border_hex if border_hex is not None else colors.DEFAULT_HEX)
        text, font, size = _unpack(write, (None, None, None))
        self.text = str(text) if text is not None else DEFAULT_GLYPH
        self.font_name = str(font) if font else DEFAULT_FONT
        self.font_size = _font_size(size)
        self.background = colors.resolve_background(background)

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError(f"RenderConfig is immutable, cannot set '{name}'")
        super().__setattr__(name, value)

    @property
    def colors(self):
        return self.fill, self.border


class MatrixView:
    """
    Falling-glyph animation over a fixed grid.

    Every tick each column draws one cell at its active row, then that
    row moves down by one, wrapping at the bottom. The view does not own
    a drawing surface: attach_to() one, and the surface calls redraw()
    with a fresh context when the timer invalidates it.
    """

    def __init__(self, frame, grid_dim, mode=None, background=None, colors=None, write=None,
                 rng=None, timer_factory=None, interval=TICK_INTERVAL):
        x, y, width, height = _unpack(frame, (0, 0, 0, 0))
        columns, rows = _unpack(grid_dim, (1, 1))
        self.frame = (x, y, width, height)
        self.rng = rng or random.Random()
        self.grid = grid_layout.layout((width, height), columns, rows)
        self.scroll = ScrollState(self.grid.columns, self.grid.rows, self.rng)
        self.config = RenderConfig(mode, background, colors, write)
        self.interval = _interval(interval)
        self.timer_factory = timer_factory or scheduled_timer
        self.anim_timer = None
        self.surface = None
        self.alpha = 1.0
        self.is_hidden = True
        self._redraw_lock = threading.Lock()
        # Grid never changes, so neither do the cell rectangles
        self._cells = [[self.grid.cell_rect(i, j) for j in range(self.grid.rows)]
                       for i in range(self.grid.columns)]

    @property
    def background_color(self):
        return self.config.background

    @property
    def running(self):
        return self.anim_timer is not None

    def attach_to(self, surface):
        self.surface = surface
        surface.set_visible(not self.is_hidden)
        return self

    def _on_tick(self, timer):
        if self.surface is not None:
            self.surface.invalidate(self)

    def start(self):
        if self.anim_timer is not None:
            self.anim_timer.cancel()
        self.anim_timer = self.timer_factory(self.interval, self._on_tick)
        log(f"[green]▶ Matrix started ({self.grid.columns}x{self.grid.rows}, {self.config.mode.value})[/]")

    def stop(self):
        if self.anim_timer is None:
            return
        self.anim_timer.cancel()
        self.anim_timer = None
        log("[yellow]⏹ Matrix stopped[/]")

    def _pick_glyph(self):
        pool = self.config.text
        if not pool:
            return DEFAULT_GLYPH
        return pool[self.rng.randrange(len(pool))]

    def _draw_cell(self, ctx, cell, glyph):
        mode = self.config.mode
        pair = self.config.colors
        if mode is CellType.LINE:
            mode.draw_line(ctx, (cell.x, cell.y + cell.height), pair)
        elif mode is CellType.RECTANGLE:
            mode.draw_rect(ctx, cell, pair)
        elif mode is CellType.CIRCLE:
            mode.draw_circle(ctx, (cell.x, cell.y), cell.width / 2, pair)
        else:
            mode.draw_text(ctx, (cell.x, cell.y),
                           (glyph, self.config.font_name, self.config.font_size), pair)

    def redraw(self, ctx):
        """Draw one frame into ctx. ctx is borrowed and not kept after this returns."""
        with self._redraw_lock:
            ctx.set_stroke(colors.BLACK)
            ctx.set_fill(colors.BLACK)
            ctx.begin_path()
            for i, column in enumerate(self._cells):
                glyph = self._pick_glyph() if self.config.mode is CellType.TEXT else None
                cell = column[self.scroll.active_row(i)]
                ctx.move_to(cell.x, cell.y)
                self._draw_cell(ctx, cell, glyph)
                self.scroll.advance_column(i)
            ctx.close_path()
            ctx.draw_path("fill_stroke")
            if self.is_hidden:
                self.is_hidden = False
                if self.surface is not None:
                    self.surface.set_visible(True)
                log("[dim]Matrix visible after first frame[/]")
