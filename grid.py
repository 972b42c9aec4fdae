from collections import namedtuple

Rect = namedtuple("Rect", ["x", "y", "width", "height"])


class Grid:
    """Fixed columns x rows partition of a viewport. Immutable once built."""

    def __init__(self, width, height, columns, rows):
        self.width = max(int(width), 0)
        self.height = max(int(height), 0)
        self.columns = columns
        self.rows = rows
        # whole pixels only; leftover pixels at the right/bottom stay empty
        self.cell_width = self.width // columns
        self.cell_height = self.height // rows

    def __setattr__(self, name, value):
        if name in self.__dict__:
            raise AttributeError(f"Grid is immutable, cannot set '{name}'")
        super().__setattr__(name, value)

    def cell_origin(self, col, row):
        return col * self.cell_width, row * self.cell_height

    def cell_rect(self, col, row):
        x, y = self.cell_origin(col, row)
        return Rect(x, y, self.cell_width, self.cell_height)

    def __repr__(self):
        return (f"Grid({self.columns}x{self.rows}, cell={self.cell_width}x{self.cell_height}, "
                f"viewport={self.width}x{self.height})")


def _whole(value, minimum):
    try:
        return max(int(value), minimum)
    except (TypeError, ValueError, OverflowError):
        return minimum


def layout(viewport_size, columns, rows):
    """Build a Grid; non-positive or non-numeric column/row requests silently become 1."""
    width, height = viewport_size
    return Grid(_whole(width, 0), _whole(height, 0), _whole(columns, 1), _whole(rows, 1))
