import random


class ScrollState:
    """Active draw row of every column. All columns move together, only the start differs."""

    def __init__(self, columns, rows, rng=None):
        rng = rng or random.Random()
        self.rows = rows
        self._active = [rng.randrange(rows) for _ in range(columns)]

    def __len__(self):
        return len(self._active)

    def active_row(self, col):
        return self._active[col]

    def advance_column(self, col):
        self._active[col] = (self._active[col] + 1) % self.rows

    def advance(self):
        for col in range(len(self._active)):
            self.advance_column(col)

    def snapshot(self):
        return list(self._active)
