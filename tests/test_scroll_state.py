import random

from scroll_state import ScrollState


def test_rows_stay_in_range_and_wrap():
    state = ScrollState(10, 4, random.Random(7))
    for _ in range(9):
        before = state.snapshot()
        assert all(0 <= r < 4 for r in before)
        state.advance()
        assert state.snapshot() == [(r + 1) % 4 for r in before]


def test_single_row_never_moves():
    state = ScrollState(3, 1, random.Random(0))
    state.advance()
    assert state.snapshot() == [0, 0, 0]


def test_advance_column_only_moves_one():
    state = ScrollState(3, 5, random.Random(3))
    before = state.snapshot()
    state.advance_column(1)
    after = state.snapshot()
    assert after[0] == before[0] and after[2] == before[2]
    assert after[1] == (before[1] + 1) % 5


def test_same_seed_same_phases():
    assert ScrollState(8, 6, random.Random(42)).snapshot() == ScrollState(8, 6, random.Random(42)).snapshot()
