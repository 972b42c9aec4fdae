import random

import pytest

from canvas import Font
from log import reset_log_fn, set_log_fn


class RecordingContext:
    """Drawing context that just remembers every call."""

    def __init__(self, known_fonts=("HelveticaNeue-Thin",)):
        self.calls = []
        self.known_fonts = set(known_fonts)

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return record

    def resolve_font(self, name, size):
        self.calls.append(("resolve_font", (name, size), {}))
        if name in self.known_fonts:
            return Font(name, size, "")
        return None

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class ManualTimer:
    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self.cancelled = 0

    def fire(self):
        self.callback(self)

    def cancel(self):
        self.cancelled += 1


class ManualTimerFactory:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, callback):
        timer = ManualTimer(interval, callback)
        self.timers.append(timer)
        return timer


class FakeSurface:
    def __init__(self):
        self.visible = False
        self.contexts = []

    def set_visible(self, flag):
        self.visible = flag

    def invalidate(self, view):
        ctx = RecordingContext()
        self.contexts.append(ctx)
        view.redraw(ctx)


@pytest.fixture
def ctx():
    return RecordingContext()


@pytest.fixture
def timers():
    return ManualTimerFactory()


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def logged():
    messages = []
    set_log_fn(lambda data, *a, **k: messages.append(data))
    yield messages
    reset_log_fn()
