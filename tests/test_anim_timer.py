import threading
import time

from anim_timer import RepeatingTimer, scheduled_timer


def test_timer_repeats_until_cancelled():
    ticks = []
    done = threading.Event()

    def on_tick(timer):
        ticks.append(timer)
        if len(ticks) >= 3:
            done.set()

    timer = scheduled_timer(0.01, on_tick)
    assert done.wait(2.0)
    timer.cancel()
    timer._thread.join(1.0)
    assert not timer.active
    assert all(t is timer for t in ticks)


def test_cancel_is_idempotent():
    timer = RepeatingTimer(10, lambda t: None).start()
    timer.cancel()
    timer.cancel()
    timer._thread.join(1.0)
    assert not timer.active


def test_callback_error_keeps_timer_alive(logged):
    calls = []
    done = threading.Event()

    def flaky(timer):
        calls.append(1)
        if len(calls) == 1:
            raise ValueError("first tick fails")
        done.set()

    timer = scheduled_timer(0.01, flaky)
    assert done.wait(2.0)
    timer.cancel()
    assert any("first tick fails" in m for m in logged)


def test_cancel_waits_for_running_tick():
    in_tick = threading.Event()
    finished = []

    def slow(timer):
        in_tick.set()
        time.sleep(0.1)
        finished.append(1)

    timer = scheduled_timer(0.01, slow)
    assert in_tick.wait(2.0)
    timer.cancel()
    assert finished
    assert not timer._thread.is_alive()


def test_cancel_from_inside_tick_does_not_block():
    done = threading.Event()

    def stop_self(timer):
        timer.cancel()
        done.set()

    timer = scheduled_timer(0.01, stop_self)
    assert done.wait(2.0)
    timer._thread.join(1.0)
    assert not timer.active
