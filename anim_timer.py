import threading

from log import log


class RepeatingTimer:
    """Calls callback every `interval` seconds on one daemon thread until cancelled."""

    def __init__(self, interval, callback):
        self.interval = interval
        self.callback = callback
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name="matrix-timer", daemon=True)

    def start(self):
        self._thread.start()
        return self

    def _run(self):
        while not self._stop_event.wait(self.interval):
            try:
                self.callback(self)
            except Exception as e:
                log(f"[red]❌ Timer callback failed: {e}[/]")

    def cancel(self, timeout=1.0):
        """Stop ticking and wait for a tick in progress, unless called from that tick."""
        self._stop_event.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    @property
    def active(self):
        return self._thread.is_alive() and not self._stop_event.is_set()


def scheduled_timer(interval, callback):
    """Default timer factory: create and start a RepeatingTimer."""
    return RepeatingTimer(interval, callback).start()
