"""
One log sink shared by the view, its timer and the terminal host.

Messages are dropped until main() installs console.print; they may
carry rich markup like "[yellow]...[/]".
"""

def _drop(data, **kwargs):
    pass

_sink = _drop

def log(data, *args, **kwargs):
    """log("cell {} skipped", 3) formats with str.format; a bad pattern is logged raw."""
    if args and isinstance(data, str):
        try:
            data = data.format(*args)
        except (IndexError, KeyError, ValueError):
            pass
    try:
        _sink(data, **kwargs)
    except Exception:
        # the animation keeps running without its log
        pass

def set_log_fn(fn):
    global _sink
    if not callable(fn):
        raise TypeError(f"log sink must be callable, got {type(fn).__name__}")
    _sink = fn

def reset_log_fn():
    global _sink
    _sink = _drop

def log_fn():
    """The sink currently in use."""
    return _sink
