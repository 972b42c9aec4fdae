import os
import json
from log import log

from cells import CellType
from colors import BackgroundType

CONFIG_PATH = "./matrix_config.json"

DEFAULTS = {
    "viewport": [40, 15],
    "grid": [40, 15],
    "mode": "rectangle",
    "background": None,
    "colors": ["FFFF00", "FFFF00"],
    "text": {"source": "T", "font": "HelveticaNeue-Thin", "size": 17.0},
    "interval": 0.1,
    "ask_mode": False,
}

def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)

def _is_pair(value, check):
    return isinstance(value, list) and len(value) == 2 and all(check(v) for v in value)

# What a usable value looks like, per key
CHECKS = {
    "viewport": lambda v: _is_pair(v, lambda n: _is_number(n) and n >= 0),
    "grid": lambda v: _is_pair(v, _is_number),
    "mode": lambda v: isinstance(v, str),
    "background": lambda v: v is None or isinstance(v, dict),
    "colors": lambda v: _is_pair(v, lambda c: c is None or isinstance(c, str)),
    "text": lambda v: isinstance(v, dict),
    "interval": lambda v: _is_number(v) and v > 0,
    "ask_mode": lambda v: isinstance(v, bool),
}

TEXT_CHECKS = {
    "source": lambda v: isinstance(v, str),
    "font": lambda v: isinstance(v, str),
    "size": lambda v: _is_number(v) and v >= 0,
}

def _fill_defaults(section, defaults, checks, where):
    """Add missing keys and replace values of the wrong shape. True if anything changed."""
    modified = False
    for key, val in defaults.items():
        if key not in section:
            section[key] = json.loads(json.dumps(val))
            modified = True
        elif not checks[key](section[key]):
            log(f"[yellow]⚠️ {where}: bad value for '{key}' ({section[key]!r}), using default[/]")
            section[key] = json.loads(json.dumps(val))
            modified = True
    return modified

def load_config(path=CONFIG_PATH):
    config = {}
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            try:
                config = json.load(f)
            except json.JSONDecodeError:
                log(f"[bold red]❌ ERROR[/] {path} is corrupted, using defaults")
                config = {}
        if not isinstance(config, dict):
            log(f"[bold red]❌ ERROR[/] {path} is not a JSON object, using defaults")
            config = {}

    modified = _fill_defaults(config, DEFAULTS, CHECKS, path)
    if _fill_defaults(config["text"], DEFAULTS["text"], TEXT_CHECKS, f"{path} text"):
        modified = True

    if modified:
        save_config(config, path)

    return config

def save_config(config, path=CONFIG_PATH):
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
    except OSError as e:
        log(f"[red]❌ Failed to save config: {e}[/]")

def mode_from_name(name):
    """'Circle', 'TEXT', ... to a CellType; anything unknown is RECTANGLE."""
    try:
        return CellType(str(name).strip().lower())
    except ValueError:
        return CellType.RECTANGLE

def background_from_config(spec):
    """None or {"type": "clear"|"colored", "color": "..."} to a (BackgroundType, hex) pair."""
    if not isinstance(spec, dict):
        return None
    try:
        kind = BackgroundType(str(spec.get("type", "clear")).lower())
    except ValueError:
        kind = BackgroundType.CLEAR
    return kind, spec.get("color")

def view_kwargs(config):
    """Turn a loaded config dict into MatrixView keyword arguments."""
    width, height = config["viewport"]
    fill, border = config["colors"]
    text = config["text"]
    return {
        "frame": (0, 0, width, height),
        "grid_dim": tuple(config["grid"]),
        "mode": mode_from_name(config["mode"]),
        "background": background_from_config(config["background"]),
        "colors": (fill, border),
        "write": (text.get("source"), text.get("font"), text.get("size")),
        "interval": config["interval"],
    }
