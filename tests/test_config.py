import json

import pytest

from cells import CellType
from colors import BackgroundType
from config import DEFAULTS, background_from_config, load_config, mode_from_name, view_kwargs
from matrix_view import MatrixView


def test_missing_file_gets_defaults_and_is_written(tmp_path):
    path = tmp_path / "matrix.json"
    config = load_config(str(path))
    assert config == DEFAULTS
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULTS


def test_partial_file_is_completed(tmp_path):
    path = tmp_path / "matrix.json"
    path.write_text(json.dumps({"mode": "circle", "text": {"source": "01"}}), encoding="utf-8")
    config = load_config(str(path))
    assert config["mode"] == "circle"
    assert config["text"] == {"source": "01", "font": "HelveticaNeue-Thin", "size": 17.0}
    assert config["grid"] == [40, 15]


def test_corrupted_file_falls_back(tmp_path, logged):
    path = tmp_path / "matrix.json"
    path.write_text("{not json", encoding="utf-8")
    config = load_config(str(path))
    assert config["mode"] == "rectangle"
    assert any("corrupted" in m for m in logged)


def test_mode_from_name():
    assert mode_from_name("TEXT") is CellType.TEXT
    assert mode_from_name(" line ") is CellType.LINE
    assert mode_from_name("hexagon") is CellType.RECTANGLE
    assert mode_from_name(None) is CellType.RECTANGLE


def test_background_from_config():
    assert background_from_config(None) is None
    assert background_from_config({"type": "colored", "color": "000000"}) == (BackgroundType.COLORED, "000000")
    assert background_from_config({"type": "plaid"}) == (BackgroundType.CLEAR, None)


def test_view_kwargs_build_a_view(tmp_path):
    config = load_config(str(tmp_path / "matrix.json"))
    config["mode"] = "line"
    view = MatrixView(**view_kwargs(config))
    assert view.grid.columns == 40 and view.grid.rows == 15
    assert view.config.mode is CellType.LINE
    assert view.interval == 0.1


@pytest.mark.parametrize("key, bad", [
    ("colors", None),
    ("colors", [1, 2]),
    ("viewport", 40),
    ("viewport", [-1, 5]),
    ("grid", "4x4"),
    ("grid", ["a", "b"]),
    ("interval", "fast"),
    ("interval", 0),
    ("text", "abc"),
    ("background", "black"),
    ("ask_mode", "yes"),
])
def test_bad_values_are_replaced(tmp_path, logged, key, bad):
    path = tmp_path / "matrix.json"
    path.write_text(json.dumps({key: bad}), encoding="utf-8")
    config = load_config(str(path))
    assert config[key] == DEFAULTS[key]
    assert any(key in m for m in logged)
    assert json.loads(path.read_text(encoding="utf-8"))[key] == DEFAULTS[key]
    view = MatrixView(**view_kwargs(config))
    assert view.grid.columns == 40


@pytest.mark.parametrize("bad", ["big", None, -2, [17]])
def test_bad_text_size_is_replaced(tmp_path, logged, bad):
    path = tmp_path / "matrix.json"
    path.write_text(json.dumps({"text": {"source": "01", "size": bad}}), encoding="utf-8")
    config = load_config(str(path))
    assert config["text"] == {"source": "01", "font": "HelveticaNeue-Thin", "size": 17.0}
    assert any("size" in m for m in logged)
    assert MatrixView(**view_kwargs(config)).config.font_size == 17.0
