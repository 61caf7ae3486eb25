"""Pytest configuration and shared fixtures."""

import json

import pytest

from faceshift.logic.shift.engine import ShiftSettings
from faceshift.logic.shift.host import ContextTree, FaceTable, HookRegistry


SAMPLE_THEME = {
    "default": {"foreground": "#808080", "background": "black"},
    "cursor": {"foreground": "unspecified", "background": "#C86432"},
    "region": {"foreground": None, "background": "unspecified"},
    "font-lock-keyword-face": {"foreground": "#C86432", "background": "unspecified"},
    "font-lock-string-face": {"foreground": "#000000"},
    "mode-line": {"foreground": "#808080", "background": "#C86432"},
}


@pytest.fixture
def theme_data():
    """Plain theme mapping, deep-copied per test."""
    return json.loads(json.dumps(SAMPLE_THEME))


@pytest.fixture
def face_table(theme_data):
    """Face table built from the sample theme."""
    return FaceTable(theme_data)


@pytest.fixture
def contexts():
    """Context tree with python-mode deriving from prog-mode."""
    tree = ContextTree(current="python-mode")
    tree.derive("python-mode", "prog-mode")
    tree.derive("prog-mode", "fundamental-mode")
    tree.derive("org-mode", "text-mode")
    return tree


@pytest.fixture
def hooks():
    return HookRegistry()


@pytest.fixture
def settings():
    """Default settings."""
    return ShiftSettings()


@pytest.fixture
def theme_file(tmp_path, theme_data):
    """Sample theme written to a JSON file."""
    path = tmp_path / "theme.json"
    path.write_text(json.dumps(theme_data), encoding="utf-8")
    return path


@pytest.fixture
def write_json(tmp_path):
    """Write an object to a JSON file under tmp_path and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
