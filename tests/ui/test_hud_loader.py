"""
test_hud_loader.py
------------------
Tests for YAML HUD layout loading.
"""

import pytest

from road_dodge.ui.hud_loader import HudLoader


def test_bundled_layout():
    layout = HudLoader().load()

    assert layout["health_message"]["position"] == [550.0, 320.0]
    assert layout["game_over"]["font_size"] == 128


def test_partial_layout_filled_from_defaults(tmp_path):
    (tmp_path / "hud.yaml").write_text("game_over:\n  font_size: 64\n", encoding="utf-8")

    layout = HudLoader(tmp_path).load("hud.yaml")

    assert layout["game_over"]["font_size"] == 64
    assert layout["game_over"]["position"] == [0.0, 0.0]
    assert layout["health_message"]["position"] == [550.0, 320.0]


def test_empty_file_gives_defaults(tmp_path):
    (tmp_path / "hud.yaml").write_text("", encoding="utf-8")
    assert HudLoader(tmp_path).load("hud.yaml")["health_message"]["font_size"] == 30


def test_missing_layout_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        HudLoader(tmp_path).load("nope.yaml")


def test_layout_cached(tmp_path):
    path = tmp_path / "hud.yaml"
    path.write_text("game_over:\n  font_size: 64\n", encoding="utf-8")
    loader = HudLoader(tmp_path)

    first = loader.load("hud.yaml")
    path.unlink()

    assert loader.load("hud.yaml") is first
