"""
hud_loader.py
-------------
Loads HUD text layout (positions, font sizes, colors) from YAML.
"""

from pathlib import Path
from typing import Any, Dict

import yaml

from road_dodge.core.debug.debug_logger import DebugLogger
from road_dodge.core.runtime.game_settings import Health


DEFAULT_LAYOUT = {
    "health_message": {
        "position": [550.0, 320.0],
        "font_size": 30,
        "color": [255, 255, 255],
    },
    "game_over": {
        "position": [0.0, 0.0],
        "font_size": Health.GAME_OVER_FONT_SIZE,
        "color": [255, 255, 255],
    },
}


class HudLoader:
    """Reads HUD layout files and fills missing fields from defaults."""

    def __init__(self, base_path=None):
        self.base_path = Path(base_path) if base_path else Path(__file__).resolve().parent.parent / "config" / "ui"
        self.cache: Dict[str, Dict[str, Any]] = {}

    def load(self, filename: str = "hud.yaml") -> Dict[str, Dict[str, Any]]:
        """
        Load a HUD layout.

        Args:
            filename: YAML file relative to the loader's base path

        Returns:
            dict: {element_name: {"position", "font_size", "color"}}

        Raises:
            FileNotFoundError: If the layout file does not exist
        """
        if filename in self.cache:
            return self.cache[filename]

        full_path = self.base_path / filename
        if not full_path.exists():
            raise FileNotFoundError(f"HUD layout not found: {full_path}")

        with open(full_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        layout = {}
        for name, defaults in DEFAULT_LAYOUT.items():
            element = dict(defaults)
            element.update(config.get(name) or {})
            layout[name] = element

        unknown = set(config) - set(DEFAULT_LAYOUT)
        if unknown:
            DebugLogger.warn(f"Ignoring unknown HUD elements: {sorted(unknown)}", category="ui")

        self.cache[filename] = layout
        DebugLogger.system(f"Loaded HUD layout {filename}", category="ui")
        return layout
