"""
config_manager.py
-----------------
JSON loader for game data files.

Features:
- Paths that exist on disk are loaded as given
- Bare file names are looked up in the bundled config directory
- Recursively merges defaults
- Ignores '_notes' keys for human-readable configs
"""

import os
import json
from road_dodge.core.debug.debug_logger import DebugLogger


# ===========================================================
# Configuration
# ===========================================================

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DATA_ROOT = os.path.join(PACKAGE_ROOT, "config")

_FILE_INDEX = None


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a JSON configuration file.

    Args:
        filename: Path on disk, or a bare name from the bundled config dir
        default_dict: Default fallback config
        strict: If True, raise exception on missing file

    Returns:
        dict: Merged configuration
    """
    if default_dict is None:
        default_dict = {}

    path = _resolve_path(filename)

    try:
        return _merge_dicts(default_dict, _load_json(path))

    except (json.JSONDecodeError, FileNotFoundError, IOError) as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="loading")
        return _merge_dicts(default_dict, {})


def build_file_index():
    """Scan the bundled config directory and cache JSON file paths."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    if os.path.isdir(DATA_ROOT):
        for root, _, files in os.walk(DATA_ROOT):
            for file in files:
                if file.endswith(".json") and file not in _FILE_INDEX:
                    _FILE_INDEX[file] = os.path.join(root, file)

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="loading")


# ===========================================================
# Path Resolution
# ===========================================================

def _resolve_path(filename):
    """Existing paths win; only bare names go through the bundled index."""
    if os.path.exists(filename):
        return filename

    filename = filename.replace("\\", "/")
    if "/" in filename:
        return filename

    if _FILE_INDEX is None:
        build_file_index()

    for key in (filename, filename + ".json"):
        if key in _FILE_INDEX:
            return _FILE_INDEX[key]

    return filename


# ===========================================================
# File Loaders
# ===========================================================

def _load_json(path):
    """Load JSON config file."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="loading")
    return data


# ===========================================================
# Merge Utilities
# ===========================================================

def _merge_dicts(default, override):
    """Recursively merge two dicts. Ignores '_notes' keys."""
    merged = {}
    for key, value in default.items():
        merged[key] = _merge_dicts(value, {}) if isinstance(value, dict) else value
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict):
            base = merged.get(key)
            merged[key] = _merge_dicts(base if isinstance(base, dict) else {}, value)
        else:
            merged[key] = value
    return merged
