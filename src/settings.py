"""
Settings Module for Word Slide Solver

Provides persistent storage for solver preferences using JSON.
Settings are stored in config.json in the project root.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional

from src.solver.context import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_STATES,
    DEFAULT_PROGRESS_INTERVAL,
)

logger = logging.getLogger(__name__)

# Settings file location (project root)
SETTINGS_FILE = Path("config.json")

# Default settings
DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug_enabled": False,
    "strategy_name": "bidirectional",
    "max_states": DEFAULT_MAX_STATES,
    "max_depth": DEFAULT_MAX_DEPTH,
    "progress_interval": DEFAULT_PROGRESS_INTERVAL,
    "grid_rows": 8,
    "grid_cols": 8,
    "max_workers": 0,  # 0 = one thread per level
}


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from config.json.

    Args:
        path: Settings file (defaults to SETTINGS_FILE)

    Returns:
        Settings dictionary. Returns defaults if file missing or invalid.
    """
    path = path or SETTINGS_FILE
    if not path.exists():
        logger.debug("Settings file not found, using defaults")
        return DEFAULT_SETTINGS.copy()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            settings = json.load(f)

        # Merge with defaults to handle missing keys
        result = DEFAULT_SETTINGS.copy()
        result.update(settings)
        logger.debug(f"Settings loaded: {result}")
        return result

    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load settings: {e}, using defaults")
        return DEFAULT_SETTINGS.copy()


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save settings to config.json.

    Args:
        settings: Settings dictionary to save
        path: Settings file (defaults to SETTINGS_FILE)
    """
    path = path or SETTINGS_FILE
    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(settings, f, indent=2)
        logger.debug(f"Settings saved: {settings}")
    except IOError as e:
        logger.error(f"Failed to save settings: {e}")
