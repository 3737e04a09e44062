from __future__ import annotations

"""
Configuration Domain Management.

Handles the optional persistent preferences file (JSON) and the default
runtime configuration of the CLI. Scan results are never persisted.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from bloat.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_config_path() -> str:
    """Return the location of the persisted preferences file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Output
        "echo_progress": True,
        "json_output": False,
        "top": 0,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load preferences from disk on top of the defaults.

    A missing or unreadable file is not an error: the defaults are used.

    Args:
        path: Explicit file location; defaults to ``get_config_path()``.

    Returns:
        Dict[str, Any]: Defaults updated with the persisted values.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at '{config_path}'. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist preferences to disk.

    Args:
        config: The configuration to save.
        path: Explicit file location; defaults to ``get_config_path()``.
    """
    config_path = path or get_config_path()
    state = dict(config)
    state["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
