"""Resource loading utilities for svgicons.

Uses importlib.resources for robust package data access that works
whether installed normally, editable, or bundled.
"""

import os
from functools import lru_cache
from importlib.resources import files
from pathlib import Path

CONFIG_ENV_VAR = "SVGICONS_CONFIG"


@lru_cache
def get_default_config(name: str) -> str:
    """Load a default config file from svgicons/config/defaults/.

    Args:
        name: Config filename (e.g., "icons.yaml")

    Returns:
        Config content as string
    """
    return files("svgicons.config.defaults").joinpath(name).read_text()


def get_default_icons_yaml() -> str:
    """Get the default icons.yaml configuration."""
    return get_default_config("icons.yaml")


def get_user_config_path() -> Path:
    """Path to the user's icons.yaml, honouring $SVGICONS_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".svgicons" / "icons.yaml"
