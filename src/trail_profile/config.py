"""Configuration file loading."""

import json
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "trail-profile"
CONFIG_PATH = CONFIG_DIR / "trail-profile.json"
LOCAL_CONFIG_PATH = Path("trail-profile.json")


def load_config() -> dict:
    """Load configuration from config files.

    Merges config from global and local files:
    1. ~/.config/trail-profile/trail-profile.json (global, loaded first)
    2. ./trail-profile.json (local, overrides global)

    Files that are missing, unreadable or not valid JSON objects are skipped.

    Returns:
        Dict with merged config values, empty dict if no files exist.
    """
    config = {}
    for config_path in [CONFIG_PATH, LOCAL_CONFIG_PATH]:
        if config_path.exists():
            try:
                with config_path.open() as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError):
                continue
            if isinstance(data, dict):
                config.update(data)
    return config
