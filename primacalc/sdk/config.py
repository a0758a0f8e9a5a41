"""Configuration management for Prima Calc.

settings.json in the config directory holds two optional keys:
   - fiscal_year: default fiscal-rules year for the CLI
   - rules_dir: extra directory searched for YYYY.yaml fiscal rules

The config directory is PRIMA_CALC_CONFIG_PATH if set, else
$XDG_CONFIG_HOME/prima-calc (~/.config/prima-calc).

Fiscal rules are looked up in rules_dir, then <config dir>/tax-rules, then
the rules bundled with the package. The first directory holding YYYY.yaml
wins.
"""

import json
import os
from pathlib import Path
from typing import Any, List

APP_NAME = "prima-calc"
SETTINGS_FILENAME = "settings.json"
RULES_DIRNAME = "tax-rules"


def get_config_dir() -> Path:
    """Directory holding settings.json and the tax-rules/ folder."""
    override = os.environ.get("PRIMA_CALC_CONFIG_PATH")
    if override:
        return Path(override)
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Read settings.json, or {} before the first setting is saved."""
    path = get_settings_path()
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Write settings.json, creating the config directory when needed."""
    path = get_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(settings, f, indent=2)
    return path


def get_setting(key: str, default: Any = None) -> Any:
    """Value of fiscal_year or rules_dir, or default when unset."""
    return load_settings().get(key, default)


def set_setting(key: str, value: Any) -> Path:
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_bundled_rules_dir() -> Path:
    """Get the directory of fiscal rules shipped with the package."""
    return Path(__file__).parent.parent / "tax_rules"


def get_rules_dirs() -> List[Path]:
    """Get fiscal rules directories in search order.

    Directories that don't exist are still listed; callers check for the
    individual YYYY.yaml file.
    """
    dirs = []

    custom_dir = get_setting("rules_dir")
    if custom_dir:
        dirs.append(Path(custom_dir).expanduser())

    dirs.append(get_config_dir() / RULES_DIRNAME)
    dirs.append(get_bundled_rules_dir())
    return dirs
