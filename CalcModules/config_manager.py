# config_manager.py
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent / "config.json"
ui_strings = Path(__file__).resolve().parent / "ui_strings.json"


DEFAULT_SETTINGS = {
    "decimal_places": 10,
    "comparison_tolerance": 1e-10,
    "history_limit": 100,
    "log_level": "WARNING",
    "debug": False,
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s (%s), using defaults", path, e)
        return {}


def load_setting_value(key_value):
    """Return all settings ("all") or a single setting, falling back to DEFAULT_SETTINGS."""
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(_read_json(config_json))

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_ui_strings():
    """Return the console texts (banner, prompt, help) from ui_strings.json.

    Multi-line texts are stored as lists of lines and joined here.
    """
    strings_dict = _read_json(ui_strings)
    return {key: "\n".join(value) if isinstance(value, list) else value
            for key, value in strings_dict.items()}
