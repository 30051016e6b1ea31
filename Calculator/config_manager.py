# config_manager.py
from pathlib import Path
import json

from .log import get_logger

logger = get_logger(__name__)

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"

DEFAULT_SETTINGS = {
    "darkmode": False,
    "decimal_places": 8,
    "after_paste_enter": False,
}

MIN_DECIMAL_PLACES = 2


def load_setting_value(key_value):
    """Return one setting, or all of them for key_value == "all".

    A missing or broken config.json falls back to DEFAULT_SETTINGS.
    """
    try:
        with open(config_json, 'r', encoding='utf-8') as f:
            settings_dict = {**DEFAULT_SETTINGS, **json.load(f)}

    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s (%s), using default settings.", config_json, e)
        settings_dict = dict(DEFAULT_SETTINGS)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, DEFAULT_SETTINGS.get(key_value))


def load_setting_description(key_value):
    try:
        with open(ui_strings, 'r', encoding='utf-8') as f:
            settings_dict = json.load(f)

    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s (%s).", ui_strings, e)
        return {}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, key_value)


def save_setting(settings_dict):
    """Write settings_dict to config.json. Returns it, or {} if writing failed."""
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError) as e:
        logger.error("Settings could not be saved: %s", e)
        return {}
