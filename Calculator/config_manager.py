# config_manager.py
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"


# Used whenever config.json is missing, unreadable or lacks a key
DEFAULT_SETTINGS = {
    "darkmode": False,
    "show_equation": True,
    "after_paste_enter": False,
    "decimal_places": 10,
    "debug": False
}

DEFAULT_DESCRIPTIONS = {
    "darkmode": "Dark mode",
    "show_equation": "Show the expression next to the result",
    "after_paste_enter": "Evaluate right after pasting",
    "decimal_places": "Decimal places",
    "debug": "Debug logging"
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

    # Missing, unreadable (permissions, directory) or non-UTF-8 / malformed files all mean "use defaults"
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.info("5001 Settings file %s not usable (%s), using defaults.", path, e)
        return {}

    if not isinstance(data, dict):
        logger.info("5001 Settings file %s does not hold an object, using defaults.", path)
        return {}
    return data


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(_read_json(config_json))

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    descriptions = dict(DEFAULT_DESCRIPTIONS)
    descriptions.update(_read_json(ui_strings))

    if key_value == "all":
        return descriptions

    else:
        return descriptions.get(key_value, key_value)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError) as e:
        logger.error("5002 Settings could not be saved to %s: %s", config_json, e)
        return {}
