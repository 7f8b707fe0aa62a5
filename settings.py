"""JSON-based UI settings for the date picker.

Only presentation options live here; chosen dates are never written to disk.
"""

import json
import os

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".persian-date-picker.json")

_DEFAULTS = {
    "label": "تاریخ رسید:",
    "placeholder": "انتخاب تاریخ",
    "font_family": None,
    "exact_conversion": False,
    "log_level": "WARNING",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_settings(path: str | None = None) -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(path or _SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            return settings
        for key in ("label", "placeholder", "font_family"):
            if key in stored and isinstance(stored[key], str):
                settings[key] = stored[key]
        if "exact_conversion" in stored and isinstance(stored["exact_conversion"], bool):
            settings["exact_conversion"] = stored["exact_conversion"]
        level = stored.get("log_level")
        if isinstance(level, str) and level.upper() in _LOG_LEVELS:
            settings["log_level"] = level.upper()
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        pass
    return settings
