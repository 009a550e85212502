import json
from countdown.common.logger import log
from countdown.common.setup import PATHS

#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.data / "settings.json"

THEME_NAMES = ("Dark", "Light")

# Default values for every settings key, along with the type each one must have.
_SETTINGS_DEFAULTS = {
    "theme": "Dark",
    "always_on_top": False,
    "expiry_action": "minimize_all",
    "tick_interval_ms": 1000,
    "window_width": 400,
    "window_height": 300,
}

# Inclusive (min, max) bounds for the integer settings.
_INT_RANGES = {
    "tick_interval_ms": (1, 60_000),
    "window_width": (200, 10_000),
    "window_height": (150, 10_000),
}

# Helper to return a truly fresh, default settings dict.
def build_default_settings():
    return dict(_SETTINGS_DEFAULTS)

# Returns True if the given value is usable for the given key. bool is an int subclass, so it's checked explicitly.
def _is_valid(key, value):
    default = _SETTINGS_DEFAULTS[key]
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        low, high = _INT_RANGES[key]
        return isinstance(value, int) and not isinstance(value, bool) and low <= value <= high
    if key == "theme":
        return value in THEME_NAMES
    return isinstance(value, type(default))

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads settings from PATHS.data / settings.json, defaulting anything that's missing or malformed. On a fresh
# install the default file gets written so it's easy to find and edit.
def load_settings():
    try:
        if not SETTINGS_PATH.exists():
            settings = build_default_settings()
            save_settings(settings)
            log.info(f"No existing settings.json found, wrote fresh defaults to '{SETTINGS_PATH}'.")
            return settings

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise TypeError(f"Expected a JSON object in settings.json, got {type(loaded).__name__}")

        settings = build_default_settings()
        defaulted_values = set()
        for key in _SETTINGS_DEFAULTS:
            if key in loaded and _is_valid(key, loaded[key]):
                settings[key] = loaded[key]
            else:
                defaulted_values.add(key)

        if defaulted_values:
            log.warning(f"Successfully loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return settings
    # Fall back to defaults in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to default settings.",exc_info=True)
        return build_default_settings()

# Write the given settings to disk under PATHS.data / settings.json
def save_settings(settings):
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
