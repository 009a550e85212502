# Color palettes keyed by theme name. "Dark" is the default.
THEMES = {
    "Dark": {
        "bg": "#1E1E1E",
        "text": "#F0F0F0",
        "muted_text": "#9A9A9A",
        "input_bg": "#2B2B2B",
        "input_border": "#3C3C3C",
        "input_invalid": "#E05252",
        "button_bg": "#3A3A3A",
        "button_hover": "#4A4A4A",
        "button_disabled_bg": "#2A2A2A",
        "button_disabled_text": "#666666",
        "running_text": "#4FC3F7",
    },
    "Light": {
        "bg": "#F5F5F5",
        "text": "#1A1A1A",
        "muted_text": "#666666",
        "input_bg": "#FFFFFF",
        "input_border": "#C8C8C8",
        "input_invalid": "#C62828",
        "button_bg": "#E4E4E4",
        "button_hover": "#D6D6D6",
        "button_disabled_bg": "#EEEEEE",
        "button_disabled_text": "#A0A0A0",
        "running_text": "#0277BD",
    },
}
