from .colors import THEMES


def build_stylesheet(theme_name):
    """Build the application-wide Qt stylesheet for a theme."""
    t = THEMES.get(theme_name, THEMES["Dark"])
    return f"""
        QMainWindow, QWidget {{
            background-color: {t['bg']};
            color: {t['text']};
        }}
        QLabel {{
            background: transparent;
        }}
        QLabel#endTime {{
            color: {t['muted_text']};
        }}
        QLabel#countdown[running="true"] {{
            color: {t['running_text']};
        }}
        QLineEdit {{
            background-color: {t['input_bg']};
            border: 1px solid {t['input_border']};
            padding: 4px;
        }}
        QLineEdit[invalid="true"] {{
            border: 1px solid {t['input_invalid']};
        }}
        QPushButton {{
            background-color: {t['button_bg']};
            border: none;
            padding: 6px 14px;
        }}
        QPushButton:hover {{
            background-color: {t['button_hover']};
        }}
        QPushButton:disabled {{
            background-color: {t['button_disabled_bg']};
            color: {t['button_disabled_text']};
        }}
    """
