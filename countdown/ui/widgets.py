"""Widget builders for the input form, countdown display, and start/stop controls.

Each builder returns a (container, widget_dict) tuple.  The container is a
QWidget that can be inserted into the main layout.  The widget_dict maps
logical names to sub-widgets for later updates.
"""

from dataclasses import dataclass

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from countdown.util.misc import IDLE_COUNTDOWN, IDLE_END_TIME

END_TIME_PREFIX = "End Time: "


@dataclass
class BuildContext:
    """Fonts shared across all builders in one window."""
    label_font: QFont
    countdown_font: QFont
    action_font: QFont

    @staticmethod
    def compute(font_family=None):
        label_font = QFont(font_family) if font_family else QFont()
        countdown_font = QFont(label_font)
        countdown_font.setPointSize(max(label_font.pointSize(), 9) * 3)
        countdown_font.setBold(True)
        action_font = QFont(label_font)
        return BuildContext(
            label_font=label_font,
            countdown_font=countdown_font,
            action_font=action_font,
        )


def _line_edit(ctx, placeholder, on_submit):
    edit = QLineEdit()
    edit.setFont(ctx.label_font)
    edit.setPlaceholderText(placeholder)
    edit.returnPressed.connect(on_submit)
    return edit


def build_input_form(ctx, on_submit):
    """Build the Name / Minutes / Hour Set form.  Return in any field submits.

    Returns (container, widget_dict) with keys: name, minutes, hour_set.
    """
    form = QWidget()
    form.setObjectName("inputForm")
    lay = QFormLayout(form)
    lay.setContentsMargins(0, 0, 0, 0)

    name_edit = _line_edit(ctx, "NAME", on_submit)
    minutes_edit = _line_edit(ctx, "MINUTES", on_submit)
    hour_set_edit = _line_edit(ctx, "HOUR SET (HHMM)", on_submit)
    hour_set_edit.setMaxLength(4)

    lay.addRow("Name", name_edit)
    lay.addRow("Minutes", minutes_edit)
    lay.addRow("Hour Set", hour_set_edit)

    return form, {
        "name": name_edit,
        "minutes": minutes_edit,
        "hour_set": hour_set_edit,
    }


def build_display(ctx):
    """Countdown and end-time labels, starting at their idle placeholders."""
    display = QWidget()
    lay = QVBoxLayout(display)
    lay.setContentsMargins(0, 0, 0, 0)

    countdown_lbl = QLabel(IDLE_COUNTDOWN)
    countdown_lbl.setObjectName("countdown")
    countdown_lbl.setFont(ctx.countdown_font)
    countdown_lbl.setAlignment(Qt.AlignCenter)

    end_lbl = QLabel(END_TIME_PREFIX + IDLE_END_TIME)
    end_lbl.setObjectName("endTime")
    end_lbl.setFont(ctx.label_font)
    end_lbl.setAlignment(Qt.AlignCenter)

    lay.addWidget(countdown_lbl)
    lay.addWidget(end_lbl)
    return display, {"countdown": countdown_lbl, "end_time": end_lbl}


def build_controls(ctx, on_start, on_stop):
    controls = QWidget()
    lay = QHBoxLayout(controls)
    lay.setContentsMargins(0, 0, 0, 0)

    start_btn = QPushButton("Start")
    start_btn.setFont(ctx.action_font)
    start_btn.clicked.connect(lambda _=False: on_start())

    stop_btn = QPushButton("Stop")
    stop_btn.setFont(ctx.action_font)
    stop_btn.clicked.connect(lambda _=False: on_stop())
    stop_btn.setEnabled(False)

    lay.addWidget(start_btn)
    lay.addWidget(stop_btn)
    return controls, {"start": start_btn, "stop": stop_btn}
