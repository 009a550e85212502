import sys
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QApplication,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)
from countdown.common.logger import log
from countdown.core import config
from countdown.core.controller import CountdownController
from countdown.core.expiry import build_expiry_action
from countdown.core.parsing import InputError, validate_hour_set, validate_minutes
from countdown.ui.dispatch import UiDispatcher
from countdown.ui.theme import THEMES, build_stylesheet
from countdown.ui.widgets import END_TIME_PREFIX, BuildContext, build_controls, build_display, build_input_form

WINDOW_TITLE = "Timer"


# ---------------------------------------------------------------------------
# Main window
# ---------------------------------------------------------------------------

# Main window of the countdown timer. It only builds widgets and forwards user actions, all timer logic lives in
# CountdownController, which calls back into the display methods below on the UI thread.
class MainWindow(QMainWindow):

    def __init__(self, settings=None, expiry_action=None):
        super().__init__()
        s = settings or config.build_default_settings()
        self.theme = s["theme"] if s["theme"] in THEMES else "Dark"
        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(s["window_width"], s["window_height"])
        if s["always_on_top"]:
            self.setWindowFlags(self.windowFlags() | Qt.WindowStaysOnTopHint)

        # -- Controller --
        self._dispatcher = UiDispatcher(self)
        self.controller = CountdownController(
            display=self,
            expiry_action=expiry_action or build_expiry_action(s["expiry_action"]),
            dispatch=self._dispatcher.post,
            tick_interval=s["tick_interval_ms"] / 1000.0,
        )

        # -- Build UI --
        central = QWidget()
        self.setCentralWidget(central)
        lay = QVBoxLayout(central)

        ctx = BuildContext.compute()
        form, self._inputs = build_input_form(ctx, on_submit=self._on_start)
        display, self._labels = build_display(ctx)
        controls, self._buttons = build_controls(ctx, on_start=self._on_start, on_stop=self._on_stop)
        lay.addWidget(form)
        lay.addWidget(display, 1)
        lay.addWidget(controls)

        self._inputs["minutes"].textChanged.connect(
            lambda text: self._mark_invalid(self._inputs["minutes"], validate_minutes(text)))
        self._inputs["hour_set"].textChanged.connect(
            lambda text: self._mark_invalid(self._inputs["hour_set"], validate_hour_set(text)))

        self._apply_style()
        QTimer.singleShot(0, self._inputs["minutes"].setFocus)

    def _apply_style(self):
        style = build_stylesheet(self.theme)
        self.setStyleSheet(style)

    # Flags a field with the "invalid" style property and puts the reason in its tooltip.
    @staticmethod
    def _mark_invalid(edit, error):
        edit.setProperty("invalid", error is not None)
        edit.setToolTip(error or "")
        edit.style().unpolish(edit)
        edit.style().polish(edit)

    # ------------------------------------------------------------------ #
    #  Display (called by CountdownController, always on the UI thread)    #
    # ------------------------------------------------------------------ #

    def show_countdown(self, text):
        self._labels["countdown"].setText(text)

    def show_end_time(self, text):
        self._labels["end_time"].setText(END_TIME_PREFIX + text)

    def set_running(self, running, name=""):
        self._buttons["start"].setEnabled(not running)
        self._buttons["stop"].setEnabled(running)
        lbl = self._labels["countdown"]
        lbl.setProperty("running", running)
        lbl.style().unpolish(lbl)
        lbl.style().polish(lbl)
        if running and name:
            self.setWindowTitle(f"{WINDOW_TITLE} - {name}")
        else:
            self.setWindowTitle(WINDOW_TITLE)

    # ------------------------------------------------------------------ #
    #  Button handlers                                                     #
    # ------------------------------------------------------------------ #

    def _on_start(self):
        try:
            self.controller.start(
                self._inputs["name"].text(),
                self._inputs["minutes"].text(),
                self._inputs["hour_set"].text(),
            )
        except InputError as e:
            log.info(f"Rejected countdown input: {e}")
            QMessageBox.warning(self, "Invalid Input", str(e))

    def _on_stop(self):
        self.controller.stop()

    # ------------------------------------------------------------------ #
    #  Keys                                                                #
    # ------------------------------------------------------------------ #

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Escape:
            self.close()
            return
        # Typing anywhere outside the inputs jumps to the minutes field
        text = event.text()
        if text and text.isprintable() and not isinstance(self.focusWidget(), QLineEdit):
            minutes = self._inputs["minutes"]
            minutes.setFocus()
            minutes.insert(text)
            return
        super().keyPressEvent(event)

    # ------------------------------------------------------------------ #
    #  Window close                                                        #
    # ------------------------------------------------------------------ #

    def closeEvent(self, event):
        self.controller.stop()
        log.info("Window closed")
        event.accept()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main():
    app = QApplication(sys.argv)
    settings = config.load_settings()
    window = MainWindow(settings)
    window.show()
    sys.exit(app.exec())
