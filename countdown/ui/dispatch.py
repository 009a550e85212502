from PySide6.QtCore import QObject, Qt, Signal, Slot


# The single channel from background threads to the UI thread. The dispatcher lives on the UI thread, so emitting
# from any other thread queues the callable and it runs in the Qt event loop.
class UiDispatcher(QObject):

    _posted = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._posted.connect(self._run, Qt.QueuedConnection)

    # Safe to call from any thread.
    def post(self, fn):
        self._posted.emit(fn)

    @Slot(object)
    def _run(self, fn):
        fn()
