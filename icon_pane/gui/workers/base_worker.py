"""Base class for cancellable worker threads."""

import logging
import threading

from PyQt6.QtCore import QThread, pyqtBoundSignal, pyqtSignal

logger = logging.getLogger(__name__)


class CancellableWorker(QThread):
    """Base class for worker threads whose results can be discarded.

    Cancelling does not abort the blocking call in progress; it only keeps
    the result from reaching the UI thread (used when the window closes).
    Subclasses emit through ``emit_unless_cancelled`` and report unexpected
    exceptions on ``error``.
    """

    # Signal emitted when an unexpected error occurs
    error = pyqtSignal(str)

    # Workers still running after shutdown(); held until they finish
    _detached: set["CancellableWorker"] = set()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request that this worker's result be dropped."""
        self._cancel_event.set()

    def check_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def emit_unless_cancelled(self, signal: pyqtBoundSignal, *args) -> bool:
        """Emit a result signal unless the worker was cancelled.

        Returns:
            True if the signal was emitted
        """
        if self.check_cancelled():
            return False
        signal.emit(*args)
        return True

    def shutdown(self, timeout_ms: int) -> bool:
        """Cancel and wait for the thread to finish.

        A thread still blocked after ``timeout_ms`` is detached from its
        parent and kept alive until it finishes, so destroying the parent
        never destroys a running QThread.

        Returns:
            True if the thread finished within the timeout
        """
        self.cancel()
        if self.wait(timeout_ms):
            return True

        logger.warning(f"{type(self).__name__} still running at shutdown, detaching")
        self.setParent(None)
        CancellableWorker._detached.add(self)
        self.finished.connect(self._release)
        return False

    def _release(self) -> None:
        CancellableWorker._detached.discard(self)
        self.deleteLater()
