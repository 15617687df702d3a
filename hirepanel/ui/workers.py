"""
Background workers for running backend coroutines from the GUI.

Each task runs on its own QThread with a fresh event loop; the result is
delivered back to the GUI thread through Qt signals.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from hirepanel.utils.logger import get_logger

logger = get_logger(__name__)

CoroutineFactory = Callable[[], Awaitable[Any]]


class AsyncTaskWorker(QObject):
    """Worker that runs one coroutine to completion."""

    finished = pyqtSignal(object)  # coroutine result
    error = pyqtSignal(str)  # error message

    def __init__(self, factory: CoroutineFactory):
        super().__init__()
        self._factory = factory

    def run(self):
        """Run the coroutine on a new event loop."""
        try:
            result = asyncio.run(self._factory())
        except Exception as e:
            logger.error(f"Background task failed: {e}")
            self.error.emit(str(e))
            return
        self.finished.emit(result)


class TaskRunner(QObject):
    """
    Starts AsyncTaskWorkers on behalf of a view and keeps them alive.

    Results for a view that has been destroyed are dropped with the view.
    """

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._running: list[tuple[QThread, AsyncTaskWorker]] = []

    def start(
        self,
        factory: CoroutineFactory,
        on_finished: Callable[[Any], None],
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Run ``factory()`` in the background.

        Callbacks must be methods of objects living on the GUI thread so the
        queued signal delivers them there.
        """
        thread = QThread()
        worker = AsyncTaskWorker(factory)
        worker.moveToThread(thread)

        thread.started.connect(worker.run)
        worker.finished.connect(on_finished)
        if on_error is not None:
            worker.error.connect(on_error)
        worker.finished.connect(thread.quit)
        worker.error.connect(thread.quit)
        thread.finished.connect(self._prune)

        self._running.append((thread, worker))
        thread.start()

    def _prune(self) -> None:
        self._running = [(t, w) for t, w in self._running if not t.isFinished()]

    @property
    def busy(self) -> bool:
        return bool(self._running)
