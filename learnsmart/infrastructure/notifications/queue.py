"""Background queue that drains notification fan-out jobs."""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

_STOP = object()


class FanOutQueue:
    """Run enqueued jobs one at a time on a daemon worker thread.

    Enqueueing never blocks the caller on the work itself; the worker is
    started lazily and stopped with :meth:`stop`.
    """

    def __init__(self, handler: Callable[[Any], Any], *, name: str = "fan-out-worker") -> None:
        self._handler = handler
        self._name = name
        self._queue: queue.Queue[Any] = queue.Queue()
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self.running:
                return
            self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
            self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        with self._lock:
            thread = self._thread
            if thread is None or not thread.is_alive():
                self._thread = None
                return
            self._queue.put(_STOP)
        thread.join(timeout)
        with self._lock:
            self._thread = None

    def enqueue(self, job: Any) -> None:
        self._queue.put(job)
        self.start()

    def drain(self) -> None:
        """Block until every job enqueued so far has been processed."""

        self._queue.join()

    def _run(self) -> None:
        while True:
            job = self._queue.get()
            try:
                if job is _STOP:
                    return
                self._handler(job)
            except Exception:
                logger.exception("Fan-out job %r failed", job)
            finally:
                self._queue.task_done()


__all__ = ["FanOutQueue"]
