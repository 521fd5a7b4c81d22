"""Background thread that drives every session timer once per second."""

from __future__ import annotations

import logging
from threading import Event, Thread

from engage_app.constants.session_constants import TICK_INTERVAL_SECONDS
from engage_app.core.session_manager import SessionManager

logger = logging.getLogger(__name__)


class SessionTicker:
    """Calls :meth:`SessionManager.tick_all` on a fixed interval until stopped."""

    def __init__(self, manager: SessionManager, interval_seconds: float = TICK_INTERVAL_SECONDS) -> None:
        if interval_seconds <= 0:
            raise ValueError("Tick interval must be positive.")
        self._manager = manager
        self._interval = interval_seconds
        self._stop_event = Event()
        self._thread: Thread | None = None

    def start(self) -> Thread:
        if self._thread is not None and self._thread.is_alive():
            return self._thread
        self._stop_event.clear()
        self._thread = Thread(target=self._run, name="SessionTicker", daemon=True)
        self._thread.start()
        return self._thread

    def stop(self, timeout: float | None = None) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _run(self) -> None:
        logger.info("Session ticker running every %.1fs", self._interval)
        while not self._stop_event.wait(self._interval):
            try:
                self._manager.tick_all()
            except Exception:
                # Keep the clock alive for the other rooms.
                logger.exception("Session tick failed")
        logger.info("Session ticker stopped")
