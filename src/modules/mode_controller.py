"""
Mode Controller
Switches between sample data and real-time mode, with automatic expiry
"""

import logging
import threading
from typing import Callable, Optional

from .engine_state import EngineState
from .notification_log import NotificationLog, new_notification, CATEGORY_SYSTEM, SEVERITY_INFO
from .scan_history import ScanHistoryLedger
from ..utils.metrics import EngineMetrics

DEFAULT_REALTIME_TIMEOUT_SECONDS = 30 * 60

MODE_SAMPLE = "sample"
MODE_REALTIME = "realtime"


class ExpiryTimer:
    """
    Single-shot timer handle that can be restarted or cancelled.

    Each activation gets a generation number. Restarting or cancelling
    bumps the generation, so a callback that was already on its way out of
    a superseded timer is recognised as stale by ``is_current``.

    Args:
        timeout_seconds: Delay before the callback fires.
        callback: Called with the activation's generation number.
        timer_factory: ``threading.Timer`` compatible factory
                       (``factory(interval, function, args=...)``).
    """

    def __init__(
        self,
        timeout_seconds: float,
        callback: Callable[[int], None],
        timer_factory=threading.Timer,
    ):
        self.timeout_seconds = timeout_seconds
        self._callback = callback
        self._timer_factory = timer_factory
        self._timer = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def restart(self) -> int:
        """Cancel any pending activation and schedule a new one."""
        self.cancel()
        generation = self._generation
        timer = self._timer_factory(self.timeout_seconds, self._callback, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()
        return generation

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def is_current(self, generation: int) -> bool:
        return self._timer is not None and generation == self._generation

    def consume(self, generation: int) -> bool:
        """Claim a firing; returns False for a stale or already-handled one."""
        if not self.is_current(generation):
            return False
        self._timer = None
        self._generation += 1
        return True


class ModeController:
    """
    Two-mode state machine (sample / real-time) over the engine state.

    Entering real-time mode shows the last real scan result if one exists,
    otherwise keeps the sample set on screen and raises the
    ``showing_no_realtime_data`` flag. Leaving it, explicitly or when the
    inactivity timer fires, restores the canonical sample data. Every
    transition records a system notification.
    """

    def __init__(
        self,
        state: EngineState,
        ledger: ScanHistoryLedger,
        notifications: NotificationLog,
        timeout_seconds: float = DEFAULT_REALTIME_TIMEOUT_SECONDS,
        lock=None,
        timer_factory=threading.Timer,
        metrics: Optional[EngineMetrics] = None,
    ):
        self.state = state
        self.ledger = ledger
        self.notifications = notifications
        self.metrics = metrics
        self._lock = lock if lock is not None else threading.RLock()
        self.timer = ExpiryTimer(timeout_seconds, self._on_timer_expired, timer_factory)
        self.logger = logging.getLogger("ModeController")

    @property
    def mode(self) -> str:
        return MODE_REALTIME if self.state.is_realtime_mode else MODE_SAMPLE

    def set_mode(self, realtime: bool) -> None:
        if realtime:
            self.enable_realtime()
        else:
            self.enable_sample()

    def enable_realtime(self) -> None:
        """Enter (or renew) real-time mode and restart the expiry timer."""
        with self._lock:
            renewed = self.state.is_realtime_mode
            self.state.is_realtime_mode = True

            if self.ledger.has_real_scans():
                self.state.show_last_real_result()
                message = "Real-time scanning is active. Showing results from your most recent scan."
            else:
                self.state.showing_no_realtime_data = True
                message = ("Real-time scanning is active. No real-time scan data yet; "
                           "run a scan to replace the sample results.")

            self.notifications.add(new_notification(
                CATEGORY_SYSTEM, "Real-Time Mode Enabled", message, severity=SEVERITY_INFO,
            ))
            self.timer.restart()
            self._record_switch("renewed" if renewed else "to_realtime")

        self.logger.info(
            f"Real-time mode {'renewed' if renewed else 'enabled'}; "
            f"auto-disable in {self.timer.timeout_seconds:.0f}s"
        )

    def enable_sample(self) -> None:
        """Return to sample data mode on request."""
        with self._lock:
            self._switch_to_sample(
                "Sample Data Mode",
                "Switched to sample data. Results shown are for demonstration purposes only.",
            )
            self._record_switch("to_sample")
        self.logger.info("Sample data mode enabled")

    def shutdown(self) -> None:
        """Cancel the pending expiry so no callback outlives the session."""
        with self._lock:
            self.timer.cancel()

    def _on_timer_expired(self, generation: int) -> None:
        with self._lock:
            if not self.timer.consume(generation):
                self.logger.debug(f"Ignoring stale expiry (generation {generation})")
                return
            self._switch_to_sample(
                "Real-Time Mode Disabled",
                "Real-time scanning was disabled due to inactivity. Showing sample data.",
            )
            self._record_switch("expired")
        self.logger.info("Real-time mode disabled due to inactivity")

    def _switch_to_sample(self, title: str, message: str) -> None:
        self.timer.cancel()
        self.state.is_realtime_mode = False
        self.state.restore_sample_data()
        self.state.showing_no_realtime_data = False
        self.notifications.add(new_notification(
            CATEGORY_SYSTEM, title, message, severity=SEVERITY_INFO,
        ))

    def _record_switch(self, direction: str) -> None:
        if self.metrics is not None:
            self.metrics.record_mode_switch(direction)
