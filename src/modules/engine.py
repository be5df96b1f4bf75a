"""
Breach Exposure Engine
Facade that owns the session state and serialises every operation on it
"""

import logging
import threading
from dataclasses import replace
from typing import Iterable, List, Optional

from .breach_data import BreachRecord
from .engine_state import EngineState, EngineSnapshot
from .mode_controller import ModeController, DEFAULT_REALTIME_TIMEOUT_SECONDS
from .monitoring import MonitoringRegistry
from .notification_log import (
    NotificationLog,
    NotificationEntry,
    new_notification,
    CATEGORY_SCAN,
    CATEGORY_CUSTOM,
    SEVERITY_INFO,
    SEVERITY_HIGH,
    SEVERITIES,
)
from .recommendations import Recommendation, generate_recommendations
from .scan_history import ScanHistoryEntry, ScanHistoryLedger
from .security_score import calculate_security_score
from ..utils.metrics import EngineMetrics
from ..utils.sanitization import mask_sensitive_data, sanitize_for_logging
from ..utils.threat_scoring import rate_security_score


def _mark_completed(recommendations: List[Recommendation], recommendation_id: str) -> bool:
    for position, recommendation in enumerate(recommendations):
        if recommendation.id == recommendation_id:
            recommendations[position] = replace(recommendation, completed=True)
            return True
    return False


class BreachExposureEngine:
    """
    Risk-assessment and monitoring-state engine for one session.

    Callers (form handlers, renderers, the CLI) receive the engine as a
    dependency and talk to it only through these methods. All state sits
    behind one re-entrant lock, which the real-time expiry timer also
    takes, so operations and the notifications they emit are observed in
    completion order. Read accessors return copies; ``snapshot()`` returns
    an immutable view of everything at once.

    Usage::

        with BreachExposureEngine() as engine:
            engine.set_mode(True)
            engine.submit_scan("Email", "jane@example.com", breaches, is_real_scan=True)
            print(engine.security_score)
    """

    def __init__(
        self,
        realtime_timeout_seconds: float = DEFAULT_REALTIME_TIMEOUT_SECONDS,
        timer_factory=threading.Timer,
        metrics: Optional[EngineMetrics] = None,
    ):
        self._lock = threading.RLock()
        self.metrics = metrics if metrics is not None else EngineMetrics()
        self.logger = logging.getLogger("BreachExposureEngine")

        self._state = EngineState()
        self._ledger = ScanHistoryLedger()
        self._notifications = NotificationLog()
        self._notifications.add_listener(lambda entry: self.metrics.record_notification(entry.category))
        self._monitoring = MonitoringRegistry(self._notifications, lock=self._lock)
        self._mode = ModeController(
            self._state,
            self._ledger,
            self._notifications,
            timeout_seconds=realtime_timeout_seconds,
            lock=self._lock,
            timer_factory=timer_factory,
            metrics=self.metrics,
        )

    @classmethod
    def from_config(cls, config, **kwargs) -> "BreachExposureEngine":
        """Build an engine from a loaded ``Config``."""
        return cls(realtime_timeout_seconds=config.mode.realtime_timeout_seconds, **kwargs)

    # ------------------------------------------------------------------
    # Inbound operations
    # ------------------------------------------------------------------

    def submit_scan(
        self,
        scan_type: str,
        value: str,
        breaches: Iterable[BreachRecord],
        is_real_scan: bool,
        account_ref: Optional[str] = None,
    ) -> ScanHistoryEntry:
        """
        Record a scan submission and, for real scans, recompute the results.

        Args:
            scan_type: Open-ended scan type label.
            value: Raw identifier value; only its masked form is stored in
                   the ledger. The raw pair is kept as ``last_scan_info``
                   because the monitoring toggle needs it.
            breaches: Breach records found by the scanning collaborator.
            is_real_scan: Whether the result should replace the displayed data.
            account_ref: Optional owning account reference.

        Returns:
            The ledger entry created for this submission.
        """
        breaches = list(breaches or ())
        masked = mask_sensitive_data(value, scan_type)

        with self._lock:
            entry = self._ledger.record(scan_type, masked, len(breaches), is_real_scan, account_ref)
            self._state.last_scan_info = (scan_type, value)
            self.metrics.record_scan(is_real_scan, (b.risk_level for b in breaches))

            if not is_real_scan:
                self.logger.info(f"Sample scan recorded for {sanitize_for_logging(scan_type)}: {masked}")
                return entry

            score = calculate_security_score(breaches)
            self._state.apply_real_result(breaches, generate_recommendations(breaches), score)

            count = len(breaches)
            noun = "breach" if count == 1 else "breaches"
            self._notifications.add(new_notification(
                CATEGORY_SCAN,
                "Scan Completed",
                f"Your {scan_type} scan for {masked} is complete. {count} {noun} found.",
                severity=SEVERITY_HIGH if count > 0 else SEVERITY_INFO,
                related_id=entry.id,
                related_type=scan_type,
                related_value=masked,
                account_ref=account_ref,
            ))

        self.logger.info(
            f"Scan completed for {sanitize_for_logging(scan_type)}: {masked} - "
            f"{count} {noun}, score={score} ({rate_security_score(score)})"
        )
        return entry

    def set_mode(self, realtime: bool) -> None:
        """Switch to real-time (True) or sample (False) mode."""
        self._mode.set_mode(realtime)

    def toggle_monitoring(
        self,
        scan_type: str,
        value: str,
        enabled: bool,
        account_ref: Optional[str] = None,
    ) -> bool:
        """
        Enable or disable monitoring for (scan_type, value).

        Empty type or value is a no-op. Returns True when the registry changed.
        """
        if not scan_type or not value:
            self.logger.debug("Ignoring monitoring toggle with empty type or value")
            return False
        if enabled:
            return self._monitoring.enable(scan_type, value, account_ref)
        return self._monitoring.disable(scan_type, value, account_ref)

    def is_monitored(self, scan_type: str, value: str) -> bool:
        return self._monitoring.is_monitored(scan_type, value)

    def mark_notification_read(self, notification_id: str) -> bool:
        with self._lock:
            return self._notifications.mark_read(notification_id)

    def mark_all_notifications_read(self) -> int:
        with self._lock:
            return self._notifications.mark_all_read()

    def delete_notification(self, notification_id: str) -> bool:
        with self._lock:
            return self._notifications.delete(notification_id)

    def clear_all_notifications(self) -> int:
        with self._lock:
            removed = self._notifications.clear()
        self.logger.info(f"Cleared {removed} notifications")
        return removed

    def add_custom_notification(
        self,
        title: str,
        message: str,
        severity: str = SEVERITY_INFO,
        account_ref: Optional[str] = None,
    ) -> NotificationEntry:
        """
        Append a caller-authored notification.

        Raises:
            ValueError: If severity is not one of info, low, medium or high
        """
        if severity not in SEVERITIES:
            raise ValueError(f"Unknown notification severity: {severity!r}")
        entry = new_notification(CATEGORY_CUSTOM, title, message, severity=severity, account_ref=account_ref)
        with self._lock:
            self._notifications.add(entry)
        return entry

    def complete_recommendation(self, recommendation_id: str) -> bool:
        """Mark a displayed recommendation completed; False for unknown ids."""
        with self._lock:
            found = _mark_completed(self._state.recommendations, recommendation_id)
            if found:
                # Keep the stored real result in step so a later reveal shows it
                _mark_completed(self._state.last_real_recommendations, recommendation_id)
            return found

    def add_notification_listener(self, listener) -> None:
        with self._lock:
            self._notifications.add_listener(listener)

    # ------------------------------------------------------------------
    # Read model
    # ------------------------------------------------------------------

    @property
    def breaches(self) -> List[BreachRecord]:
        with self._lock:
            return list(self._state.breaches)

    @property
    def recommendations(self):
        with self._lock:
            return list(self._state.recommendations)

    @property
    def security_score(self) -> int:
        with self._lock:
            return self._state.security_score

    @property
    def scan_history(self) -> List[ScanHistoryEntry]:
        with self._lock:
            return self._ledger.entries()

    @property
    def monitored(self):
        return self._monitoring.entries()

    @property
    def notifications(self) -> List[NotificationEntry]:
        with self._lock:
            return self._notifications.entries()

    @property
    def unread_notifications(self) -> int:
        with self._lock:
            return self._notifications.unread_count()

    @property
    def is_real_data(self) -> bool:
        with self._lock:
            return self._state.is_real_data

    @property
    def mode(self) -> str:
        """``"realtime"`` or ``"sample"``"""
        with self._lock:
            return self._mode.mode

    @property
    def is_realtime_mode(self) -> bool:
        with self._lock:
            return self._state.is_realtime_mode

    @property
    def showing_no_realtime_data(self) -> bool:
        with self._lock:
            return self._state.showing_no_realtime_data

    @property
    def last_scan_info(self):
        with self._lock:
            return self._state.last_scan_info

    @property
    def has_ever_run_real_scan(self) -> bool:
        with self._lock:
            return self._ledger.has_real_scans()

    def last_scan_date(self) -> str:
        with self._lock:
            return self._ledger.last_scan_date()

    def filter_notifications(self, category: Optional[str] = None, unread_only: bool = False):
        with self._lock:
            return self._notifications.filter(category, unread_only)

    def snapshot(self) -> EngineSnapshot:
        with self._lock:
            return EngineSnapshot(
                breaches=tuple(self._state.breaches),
                recommendations=tuple(self._state.recommendations),
                security_score=self._state.security_score,
                scan_history=tuple(self._ledger.entries()),
                monitored=tuple(self._monitoring.entries()),
                notifications=tuple(self._notifications.entries()),
                is_real_data=self._state.is_real_data,
                is_realtime_mode=self._state.is_realtime_mode,
                showing_no_realtime_data=self._state.showing_no_realtime_data,
                last_scan_info=self._state.last_scan_info,
                has_ever_run_real_scan=self._ledger.has_real_scans(),
                unread_notifications=self._notifications.unread_count(),
            )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Tear down the session; cancels the pending real-time expiry."""
        self._mode.shutdown()
        self.logger.debug(f"Engine closed: {self.metrics.get_summary()}")

    def __enter__(self) -> "BreachExposureEngine":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
