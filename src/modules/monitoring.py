"""
Monitoring Registry
Tracks the (type, value) pairs under continuous breach monitoring
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .notification_log import (
    NotificationLog,
    new_notification,
    CATEGORY_MONITORING,
    SEVERITY_INFO,
)
from ..utils.sanitization import mask_sensitive_data, sanitize_for_logging


@dataclass(frozen=True)
class MonitoredIdentifier:
    """An identifier under watch; exists only while monitoring is enabled"""
    id: str
    scan_type: str
    value: str
    date_added: str
    account_ref: Optional[str] = None


class MonitoringRegistry:
    """
    Set of monitored identifiers keyed by exact (type, value).

    Every mutation and the notification describing it happen under one
    lock, so observers never see a registry change without its
    notification or the other way round.
    """

    def __init__(self, notifications: NotificationLog, lock=None):
        self.notifications = notifications
        self._lock = lock if lock is not None else threading.RLock()
        self._entries: Dict[Tuple[str, str], MonitoredIdentifier] = {}
        self.logger = logging.getLogger("MonitoringRegistry")

    def enable(self, scan_type: str, value: str, account_ref: Optional[str] = None) -> bool:
        """
        Start monitoring (scan_type, value).

        Returns:
            True if a new entry was created, False if it was already monitored
            (in which case nothing is recorded).
        """
        key = (scan_type, value)
        masked = mask_sensitive_data(value, scan_type)
        with self._lock:
            if key in self._entries:
                self.logger.debug(f"Already monitoring {sanitize_for_logging(scan_type)}: {masked}")
                return False

            entry = MonitoredIdentifier(
                id=f"monitor-{uuid.uuid4().hex[:12]}",
                scan_type=scan_type,
                value=value,
                date_added=datetime.now().isoformat(),
                account_ref=account_ref,
            )
            self._entries[key] = entry
            self.notifications.add(new_notification(
                CATEGORY_MONITORING,
                "Continuous Monitoring Activated",
                f"Your {scan_type} {masked} is now being continuously monitored for new breaches.",
                severity=SEVERITY_INFO,
                related_id=entry.id,
                related_type=scan_type,
                related_value=masked,
                account_ref=account_ref,
            ))
        self.logger.info(f"Monitoring enabled for {sanitize_for_logging(scan_type)}: {masked}")
        return True

    def disable(self, scan_type: str, value: str, account_ref: Optional[str] = None) -> bool:
        """
        Stop monitoring (scan_type, value).

        The entry, including its raw value, is removed. A "stopped"
        notification is recorded even when nothing was being monitored.

        Returns:
            True if an entry was removed.
        """
        masked = mask_sensitive_data(value, scan_type)
        with self._lock:
            removed = self._entries.pop((scan_type, value), None)
            self.notifications.add(new_notification(
                CATEGORY_MONITORING,
                "Continuous Monitoring Stopped",
                f"Monitoring for your {scan_type} {masked} has been stopped.",
                severity=SEVERITY_INFO,
                related_id=removed.id if removed else None,
                related_type=scan_type,
                related_value=masked,
                account_ref=account_ref,
            ))
        if removed is None:
            self.logger.debug(f"Disable requested for unmonitored {sanitize_for_logging(scan_type)}: {masked}")
        else:
            self.logger.info(f"Monitoring disabled for {sanitize_for_logging(scan_type)}: {masked}")
        return removed is not None

    def is_monitored(self, scan_type: str, value: str) -> bool:
        with self._lock:
            return (scan_type, value) in self._entries

    def entries(self) -> List[MonitoredIdentifier]:
        """Return monitored identifiers in the order they were added."""
        with self._lock:
            return list(self._entries.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
