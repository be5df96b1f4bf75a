"""
Notification Log
Append-only, de-duplicated notification stream with read/unread state
"""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, Dict, List, Optional

CATEGORY_BREACH = "breach"
CATEGORY_SCAN = "scan"
CATEGORY_SYSTEM = "system"
CATEGORY_MONITORING = "monitoring"
CATEGORY_CUSTOM = "custom"
CATEGORIES = (CATEGORY_BREACH, CATEGORY_SCAN, CATEGORY_SYSTEM, CATEGORY_MONITORING, CATEGORY_CUSTOM)

SEVERITY_INFO = "info"
SEVERITY_LOW = "low"
SEVERITY_MEDIUM = "medium"
SEVERITY_HIGH = "high"
SEVERITIES = (SEVERITY_INFO, SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH)


@dataclass(frozen=True)
class NotificationEntry:
    """A single notification; only ``read`` ever changes after creation"""
    id: str
    category: str
    title: str
    message: str
    timestamp: str
    severity: str = SEVERITY_INFO
    read: bool = False
    related_id: Optional[str] = None
    related_type: Optional[str] = None
    related_value: Optional[str] = None
    account_ref: Optional[str] = None


def new_notification(
    category: str,
    title: str,
    message: str,
    severity: str = SEVERITY_INFO,
    related_id: Optional[str] = None,
    related_type: Optional[str] = None,
    related_value: Optional[str] = None,
    account_ref: Optional[str] = None,
) -> NotificationEntry:
    """Create an unread notification stamped with the current time."""
    return NotificationEntry(
        id=f"notif-{uuid.uuid4().hex[:12]}",
        category=category,
        title=title,
        message=message,
        timestamp=datetime.now().isoformat(),
        severity=severity,
        read=False,
        related_id=related_id,
        related_type=related_type,
        related_value=related_value,
        account_ref=account_ref,
    )


NotificationListener = Callable[[NotificationEntry], None]


class NotificationLog:
    """
    Ordered notification store.

    Entries are kept in insertion order and read newest-first. Appending an
    entry whose id is already present is ignored. Listeners are called with
    each newly recorded entry; a failing listener is logged and skipped so
    it can never undo or block the append.
    """

    def __init__(self):
        self._entries: List[NotificationEntry] = []
        self._index: Dict[str, int] = {}
        self._listeners: List[NotificationListener] = []
        self.logger = logging.getLogger("NotificationLog")

    def add_listener(self, listener: NotificationListener) -> None:
        self._listeners.append(listener)

    def add(self, entry: NotificationEntry) -> bool:
        """Record *entry*; returns False if an entry with the same id exists."""
        if entry.id in self._index:
            self.logger.debug(f"Ignoring duplicate notification {entry.id}")
            return False

        self._index[entry.id] = len(self._entries)
        self._entries.append(entry)
        self.logger.debug(f"Notification recorded: [{entry.category}/{entry.severity}] {entry.title}")

        for listener in self._listeners:
            try:
                listener(entry)
            except Exception as e:
                self.logger.error(f"Notification listener failed: {e}", exc_info=True)
        return True

    def entries(self) -> List[NotificationEntry]:
        """Return all notifications, newest first."""
        return list(reversed(self._entries))

    def get(self, notification_id: str) -> Optional[NotificationEntry]:
        position = self._index.get(notification_id)
        return None if position is None else self._entries[position]

    def filter(self, category: Optional[str] = None, unread_only: bool = False) -> List[NotificationEntry]:
        """Return notifications matching *category* (any if None), newest first."""
        return [
            entry for entry in reversed(self._entries)
            if (category is None or entry.category == category)
            and (not unread_only or not entry.read)
        ]

    def mark_read(self, notification_id: str) -> bool:
        """Mark one notification read; returns False for unknown ids."""
        position = self._index.get(notification_id)
        if position is None:
            return False
        entry = self._entries[position]
        if not entry.read:
            self._entries[position] = replace(entry, read=True)
        return True

    def mark_all_read(self) -> int:
        """Mark every notification read and return how many changed."""
        changed = 0
        for position, entry in enumerate(self._entries):
            if not entry.read:
                self._entries[position] = replace(entry, read=True)
                changed += 1
        return changed

    def delete(self, notification_id: str) -> bool:
        """Remove one notification; returns False for unknown ids."""
        if notification_id not in self._index:
            return False
        self._entries = [e for e in self._entries if e.id != notification_id]
        self._reindex()
        return True

    def clear(self) -> int:
        """Remove all notifications and return how many were removed."""
        removed = len(self._entries)
        self._entries.clear()
        self._index.clear()
        return removed

    def unread_count(self) -> int:
        return sum(1 for entry in self._entries if not entry.read)

    def has_unread(self) -> bool:
        return any(not entry.read for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _reindex(self) -> None:
        self._index = {entry.id: position for position, entry in enumerate(self._entries)}
