"""
Scan History Ledger
Append-only record of every scan submission, newest first
"""

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class ScanHistoryEntry:
    """One scan submission; ``masked_value`` is never the raw value"""
    id: str
    timestamp: str
    scan_type: str
    masked_value: str
    breaches_found: int
    is_real_scan: bool
    account_ref: Optional[str] = None


class ScanHistoryLedger:
    """
    Newest-first list of scan submissions.

    There is no eviction: the ledger grows for the lifetime of the session,
    which bounds how long a single session can reasonably run.
    """

    def __init__(self):
        self._entries: List[ScanHistoryEntry] = []

    def record(
        self,
        scan_type: str,
        masked_value: str,
        breaches_found: int,
        is_real_scan: bool,
        account_ref: Optional[str] = None,
    ) -> ScanHistoryEntry:
        """Create an entry and place it at the head of the ledger."""
        entry = ScanHistoryEntry(
            id=f"scan-{uuid.uuid4().hex[:12]}",
            timestamp=datetime.now().isoformat(),
            scan_type=scan_type,
            masked_value=masked_value,
            breaches_found=breaches_found,
            is_real_scan=is_real_scan,
            account_ref=account_ref,
        )
        self._entries.insert(0, entry)
        return entry

    def entries(self) -> List[ScanHistoryEntry]:
        return list(self._entries)

    def latest(self) -> Optional[ScanHistoryEntry]:
        return self._entries[0] if self._entries else None

    def real_entries(self) -> List[ScanHistoryEntry]:
        return [entry for entry in self._entries if entry.is_real_scan]

    def has_real_scans(self) -> bool:
        return any(entry.is_real_scan for entry in self._entries)

    def last_scan_date(self) -> str:
        """ISO timestamp of the newest entry, or an empty string."""
        return self._entries[0].timestamp if self._entries else ""

    def __len__(self) -> int:
        return len(self._entries)
