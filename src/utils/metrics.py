"""
Metrics Collection Module
Tracks scan activity, mode switches and notification volume for a session
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable


@dataclass
class EngineMetrics:
    """
    Operational counters for one engine session.

    PATTERN RECOGNITION: Same shape as request counters on a web server:
    plain counts that can be dumped with ``get_summary()`` and shipped to
    whatever dashboard the host application uses.
    """

    scans_submitted: int = 0
    real_scans: int = 0

    # Breaches seen in real scans, keyed by risk level
    breaches_by_risk: Counter = field(default_factory=Counter)

    # "to_realtime", "renewed", "to_sample", "expired"
    mode_switches: Counter = field(default_factory=Counter)

    notifications_by_category: Counter = field(default_factory=Counter)

    start_time: datetime = field(default_factory=datetime.now)

    def record_scan(self, is_real_scan: bool, risk_levels: Iterable[str] = ()):
        """
        Record a scan submission.

        Args:
            is_real_scan: Whether the submission replaced the displayed results
            risk_levels: Risk level of each breach found (real scans only)
        """
        self.scans_submitted += 1
        if is_real_scan:
            self.real_scans += 1
            for level in risk_levels:
                self.breaches_by_risk[level] += 1

    def record_mode_switch(self, direction: str):
        self.mode_switches[direction] += 1

    def record_notification(self, category: str):
        self.notifications_by_category[category] += 1

    def get_summary(self) -> Dict:
        """
        Get a summary of all metrics.

        Returns:
            Dictionary suitable for logging or export
        """
        return {
            "uptime_seconds": (datetime.now() - self.start_time).total_seconds(),
            "scans_submitted": self.scans_submitted,
            "real_scans": self.real_scans,
            "sample_scans": self.scans_submitted - self.real_scans,
            "breaches_by_risk": dict(self.breaches_by_risk),
            "mode_switches": dict(self.mode_switches),
            "notifications": dict(self.notifications_by_category),
        }

    def reset(self):
        """Reset all counters and restart the collection window."""
        self.scans_submitted = 0
        self.real_scans = 0
        self.breaches_by_risk.clear()
        self.mode_switches.clear()
        self.notifications_by_category.clear()
        self.start_time = datetime.now()
