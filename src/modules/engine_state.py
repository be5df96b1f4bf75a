"""
Engine State Model
Mutable aggregate owned by the engine and the read-only snapshot handed to callers
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .breach_data import BreachRecord, sample_breaches
from .monitoring import MonitoredIdentifier
from .notification_log import NotificationEntry
from .recommendations import Recommendation, sample_recommendations
from .scan_history import ScanHistoryEntry
from .security_score import SAMPLE_SECURITY_SCORE


@dataclass
class EngineState:
    """
    Displayed results and mode flags.

    ``last_real_*`` keep the result of the most recent real scan as it was
    computed at submission time, so switching back to real-time mode can
    show it again without recomputing.
    """
    breaches: List[BreachRecord] = field(default_factory=sample_breaches)
    recommendations: List[Recommendation] = field(default_factory=sample_recommendations)
    security_score: int = SAMPLE_SECURITY_SCORE
    is_real_data: bool = False
    is_realtime_mode: bool = False
    showing_no_realtime_data: bool = False
    last_scan_info: Optional[Tuple[str, str]] = None
    last_real_breaches: List[BreachRecord] = field(default_factory=list)
    last_real_recommendations: List[Recommendation] = field(default_factory=list)
    last_real_score: Optional[int] = None

    def apply_real_result(
        self,
        breaches: List[BreachRecord],
        recommendations: List[Recommendation],
        score: int,
    ) -> None:
        """Replace the displayed result with a freshly computed real one."""
        self.last_real_breaches = list(breaches)
        self.last_real_recommendations = list(recommendations)
        self.last_real_score = score
        self.show_last_real_result()

    def show_last_real_result(self) -> None:
        self.breaches = list(self.last_real_breaches)
        self.recommendations = list(self.last_real_recommendations)
        self.security_score = self.last_real_score
        self.is_real_data = True
        self.showing_no_realtime_data = False

    def restore_sample_data(self) -> None:
        self.breaches = sample_breaches()
        self.recommendations = sample_recommendations()
        self.security_score = SAMPLE_SECURITY_SCORE
        self.is_real_data = False


@dataclass(frozen=True)
class EngineSnapshot:
    """Point-in-time, read-only view of the engine for rendering collaborators"""
    breaches: Tuple[BreachRecord, ...]
    recommendations: Tuple[Recommendation, ...]
    security_score: int
    scan_history: Tuple[ScanHistoryEntry, ...]
    monitored: Tuple[MonitoredIdentifier, ...]
    notifications: Tuple[NotificationEntry, ...]
    is_real_data: bool
    is_realtime_mode: bool
    showing_no_realtime_data: bool
    last_scan_info: Optional[Tuple[str, str]]
    has_ever_run_real_scan: bool
    unread_notifications: int
