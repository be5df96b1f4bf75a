"""
Alert and Response System
Console channel for engine notifications and scan summaries
"""

import logging
from typing import Optional

from .engine_state import EngineSnapshot
from .notification_log import NotificationEntry, SEVERITIES
from ..utils.colors import Colors
from ..utils.threat_scoring import rate_security_score


class AlertSystem:
    """Prints notifications and scan summaries to the console"""

    def __init__(self, config, output=print):
        """
        Initialize alert system

        Args:
            config: NotificationConfig object
            output: Callable used to emit lines (defaults to print)
        """
        self.config = config
        self.output = output
        self.logger = logging.getLogger("AlertSystem")

    def handle_notification(self, entry: NotificationEntry) -> bool:
        """
        Notification listener; prints *entry* when it meets the configured severity.

        Returns:
            True if the notification was printed.
        """
        if not self.config.console:
            return False
        if self._severity_rank(entry.severity) < self._severity_rank(self.config.min_severity):
            self.logger.debug(f"Notification below console threshold: {entry.severity}")
            return False

        color = Colors.get_risk_color(entry.severity)
        self.output(
            f"{Colors.colorize('[' + entry.severity.upper() + ']', color + Colors.BOLD)} "
            f"{Colors.BOLD}{self._sanitize_text(entry.title)}{Colors.RESET}: "
            f"{self._sanitize_text(entry.message)}"
        )
        return True

    def print_summary(self, snapshot: EngineSnapshot) -> None:
        """Print score, breaches and recommendations for the current view"""
        rating = rate_security_score(snapshot.security_score)
        rating_color = Colors.get_rating_color(rating)
        header_bar = Colors.colorize("=" * 80, rating_color)
        source = "REAL DATA" if snapshot.is_real_data else "SAMPLE DATA"
        mode = "Real-Time" if snapshot.is_realtime_mode else "Sample Mode"

        self.output("\n" + header_bar)
        self.output(Colors.colorize(f"BREACH EXPOSURE REPORT - {source}", rating_color + Colors.BOLD))
        self.output(header_bar)
        self.output(f"{Colors.BOLD}Mode:{Colors.RESET}     {mode}")
        self.output(
            f"{Colors.BOLD}Score:{Colors.RESET}    "
            f"{Colors.colorize(f'{snapshot.security_score} ({rating.upper()})', rating_color + Colors.BOLD)}"
        )
        if snapshot.showing_no_realtime_data:
            self.output(Colors.colorize("No real-time scan data yet; showing sample results.", Colors.GREY))

        self.output(f"\n{Colors.BOLD}--- BREACHES ({len(snapshot.breaches)}) ---{Colors.RESET}")
        for breach in snapshot.breaches:
            risk_color = Colors.get_risk_color(breach.risk_level)
            self.output(
                f"  {Colors.colorize('•', risk_color)} {self._sanitize_text(breach.title)} "
                f"({breach.domain}, {breach.breach_date[:10]}) "
                f"{Colors.colorize(breach.risk_level.upper(), risk_color)} "
                f"({breach.risk_percentage}% risk)"
            )
            if breach.affected_data:
                self.output(f"      Exposed: {', '.join(breach.affected_data)}")

        self.output(f"\n{Colors.BOLD}--- RECOMMENDATIONS ---{Colors.RESET}")
        for rec in snapshot.recommendations:
            marker = Colors.colorize('✓' if rec.completed else '►', Colors.GREEN)
            self.output(
                f"  {marker} {rec.title} "
                f"[{Colors.colorize(rec.priority, Colors.get_risk_color(rec.priority))}]"
            )
            for number, step in enumerate(rec.setup_steps, 1):
                self.output(f"      {number}. {step}")

        self.output(header_bar + "\n")

    @staticmethod
    def _severity_rank(severity: Optional[str]) -> int:
        try:
            return SEVERITIES.index((severity or "").lower())
        except ValueError:
            return 0

    @staticmethod
    def _sanitize_text(text: str) -> str:
        """Strip control characters so caller text can't rewrite the terminal"""
        if not text:
            return ""
        sanitized = text.replace('\n', ' ').replace('\r', ' ').replace('\t', ' ')
        return ''.join(
            c for c in sanitized
            if not ((0 <= ord(c) <= 31) or (127 <= ord(c) <= 159))
        )
