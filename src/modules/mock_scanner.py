"""
Mock Breach Scanner
Stand-in scanning collaborator backed by a fixed table of compromised identifiers
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Dict, FrozenSet, List, Optional

from .breach_data import BreachRecord, RISK_HIGH, RISK_MEDIUM
from ..utils.sanitization import mask_sensitive_data, sanitize_for_logging


class ScanInputError(ValueError):
    """Raised when a scan is requested with an unusable value"""


# Values that "appear" in breaches for demo purposes
MOCK_BREACH_DATABASE: Dict[str, FrozenSet[str]] = {
    "email": frozenset({"test@example.com", "admin@company.com", "john.doe@gmail.com", "breach@test.com"}),
    "phone": frozenset({"5551234567", "5559876543", "5550001111"}),
    "username": frozenset({"admin123", "testuser", "johndoe"}),
}

DAY = timedelta(days=1)


class MockBreachScanner:
    """
    Simulated breach lookup.

    No lookup leaves the process: a value is "compromised" when it is in
    ``MOCK_BREACH_DATABASE`` and the scanner returns canned breach records
    dated relative to *now*.
    """

    def __init__(self, database: Optional[Dict[str, FrozenSet[str]]] = None):
        self.database = database if database is not None else MOCK_BREACH_DATABASE
        self.logger = logging.getLogger("MockBreachScanner")

    def scan(self, scan_type: str, value: str, now: Optional[datetime] = None) -> List[BreachRecord]:
        """
        Look up *value* and return the breach records found.

        Raises:
            ScanInputError: If the value is empty or whitespace.
        """
        if value is None or not str(value).strip():
            raise ScanInputError("Please enter a value to scan")

        value = str(value).strip()
        kind = (scan_type or "").strip().lower()
        now = now or datetime.now()
        masked = mask_sensitive_data(value, scan_type)

        if value not in self.database.get(kind, frozenset()):
            self.logger.info(f"No breaches found for {sanitize_for_logging(scan_type)}: {masked}")
            return []

        builder = {
            "email": self._email_breaches,
            "phone": self._phone_breaches,
            "username": self._username_breaches,
        }.get(kind)
        breaches = builder(value, now) if builder else []
        self.logger.warning(
            f"{len(breaches)} breach(es) found for {sanitize_for_logging(scan_type)}: {masked}"
        )
        return breaches

    @staticmethod
    def _breach_id(prefix: str) -> str:
        return f"{prefix}-breach-{uuid.uuid4().hex[:8]}"

    def _email_breaches(self, value: str, now: datetime) -> List[BreachRecord]:
        return [
            BreachRecord(
                id=self._breach_id("email"),
                title="Email Compromise Detected",
                domain="multiple-sources.com",
                breach_date=(now - 180 * DAY).isoformat(),
                affected_data=("Email", "Password", "Personal Information"),
                risk_level=RISK_HIGH,
                verified=True,
                description=(
                    "Your email address was found in a data breach affecting multiple "
                    "services. This breach exposed passwords and personal information."
                ),
            ),
            BreachRecord(
                id=self._breach_id("email"),
                title="Social Media Breach",
                domain="socialmedia.com",
                breach_date=(now - 360 * DAY).isoformat(),
                affected_data=("Email", "Username", "IP Address"),
                risk_level=RISK_MEDIUM,
                verified=True,
                description=(
                    "Your email address was also found in a social media platform breach "
                    "that exposed user account information and IP addresses."
                ),
            ),
        ]

    def _phone_breaches(self, value: str, now: datetime) -> List[BreachRecord]:
        return [
            BreachRecord(
                id=self._breach_id("phone"),
                title="Telecom Data Breach",
                domain="telecom-provider.com",
                breach_date=(now - 90 * DAY).isoformat(),
                affected_data=("Phone Number", "Call Records", "Account Details"),
                risk_level=RISK_MEDIUM,
                verified=True,
                description=(
                    "Your phone number was found in a telecommunications provider data "
                    "breach that exposed customer records and call history."
                ),
            ),
        ]

    def _username_breaches(self, value: str, now: datetime) -> List[BreachRecord]:
        return [
            BreachRecord(
                id=self._breach_id("username"),
                title="Gaming Platform Breach",
                domain="gaming-platform.com",
                breach_date=(now - 60 * DAY).isoformat(),
                affected_data=("Username", "Email", "Hashed Password"),
                risk_level=RISK_MEDIUM,
                verified=True,
                description=(
                    "Your username was exposed in a gaming platform breach that affected "
                    "millions of accounts."
                ),
            ),
        ]
