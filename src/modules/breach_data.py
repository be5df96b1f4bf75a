"""
Breach Data Model
Contains the BreachRecord dataclass and the canonical sample breach set
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Tuple

RISK_HIGH = "high"
RISK_MEDIUM = "medium"
RISK_LOW = "low"
RISK_LEVELS = (RISK_HIGH, RISK_MEDIUM, RISK_LOW)

# Display percentage for a single breach's risk bar
RISK_PERCENTAGES = {
    RISK_HIGH: 90,
    RISK_MEDIUM: 50,
    RISK_LOW: 20,
}


@dataclass(frozen=True)
class BreachRecord:
    """
    A single discovered exposure event tied to a scanned identifier.

    Records are produced by the scanning collaborator and never modified
    afterwards; ``affected_data`` is normalised to a tuple so the record
    stays hashable and read-only.
    """
    id: str
    title: str
    domain: str
    breach_date: str
    affected_data: Tuple[str, ...]
    risk_level: str
    verified: bool = True
    description: str = ""

    def __post_init__(self):
        if not isinstance(self.affected_data, tuple):
            object.__setattr__(self, "affected_data", tuple(self.affected_data or ()))

    @property
    def risk_percentage(self) -> int:
        return RISK_PERCENTAGES.get(self.risk_level, 0)

    def parsed_breach_date(self) -> Optional[datetime]:
        """Return the breach date as a naive datetime, or None if unparseable."""
        return parse_breach_date(self.breach_date)


def parse_breach_date(value) -> Optional[datetime]:
    """
    Parse a breach date string into a naive datetime.

    Accepts plain dates (``2013-10-03``) and ISO timestamps, including a
    trailing ``Z``. Timezone-aware values are converted to naive UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        if not value or not isinstance(value, str):
            return None
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def sample_breaches() -> List[BreachRecord]:
    """Build a fresh copy of the canonical sample breach set."""
    return [
        BreachRecord(
            id="sample-1",
            title="Adobe Breach (SAMPLE)",
            domain="adobe.com",
            breach_date="2013-10-03",
            affected_data=("Email", "Passwords", "Credit Cards"),
            risk_level=RISK_HIGH,
            verified=True,
            description=(
                "[SAMPLE DATA] In October 2013, 153 million Adobe accounts were "
                "breached, resulting in exposed passwords and credit cards."
            ),
        ),
        BreachRecord(
            id="sample-2",
            title="MySpace Breach (SAMPLE)",
            domain="myspace.com",
            breach_date="2016-05-26",
            affected_data=("Email", "Username", "Password"),
            risk_level=RISK_MEDIUM,
            verified=True,
            description=(
                "[SAMPLE DATA] In May 2016, MySpace suffered a data breach that "
                "exposed over 360 million accounts."
            ),
        ),
    ]
