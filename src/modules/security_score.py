"""
Security Score Calculator
Turns a set of breach records into a bounded integer score (higher is safer)
"""

import math
from datetime import datetime, timedelta
from typing import Iterable, Optional

from .breach_data import BreachRecord, RISK_HIGH, RISK_MEDIUM, RISK_LOW
from .scoring_utils import PenaltyAccumulator

BASE_SCORE = 100
NO_BREACH_SCORE = 95
MIN_SCORE = 5
MAX_SCORE = 95
HIGH_RISK_CEILING = 40

# Sample-mode score shown before any real scan
SAMPLE_SECURITY_SCORE = 75

RISK_PENALTIES = {
    RISK_HIGH: 30,
    RISK_MEDIUM: 15,
    RISK_LOW: 5,
}

# Extra penalty per exposed data category; unlisted categories add nothing
DATA_CATEGORY_SURCHARGES = {
    "Credit Cards": 10,
    "SSN": 15,
    "Government ID": 15,
    "Passwords": 8,
    "Password": 8,
    "Banking Info": 12,
    "Bank Account": 12,
    "Financial": 10,
    "Health Records": 12,
    "Biometric Data": 10,
}

OLD_BREACH_AGE = timedelta(days=365)
OLD_BREACH_RELIEF = 0.9


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_security_score(
    breaches: Iterable[BreachRecord],
    now: Optional[datetime] = None,
) -> int:
    """
    Calculate the security score for a breach set.

    Args:
        breaches: Breach records from a real scan.
        now: Reference time for breach age (defaults to the current time).

    Returns:
        Integer in [5, 95]; never above 40 when any breach is high risk.

    Each breach adds a risk-level penalty and a surcharge per listed data
    category. A breach dated more than a year before *now* then scales the
    penalty accumulated so far by 0.9, so several old breaches compound.
    """
    breaches = list(breaches or ())
    if not breaches:
        return NO_BREACH_SCORE

    now = now or datetime.now()
    penalty = PenaltyAccumulator()
    has_high_risk = False

    for breach in breaches:
        if breach.risk_level == RISK_HIGH:
            has_high_risk = True
        penalty.add(RISK_PENALTIES.get(breach.risk_level, 0),
                    f"{breach.risk_level} risk: {breach.domain}")

        for category in breach.affected_data:
            surcharge = DATA_CATEGORY_SURCHARGES.get(category, 0)
            if surcharge:
                penalty.add(surcharge, f"exposed {category}")

        breach_date = breach.parsed_breach_date()
        if breach_date is not None and breach_date < now - OLD_BREACH_AGE:
            penalty.scale(OLD_BREACH_RELIEF, f"old breach: {breach.domain}")

    upper = HIGH_RISK_CEILING if has_high_risk else MAX_SCORE
    return penalty.finalize(
        lambda total: _round_half_up(max(MIN_SCORE, min(upper, BASE_SCORE - total)))
    )
