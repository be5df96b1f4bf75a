"""
Reusable penalty accumulator for the security score.

PATTERN RECOGNITION: This is the Accumulator pattern - a single object
maintains the running penalty and the reasons behind it, and exposes
atomic add()/scale() operations so the calculator reads as a list of
rules instead of a pile of ``penalty +=`` statements.
"""

from typing import Callable, List, Optional


class PenaltyAccumulator:
    """Accumulates a score penalty and a flat list of reason strings.

    Usage::

        penalty = PenaltyAccumulator()
        penalty.add(30, "high risk breach: adobe.com")
        penalty.scale(0.9, "breach older than one year")
        score = penalty.finalize(lambda total: 100 - total)
    """

    def __init__(self) -> None:
        self.total: float = 0.0
        self.reasons: List[str] = []

    def add(self, amount: float, reason: Optional[str] = None) -> None:
        """Add *amount* to the running penalty, recording *reason* if given."""
        self.total += amount
        if reason:
            self.reasons.append(reason)

    def scale(self, factor: float, reason: Optional[str] = None) -> None:
        """Multiply the penalty accumulated so far by *factor*.

        Scaling applies to everything added before the call, so repeated
        calls compound.
        """
        self.total *= factor
        if reason:
            self.reasons.append(reason)

    def finalize(self, converter: Callable[[float], int]) -> int:
        """Return the final value produced by *converter* from the total penalty."""
        return converter(self.total)
