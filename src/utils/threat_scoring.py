"""
Shared security score rating utilities.

PATTERN RECOGNITION: Centralises the score-to-rating bands so the console
summary, the logs and any rendering collaborator use identical labels.
"""

RATING_GOOD = "good"
RATING_FAIR = "fair"
RATING_POOR = "poor"


def rate_security_score(
    score: float,
    fair_threshold: float = 50,
    good_threshold: float = 80,
) -> str:
    """Return a rating label for the given security *score*.

    Args:
        score: Security score (higher is safer).
        fair_threshold: Minimum score that qualifies as ``"fair"``.
        good_threshold: Minimum score that qualifies as ``"good"``.

    Returns:
        One of ``"good"``, ``"fair"``, or ``"poor"``.
    """
    if score >= good_threshold:
        return RATING_GOOD
    if score >= fair_threshold:
        return RATING_FAIR
    return RATING_POOR
