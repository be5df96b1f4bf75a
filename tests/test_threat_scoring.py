"""
Tests for the security score rating bands (src/utils/threat_scoring.py).
"""

import pytest
from src.utils.threat_scoring import (
    rate_security_score, RATING_GOOD, RATING_FAIR, RATING_POOR
)


@pytest.mark.parametrize("score,expected", [
    (95, RATING_GOOD),
    (80, RATING_GOOD),
    (79, RATING_FAIR),
    (50, RATING_FAIR),
    (49, RATING_POOR),
    (5, RATING_POOR),
])
def test_default_bands(score, expected):
    assert rate_security_score(score) == expected


def test_custom_thresholds():
    assert rate_security_score(60, fair_threshold=40, good_threshold=60) == RATING_GOOD
    assert rate_security_score(39, fair_threshold=40, good_threshold=60) == RATING_POOR


def test_sample_score_is_fair():
    from src.modules.security_score import SAMPLE_SECURITY_SCORE
    assert rate_security_score(SAMPLE_SECURITY_SCORE) == RATING_FAIR
