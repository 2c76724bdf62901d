"""
Status classification from a risk score.

The only place a lifecycle status or a risk level is derived.
Both labels use the same two cutoffs, so for any score:

    active  <-> low
    at_risk <-> medium
    churned <-> high
"""

from typing import Optional

from .config import ScoringConfig, DEFAULT_CONFIG

ACTIVE = "active"
AT_RISK = "at_risk"
CHURNED = "churned"

STATUSES = (ACTIVE, AT_RISK, CHURNED)
RISK_LEVELS = ("low", "medium", "high")


def _band(score: float, config: ScoringConfig) -> int:
    if score < config.at_risk_cutoff:
        return 0
    if score < config.churn_cutoff:
        return 1
    return 2


def classify_status(score: float, config: Optional[ScoringConfig] = None) -> str:
    """
    Map a risk score to a lifecycle status.

    Args:
        score: Risk score in [0, 1]
        config: ScoringConfig with cutoffs. Uses DEFAULT_CONFIG if None.

    Returns:
        "active", "at_risk" or "churned"
    """
    return STATUSES[_band(score, config or DEFAULT_CONFIG)]


def risk_level(score: float, config: Optional[ScoringConfig] = None) -> str:
    """Map a risk score to the low/medium/high label of a prediction."""
    return RISK_LEVELS[_band(score, config or DEFAULT_CONFIG)]
