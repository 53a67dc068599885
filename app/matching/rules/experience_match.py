"""
Experience relevance rule (Weight: 20 points).

Uses the provider's completed engagement count as a proxy for delivery
track record, falling back to the total count when completions are not
reported.

Scoring:
  - 20+ engagements: full weight (20 pts)
  - 10-19: 15 pts
  - 5-9: 10 pts
  - 1-4: 5 pts
  - No usable count: 3 pts
"""

import math

from app.models.provider import Provider

MAX_POINTS = 20
UNKNOWN_POINTS = 3


def _usable(count: float | None) -> bool:
    return count is not None and math.isfinite(count) and count > 0


def completed_equivalent(provider: Provider) -> float | None:
    metrics = provider.performance_metrics
    if metrics is None:
        return None
    if _usable(metrics.completed_engagements):
        return metrics.completed_engagements
    if _usable(metrics.total_engagements):
        return metrics.total_engagements
    return None


def score(provider: Provider) -> dict:
    """
    Score experience relevance for a provider.

    Returns:
        dict with keys: score, max_score, details
    """
    count = completed_equivalent(provider)

    if count is None:
        return {
            "score": UNKNOWN_POINTS,
            "max_score": MAX_POINTS,
            "details": "No engagement history reported",
        }

    if count >= 20:
        points = MAX_POINTS
    elif count >= 10:
        points = 15
    elif count >= 5:
        points = 10
    else:
        points = 5

    return {
        "score": points,
        "max_score": MAX_POINTS,
        "details": f"{count:g} completed engagement(s)",
    }
