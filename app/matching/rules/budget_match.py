"""
Budget alignment rule (Weight: 20 points).

Compares the brief's budget range against the provider's typical
engagement budget. Both sides need a min and a max to be compared;
otherwise the rule stays neutral rather than penalizing missing data.

Scoring:
  - Provider range contains brief range: full weight (20 pts)
  - Ranges overlap: 10 pts
  - Missing range on either side: 10 pts (neutral)
  - Disjoint ranges: 2 pts
"""

from app.matching.classifications import BudgetFit
from app.models.brief import Brief
from app.models.provider import Provider

MAX_POINTS = 20
PARTIAL_POINTS = 10
NEUTRAL_POINTS = 10
MISMATCH_POINTS = 2


def ranges_overlap(min_a: float, max_a: float, min_b: float, max_b: float) -> bool:
    return max(min_a, min_b) <= min(max_a, max_b)


def score(brief: Brief, provider: Provider) -> dict:
    """
    Score budget alignment between brief and provider.

    Returns:
        dict with keys: score, max_score, details, fit
    """
    brief_min = brief.constraints.budget.min
    brief_max = brief.constraints.budget.max
    provider_min = provider.typical_budget_min
    provider_max = provider.typical_budget_max

    if None in (brief_min, brief_max, provider_min, provider_max):
        return {
            "score": NEUTRAL_POINTS,
            "max_score": MAX_POINTS,
            "details": "Missing budget range on one or both sides",
            "fit": BudgetFit.NEUTRAL,
        }

    ranges = f"provider {provider_min:g}-{provider_max:g}, brief {brief_min:g}-{brief_max:g}"

    if provider_min <= brief_min and provider_max >= brief_max:
        return {
            "score": MAX_POINTS,
            "max_score": MAX_POINTS,
            "details": f"Provider range contains brief range: {ranges}",
            "fit": BudgetFit.FULL,
        }

    if ranges_overlap(provider_min, provider_max, brief_min, brief_max):
        return {
            "score": PARTIAL_POINTS,
            "max_score": MAX_POINTS,
            "details": f"Budget ranges overlap: {ranges}",
            "fit": BudgetFit.PARTIAL,
        }

    return {
        "score": MISMATCH_POINTS,
        "max_score": MAX_POINTS,
        "details": f"Budget ranges do not overlap: {ranges}",
        "fit": BudgetFit.NONE,
    }
