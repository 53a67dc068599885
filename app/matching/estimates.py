"""
Estimated budget and timeline shown alongside each match.

The budget estimate starts from the provider's typical range and is pulled
inside whatever the brief allows. Brief ranges entered backwards
(min > max) are tolerated; the estimate is always ordered.
"""

import math

from app.models.brief import Brief
from app.models.provider import Provider


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def derive_estimated_budget(brief: Brief, provider: Provider) -> dict:
    """
    Returns:
        dict with keys: min, max (min <= max)
    """
    brief_min = brief.constraints.budget.min
    brief_max = brief.constraints.budget.max

    low = next((v for v in (provider.typical_budget_min, brief_min) if v is not None), 0)
    high = next((v for v in (provider.typical_budget_max, brief_max) if v is not None), low)

    if low > high:
        low, high = high, low

    if brief_min is not None and brief_max is not None:
        brief_low, brief_high = min(brief_min, brief_max), max(brief_min, brief_max)
        clamped_low = max(low, brief_low)
        clamped_high = min(high, brief_high)

        if clamped_low <= clamped_high:
            return {"min": round_half_up(clamped_low), "max": round_half_up(clamped_high)}

        # No overlap: collapse to the nearer brief bound
        nearest = brief_low if high < brief_low else brief_high
        return {"min": round_half_up(nearest), "max": round_half_up(nearest)}

    if brief_min is not None:
        low = max(low, brief_min)
        high = max(high, low)

    if brief_max is not None:
        high = min(high, brief_max)
        low = min(low, high)

    return {"min": round_half_up(low), "max": round_half_up(high)}


def derive_estimated_timeline(provider: Provider) -> str:
    lead = provider.lead_time_weeks
    engagement = provider.typical_engagement_weeks

    if engagement is not None:
        window = f"{engagement.min:g}-{engagement.max:g} week implementation window"
        if lead is not None:
            return f"{lead:g} week lead + {window}"
        return window

    if lead is not None:
        return f"{lead:g} week lead time; delivery duration to be confirmed"

    return "Timeline estimate pending provider details"
