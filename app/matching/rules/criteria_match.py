"""
Success criteria alignment rule (Weight: 10 points).

Looks at the brief's high-importance success criteria and counts how many
of their metrics mention one of the provider's keywords.

Scoring:
  - No criteria, or none of high importance: 5 pts (neutral)
  - Otherwise: 2 pts per aligned criterion, capped at 10
"""

from app.config import get_settings
from app.matching.keywords import extract_provider_keywords, normalize
from app.models.brief import Brief
from app.models.provider import Provider

MAX_POINTS = 10
NEUTRAL_POINTS = 5
POINTS_PER_CRITERION = 2


def score(brief: Brief, provider: Provider) -> dict:
    """
    Score success criteria alignment between brief and provider.

    Returns:
        dict with keys: score, max_score, details
    """
    criteria = brief.success_criteria

    if not criteria:
        return {
            "score": NEUTRAL_POINTS,
            "max_score": MAX_POINTS,
            "details": "Brief has no success criteria",
        }

    threshold = get_settings().high_importance_criterion_weight
    important = [criterion for criterion in criteria if criterion.weight >= threshold]

    if not important:
        return {
            "score": NEUTRAL_POINTS,
            "max_score": MAX_POINTS,
            "details": f"No success criteria weighted {threshold} or higher",
        }

    provider_keywords = extract_provider_keywords(provider)

    aligned = 0
    for criterion in important:
        metric = normalize(criterion.metric)
        if metric and any(keyword in metric for keyword in provider_keywords):
            aligned += 1

    return {
        "score": min(aligned * POINTS_PER_CRITERION, MAX_POINTS),
        "max_score": MAX_POINTS,
        "details": f"{aligned} of {len(important)} high-importance criteria aligned",
    }
