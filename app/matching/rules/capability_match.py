"""
Capability fit rule (Weight: 25 points).

Compares the brief's project type against the project types the provider
has served. When there is no direct hit, falls back to keyword overlap
between the brief text and the provider's capability profile.

Scoring:
  - Direct match (project type served): full weight (25 pts)
  - Related keyword overlap: 12 pts
  - No match: 0 pts
"""

from app.matching.keywords import extract_brief_keywords, extract_provider_keywords
from app.models.brief import Brief
from app.models.provider import Provider

MAX_POINTS = 25
RELATED_POINTS = 12


def _related_keywords(brief: Brief, provider: Provider) -> list[str]:
    brief_keywords = extract_brief_keywords(brief)
    if not brief_keywords:
        return []

    provider_keywords = set(extract_provider_keywords(provider))
    if not provider_keywords:
        return []

    return [keyword for keyword in dict.fromkeys(brief_keywords) if keyword in provider_keywords]


def score(brief: Brief, provider: Provider) -> dict:
    """
    Score capability fit between brief and provider.

    Returns:
        dict with keys: score, max_score, details, direct_match, partial_match
    """
    if brief.project_type_id in provider.project_types_served:
        return {
            "score": MAX_POINTS,
            "max_score": MAX_POINTS,
            "details": f"Provider has served project type '{brief.project_type_id}'",
            "direct_match": True,
            "partial_match": False,
        }

    shared = _related_keywords(brief, provider)
    if shared:
        return {
            "score": RELATED_POINTS,
            "max_score": MAX_POINTS,
            "details": f"Related capability keywords: {', '.join(shared[:5])}",
            "direct_match": False,
            "partial_match": True,
        }

    return {
        "score": 0,
        "max_score": MAX_POINTS,
        "details": f"No capability evidence for '{brief.project_type_id}'",
        "direct_match": False,
        "partial_match": False,
    }
