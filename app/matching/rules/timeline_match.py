"""
Timeline compatibility rule (Weight: 15 points).

Maps the brief's urgency onto a bucket with an expected delivery window
and compares it against the provider's lead time plus the upper end of
its typical engagement length.

Scoring:
  - Flexible / exploring brief: full weight (15 pts)
  - Provider total within expected window: full weight (15 pts)
  - Within twice the expected window: 8 pts (tight)
  - Beyond that: 0 pts (cannot fit)
  - Unknown urgency or missing provider timeline data: 8 pts (neutral)
"""

from app.matching.classifications import TimelineFit, UrgencyBucket
from app.matching.errors import assert_unreachable
from app.matching.keywords import normalize
from app.models.brief import Brief, TimelineUrgency
from app.models.provider import Provider

MAX_POINTS = 15
TIGHT_POINTS = 8
NEUTRAL_POINTS = 8

_KNOWN_URGENCIES = {urgency.value: urgency for urgency in TimelineUrgency}


def bucket_for_urgency(urgency: TimelineUrgency) -> UrgencyBucket:
    if urgency == TimelineUrgency.IMMEDIATE:
        return UrgencyBucket.URGENT
    if urgency == TimelineUrgency.WITHIN_2_WEEKS:
        return UrgencyBucket.HIGH
    if urgency in (TimelineUrgency.WITHIN_1_MONTH, TimelineUrgency.WITHIN_3_MONTHS):
        return UrgencyBucket.STANDARD
    if urgency == TimelineUrgency.FLEXIBLE:
        return UrgencyBucket.FLEXIBLE
    return assert_unreachable(urgency)


def resolve_urgency_bucket(urgency: str | None) -> UrgencyBucket | None:
    """Resolve a brief urgency, including legacy free-text buckets."""
    if not urgency:
        return None

    if urgency in _KNOWN_URGENCIES:
        return bucket_for_urgency(_KNOWN_URGENCIES[urgency])

    try:
        return UrgencyBucket(normalize(urgency))
    except ValueError:
        return None


def expected_weeks(bucket: UrgencyBucket) -> int:
    """Longest acceptable lead + delivery time for a time-pressured bucket."""
    if bucket == UrgencyBucket.URGENT:
        return 4
    if bucket == UrgencyBucket.HIGH:
        return 8
    if bucket == UrgencyBucket.STANDARD:
        return 16
    return assert_unreachable(bucket, f"No expected window for bucket {bucket!r}")


def score(brief: Brief, provider: Provider) -> dict:
    """
    Score timeline compatibility between brief and provider.

    Returns:
        dict with keys: score, max_score, details, fit
    """
    bucket = resolve_urgency_bucket(brief.constraints.timeline.urgency)
    lead = provider.lead_time_weeks
    engagement = provider.typical_engagement_weeks

    if bucket is None or lead is None or engagement is None:
        return {
            "score": NEUTRAL_POINTS,
            "max_score": MAX_POINTS,
            "details": "Urgency unresolved or provider timeline data missing",
            "fit": TimelineFit.NEUTRAL,
        }

    if bucket in (UrgencyBucket.FLEXIBLE, UrgencyBucket.EXPLORING):
        return {
            "score": MAX_POINTS,
            "max_score": MAX_POINTS,
            "details": f"No time pressure ({bucket.value})",
            "fit": TimelineFit.FIT,
        }

    provider_total = lead + engagement.max
    expected = expected_weeks(bucket)
    comparison = f"provider {provider_total:g} weeks vs expected {expected} ({bucket.value})"

    if provider_total <= expected:
        return {
            "score": MAX_POINTS,
            "max_score": MAX_POINTS,
            "details": f"Fits window: {comparison}",
            "fit": TimelineFit.FIT,
        }

    if provider_total <= expected * 2:
        return {
            "score": TIGHT_POINTS,
            "max_score": MAX_POINTS,
            "details": f"Tight: {comparison}",
            "fit": TimelineFit.TIGHT,
        }

    return {
        "score": 0,
        "max_score": MAX_POINTS,
        "details": f"Cannot fit: {comparison}",
        "fit": TimelineFit.CANNOT_FIT,
    }
