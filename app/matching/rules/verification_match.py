"""
Verification level rule (Weight: 10 points).

Fixed lookup on the provider's overall verification level. An unknown
level is schema drift and aborts the run instead of scoring zero.
"""

from app.matching.errors import assert_unreachable
from app.models.provider import Provider, VerificationLevel

MAX_POINTS = 10


def points_for_level(level: VerificationLevel) -> int:
    if level == VerificationLevel.SABLECREST_VERIFIED:
        return 10
    if level == VerificationLevel.REFERENCE_VALIDATED:
        return 8
    if level == VerificationLevel.DOCUMENTED:
        return 6
    if level == VerificationLevel.PROVIDER_STATED:
        return 3
    if level == VerificationLevel.UNVERIFIED:
        return 0
    return assert_unreachable(level, f"Unknown verification level: {level!r}")


def score(provider: Provider) -> dict:
    """
    Score the provider's verification level.

    Returns:
        dict with keys: score, max_score, details
    """
    level = provider.overall_verification
    return {
        "score": points_for_level(level),
        "max_score": MAX_POINTS,
        "details": f"Overall verification: {getattr(level, 'value', level)}",
    }
