"""
Matching engine orchestrator.

Takes a brief and a provider population, filters out ineligible providers,
scores the rest with the scoring module and returns a ranked, truncated
result. Pure and storage-agnostic: no I/O, inputs are never mutated.

Flow:
  1. Eligibility filter (exclude list, tier allow-list, required capabilities)
  2. Score every eligible provider
  3. Drop scores below minimum_score (evaluated count is fixed before this)
  4. Sort by overall score descending, ties by confidence descending
  5. Truncate to max_results
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone

from app.config import get_settings
from app.matching.errors import UnreachableCaseError
from app.matching.keywords import matches_required_capabilities
from app.matching.scoring import MatchScore, score_provider
from app.models.brief import Brief
from app.models.preferences import MatchingPreferences
from app.models.provider import Provider

logger = logging.getLogger(__name__)


@dataclass
class MatchingResult:
    """Summary of a matching run."""

    brief_id: str
    algorithm_version: str
    generated_at: datetime
    total_candidates_evaluated: int = 0
    matches: list[MatchScore] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "brief_id": self.brief_id,
            "matches": [match.to_dict() for match in self.matches],
            "total_candidates_evaluated": self.total_candidates_evaluated,
            "algorithm_version": self.algorithm_version,
            "generated_at": self.generated_at.isoformat(),
        }


def filter_providers(
    providers: list[Provider],
    preferences: MatchingPreferences,
) -> list[Provider]:
    """Return the providers eligible for scoring, in input order."""
    excluded = set(preferences.exclude_providers)
    tiers = set(preferences.preferred_tiers)
    required = preferences.required_capabilities

    eligible = []
    for provider in providers:
        if provider.id in excluded:
            continue
        if tiers and provider.tier not in tiers:
            continue
        if required and not matches_required_capabilities(provider, required):
            continue
        eligible.append(provider)

    return eligible


def resolve_max_results(value: float | None) -> int:
    """Coerce a caller-supplied cap into a non-negative integer."""
    if value is None or not math.isfinite(value):
        return get_settings().default_max_results
    return max(0, math.floor(value))


def rank_matches(matches: list[MatchScore]) -> list[MatchScore]:
    return sorted(matches, key=lambda m: (m.overall_score, m.confidence), reverse=True)


def generate_matches(
    brief: Brief,
    providers: list[Provider],
    preferences: MatchingPreferences | None = None,
    generated_at: datetime | None = None,
) -> MatchingResult:
    """
    Generate ranked provider matches for a brief.

    Args:
        brief: Validated implementation brief
        providers: Candidate provider population
        preferences: Optional filters, threshold and result cap
        generated_at: Pin the generation timestamp (defaults to now, UTC)

    Returns:
        MatchingResult with ranked matches and the evaluated candidate count.

    Raises:
        UnreachableCaseError: an enumeration value outside its known set.
    """
    settings = get_settings()
    preferences = preferences or MatchingPreferences()
    generated_at = generated_at or datetime.now(timezone.utc)

    logger.info(
        "Starting matching for brief %s: %d providers",
        brief.id,
        len(providers),
    )

    eligible = filter_providers(providers, preferences)

    result = MatchingResult(
        brief_id=brief.id,
        algorithm_version=settings.algorithm_version,
        generated_at=generated_at,
        total_candidates_evaluated=len(eligible),
    )

    if not eligible:
        logger.info("Nothing to score for brief %s: no eligible providers", brief.id)
        return result

    scored: list[MatchScore] = []
    for provider in eligible:
        try:
            match = score_provider(brief, provider, generated_at)
        except UnreachableCaseError as e:
            logger.error(
                "Aborting matching for brief %s: provider %s: %s",
                brief.id,
                provider.id,
                str(e),
            )
            raise
        logger.debug("Scored provider %s: %d", provider.id, match.overall_score)
        scored.append(match)

    if preferences.minimum_score is not None:
        scored = [m for m in scored if m.overall_score >= preferences.minimum_score]

    result.matches = rank_matches(scored)[: resolve_max_results(preferences.max_results)]

    logger.info(
        "Matching complete for brief %s: %d evaluated, %d returned",
        brief.id,
        result.total_candidates_evaluated,
        len(result.matches),
    )

    return result
