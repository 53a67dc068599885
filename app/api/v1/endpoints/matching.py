"""Matching endpoints: rank providers for a brief and audit single scores."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from app.matching import MatchScore, UnreachableCaseError, generate_matches
from app.matching.scoring import score_provider
from app.api.v1.schemas.matching import (
    GenerateMatchesRequest,
    MatchingResultResponse,
    MatchScoreResponse,
    ScoreBreakdownResponse,
    EstimatedBudget,
    ScoreProviderRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/matching", tags=["Matching"])


def _score_to_response(match: MatchScore) -> MatchScoreResponse:
    """Convert a MatchScore dataclass to a MatchScoreResponse schema."""
    return MatchScoreResponse(
        provider_id=match.provider_id,
        brief_id=match.brief_id,
        overall_score=match.overall_score,
        breakdown=ScoreBreakdownResponse(**match.breakdown.to_dict()),
        strengths=match.strengths,
        risks=match.risks,
        estimated_budget=EstimatedBudget(**match.estimated_budget),
        estimated_timeline=match.estimated_timeline,
        explanation=match.explanation,
        confidence=match.confidence,
        algorithm_version=match.algorithm_version,
        generated_at=match.generated_at,
        rule_details=match.rule_details,
    )


@router.post("/generate", response_model=MatchingResultResponse)
def generate(request: GenerateMatchesRequest):
    """
    Rank providers for a brief.

    Applies the optional preferences (tier allow-list, required capabilities,
    exclusions, minimum score, result cap) and returns matches best-first.
    """
    try:
        result = generate_matches(request.brief, request.providers, request.preferences)
    except UnreachableCaseError as e:
        logger.error("Matching failed for brief %s: %s", request.brief.id, e)
        raise HTTPException(status_code=500, detail="Matching failed due to unexpected provider data")

    return MatchingResultResponse(
        brief_id=result.brief_id,
        matches=[_score_to_response(m) for m in result.matches],
        total_candidates_evaluated=result.total_candidates_evaluated,
        algorithm_version=result.algorithm_version,
        generated_at=result.generated_at,
    )


@router.post("/score", response_model=MatchScoreResponse)
def score(request: ScoreProviderRequest):
    """Score one provider against a brief without filtering or thresholds."""
    try:
        match = score_provider(request.brief, request.provider, datetime.now(timezone.utc))
    except UnreachableCaseError as e:
        logger.error("Scoring failed for provider %s: %s", request.provider.id, e)
        raise HTTPException(status_code=500, detail="Scoring failed due to unexpected provider data")

    return _score_to_response(match)
