"""Pydantic schemas for matching endpoints."""

from datetime import datetime
from pydantic import BaseModel

from app.models import Brief, MatchingPreferences, Provider


class GenerateMatchesRequest(BaseModel):
    """Request body for generating matches for a brief."""
    brief: Brief
    providers: list[Provider]
    preferences: MatchingPreferences | None = None


class ScoreProviderRequest(BaseModel):
    """Request body for scoring a single provider against a brief."""
    brief: Brief
    provider: Provider


class ScoreBreakdownResponse(BaseModel):
    capability_fit: int
    budget_alignment: int
    timeline_compatibility: int
    experience_relevance: int
    verification_level: int
    success_criteria_alignment: int


class EstimatedBudget(BaseModel):
    min: int
    max: int


class MatchScoreResponse(BaseModel):
    """Single provider match."""
    provider_id: str
    brief_id: str
    overall_score: int
    breakdown: ScoreBreakdownResponse
    strengths: list[str]
    risks: list[str]
    estimated_budget: EstimatedBudget
    estimated_timeline: str
    explanation: str
    confidence: float
    algorithm_version: str
    generated_at: datetime
    rule_details: dict[str, str] = {}


class MatchingResultResponse(BaseModel):
    """Ranked matches for a brief. Order is final; clients must not re-sort."""
    brief_id: str
    matches: list[MatchScoreResponse]
    total_candidates_evaluated: int
    algorithm_version: str
    generated_at: datetime
