"""
Scoring combiner. Runs all six matching rules for one provider.

Takes a brief and a provider, executes the rules, sums their points into
an overall 0-100 score and converts each rule's points into a 0-100
percentage of its own maximum. The same rule results feed the narrative,
so classifications are computed exactly once.

Dimension weights (100 points total):
  capability 25 | budget 20 | experience 20 | timeline 15 |
  verification 10 | success criteria 10
"""

import math
from dataclasses import dataclass, field
from datetime import datetime

from app.config import get_settings
from app.matching.confidence import derive_confidence
from app.matching.estimates import derive_estimated_budget, derive_estimated_timeline, round_half_up
from app.matching.narrative import build_explanation, build_risks, build_strengths
from app.matching.rules import (
    budget_match,
    capability_match,
    criteria_match,
    experience_match,
    timeline_match,
    verification_match,
)
from app.models.brief import Brief
from app.models.provider import Provider

DIMENSION_WEIGHTS = {
    "capability": capability_match.MAX_POINTS,
    "budget": budget_match.MAX_POINTS,
    "experience": experience_match.MAX_POINTS,
    "timeline": timeline_match.MAX_POINTS,
    "verification": verification_match.MAX_POINTS,
    "success_criteria": criteria_match.MAX_POINTS,
}


@dataclass
class ScoreBreakdown:
    """Per-dimension percentages, each independently in [0, 100]."""

    capability_fit: int
    budget_alignment: int
    timeline_compatibility: int
    experience_relevance: int
    verification_level: int
    success_criteria_alignment: int

    def to_dict(self) -> dict:
        return {
            "capability_fit": self.capability_fit,
            "budget_alignment": self.budget_alignment,
            "timeline_compatibility": self.timeline_compatibility,
            "experience_relevance": self.experience_relevance,
            "verification_level": self.verification_level,
            "success_criteria_alignment": self.success_criteria_alignment,
        }


@dataclass
class MatchScore:
    """Scored, explained match of one provider against one brief."""

    provider_id: str
    brief_id: str
    overall_score: int
    breakdown: ScoreBreakdown
    strengths: list[str]
    risks: list[str]
    estimated_budget: dict
    estimated_timeline: str
    explanation: str
    confidence: float
    algorithm_version: str
    generated_at: datetime
    rule_details: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "provider_id": self.provider_id,
            "brief_id": self.brief_id,
            "overall_score": self.overall_score,
            "breakdown": self.breakdown.to_dict(),
            "strengths": list(self.strengths),
            "risks": list(self.risks),
            "estimated_budget": dict(self.estimated_budget),
            "estimated_timeline": self.estimated_timeline,
            "explanation": self.explanation,
            "confidence": self.confidence,
            "algorithm_version": self.algorithm_version,
            "generated_at": self.generated_at.isoformat(),
            "rule_details": dict(self.rule_details),
        }


def clamp_score(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return max(0, min(100, round_half_up(value)))


def to_dimension_percent(points: float, max_points: float) -> int:
    if max_points <= 0:
        return 0
    return clamp_score(points / max_points * 100)


def run_rules(brief: Brief, provider: Provider) -> dict[str, dict]:
    """Run every rule and return their raw results keyed by dimension."""
    return {
        "capability": capability_match.score(brief, provider),
        "budget": budget_match.score(brief, provider),
        "experience": experience_match.score(provider),
        "timeline": timeline_match.score(brief, provider),
        "verification": verification_match.score(provider),
        "success_criteria": criteria_match.score(brief, provider),
    }


def score_provider(
    brief: Brief,
    provider: Provider,
    generated_at: datetime,
) -> MatchScore:
    """
    Score a single provider against a brief.

    Returns:
        MatchScore with overall score, breakdown, narrative and estimates.
    """
    rules = run_rules(brief, provider)

    overall = clamp_score(sum(result["score"] for result in rules.values()))

    def percent(name: str) -> int:
        return to_dimension_percent(rules[name]["score"], rules[name]["max_score"])

    breakdown = ScoreBreakdown(
        capability_fit=percent("capability"),
        budget_alignment=percent("budget"),
        timeline_compatibility=percent("timeline"),
        experience_relevance=percent("experience"),
        verification_level=percent("verification"),
        success_criteria_alignment=percent("success_criteria"),
    )

    return MatchScore(
        provider_id=provider.id,
        brief_id=brief.id,
        overall_score=overall,
        breakdown=breakdown,
        strengths=build_strengths(provider, rules),
        risks=build_risks(provider, rules),
        estimated_budget=derive_estimated_budget(brief, provider),
        estimated_timeline=derive_estimated_timeline(provider),
        explanation=build_explanation(brief, rules),
        confidence=derive_confidence(provider),
        algorithm_version=get_settings().algorithm_version,
        generated_at=generated_at,
        rule_details={name: result["details"] for name, result in rules.items()},
    )
