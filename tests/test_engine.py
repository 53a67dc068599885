"""
Integration tests for the matching engine.
"""

import math

import pytest

from app.matching import UnreachableCaseError, generate_matches
from app.models import MatchingPreferences, Provider
from tests.conftest import FIXED_TIME, bare_provider, make_brief, make_provider


def _prefs(**kwargs) -> MatchingPreferences:
    return MatchingPreferences(**kwargs)


class TestScenarios:
    def setup_method(self):
        self.brief = make_brief()

    def test_direct_match_provider(self):
        result = generate_matches(self.brief, [make_provider()], generated_at=FIXED_TIME)
        match = result.matches[0]

        # 25 capability + 20 budget + 8 timeline + 20 experience + 10 verification + 5 criteria
        assert match.overall_score == 88
        assert match.breakdown.capability_fit == 100
        assert match.breakdown.budget_alignment == 100
        assert match.breakdown.timeline_compatibility == 53
        assert match.breakdown.experience_relevance == 100
        assert match.breakdown.verification_level == 100
        assert match.breakdown.success_criteria_alignment == 50
        assert match.confidence == 0.9

    def test_provider_without_overlap_or_data(self):
        result = generate_matches(self.brief, [bare_provider()], generated_at=FIXED_TIME)
        match = result.matches[0]

        assert match.breakdown.capability_fit == 0
        assert match.breakdown.budget_alignment == 50
        assert match.breakdown.experience_relevance == 15
        assert match.confidence == 0.3
        # 0 + 10 + 8 + 3 + 0 + 5
        assert match.overall_score == 26

    def test_excluded_provider_is_not_evaluated(self):
        providers = [make_provider(id="a"), make_provider(id="b")]
        result = generate_matches(self.brief, providers, _prefs(exclude_providers=["a"]))

        assert result.total_candidates_evaluated == 1
        assert [m.provider_id for m in result.matches] == ["b"]

    def test_minimum_score_keeps_evaluated_count(self):
        providers = [make_provider(id="strong"), bare_provider(id="weak")]
        result = generate_matches(self.brief, providers, _prefs(minimum_score=50))

        assert [m.provider_id for m in result.matches] == ["strong"]
        assert result.total_candidates_evaluated == 2


class TestFiltering:
    def setup_method(self):
        self.brief = make_brief()
        self.providers = [
            make_provider(id="elite", tier="Elite", specializations=["Construction ERP"]),
            make_provider(id="emerging", tier="Emerging"),
            make_provider(id="pending", tier="Pending", description="Procore integration for construction firms"),
        ]

    def test_preferred_tiers(self):
        result = generate_matches(self.brief, self.providers, _prefs(preferred_tiers=["Elite", "Pending"]))
        assert {m.provider_id for m in result.matches} == {"elite", "pending"}
        assert result.total_candidates_evaluated == 2

    def test_required_capabilities(self):
        result = generate_matches(
            self.brief, self.providers, _prefs(required_capabilities=["construction erp"])
        )
        assert {m.provider_id for m in result.matches} == {"elite"}

    def test_nothing_eligible_returns_empty_result(self):
        result = generate_matches(self.brief, self.providers, _prefs(required_capabilities=["salesforce"]))
        assert result.matches == []
        assert result.total_candidates_evaluated == 0

    def test_no_providers(self):
        result = generate_matches(self.brief, [])
        assert result.matches == []
        assert result.total_candidates_evaluated == 0
        assert result.brief_id == "brief-1"


class TestRanking:
    def setup_method(self):
        self.brief = make_brief()

    def test_ties_broken_by_confidence(self):
        # Missing timeline data scores the same 8 points as a tight fit but lowers confidence
        lower = make_provider(id="lower", lead_time_weeks=None)
        higher = make_provider(id="higher")
        result = generate_matches(self.brief, [lower, higher])

        assert [m.overall_score for m in result.matches] == [88, 88]
        assert [m.provider_id for m in result.matches] == ["higher", "lower"]

    def test_sorted_by_score(self):
        providers = [bare_provider(id="weak"), make_provider(id="strong")]
        result = generate_matches(self.brief, providers)
        scores = [m.overall_score for m in result.matches]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.parametrize(
        "max_results, expected",
        [
            (None, 10),
            (3, 3),
            (2.7, 2),
            (0, 0),
            (-4, 0),
            (math.inf, 10),
            (math.nan, 10),
        ],
    )
    def test_truncation(self, max_results, expected):
        providers = [make_provider(id=f"p{i}") for i in range(12)]
        result = generate_matches(self.brief, providers, _prefs(max_results=max_results))

        assert len(result.matches) == expected
        assert result.total_candidates_evaluated == 12


class TestProperties:
    def setup_method(self):
        self.brief = make_brief(
            success_criteria=[
                {"metric": "ERP go-live on schedule", "weight": 9},
                {"metric": "Ledger reconciliation accuracy", "weight": 7},
            ]
        )
        self.providers = [
            make_provider(id="full"),
            bare_provider(id="bare"),
            make_provider(id="cheap", typical_budget_min=1000, typical_budget_max=2000),
            make_provider(id="slow", lead_time_weeks=30, overall_verification="Provider-stated"),
            make_provider(
                id="related",
                project_types_served=["finance-transformation"],
                capabilities=[{"capability": "General ledger", "experience_level": "Expert"}],
                performance_metrics={"total_engagements": 2},
            ),
        ]

    def test_scores_within_bounds(self):
        result = generate_matches(self.brief, self.providers)

        for match in result.matches:
            assert 0 <= match.overall_score <= 100
            assert 0 <= match.confidence <= 1
            for value in match.breakdown.to_dict().values():
                assert 0 <= value <= 100
            assert 2 <= len(match.strengths) <= 3
            assert 1 <= len(match.risks) <= 2
            assert match.estimated_budget["min"] <= match.estimated_budget["max"]

    def test_deterministic_with_pinned_timestamp(self):
        first = generate_matches(self.brief, self.providers, generated_at=FIXED_TIME)
        second = generate_matches(self.brief, self.providers, generated_at=FIXED_TIME)
        assert first.to_dict() == second.to_dict()

    def test_timestamp_shared_across_matches(self):
        result = generate_matches(self.brief, self.providers)
        assert {m.generated_at for m in result.matches} == {result.generated_at}

    def test_direct_match_dominance(self):
        brief = make_brief()
        direct = make_provider(id="direct")
        unrelated = make_provider(id="unrelated", project_types_served=["website-redesign"])
        result = generate_matches(brief, [direct, unrelated])
        scores = {m.provider_id: m.overall_score for m in result.matches}

        assert scores["direct"] - scores["unrelated"] >= 25

    def test_inputs_not_mutated(self):
        before = [p.model_dump() for p in self.providers]
        generate_matches(self.brief, self.providers, _prefs(max_results=1, minimum_score=10))
        assert [p.model_dump() for p in self.providers] == before


def test_unknown_enum_value_aborts_run():
    broken = Provider.model_construct(
        **{**dict(make_provider(id="broken")), "overall_verification": "Self-certified"}
    )
    with pytest.raises(UnreachableCaseError):
        generate_matches(make_brief(), [make_provider(), broken])
