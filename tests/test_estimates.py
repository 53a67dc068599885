"""
Unit tests for budget/timeline estimates and confidence.
"""

import math

import pytest
from pydantic import ValidationError

from app.matching.confidence import derive_confidence
from app.matching.estimates import derive_estimated_budget, derive_estimated_timeline
from tests.conftest import bare_provider, make_brief, make_provider


class TestEstimatedBudget:
    def test_intersects_with_brief_range(self, brief, provider):
        assert derive_estimated_budget(brief, provider) == {"min": 250000, "max": 2000000}

    def test_collapses_to_lower_brief_bound_when_provider_is_cheaper(self, brief):
        provider = make_provider(typical_budget_min=10000, typical_budget_max=50000)
        assert derive_estimated_budget(brief, provider) == {"min": 250000, "max": 250000}

    def test_collapses_to_upper_brief_bound_when_provider_is_pricier(self, brief):
        provider = make_provider(typical_budget_min=5000000, typical_budget_max=9000000)
        assert derive_estimated_budget(brief, provider) == {"min": 2000000, "max": 2000000}

    def test_inverted_brief_budget_returns_ordered_pair(self):
        brief = make_brief(constraints={"budget": {"min": 900000, "max": 100000}})
        for provider in (make_provider(), bare_provider()):
            estimate = derive_estimated_budget(brief, provider)
            assert estimate["min"] <= estimate["max"]

    def test_swaps_inverted_provider_range(self):
        brief = make_brief(constraints={})
        provider = make_provider(typical_budget_min=80000, typical_budget_max=20000)
        assert derive_estimated_budget(brief, provider) == {"min": 20000, "max": 80000}

    def test_clamps_toward_single_brief_bound(self):
        provider = make_provider(typical_budget_min=50000, typical_budget_max=150000)

        only_min = make_brief(constraints={"budget": {"min": 100000}})
        assert derive_estimated_budget(only_min, provider) == {"min": 100000, "max": 150000}

        only_max = make_brief(constraints={"budget": {"max": 80000}})
        assert derive_estimated_budget(only_max, provider) == {"min": 50000, "max": 80000}

    def test_no_data_anywhere_is_zero(self):
        brief = make_brief(constraints={})
        assert derive_estimated_budget(brief, bare_provider()) == {"min": 0, "max": 0}


class TestEstimatedTimeline:
    def test_lead_and_window(self, provider):
        assert derive_estimated_timeline(provider) == "4 week lead + 12-20 week implementation window"

    def test_window_only(self):
        provider = make_provider(lead_time_weeks=None)
        assert derive_estimated_timeline(provider) == "12-20 week implementation window"

    def test_lead_only(self):
        provider = make_provider(typical_engagement_weeks=None)
        assert derive_estimated_timeline(provider) == (
            "4 week lead time; delivery duration to be confirmed"
        )

    def test_pending(self):
        assert derive_estimated_timeline(bare_provider()) == "Timeline estimate pending provider details"


class TestConfidence:
    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({}, 0.9),
            ({"typical_budget_min": None, "performance_metrics": None}, 0.3),
            ({"performance_metrics": None}, 0.6),
            ({"performance_metrics": {}}, 0.6),
            ({"typical_budget_max": None}, 0.75),
            ({"lead_time_weeks": None}, 0.8),
            ({"project_types_served": [], "capabilities": []}, 0.8),
        ],
    )
    def test_decision_table(self, overrides, expected):
        assert derive_confidence(make_provider(**overrides)) == expected

    def test_capabilities_count_as_capability_data(self):
        provider = make_provider(
            project_types_served=[],
            capabilities=[{"capability": "ERP", "experience_level": "Expert"}],
        )
        assert derive_confidence(provider) == 0.9


class TestNonFiniteBudgets:
    @pytest.mark.parametrize("field", ["typical_budget_min", "typical_budget_max"])
    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_provider_budget_must_be_finite(self, field, value):
        with pytest.raises(ValidationError):
            make_provider(**{field: value})

    @pytest.mark.parametrize("value", [math.inf, math.nan])
    def test_brief_budget_must_be_finite(self, value):
        with pytest.raises(ValidationError):
            make_brief(constraints={"budget": {"min": 1000, "max": value}})

    def test_engagement_weeks_must_be_finite(self):
        with pytest.raises(ValidationError):
            make_provider(typical_engagement_weeks={"min": 4, "max": math.inf})
