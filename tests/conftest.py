"""Shared builders for matching tests."""

from datetime import datetime, timezone

import pytest

from app.models import Brief, Provider

FIXED_TIME = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_brief(**overrides) -> Brief:
    data = {
        "id": "brief-1",
        "title": "Core ERP rollout",
        "project_type_id": "erp-implementation",
        "business_context": {
            "company_name": "Acme Builders",
            "industry": "Construction",
            "current_state": "Spreadsheets and legacy accounting",
            "desired_outcome": "Unified finance and project controls",
        },
        "requirements": [{"description": "Migrate general ledger history"}],
        "success_criteria": [],
        "constraints": {
            "budget": {"min": 250000, "max": 2000000},
            "timeline": {"urgency": "Within 1 month"},
        },
    }
    data.update(overrides)
    return Brief.model_validate(data)


def make_provider(**overrides) -> Provider:
    data = {
        "id": "prov-1",
        "name": "Northwind Systems",
        "description": "",
        "tier": "Verified",
        "overall_verification": "Sablecrest-verified",
        "regions": [],
        "capabilities": [],
        "specializations": [],
        "project_types_served": ["erp-implementation"],
        "typical_budget_min": 200000,
        "typical_budget_max": 2500000,
        "typical_engagement_weeks": {"min": 12, "max": 20},
        "lead_time_weeks": 4,
        "performance_metrics": {"total_engagements": 30, "completed_engagements": 25},
    }
    data.update(overrides)
    return Provider.model_validate(data)


def bare_provider(**overrides) -> Provider:
    """Provider with no budget, timeline, performance or capability data."""
    data = {
        "id": "prov-bare",
        "name": "Bare Provider",
        "tier": "Emerging",
        "overall_verification": "Unverified",
        "project_types_served": [],
        "typical_budget_min": None,
        "typical_budget_max": None,
        "typical_engagement_weeks": None,
        "lead_time_weeks": None,
        "performance_metrics": None,
    }
    data.update(overrides)
    return make_provider(**data)


@pytest.fixture
def brief() -> Brief:
    return make_brief()


@pytest.fixture
def provider() -> Provider:
    return make_provider()
