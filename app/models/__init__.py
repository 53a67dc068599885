from app.models.brief import (
    Brief,
    BriefConstraints,
    BriefRequirement,
    BudgetConstraint,
    BusinessContext,
    SensitivityConstraint,
    SensitivityLevel,
    SuccessCriterion,
    TechnicalConstraint,
    TimelineConstraint,
    TimelineUrgency,
)
from app.models.provider import (
    ExperienceLevel,
    PerformanceMetrics,
    Provider,
    ProviderCapability,
    ProviderTier,
    VerificationLevel,
    WeekRange,
)
from app.models.preferences import MatchingPreferences

__all__ = [
    "Brief",
    "BriefConstraints",
    "BriefRequirement",
    "BudgetConstraint",
    "BusinessContext",
    "SensitivityConstraint",
    "SensitivityLevel",
    "SuccessCriterion",
    "TechnicalConstraint",
    "TimelineConstraint",
    "TimelineUrgency",
    "ExperienceLevel",
    "PerformanceMetrics",
    "Provider",
    "ProviderCapability",
    "ProviderTier",
    "VerificationLevel",
    "WeekRange",
    "MatchingPreferences",
]
