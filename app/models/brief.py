import enum
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CRITERION_WEIGHT = 5


class TimelineUrgency(str, enum.Enum):
    IMMEDIATE = "Immediate"
    WITHIN_2_WEEKS = "Within 2 weeks"
    WITHIN_1_MONTH = "Within 1 month"
    WITHIN_3_MONTHS = "Within 3 months"
    FLEXIBLE = "Flexible"


class SensitivityLevel(str, enum.Enum):
    STANDARD = "Standard"
    CONFIDENTIAL = "Confidential"
    HIGHLY_CONFIDENTIAL = "Highly Confidential"


class BusinessContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_name: str = ""
    company_size: str = ""
    industry: str = ""
    current_state: str = ""
    desired_outcome: str = ""
    key_stakeholders: str = ""
    decision_timeline: str = ""


class BriefRequirement(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    category: str = "Functional"
    priority: str = "Must Have"
    description: str
    acceptance_criteria: str | None = None
    source: str = "User"


class SuccessCriterion(BaseModel):
    """A measurable outcome the client will judge the engagement by."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    metric: str
    baseline: str | None = None
    target: str = ""
    measurement_method: str = ""
    timeframe: str = ""
    # 1-10, importance for matching
    weight: float = DEFAULT_CRITERION_WEIGHT

    @field_validator("weight", mode="before")
    @classmethod
    def _default_invalid_weight(cls, value: Any) -> float:
        if value is None or isinstance(value, bool):
            return DEFAULT_CRITERION_WEIGHT
        try:
            weight = float(value)
        except (TypeError, ValueError):
            return DEFAULT_CRITERION_WEIGHT
        if not math.isfinite(weight) or weight < 1 or weight > 10:
            return DEFAULT_CRITERION_WEIGHT
        return weight


class BudgetConstraint(BaseModel):
    """Client budget range. min <= max is not guaranteed."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    min: float | None = None
    max: float | None = None
    flexibility: str = "Flexible"


class TimelineConstraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    # One of TimelineUrgency's values, or free text from older intake forms
    urgency: str | None = None
    hard_deadline: str | None = None
    reason: str | None = None


class SensitivityConstraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: SensitivityLevel = SensitivityLevel.STANDARD
    concerns: list[str] = Field(default_factory=list)


class TechnicalConstraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    must_integrate: list[str] = Field(default_factory=list)
    cannot_change: list[str] = Field(default_factory=list)
    preferences: list[str] = Field(default_factory=list)


class BriefConstraints(BaseModel):
    model_config = ConfigDict(frozen=True)

    budget: BudgetConstraint = Field(default_factory=BudgetConstraint)
    timeline: TimelineConstraint = Field(default_factory=TimelineConstraint)
    sensitivity: SensitivityConstraint = Field(default_factory=SensitivityConstraint)
    technical: TechnicalConstraint = Field(default_factory=TechnicalConstraint)


class Brief(BaseModel):
    """Implementation brief as validated by the intake wizard."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    project_type_id: str = ""
    business_context: BusinessContext = Field(default_factory=BusinessContext)
    requirements: list[BriefRequirement] = Field(default_factory=list)
    success_criteria: list[SuccessCriterion] = Field(default_factory=list)
    constraints: BriefConstraints = Field(default_factory=BriefConstraints)
