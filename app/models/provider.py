import enum

from pydantic import BaseModel, ConfigDict, Field


class ProviderTier(str, enum.Enum):
    PENDING = "Pending"
    EMERGING = "Emerging"
    VERIFIED = "Verified"
    ELITE = "Elite"


class VerificationLevel(str, enum.Enum):
    """Ordered from weakest to strongest substantiation."""

    UNVERIFIED = "Unverified"
    PROVIDER_STATED = "Provider-stated"
    DOCUMENTED = "Documented"
    REFERENCE_VALIDATED = "Reference-validated"
    SABLECREST_VERIFIED = "Sablecrest-verified"


class ExperienceLevel(str, enum.Enum):
    COMPETENT = "Competent"
    PROFICIENT = "Proficient"
    EXPERT = "Expert"


class ProviderCapability(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    capability: str
    subcategories: list[str] = Field(default_factory=list)
    experience_level: ExperienceLevel
    verification_level: VerificationLevel = VerificationLevel.UNVERIFIED
    project_count: int | None = None


class WeekRange(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    min: float
    max: float


class PerformanceMetrics(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    total_engagements: float | None = None
    completed_engagements: float | None = None
    success_rate: float | None = None
    average_nps: float | None = None
    on_time_delivery_rate: float | None = None


class Provider(BaseModel):
    """Provider registry entry as consumed by matching."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    id: str
    name: str
    description: str = ""
    tier: ProviderTier
    overall_verification: VerificationLevel
    regions: list[str] = Field(default_factory=list)
    capabilities: list[ProviderCapability] = Field(default_factory=list)
    specializations: list[str] = Field(default_factory=list)
    project_types_served: list[str] = Field(default_factory=list)
    typical_budget_min: float | None = None
    typical_budget_max: float | None = None
    typical_engagement_weeks: WeekRange | None = None
    lead_time_weeks: float | None = None
    performance_metrics: PerformanceMetrics | None = None
