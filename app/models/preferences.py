from pydantic import BaseModel, ConfigDict, Field

from app.models.provider import ProviderTier


class MatchingPreferences(BaseModel):
    """Optional caller controls for a matching run."""

    model_config = ConfigDict(frozen=True)

    preferred_tiers: list[ProviderTier] = Field(default_factory=list)
    required_capabilities: list[str] = Field(default_factory=list)
    exclude_providers: list[str] = Field(default_factory=list)
    minimum_score: float | None = None
    # None falls back to the configured default
    max_results: float | None = None
