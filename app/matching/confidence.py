"""
Confidence estimator.

Measures how complete the provider's structured data is, independent of
how well it fits the brief. The table is evaluated top to bottom; the
guards overlap, so order matters.

  all four present                 -> 0.90
  no budget and no performance     -> 0.30
  no performance                   -> 0.60
  no budget                        -> 0.75
  anything else (timeline/caps)    -> 0.80
"""

from app.models.provider import Provider


def has_budget_data(provider: Provider) -> bool:
    return provider.typical_budget_min is not None and provider.typical_budget_max is not None


def has_performance_data(provider: Provider) -> bool:
    metrics = provider.performance_metrics
    return metrics is not None and (
        metrics.total_engagements is not None or metrics.completed_engagements is not None
    )


def has_timeline_data(provider: Provider) -> bool:
    return provider.lead_time_weeks is not None and provider.typical_engagement_weeks is not None


def has_capability_data(provider: Provider) -> bool:
    return bool(provider.capabilities or provider.project_types_served)


def derive_confidence(provider: Provider) -> float:
    budget = has_budget_data(provider)
    performance = has_performance_data(provider)

    if budget and performance and has_timeline_data(provider) and has_capability_data(provider):
        return 0.9
    if not budget and not performance:
        return 0.3
    if not performance:
        return 0.6
    if not budget:
        return 0.75
    return 0.8
