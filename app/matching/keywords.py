"""
Keyword normalization and extraction.

Shared by the eligibility filter, the capability rule and the success
criteria rule so all three see the same token set:

  normalize -> lowercase, strip everything but [a-z0-9], whitespace and '-'
  tokenize  -> split normalized text, keep tokens of min_keyword_length+
"""

import re

from app.config import get_settings
from app.matching.errors import assert_unreachable
from app.models.brief import Brief
from app.models.provider import ExperienceLevel, Provider

_NON_KEYWORD_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")

# Capabilities below this experience score are not trusted as keyword sources
MIN_CAPABILITY_EXPERIENCE_SCORE = 50


def normalize(value: str | None) -> str:
    if not value:
        return ""
    cleaned = _NON_KEYWORD_CHARS.sub(" ", value.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()


def tokenize(value: str | None) -> list[str]:
    min_length = get_settings().min_keyword_length
    return [token for token in normalize(value).split(" ") if len(token) >= min_length]


def experience_level_score(level: ExperienceLevel) -> int:
    """Map a capability experience level onto a 0-100 scale."""
    if level == ExperienceLevel.COMPETENT:
        return 50
    if level == ExperienceLevel.PROFICIENT:
        return 75
    if level == ExperienceLevel.EXPERT:
        return 100
    return assert_unreachable(level)


def extract_brief_keywords(brief: Brief) -> list[str]:
    context = brief.business_context
    text = " ".join(
        [
            brief.project_type_id,
            brief.title,
            context.industry,
            context.current_state,
            context.desired_outcome,
            *(item.description for item in brief.requirements),
            *(item.metric for item in brief.success_criteria),
        ]
    )
    return tokenize(text)


def extract_provider_keywords(provider: Provider) -> list[str]:
    """Distinct provider keywords, in first-seen order."""
    keywords: list[str] = []

    for capability in provider.capabilities:
        if experience_level_score(capability.experience_level) < MIN_CAPABILITY_EXPERIENCE_SCORE:
            continue
        keywords.extend(tokenize(" ".join([capability.capability, *capability.subcategories])))

    keywords.extend(
        tokenize(
            " ".join(
                [
                    provider.description,
                    *provider.specializations,
                    *provider.project_types_served,
                ]
            )
        )
    )

    return list(dict.fromkeys(keywords))


def provider_search_text(provider: Provider) -> str:
    """Normalized haystack used for required-capability filtering."""
    parts = [capability.capability for capability in provider.capabilities]
    for capability in provider.capabilities:
        parts.extend(capability.subcategories)
    parts.extend(provider.specializations)
    parts.extend(provider.project_types_served)
    parts.append(provider.description)
    return normalize(" ".join(parts))


def matches_required_capabilities(provider: Provider, required: list[str]) -> bool:
    """True if every required capability appears in the provider's text.

    A required entry that normalizes to nothing never matches.
    """
    haystack = provider_search_text(provider)
    for item in required:
        needle = normalize(item)
        if not needle or needle not in haystack:
            return False
    return True
