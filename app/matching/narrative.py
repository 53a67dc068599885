"""
Narrative builder: strengths, risks and the one-paragraph explanation.

Works purely from the rule results computed during scoring, so the prose
can never disagree with the numbers.
"""

from app.matching.classifications import BudgetFit, TimelineFit
from app.matching.errors import assert_unreachable
from app.models.brief import Brief
from app.models.provider import Provider

MAX_STRENGTHS = 3
MIN_STRENGTHS = 2
MAX_RISKS = 2

FALLBACK_STRENGTH = "Baseline fit is present across core criteria."
FALLBACK_RISK = "No material risks identified from current structured inputs."


def build_strengths(provider: Provider, rules: dict[str, dict]) -> list[str]:
    capability = rules["capability"]
    strengths: list[str] = []

    if capability["direct_match"]:
        strengths.append("Direct project-type experience is present.")
    elif capability["partial_match"]:
        strengths.append("Related capabilities suggest practical fit.")

    if rules["verification"]["score"] >= 8:
        strengths.append("Verification quality is high for key claims.")

    if rules["experience"]["score"] >= 15:
        strengths.append("Strong completed-engagement track record.")

    if rules["budget"]["score"] >= 10:
        strengths.append("Budget profile is within or near target range.")

    if provider.regions:
        strengths.append(f"Regional footprint includes {', '.join(provider.regions[:2])}.")

    while len(strengths) < MIN_STRENGTHS:
        strengths.append(FALLBACK_STRENGTH)

    return strengths[:MAX_STRENGTHS]


def build_risks(provider: Provider, rules: dict[str, dict]) -> list[str]:
    capability = rules["capability"]
    risks: list[str] = []

    if rules["timeline"]["fit"] in (TimelineFit.TIGHT, TimelineFit.CANNOT_FIT):
        risks.append("Timeline pressure could impact delivery certainty.")

    if rules["experience"]["score"] <= 5:
        risks.append("Limited completed project history for this profile.")

    if rules["budget"]["score"] <= 2:
        risks.append("Budget mismatch may require scope tradeoffs.")

    if not capability["direct_match"] and not capability["partial_match"]:
        risks.append("No direct evidence of experience with this exact project type.")

    if provider.performance_metrics is None:
        risks.append("Performance metrics are incomplete, reducing predictability.")

    if not risks:
        risks.append(FALLBACK_RISK)

    return risks[:MAX_RISKS]


def _budget_phrase(fit: BudgetFit) -> str:
    if fit == BudgetFit.FULL:
        return "Budget range aligns well."
    if fit == BudgetFit.PARTIAL:
        return "Budget overlap is partial."
    if fit == BudgetFit.NONE:
        return "Budget range appears misaligned."
    if fit == BudgetFit.NEUTRAL:
        return "Budget alignment requires confirmation."
    return assert_unreachable(fit)


def _timeline_phrase(fit: TimelineFit) -> str:
    if fit == TimelineFit.FIT:
        return "Timeline appears feasible."
    if fit == TimelineFit.TIGHT:
        return "Lead time may be tight against urgency."
    if fit == TimelineFit.CANNOT_FIT:
        return "Timeline is unlikely without scope or sequencing changes."
    if fit == TimelineFit.NEUTRAL:
        return "Timeline feasibility needs validation."
    return assert_unreachable(fit)


def build_explanation(brief: Brief, rules: dict[str, dict]) -> str:
    capability = rules["capability"]

    if capability["direct_match"]:
        capability_sentence = (
            f"Direct match for {brief.project_type_id} with relevant implementation capabilities."
        )
    elif capability["partial_match"]:
        capability_sentence = (
            "Related capability coverage is present, though direct project-type evidence is limited."
        )
    else:
        capability_sentence = "Direct capability alignment for this project type appears limited."

    return " ".join(
        [
            capability_sentence,
            _budget_phrase(rules["budget"]["fit"]),
            _timeline_phrase(rules["timeline"]["fit"]),
        ]
    )
