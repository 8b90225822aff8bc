"""Safety / target / reach classification against the school catalog."""

from __future__ import annotations

from typing import List, Optional

from app.core.errors import SchoolNotFoundError
from app.core.numeric import round_half_up, safe_div, safe_round
from app.data.schools import SCHOOLS, SCHOOLS_BY_ID, School
from app.i18n import get_i18n_resource
from app.i18n.messages import CatalogErrorMessages
from app.schemas.profile import (
    ApplicationComponents,
    SchoolRecommendation,
    SchoolSearchResult,
    StudentProfile,
)
from app.services.profile_score import calculate_profile_score, derive_application_components

__all__ = [
    "SAFETY_RATIO",
    "TARGET_RATIO",
    "classify_category",
    "estimate_admission_chance",
    "has_required_components",
    "generate_recommendations",
    "search_schools",
    "get_school",
]

SAFETY_RATIO = 1.1
TARGET_RATIO = 0.9
MISSING_COMPONENTS_CHANCE = 5


def classify_category(comparison_ratio: float) -> str:
    if comparison_ratio >= SAFETY_RATIO:
        return "safety"
    if comparison_ratio >= TARGET_RATIO:
        return "target"
    return "reach"


def estimate_admission_chance(comparison_ratio: float) -> float:
    """Percent chance for a school with all required components present."""
    category = classify_category(comparison_ratio)
    if category == "safety":
        return min(85.0, 70 + (comparison_ratio - 1) * 50)
    if category == "target":
        return min(65.0, 40 + (comparison_ratio - TARGET_RATIO) * 125)
    return max(5.0, comparison_ratio * 30)


def has_required_components(school: School, components: ApplicationComponents) -> bool:
    return all(getattr(components, requirement) for requirement in school.requirements)


def _strengthen_areas(profile: StudentProfile, labels) -> List[str]:
    areas: List[str] = []
    if profile.gpa < 3.7:
        areas.append(labels["gpa"])
    if profile.sat_total < 1400 and profile.act_score < 30:
        areas.append(labels["tests"])
    if len(profile.extracurriculars) < 3:
        areas.append(labels["extracurriculars"])
    if len(profile.personal_statement) < 300:
        areas.append(labels["statement"])
    return areas


def _comparison_ratio(rigor_score: float, school: School) -> float:
    return safe_div(rigor_score, school.required_score)


def generate_recommendations(
    profile: StudentProfile,
    rigor_score: Optional[float] = None,
    components: Optional[ApplicationComponents] = None,
    *,
    locale: str = "en",
) -> List[SchoolRecommendation]:
    """Recommend every catalog school with a category and admission chance.

    ``rigor_score`` and ``components`` are derived from ``profile`` when omitted.
    """
    if rigor_score is None:
        rigor_score = calculate_profile_score(profile)
    if components is None:
        components = derive_application_components(profile)
    labels = get_i18n_resource("recommendations", locale)["strengthen"]

    recommendations: List[SchoolRecommendation] = []
    for school in SCHOOLS:
        ratio = _comparison_ratio(rigor_score, school)
        if has_required_components(school, components):
            category = classify_category(ratio)
            chance = estimate_admission_chance(ratio)
            areas = _strengthen_areas(profile, labels)
        else:
            category = "reach"
            chance = MISSING_COMPONENTS_CHANCE
            areas = [labels["components"]]
        recommendations.append(
            SchoolRecommendation(
                university_id=school.id,
                category=category,
                admission_chance=round_half_up(chance),
                strengthen_areas=areas,
                required_score=school.required_score,
                comparison_ratio=safe_round(ratio, 2),
            )
        )
    return recommendations


def search_schools(query: str, rigor_score: float) -> List[SchoolSearchResult]:
    """Case-insensitive name search; a blank query returns nothing."""
    needle = query.strip().lower()
    if not needle:
        return []
    results: List[SchoolSearchResult] = []
    for school in SCHOOLS:
        if needle not in school.name.lower():
            continue
        ratio = _comparison_ratio(rigor_score, school)
        results.append(
            SchoolSearchResult(
                id=school.id,
                name=school.name,
                required_score=school.required_score,
                comparison_ratio=safe_round(ratio, 2),
                category=classify_category(ratio),
                ranking=school.ranking,
                acceptance_rate=school.acceptance_rate,
            )
        )
    return results


def get_school(school_id: str) -> School:
    try:
        return SCHOOLS_BY_ID[school_id]
    except KeyError as exc:
        raise SchoolNotFoundError(
            CatalogErrorMessages.SCHOOL_NOT_FOUND.format(school_id=school_id),
            detail={"school_id": school_id},
        ) from exc
