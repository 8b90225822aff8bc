"""Holistic 0-100 profile rigor score.

Academic components carry 65 points (GPA 30, tests 25, course rigor 10) and
non-academic components 35 (activities 15, personal statement 10,
recommendation letters 5, legacy 2, English proficiency 3).
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from app.core.metrics import count_calls
from app.core.numeric import clamp, round_half_up
from app.schemas.profile import ApplicationComponents, StudentProfile

__all__ = [
    "calculate_profile_score",
    "quick_profile_score",
    "derive_application_components",
]

# (minimum value, points) pairs, highest tier first.
Tiers = Sequence[Tuple[float, float]]

GPA_TIERS: Tiers = ((3.9, 30), (3.7, 27), (3.5, 24), (3.3, 20), (3.0, 16), (2.7, 12), (2.5, 8))
SAT_TIERS: Tiers = ((1500, 25), (1400, 22), (1300, 19), (1200, 15), (1100, 11), (1000, 7))
ACT_TIERS: Tiers = ((34, 25), (31, 22), (28, 19), (25, 15), (22, 11), (19, 7))
TOEFL_TIERS: Tiers = ((110, 3), (100, 2.5), (90, 2), (80, 1.5))
STATEMENT_TIERS: Tiers = ((500, 10), (300, 7), (150, 4), (1, 2))
HOURS_TIERS: Tiers = ((15, 1.5), (10, 1), (5, 0.5))

RECOGNITION_POINTS = {"International": 3.0, "National": 2.5, "Regional": 1.5, "Local": 0.5}
LETTER_DEPTH_POINTS = {"knows very well": 0.8, "knows well": 0.5, "knows somewhat": 0.2}
LETTER_RELEVANCE_POINTS = {"very relevant": 0.5, "somewhat relevant": 0.2}

EXTRACURRICULAR_CAP = 15.0
LETTER_CAP = 5.0
RIGOR_CAP = 10.0
LEGACY_POINTS = 2.0
DOMESTIC_ENGLISH_POINTS = 3.0


def _tiered(value: float, tiers: Tiers, default: float = 0.0) -> float:
    for minimum, points in tiers:
        if value >= minimum:
            return points
    return default


def _gpa_points(gpa: float) -> float:
    if not gpa:
        return 0.0
    return _tiered(gpa, GPA_TIERS, default=(gpa / 4.0) * 8)


def _test_points(profile: StudentProfile) -> float:
    if profile.sat_ebrw and profile.sat_math:
        total = profile.sat_total
        return _tiered(total, SAT_TIERS, default=(total / 1600) * 7)
    if profile.act_score:
        act = profile.act_score
        return _tiered(act, ACT_TIERS, default=(act / 36) * 7)
    return 0.0


def _rigor_points(profile: StudentProfile) -> float:
    if profile.ap_courses > 0:
        return min(profile.ap_courses * 1.5, RIGOR_CAP)
    if profile.ib_score > 0:
        return (profile.ib_score / 45) * 10
    # No AP/IB data collected: a strong GPA implies some course rigor.
    if profile.gpa >= 3.5:
        return 5.0
    return 0.0


def _extracurricular_points(profile: StudentProfile) -> float:
    total = 0.0
    for activity in profile.extracurriculars:
        total += RECOGNITION_POINTS.get(activity.recognition_level, 0.0)
        total += _tiered(activity.hours_per_week, HOURS_TIERS)
    return min(total, EXTRACURRICULAR_CAP)


def _letter_points(profile: StudentProfile) -> float:
    letters = profile.recommendation_letters
    if not letters:
        return 0.0
    if len(letters) >= 3:
        points = 2.0
    elif len(letters) == 2:
        points = 1.5
    else:
        points = 0.5
    for letter in letters:
        points += LETTER_DEPTH_POINTS.get(letter.depth or "", 0.0)
        points += LETTER_RELEVANCE_POINTS.get(letter.relevance or "", 0.0)
    return min(points, LETTER_CAP)


def _english_points(profile: StudentProfile) -> float:
    if profile.citizenship == "international" and profile.toefl_score:
        toefl = profile.toefl_score
        return _tiered(toefl, TOEFL_TIERS, default=(toefl / 120) * 1.5)
    if profile.citizenship == "domestic":
        return DOMESTIC_ENGLISH_POINTS
    return 0.0


@count_calls("profile_score.requests")
def calculate_profile_score(profile: StudentProfile) -> int:
    score = (
        _gpa_points(profile.gpa)
        + _test_points(profile)
        + _rigor_points(profile)
        + _extracurricular_points(profile)
        + _tiered(len(profile.personal_statement), STATEMENT_TIERS)
        + _letter_points(profile)
        + (LEGACY_POINTS if profile.legacy_status else 0.0)
        + _english_points(profile)
    )
    return round_half_up(clamp(score, 0.0, 100.0))


def quick_profile_score(
    gpa: Optional[float],
    sat_ebrw: Optional[float],
    sat_math: Optional[float],
) -> Optional[int]:
    """Landing-page estimate from GPA (40 points) and SAT total (60 points).

    Returns ``None`` until all three inputs are present.
    """
    if gpa is None or sat_ebrw is None or sat_math is None:
        return None
    gpa_score = (gpa / 4.0) * 40
    sat_score = ((int(sat_ebrw) + int(sat_math)) / 1600) * 60
    return round_half_up(min(gpa_score + sat_score, 100))


def derive_application_components(profile: StudentProfile) -> ApplicationComponents:
    """Infer the application checklist from profile data.

    School rank, school record and college-prep enrolment cannot be inferred
    and stay False unless the caller sets them explicitly.
    """
    derived = {
        "secondary_school_gpa": profile.gpa > 0,
        "secondary_school_rank": False,
        "secondary_school_record": False,
        "college_prep_program": False,
        "recommendations": len(profile.recommendation_letters) > 0,
        "extracurricular_activities": len(profile.extracurriculars) > 0,
        "essay": len(profile.personal_statement) > 0,
        "test_scores": (profile.sat_ebrw > 0 and profile.sat_math > 0)
        or profile.act_score > 0
        or profile.toefl_score > 0,
    }
    explicit = profile.application_components
    if explicit is not None:
        for name in explicit.model_fields_set:
            derived[name] = getattr(explicit, name)
    return ApplicationComponents(**derived)
