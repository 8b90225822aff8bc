from app.schemas.profile import StudentProfile
from app.services.profile_score import (
    calculate_profile_score,
    derive_application_components,
    quick_profile_score,
)


def _letter(depth=None, relevance=None):
    return {"source": "Teacher", "depth": depth, "relevance": relevance}


def test_empty_domestic_profile_gets_english_points_only():
    assert calculate_profile_score(StudentProfile()) == 3


def test_international_without_toefl_gets_nothing():
    assert calculate_profile_score(StudentProfile(citizenship="international")) == 0


def test_strong_profile_scores_near_top():
    profile = StudentProfile.model_validate(
        {
            "gpa": 3.95,
            "satEBRW": 780,
            "satMath": 760,
            "apCourses": 8,
            "personalStatement": "x" * 600,
            "extracurriculars": [
                {"recognitionLevel": "International", "hoursPerWeek": 15},
                {"recognitionLevel": "National", "hoursPerWeek": 10},
                {"recognitionLevel": "Regional", "hoursPerWeek": 5},
                {"recognitionLevel": "Local", "hoursPerWeek": 2},
            ],
            "recommendationLetters": [_letter("knows very well", "very relevant")] * 3,
        }
    )
    # 30 + 25 + 10 + 10.5 + 10 + 5 (capped) + 3 = 93.5
    assert calculate_profile_score(profile) == 94


def test_international_act_profile():
    profile = StudentProfile(citizenship="international", toefl_score=95, gpa=3.2, act_score=29)
    # GPA 16 + ACT 19 + TOEFL 2
    assert calculate_profile_score(profile) == 37


def test_below_threshold_scores_scale_linearly():
    profile = StudentProfile(gpa=2.0, sat_ebrw=450, sat_math=450)
    # 4 + 3.9375 + 3 = 10.9375
    assert calculate_profile_score(profile) == 11


def test_sat_requires_both_sections_before_act_fallback():
    profile = StudentProfile(gpa=3.0, sat_ebrw=700, act_score=28)
    # GPA 16 + ACT 19 + domestic 3
    assert calculate_profile_score(profile) == 38


def test_ib_rigor_and_letters():
    profile = StudentProfile.model_validate(
        {
            "gpa": 3.0,
            "ibScore": 36,
            "recommendationLetters": [_letter("knows well", "somewhat relevant")],
            "legacyStatus": True,
        }
    )
    # GPA 16 + IB 8 + letters 1.2 + legacy 2 + domestic 3 = 30.2
    assert calculate_profile_score(profile) == 30


def test_strong_gpa_implies_rigor_without_ap_or_ib():
    assert calculate_profile_score(StudentProfile(gpa=3.5)) == 24 + 5 + 3


def test_score_is_capped_at_100():
    profile = StudentProfile.model_validate(
        {
            "gpa": 4.0,
            "satEBRW": 800,
            "satMath": 800,
            "apCourses": 10,
            "personalStatement": "y" * 700,
            "extracurriculars": [{"recognitionLevel": "International", "hoursPerWeek": 20}] * 5,
            "recommendationLetters": [_letter("knows very well", "very relevant")] * 4,
            "legacyStatus": True,
        }
    )
    assert calculate_profile_score(profile) == 100


def test_quick_score():
    assert quick_profile_score(3.8, 730, 720) == 92
    assert quick_profile_score(4.0, 800, 800) == 100
    assert quick_profile_score(3.0, 600.9, 600) == 75


def test_quick_score_requires_all_inputs():
    assert quick_profile_score(None, 700, 700) is None
    assert quick_profile_score(3.5, None, 700) is None
    assert quick_profile_score(3.5, 700, None) is None


def test_components_derived_from_profile():
    components = derive_application_components(StudentProfile(gpa=3.5, sat_ebrw=700, sat_math=700))
    assert components.secondary_school_gpa
    assert components.test_scores
    assert not components.essay
    assert not components.secondary_school_record


def test_explicit_components_override_derived_values():
    profile = StudentProfile.model_validate(
        {
            "gpa": 3.5,
            "actScore": 30,
            "applicationComponents": {"secondarySchoolRecord": True, "testScores": False},
        }
    )
    components = derive_application_components(profile)
    assert components.secondary_school_record
    assert not components.test_scores
    assert components.secondary_school_gpa
