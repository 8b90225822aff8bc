import pytest

from app.services.competitiveness import (
    describe_competitiveness,
    describe_competitiveness_korean,
    summarize_competitiveness,
)


def test_top_band_for_high_percentile():
    description = describe_competitiveness(0.95, 10000)
    assert description.percentile_pct == 95
    assert description.band_phrase == "Top 5%"
    assert description.stronger_than == 9500
    assert description.weaker_than == 500
    assert description.n_applicants == 10000


def test_bottom_band_reports_complement():
    description = describe_competitiveness(0.30, 10000)
    assert description.percentile_pct == 30
    assert description.band_phrase == "Bottom 70%"
    assert description.stronger_than == 3000


def test_median_uses_top_band():
    assert describe_competitiveness(0.5).band_phrase == "Top 50%"


def test_half_values_round_up():
    description = describe_competitiveness(0.125, 100)
    assert description.percentile_pct == 13
    assert description.band_phrase == "Bottom 88%"
    assert description.stronger_than == 10
    assert description.weaker_than == 90


def test_stronger_than_rounds_to_nearest_ten():
    description = describe_competitiveness(0.123, 500)
    assert description.stronger_than == 60
    assert description.weaker_than == 440
    assert description.stronger_than + description.weaker_than == description.n_applicants


def test_korean_phrasing():
    assert describe_competitiveness_korean(0.95).band_phrase == "상위 5%"
    assert describe_competitiveness_korean(0.30).band_phrase == "하위 70%"
    english = describe_competitiveness(0.42)
    korean = describe_competitiveness_korean(0.42)
    assert (korean.percentile_pct, korean.stronger_than) == (english.percentile_pct, english.stronger_than)


def test_unknown_locale_falls_back_to_english():
    assert describe_competitiveness(0.95, locale="fr").band_phrase == "Top 5%"


@pytest.mark.parametrize(
    "locale,expected",
    [
        ("en", "Stronger than 9,500 of 10,000 applicants"),
        ("ko", "지원자 10,000명 중 9,500명보다 경쟁력이 높습니다"),
    ],
)
def test_summary_sentence(locale, expected):
    description = describe_competitiveness(0.95)
    assert summarize_competitiveness(description, locale=locale) == expected


def test_description_serializes_with_camel_case_keys():
    payload = describe_competitiveness(0.95).as_dict()
    assert payload["percentilePct"] == 95
    assert payload["bandPhrase"] == "Top 5%"
    assert payload["nApplicants"] == 10000
