from __future__ import annotations

from app.core.formatting import format_count
from app.core.numeric import round_half_up
from app.engine.norms.value_objects import CompetitivenessDescription
from app.i18n import get_i18n_resource

__all__ = [
    "DEFAULT_N_APPLICANTS",
    "describe_competitiveness",
    "describe_competitiveness_korean",
    "summarize_competitiveness",
]

DEFAULT_N_APPLICANTS = 10_000


def _band_phrase(percentile_pct: float, locale: str) -> str:
    phrases = get_i18n_resource("competitiveness", locale)
    # Both bands report the complement of the percentile, so the 30th
    # percentile reads "Bottom 70%". Kept for parity with published results.
    complement = round_half_up(100 - percentile_pct)
    template = phrases["band_top"] if percentile_pct >= 50 else phrases["band_bottom"]
    return template.format(pct=complement)


def describe_competitiveness(
    percentile: float,
    n_applicants: int = DEFAULT_N_APPLICANTS,
    *,
    locale: str = "en",
) -> CompetitivenessDescription:
    """Turn a fractional percentile into band and head-count phrasing.

    ``stronger_than`` is rounded to the nearest ten applicants.
    """

    percentile_pct = percentile * 100
    stronger_than = round_half_up(percentile * n_applicants / 10) * 10
    return CompetitivenessDescription(
        percentile=percentile,
        percentile_pct=round_half_up(percentile_pct),
        band_phrase=_band_phrase(percentile_pct, locale),
        stronger_than=stronger_than,
        weaker_than=n_applicants - stronger_than,
        n_applicants=n_applicants,
    )


def describe_competitiveness_korean(
    percentile: float,
    n_applicants: int = DEFAULT_N_APPLICANTS,
) -> CompetitivenessDescription:
    return describe_competitiveness(percentile, n_applicants, locale="ko")


def summarize_competitiveness(description: CompetitivenessDescription, *, locale: str = "en") -> str:
    """Render the "stronger than N of M applicants" sentence."""

    template = get_i18n_resource("competitiveness", locale)["stronger_than"]
    return template.format(
        stronger=format_count(description.stronger_than),
        total=format_count(description.n_applicants),
    )
