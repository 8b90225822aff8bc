from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

TestLabel = Literal["SAT", "ACT"]


@dataclass(frozen=True, slots=True)
class CompositeResult:
    """Outcome of one composite scoring call; every field is a fraction in [0, 1]."""

    composite: float
    gpa_percentile: float
    test_percentile: float
    test_label: TestLabel

    def as_dict(self) -> dict[str, Any]:
        return {
            "composite": self.composite,
            "gpaPercentile": self.gpa_percentile,
            "testPercentile": self.test_percentile,
            "testLabel": self.test_label,
        }


@dataclass(frozen=True, slots=True)
class CompetitivenessDescription:
    """Presentation-ready view of a percentile against an applicant pool."""

    percentile: float
    percentile_pct: int
    band_phrase: str
    stronger_than: int
    weaker_than: int
    n_applicants: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "percentile": self.percentile,
            "percentilePct": self.percentile_pct,
            "bandPhrase": self.band_phrase,
            "strongerThan": self.stronger_than,
            "weakerThan": self.weaker_than,
            "nApplicants": self.n_applicants,
        }
