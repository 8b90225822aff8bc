from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from app.engine.norms.quartiles import estimate_percentile_from_quartiles


@dataclass(frozen=True, slots=True)
class QuartileStatistics:
    """Empirical 25th/50th/75th percentile values of a reference population."""

    q25: float
    q50: float
    q75: float

    @property
    def is_degenerate(self) -> bool:
        return self.q75 == self.q25

    def percentile(self, value: float) -> float:
        return estimate_percentile_from_quartiles(self.q25, self.q50, self.q75, value)

    def map(self, func) -> "QuartileStatistics":
        """Return a new triple with ``func`` applied to each boundary."""
        return QuartileStatistics(func(self.q25), func(self.q50), func(self.q75))

    def as_dict(self) -> dict[str, float]:
        return {"q25": self.q25, "q50": self.q50, "q75": self.q75}

    @classmethod
    def from_raw(cls, payload: Mapping[str, Any]) -> "QuartileStatistics":
        return cls(
            q25=float(payload["q25"]),
            q50=float(payload["q50"]),
            q75=float(payload["q75"]),
        )


@dataclass(frozen=True, slots=True)
class GpaRegression:
    """Linear SAT-average to school-GPA model, capped at the GPA scale maximum."""

    slope: float = 0.002
    intercept: float = 2.5
    sat_divisor: float = 10.0
    cap: float = 4.0

    def predict(self, sat_average: float) -> float:
        sat_scaled = sat_average / self.sat_divisor
        result = self.slope * sat_scaled + self.intercept
        return result if result <= self.cap else self.cap

    @classmethod
    def from_raw(cls, payload: Mapping[str, Any]) -> "GpaRegression":
        return cls(
            slope=float(payload["slope"]),
            intercept=float(payload["intercept"]),
            sat_divisor=float(payload.get("sat_divisor", 10.0)),
            cap=float(payload.get("cap", 4.0)),
        )


@dataclass(frozen=True, slots=True)
class ReferenceStatistics:
    """Versioned bundle of every population constant the estimators read."""

    version: str
    sat: QuartileStatistics
    act: QuartileStatistics
    gpa_regression: GpaRegression
    source: str | None = None

    @property
    def gpa(self) -> QuartileStatistics:
        """Synthetic GPA quartiles: the SAT quartiles mapped through the regression."""
        return self.sat.map(self.gpa_regression.predict)

    @classmethod
    def from_raw(cls, payload: Mapping[str, Any]) -> "ReferenceStatistics":
        return cls(
            version=str(payload["version"]),
            sat=QuartileStatistics.from_raw(payload["sat_total"]),
            act=QuartileStatistics.from_raw(payload["act_composite"]),
            gpa_regression=GpaRegression.from_raw(payload["gpa_regression"]),
            source=payload.get("source"),
        )
