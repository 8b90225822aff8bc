"""Composite admissions-competitiveness estimator.

SAT and ACT percentiles come straight from the reference quartiles. GPA has
no standardized population table, so its quartiles are synthesized by pushing
the SAT quartile boundaries through the SAT-to-GPA regression configured in
``reference.yaml``. This proxy conflates two measurement scales and should be
replaced once an empirical GPA distribution is available.
"""

from __future__ import annotations

import math
from typing import Optional

from app.assessments.admissions import get_reference_statistics
from app.assessments.admissions.types import GpaRegression, ReferenceStatistics
from app.core.errors import InvalidInputError
from app.core.logging import get_logger
from app.core.metrics import count_calls, timeit
from app.engine.norms.value_objects import CompositeResult, TestLabel
from app.i18n.messages import ScoringErrorMessages

__all__ = [
    "estimate_sat_percentile",
    "estimate_act_percentile",
    "estimate_average_school_gpa",
    "estimate_gpa_percentile",
    "estimate_composite_percentile",
]

logger = get_logger(__name__, component="composite")


def _resolve(reference: Optional[ReferenceStatistics]) -> ReferenceStatistics:
    return reference if reference is not None else get_reference_statistics()


def estimate_sat_percentile(total_score: float, reference: Optional[ReferenceStatistics] = None) -> float:
    return _resolve(reference).sat.percentile(total_score)


def estimate_act_percentile(total_score: float, reference: Optional[ReferenceStatistics] = None) -> float:
    return _resolve(reference).act.percentile(total_score)


def estimate_average_school_gpa(sat_average: float, regression: Optional[GpaRegression] = None) -> float:
    """Predicted average GPA of a school whose SAT average is ``sat_average`` (capped at 4.0)."""

    model = regression if regression is not None else get_reference_statistics().gpa_regression
    return model.predict(sat_average)


def estimate_gpa_percentile(gpa: float, reference: Optional[ReferenceStatistics] = None) -> float:
    return _resolve(reference).gpa.percentile(gpa)


@count_calls("composite.requests")
@timeit("composite.estimate")
def estimate_composite_percentile(
    gpa: float,
    sat_score: Optional[float] = None,
    act_score: Optional[float] = None,
    weight_test: float = 0.5,
    weight_gpa: float = 0.5,
    *,
    reference: Optional[ReferenceStatistics] = None,
) -> CompositeResult:
    """Blend one test percentile with the GPA percentile into a composite.

    Exactly one of ``sat_score`` / ``act_score`` must be given. Weights are
    normalized to sum to one.

    Raises:
        InvalidInputError: both or neither test scores supplied, a weight is
            not finite, or the weights sum to zero.
    """
    using_sat = sat_score is not None
    using_act = act_score is not None
    if using_sat and using_act:
        raise InvalidInputError(ScoringErrorMessages.BOTH_TEST_SCORES)
    if not using_sat and not using_act:
        raise InvalidInputError(ScoringErrorMessages.NO_TEST_SCORE)

    if not (math.isfinite(weight_test) and math.isfinite(weight_gpa)):
        raise InvalidInputError(ScoringErrorMessages.NON_FINITE_WEIGHT)
    # Scale by the larger magnitude first so the sum cannot overflow.
    scale = max(abs(weight_test), abs(weight_gpa)) or 1.0
    scaled_test, scaled_gpa = weight_test / scale, weight_gpa / scale
    total_weight = scaled_test + scaled_gpa
    if total_weight == 0:
        raise InvalidInputError(
            ScoringErrorMessages.ZERO_TOTAL_WEIGHT,
            detail={"weightTest": weight_test, "weightGPA": weight_gpa},
        )

    stats = _resolve(reference)
    test_label: TestLabel
    if using_sat:
        test_percentile = estimate_sat_percentile(sat_score, stats)
        test_label = "SAT"
    else:
        test_percentile = estimate_act_percentile(act_score, stats)
        test_label = "ACT"

    gpa_percentile = estimate_gpa_percentile(gpa, stats)
    composite = (scaled_test / total_weight) * test_percentile + (scaled_gpa / total_weight) * gpa_percentile

    logger.debug(
        "composite_estimated",
        extra={
            "structured_data": {
                "test_label": test_label,
                "reference_version": stats.version,
                "composite": composite,
            }
        },
    )
    return CompositeResult(
        composite=composite,
        gpa_percentile=gpa_percentile,
        test_percentile=test_percentile,
        test_label=test_label,
    )
