"""Percentile estimation from published 25th/50th/75th percentile statistics.

The reference population is modelled as Gaussian: the median is the mean and
the interquartile range spans ``IQR_NORMAL_SPAN`` standard deviations.
"""

from __future__ import annotations

import logging

from app.engine.norms.gaussian import normal_cdf

__all__ = [
    "IQR_NORMAL_SPAN",
    "DEGENERATE_STDEV",
    "stdev_from_iqr",
    "estimate_percentile_from_quartiles",
]

logger = logging.getLogger(__name__)

# Width of the IQR in standard deviations for a true normal distribution.
IQR_NORMAL_SPAN = 1.349
# Used when q75 == q25; any value off the median then saturates toward 0 or 1.
DEGENERATE_STDEV = 1e-6


def stdev_from_iqr(q25: float, q75: float) -> float:
    iqr = q75 - q25
    if iqr == 0:
        logger.debug(
            "degenerate_iqr_fallback",
            extra={"structured_data": {"q25": q25, "q75": q75, "stdev": DEGENERATE_STDEV}},
        )
        return DEGENERATE_STDEV
    return iqr / IQR_NORMAL_SPAN


def estimate_percentile_from_quartiles(q25: float, q50: float, q75: float, value: float) -> float:
    """Estimate the fraction of the population at or below ``value``.

    No range checks are applied to ``value``; extreme inputs saturate near
    0 or 1.
    """

    stdev = stdev_from_iqr(q25, q75)
    z = (value - q50) / stdev
    return normal_cdf(z)
