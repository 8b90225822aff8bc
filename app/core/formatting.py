"""Formatting helpers for consistent rounding and display of counts."""

from __future__ import annotations

from typing import Optional

from app.core.numeric import safe_round

__all__ = ["format_decimal", "format_count"]


def format_decimal(value: Optional[float], *, decimals: int = 2) -> Optional[float]:
    """Safely round a nullable float value using the shared numeric helpers."""

    if value is None:
        return None
    return safe_round(value, decimals=decimals)


def format_count(value: int) -> str:
    """Render an applicant count with thousands separators (``9500`` -> ``"9,500"``)."""

    return f"{int(value):,}"
