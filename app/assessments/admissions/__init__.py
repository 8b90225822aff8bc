from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import yaml

from app.assessments.admissions.types import QuartileStatistics, ReferenceStatistics
from app.core.config import settings
from app.core.errors import ReferenceDataError
from app.core.logging import get_logger

REFERENCE_PATH = Path(__file__).with_name("reference.yaml")

logger = get_logger(__name__, component="reference")


def _check_ordering(name: str, stats: QuartileStatistics) -> None:
    if not stats.q25 <= stats.q50 <= stats.q75:
        raise ReferenceDataError(
            f"Quartiles for '{name}' must be non-decreasing (q25 <= q50 <= q75)",
            detail=stats.as_dict(),
        )
    if stats.is_degenerate:
        logger.warning(
            "reference_degenerate_iqr",
            extra={"structured_data": {"scale": name, **stats.as_dict()}},
        )


def load_reference(path: Path | None = None) -> ReferenceStatistics:
    """Parse and validate a reference statistics YAML file."""

    target = Path(path) if path is not None else REFERENCE_PATH
    try:
        with target.open("r", encoding="utf-8") as fh:
            raw: Dict[str, Any] = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ReferenceDataError(f"Reference statistics file not found: {target}") from exc
    except yaml.YAMLError as exc:
        raise ReferenceDataError(f"Reference statistics file is not valid YAML: {target}") from exc

    if not isinstance(raw, dict):
        raise ReferenceDataError(f"Reference statistics file must contain a mapping: {target}")
    try:
        reference = ReferenceStatistics.from_raw(raw)
    except (KeyError, TypeError, ValueError) as exc:
        raise ReferenceDataError(
            f"Reference statistics file is incomplete: {target}", detail=str(exc)
        ) from exc

    _check_ordering("sat_total", reference.sat)
    _check_ordering("act_composite", reference.act)
    logger.info(
        "reference_loaded",
        extra={"structured_data": {"version": reference.version, "path": str(target)}},
    )
    return reference


@lru_cache()
def get_reference_statistics() -> ReferenceStatistics:
    """Process-wide reference statistics, honouring the configured override path."""

    return load_reference(settings.reference_statistics_path)


__all__ = [
    "REFERENCE_PATH",
    "load_reference",
    "get_reference_statistics",
]
