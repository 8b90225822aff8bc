from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from app.core.config import settings
from app.schemas.profile import CamelModel

__all__ = [
    "CompositeRequest",
    "CompositeResultRead",
    "CompetitivenessRead",
    "CompositeResponse",
    "DescribeRequest",
    "DescribeResponse",
    "QuickScoreRequest",
    "QuickScoreResponse",
]

Locale = Literal["en", "ko"]


class CompositeRequest(CamelModel):
    # Range checks on scores belong to the caller; the estimator extrapolates.
    gpa: float
    sat_score: Optional[float] = None
    act_score: Optional[float] = None
    weight_test: float = Field(default=settings.default_weight_test, ge=0)
    weight_gpa: float = Field(default=settings.default_weight_gpa, ge=0, alias="weightGPA")
    n_applicants: int = Field(default=settings.default_n_applicants, ge=1)
    locale: Locale = settings.default_locale


class CompositeResultRead(CamelModel):
    composite: float
    gpa_percentile: float
    test_percentile: float
    test_label: Literal["SAT", "ACT"]


class CompetitivenessRead(CamelModel):
    percentile: float
    percentile_pct: int
    band_phrase: str
    stronger_than: int
    weaker_than: int
    n_applicants: int


class CompositeResponse(CamelModel):
    result: CompositeResultRead
    description: CompetitivenessRead
    summary: str
    reference_version: str


class DescribeRequest(CamelModel):
    percentile: float = Field(ge=0, le=1)
    n_applicants: int = Field(default=settings.default_n_applicants, ge=1)
    locale: Locale = settings.default_locale


class DescribeResponse(CamelModel):
    description: CompetitivenessRead
    summary: str


class QuickScoreRequest(CamelModel):
    gpa: Optional[float] = Field(default=None, ge=0)
    sat_ebrw: Optional[float] = Field(default=None, ge=0, alias="satEBRW")
    sat_math: Optional[float] = Field(default=None, ge=0)


class QuickScoreResponse(CamelModel):
    score: Optional[int]
