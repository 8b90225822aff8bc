from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

__all__ = [
    "CamelModel",
    "ExtracurricularActivity",
    "RecommendationLetter",
    "ApplicationComponents",
    "StudentProfile",
    "SchoolRecommendation",
    "SchoolSearchResult",
    "SchoolRead",
    "ProfileScoreResponse",
    "SchoolSearchRequest",
]

Category = Literal["safety", "target", "reach"]


class CamelModel(BaseModel):
    """Base model accepting and emitting the frontend's camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)


class ExtracurricularActivity(CamelModel):
    id: Optional[str] = None
    type: Literal[
        "Sports",
        "Arts",
        "Community Service",
        "Research",
        "Academic Clubs",
        "Leadership",
        "Work Experience",
        "Other",
    ] = "Other"
    name: str = ""
    description: str = ""
    grades: List[str] = Field(default_factory=list)
    recognition_level: Literal["Local", "Regional", "National", "International"] = "Local"
    hours_per_week: float = Field(default=0, ge=0)


class RecommendationLetter(CamelModel):
    id: Optional[str] = None
    source: Literal["Teacher", "Counselor", "Principal", "Coach", "Employer", "Other"] = "Other"
    depth: Optional[str] = None
    relevance: Optional[str] = None


class ApplicationComponents(CamelModel):
    secondary_school_gpa: bool = False
    secondary_school_rank: bool = False
    secondary_school_record: bool = False
    college_prep_program: bool = False
    recommendations: bool = False
    extracurricular_activities: bool = False
    essay: bool = False
    test_scores: bool = False


class StudentProfile(CamelModel):
    gpa: float = Field(default=0, ge=0)
    sat_ebrw: float = Field(default=0, ge=0, alias="satEBRW")
    sat_math: float = Field(default=0, ge=0)
    act_score: float = Field(default=0, ge=0)
    toefl_score: float = Field(default=0, ge=0)
    ap_courses: int = Field(default=0, ge=0)
    ib_score: float = Field(default=0, ge=0)
    intended_major: str = ""
    personal_statement: str = ""
    extracurriculars: List[ExtracurricularActivity] = Field(default_factory=list)
    recommendation_letters: List[RecommendationLetter] = Field(default_factory=list)
    legacy_status: bool = False
    citizenship: Literal["domestic", "international"] = "domestic"
    # Only fields explicitly sent by the caller override the derived checklist.
    application_components: Optional[ApplicationComponents] = None

    @property
    def sat_total(self) -> float:
        return self.sat_ebrw + self.sat_math


class SchoolRecommendation(CamelModel):
    university_id: str
    category: Category
    admission_chance: int
    strengthen_areas: List[str]
    required_score: float
    comparison_ratio: float


class SchoolSearchResult(CamelModel):
    id: str
    name: str
    required_score: float
    comparison_ratio: float
    category: Category
    ranking: int
    acceptance_rate: float


class SchoolRead(CamelModel):
    id: str
    name: str
    required_score: float
    ranking: int
    acceptance_rate: float
    requirements: List[str]


class ProfileScoreResponse(CamelModel):
    profile_score: int
    application_components: ApplicationComponents
    recommendations: List[SchoolRecommendation]


class SchoolSearchRequest(CamelModel):
    query: str
    profile_score: float = Field(ge=0, le=100)
