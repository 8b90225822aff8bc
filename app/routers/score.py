from fastapi import APIRouter

from app.assessments.admissions import get_reference_statistics
from app.schemas.profile import ProfileScoreResponse, StudentProfile
from app.schemas.score import (
    CompetitivenessRead,
    CompositeRequest,
    CompositeResponse,
    CompositeResultRead,
    DescribeRequest,
    DescribeResponse,
    QuickScoreRequest,
    QuickScoreResponse,
)
from app.services.competitiveness import describe_competitiveness, summarize_competitiveness
from app.services.composite import estimate_composite_percentile
from app.services.profile_score import (
    calculate_profile_score,
    derive_application_components,
    quick_profile_score,
)
from app.services.recommendations import generate_recommendations

router = APIRouter(prefix="/score", tags=["score"])


@router.post("/composite", response_model=CompositeResponse)
def score_composite(payload: CompositeRequest) -> CompositeResponse:
    reference = get_reference_statistics()
    result = estimate_composite_percentile(
        payload.gpa,
        sat_score=payload.sat_score,
        act_score=payload.act_score,
        weight_test=payload.weight_test,
        weight_gpa=payload.weight_gpa,
        reference=reference,
    )
    description = describe_competitiveness(
        result.composite, payload.n_applicants, locale=payload.locale
    )
    return CompositeResponse(
        result=CompositeResultRead.model_validate(result, from_attributes=True),
        description=CompetitivenessRead.model_validate(description, from_attributes=True),
        summary=summarize_competitiveness(description, locale=payload.locale),
        reference_version=reference.version,
    )


@router.post("/describe", response_model=DescribeResponse)
def score_describe(payload: DescribeRequest) -> DescribeResponse:
    description = describe_competitiveness(
        payload.percentile, payload.n_applicants, locale=payload.locale
    )
    return DescribeResponse(
        description=CompetitivenessRead.model_validate(description, from_attributes=True),
        summary=summarize_competitiveness(description, locale=payload.locale),
    )


@router.post("/quick", response_model=QuickScoreResponse)
def score_quick(payload: QuickScoreRequest) -> QuickScoreResponse:
    return QuickScoreResponse(
        score=quick_profile_score(payload.gpa, payload.sat_ebrw, payload.sat_math)
    )


@router.post("/profile", response_model=ProfileScoreResponse)
def score_profile(payload: StudentProfile) -> ProfileScoreResponse:
    profile_score = calculate_profile_score(payload)
    components = derive_application_components(payload)
    return ProfileScoreResponse(
        profile_score=profile_score,
        application_components=components,
        recommendations=generate_recommendations(payload, profile_score, components),
    )
