from typing import List

from fastapi import APIRouter

from app.schemas.profile import SchoolRead, SchoolSearchRequest, SchoolSearchResult
from app.services.recommendations import get_school, search_schools

router = APIRouter(prefix="/schools", tags=["schools"])


@router.post("/search", response_model=List[SchoolSearchResult])
def schools_search(payload: SchoolSearchRequest) -> List[SchoolSearchResult]:
    return search_schools(payload.query, payload.profile_score)


@router.get("/{school_id}", response_model=SchoolRead)
def school_detail(school_id: str) -> SchoolRead:
    school = get_school(school_id)
    return SchoolRead(
        id=school.id,
        name=school.name,
        required_score=school.required_score,
        ranking=school.ranking,
        acceptance_rate=school.acceptance_rate,
        requirements=list(school.requirements),
    )
