"""Reference school catalog used for safety/target/reach recommendations.

``required_score`` is the profile rigor score (0-100) at which an applicant is
considered an even match. ``requirements`` lists the application components a
school insists on before any chance above the floor is reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True, slots=True)
class School:
    id: str
    name: str
    required_score: float
    ranking: int
    acceptance_rate: float
    requirements: Tuple[str, ...]


_FULL = (
    "secondary_school_gpa",
    "secondary_school_record",
    "recommendations",
    "essay",
    "test_scores",
)
_RECORD_AND_TESTS = ("secondary_school_gpa", "secondary_school_record", "test_scores")

SCHOOLS: Tuple[School, ...] = (
    School("1", "Harvard University", 95, 2, 5.4, _FULL),
    School("2", "Stanford University", 94, 3, 4.8, _FULL),
    School("3", "MIT", 93, 4, 7.3, _FULL),
    School("4", "Yale University", 92, 5, 6.9, _RECORD_AND_TESTS),
    School("5", "Princeton University", 91, 1, 5.8, _FULL),
    School("6", "UC Berkeley", 78, 22, 17.5, ("secondary_school_gpa", "secondary_school_record")),
    School(
        "7",
        "NYU",
        72,
        28,
        21.1,
        ("secondary_school_gpa", "secondary_school_record", "recommendations", "test_scores"),
    ),
    School("8", "Penn State", 65, 63, 76.0, _RECORD_AND_TESTS),
    School("9", "University of Michigan", 80, 21, 26.0, _FULL),
    School("10", "UCLA", 82, 20, 14.3, _FULL),
)

SCHOOLS_BY_ID: Mapping[str, School] = MappingProxyType({school.id: school for school in SCHOOLS})
