"""User-facing English error messages raised by the scoring services.

The wire contract uses camelCase field names, so the messages name the
request fields (``satScore``) rather than the Python parameters.
"""


class ScoringErrorMessages:
    """Composite estimator input errors."""

    BOTH_TEST_SCORES: str = "Provide only one of satScore or actScore, not both."
    NO_TEST_SCORE: str = "You must provide either satScore or actScore."
    ZERO_TOTAL_WEIGHT: str = "weightTest and weightGPA must not sum to zero."
    NON_FINITE_WEIGHT: str = "weightTest and weightGPA must be finite numbers."


class CatalogErrorMessages:
    """School catalog lookups."""

    SCHOOL_NOT_FOUND: str = "School {school_id} not found"
