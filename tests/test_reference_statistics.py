import pytest

from app.assessments.admissions import REFERENCE_PATH, get_reference_statistics, load_reference
from app.core.errors import ReferenceDataError


def _write(tmp_path, body: str):
    target = tmp_path / "reference.yaml"
    target.write_text(body, encoding="utf-8")
    return target


VALID_BODY = """
version: v2-test
sat_total: {q25: 1000, q50: 1100, q75: 1200}
act_composite: {q25: 20, q50: 23, q75: 26}
gpa_regression: {slope: 0.002, intercept: 2.5}
"""


def test_bundled_reference_matches_published_quartiles():
    reference = load_reference(REFERENCE_PATH)
    assert reference.version == "v1"
    assert reference.sat.as_dict() == {"q25": 1083.0, "q50": 1185.0, "q75": 1285.0}
    assert reference.act.as_dict() == {"q25": 22.2, "q50": 24.95, "q75": 27.7}
    assert reference.gpa_regression.slope == 0.002
    assert reference.gpa_regression.intercept == 2.5
    assert reference.gpa_regression.cap == 4.0


def test_default_reference_is_cached():
    assert get_reference_statistics() is get_reference_statistics()


def test_synthetic_gpa_quartiles_follow_sat_regression():
    gpa = load_reference().gpa
    assert gpa.q25 == pytest.approx(2.7166)
    assert gpa.q50 == pytest.approx(2.737)
    assert gpa.q75 == pytest.approx(2.757)


def test_custom_file_is_loaded_with_defaults(tmp_path):
    reference = load_reference(_write(tmp_path, VALID_BODY))
    assert reference.version == "v2-test"
    assert reference.gpa_regression.sat_divisor == 10.0
    assert reference.sat.percentile(1100) == pytest.approx(0.5, abs=1e-6)


def test_decreasing_quartiles_are_rejected(tmp_path):
    body = VALID_BODY.replace("{q25: 1000, q50: 1100, q75: 1200}", "{q25: 1200, q50: 1100, q75: 1000}")
    with pytest.raises(ReferenceDataError) as excinfo:
        load_reference(_write(tmp_path, body))
    assert excinfo.value.detail == {"q25": 1200.0, "q50": 1100.0, "q75": 1000.0}


def test_degenerate_quartiles_load(tmp_path):
    body = VALID_BODY.replace("{q25: 20, q50: 23, q75: 26}", "{q25: 23, q50: 23, q75: 23}")
    reference = load_reference(_write(tmp_path, body))
    assert reference.act.is_degenerate


def test_missing_section_raises_reference_error(tmp_path):
    body = "version: broken\nsat_total: {q25: 1, q50: 2, q75: 3}\n"
    with pytest.raises(ReferenceDataError):
        load_reference(_write(tmp_path, body))


def test_missing_file_raises_reference_error(tmp_path):
    with pytest.raises(ReferenceDataError):
        load_reference(tmp_path / "absent.yaml")


def test_non_mapping_file_raises_reference_error(tmp_path):
    with pytest.raises(ReferenceDataError):
        load_reference(_write(tmp_path, "- just\n- a list\n"))
