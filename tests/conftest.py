import pytest
from fastapi.testclient import TestClient

from app.assessments.admissions.types import GpaRegression, QuartileStatistics, ReferenceStatistics
from app.core.metrics import metrics_registry
from app.i18n import clear_i18n_cache
from app.main import app


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture(autouse=True)
def _reset_process_state():
    metrics_registry.reset()
    clear_i18n_cache()
    yield


@pytest.fixture()
def synthetic_reference():
    return ReferenceStatistics(
        version="test",
        sat=QuartileStatistics(q25=100.0, q50=200.0, q75=300.0),
        act=QuartileStatistics(q25=10.0, q50=20.0, q75=30.0),
        gpa_regression=GpaRegression(),
    )
