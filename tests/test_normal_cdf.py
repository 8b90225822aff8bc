import pytest

from app.engine.norms.gaussian import erf_approx, normal_cdf

EPS = 1e-6


def test_cdf_at_zero_is_one_half():
    assert normal_cdf(0.0) == pytest.approx(0.5, abs=EPS)


@pytest.mark.parametrize("z", [0.1, 0.5, 1.0, 1.96, 2.5, 4.0, 10.0])
def test_cdf_is_symmetric(z):
    assert normal_cdf(z) + normal_cdf(-z) == pytest.approx(1.0, abs=EPS)


def test_cdf_is_monotonic_and_bounded():
    zs = [x / 4 for x in range(-40, 41)]
    values = [normal_cdf(z) for z in zs]
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert all(0.0 <= v <= 1.0 for v in values)


def test_cdf_matches_known_quantiles():
    assert normal_cdf(1.0) == pytest.approx(0.841345, abs=1e-5)
    assert normal_cdf(1.96) == pytest.approx(0.975002, abs=1e-5)
    assert normal_cdf(-1.6449) == pytest.approx(0.05, abs=1e-4)


def test_cdf_saturates_for_extreme_inputs():
    assert normal_cdf(50.0) == pytest.approx(1.0, abs=1e-12)
    assert normal_cdf(-50.0) == pytest.approx(0.0, abs=1e-12)


def test_erf_approx_ignores_sign():
    assert erf_approx(-0.7) == erf_approx(0.7)
