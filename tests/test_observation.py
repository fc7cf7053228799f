import numpy as np
import pytest

from survsim.core import observe


@pytest.mark.parametrize("rho", [0.0, 0.1, 0.5, 1.0])
def test_no_cases_means_no_reports(rng, rho):
    assert observe(0, rho, rng) == 0


def test_full_reporting_returns_cases(rng):
    cases = np.array([0, 1, 17, 5000])
    assert np.array_equal(observe(cases, 1.0, rng), cases)


def test_zero_reporting_returns_zero(rng):
    cases = np.array([0, 1, 17, 5000])
    assert (observe(cases, 0.0, rng) == 0).all()


def test_reports_never_exceed_cases(rng):
    cases = rng.integers(0, 1000, size=200)
    reports = observe(cases, 0.3, rng)
    assert reports.shape == cases.shape
    assert ((reports >= 0) & (reports <= cases)).all()


def test_seeded_draws_are_reproducible():
    cases = np.arange(50)
    first = observe(cases, 0.4, np.random.default_rng(7))
    second = observe(cases, 0.4, np.random.default_rng(7))
    assert np.array_equal(first, second)
