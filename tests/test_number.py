import math

import numpy as np
import pytest

from weibull_quantile.transformers.number import quantile, quantile_array


def test_invalid_probabilities_are_nan():
    for p in [-0.1, 1.1, -math.inf, math.inf, float("nan")]:
        for lam, k in [(1.0, 1.0), (2.5, 1.7), (0.3, -2.0)]:
            assert math.isnan(quantile(p, lam, k))


def test_standard_exponential():
    assert quantile(0, 1, 1) == 0
    assert quantile(0.5, 1, 1) == pytest.approx(0.6931471805599453, rel=1e-12)
    assert quantile(1, 1, 1) == math.inf


def test_matches_reference(probabilities, reference, params):
    lam, k = params
    actual = [quantile(p, lam, k) for p in probabilities]
    np.testing.assert_allclose(actual, reference(probabilities), rtol=1e-12)


def test_monotone_in_p(probabilities):
    values = np.array([quantile(p, 2.0, 0.5) for p in probabilities])
    assert np.all(np.diff(values) >= 0)


def test_parameters_are_not_validated():
    # IEEE propagation instead of exceptions
    assert quantile(0.5, 0, 1) == 0
    assert quantile(0.5, 1, 0) == 0
    assert quantile(0.9, 1, 0) == math.inf
    assert quantile(0, 1, -1) == math.inf
    assert quantile(0.5, 1, -1) == pytest.approx(1 / math.log(2), rel=1e-12)
    assert math.isnan(quantile(1, 0, 1))
    assert math.isnan(quantile(0.5, 1, float("nan")))


def test_quantile_array_agrees_with_scalar(params):
    lam, k = params
    p = np.array([-1.0, 0.0, 0.25, 0.5, 1.0, np.nan, 2.0])
    expected = [quantile(v, lam, k) for v in p]
    np.testing.assert_allclose(quantile_array(p, lam, k), expected, rtol=1e-12)


def test_quantile_array_keeps_shape():
    p = np.full((3, 4), 0.5)
    assert quantile_array(p, 1, 1).shape == (3, 4)
