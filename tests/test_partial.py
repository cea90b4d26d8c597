import math

import numpy as np

from weibull_quantile.transformers.number import quantile
from weibull_quantile.transformers.partial import partial


def test_returns_a_function(params):
    assert callable(partial(*params))


def test_evaluates_the_quantile_function(probabilities, reference, params):
    fcn = partial(*params)
    actual = [fcn(p) for p in probabilities]
    np.testing.assert_allclose(actual, reference(probabilities), rtol=1e-12)


def test_same_as_scalar_quantile(probabilities, params):
    lam, k = params
    fcn = partial(lam, k)
    for p in probabilities:
        assert fcn(p) == quantile(p, lam, k)


def test_nan_for_invalid_probabilities(params):
    fcn = partial(*params)
    assert math.isnan(fcn(float("nan")))
    assert math.isnan(fcn(1.1))
    assert math.isnan(fcn(-0.1))


def test_binding_zero_shape_does_not_raise():
    fcn = partial(1, 0)
    assert fcn(0.5) == 0
    assert fcn(0.9) == math.inf
