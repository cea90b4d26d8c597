import copy
import math

import numpy as np
import pytest

from weibull_quantile.transformers.accessor import quantile
from weibull_quantile.transformers.base import LengthMismatchError


def get_value(d):
    return d[1]


def test_evaluates_accessor_values(probabilities, reference, params):
    data = [[i, p] for i, p in enumerate(probabilities.tolist())]
    original = copy.deepcopy(data)

    actual = quantile(data, get_value, *params)

    assert actual is not data
    assert data == original
    np.testing.assert_allclose(actual, reference(probabilities), rtol=1e-12)


def test_empty_input_returns_new_empty_list(params):
    data = []
    actual = quantile(data, get_value, *params)
    assert actual == []
    assert actual is not data


def test_non_numeric_values_become_nan(params):
    data = [{"x": True}, {"x": None}, {"x": []}, {"x": {}}]
    actual = quantile(data, lambda d: d["x"], *params)
    assert all(math.isnan(v) for v in actual)


def test_accessor_errors_propagate(params):
    data = [{"x": 0.1}, {}]
    with pytest.raises(KeyError):
        quantile(data, lambda d: d["x"], *params)


def test_writes_into_supplied_output(params):
    out = np.zeros(2, dtype=np.float32)
    actual = quantile([(0, 0.5), (1, 0.0)], get_value, 1, 1, out=out)
    assert actual is out
    np.testing.assert_allclose(out, [math.log(2), 0.0], rtol=1e-6)


def test_supplied_output_length_must_match(params):
    with pytest.raises(LengthMismatchError):
        quantile([(0, 0.5)], get_value, *params, out=[None, None])
