import numpy as np
import pytest
from scipy.stats import weibull_min

LAMBDA = 2.5
K = 1.7


@pytest.fixture
def params():
    return LAMBDA, K


@pytest.fixture
def reference():
    """Weibull quantile from scipy; weibull_min's `c` is the shape, `scale` the scale."""
    def _reference(p, lam=LAMBDA, k=K):
        return weibull_min.ppf(np.asarray(p, dtype=np.float64), c=k, scale=lam)
    return _reference


@pytest.fixture
def probabilities():
    # includes both ends of [0, 1]
    return np.linspace(0.0, 1.0, 21)
