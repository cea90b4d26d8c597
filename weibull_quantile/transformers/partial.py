"""
Partial application of the Weibull quantile function
"""
from __future__ import annotations

from typing import Callable

import numpy as np

from weibull_quantile.transformers.number import NAN


def partial(lam: float, k: float) -> Callable[[float], float]:
    """Bind scale `lam` and shape `k`; return a one-argument quantile function."""
    with np.errstate(all="ignore"):
        exponent = np.float64(1.0) / k

    def quantile(p: float) -> float:
        if p != p or p < 0 or p > 1:
            return NAN
        with np.errstate(all="ignore"):
            return float(lam * np.power(-np.log1p(-np.float64(p)), exponent))

    return quantile
