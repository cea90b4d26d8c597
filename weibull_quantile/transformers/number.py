"""
Weibull quantile function for a single probability
"""
from __future__ import annotations

import numpy as np

NAN = float("nan")


def quantile(p: float, lam: float, k: float) -> float:
    """Evaluate the Weibull quantile function with scale `lam` and shape `k` at `p`.

    Probabilities outside [0, 1] (and NaN) give NaN. Parameters are not
    checked: k=0 or negative values follow IEEE arithmetic instead of raising.
    """
    if p != p or p < 0 or p > 1:
        return NAN
    with np.errstate(all="ignore"):
        return float(lam * np.power(-np.log1p(-np.float64(p)), np.float64(1.0) / k))


def quantile_array(p, lam: float, k: float) -> np.ndarray:
    """Vectorised `quantile` over an array of probabilities (any shape)."""
    p = np.asarray(p, dtype=np.float64)
    with np.errstate(all="ignore"):
        out = lam * np.power(-np.log1p(-p), np.float64(1.0) / k)
        out = np.where(np.isnan(p) | (p < 0) | (p > 1), np.nan, out)
    return np.asarray(out, dtype=np.float64)
