"""
Weibull quantile over the elements of a matrix
"""
from __future__ import annotations

from typing import Any

from weibull_quantile import dtypes
from weibull_quantile.transformers.base import LengthMismatchError
from weibull_quantile.transformers.number import quantile_array


def quantile(out: Any, mat: Any, lam: float, k: float) -> Any:
    """
    Evaluate the Weibull quantile function for each element of `mat` and
    store the results in `out`. Only the total element counts have to agree;
    the output's dtype decides how results are narrowed.
    """
    n = mat.length
    if out.length != n:
        raise LengthMismatchError(
            f"Input and output matrices must be the same length ({n} != {out.length})"
        )
    if n == 0:
        return out
    out.data[:] = dtypes.cast(quantile_array(mat.data, lam, k), out.dtype)
    return out
