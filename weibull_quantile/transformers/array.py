"""
Weibull quantile over a flat sequence
"""
from __future__ import annotations

from typing import Any, Iterable, List, MutableSequence, Union

import numpy as np

from weibull_quantile import dtypes
from weibull_quantile.transformers.base import LengthMismatchError
from weibull_quantile.transformers.number import quantile_array
from weibull_quantile.transformers.partial import partial
from weibull_quantile.utils.type_inference import to_number

Output = Union[MutableSequence, np.ndarray]


def length(x: Any) -> int:
    """Element count; numpy arrays count every element, not just the first axis."""
    if isinstance(x, np.ndarray):
        return int(x.size)
    return len(x)


def fill(out: Output, values: Union[List[float], np.ndarray]) -> Output:
    """Write float64 results into `out`, casting to its dtype when it is a numpy array."""
    if isinstance(out, np.ndarray):
        buf = np.asarray(values, dtype=np.float64).reshape(out.shape)
        out[...] = dtypes.cast(buf, out.dtype)
        return out
    if isinstance(values, np.ndarray):
        values = values.reshape(-1).tolist()
    for i, v in enumerate(values):
        out[i] = v
    return out


def _elements(arr: Any) -> Iterable[Any]:
    if isinstance(arr, np.ndarray):
        return arr.reshape(-1)
    return arr


def quantile(out: Output, arr: Any, lam: float, k: float) -> Output:
    """
    Evaluate the Weibull quantile function for each element of `arr` and
    store the results in `out`, which must have the same length.

    Elements that are not real numbers evaluate to NaN. `out` may be `arr`
    itself; each index is read before it is written.
    """
    n = length(arr)
    if length(out) != n:
        raise LengthMismatchError(
            f"Input and output sequences must be the same length ({n} != {length(out)})"
        )
    if n == 0:
        return out

    if isinstance(arr, np.ndarray) and arr.dtype.kind in dtypes.NUMERIC_KINDS:
        values = quantile_array(arr, lam, k)
    else:
        fcn = partial(lam, k)
        values = [fcn(to_number(v)) for v in _elements(arr)]
    return fill(out, values)
