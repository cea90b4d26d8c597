"""
Weibull quantile over values pulled out of composite elements
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from weibull_quantile.transformers.array import Output, fill, length
from weibull_quantile.transformers.base import LengthMismatchError
from weibull_quantile.transformers.partial import partial
from weibull_quantile.utils.type_inference import to_number


def quantile(
    arr: Any,
    accessor: Callable[[Any], Any],
    lam: float,
    k: float,
    out: Optional[Output] = None,
) -> Output:
    """
    Evaluate the Weibull quantile function for `accessor(e)` of every element.

    Results go to a new flat sequence (`out` when given, a new list
    otherwise); the input elements are never modified. Exceptions raised by
    the accessor propagate.
    """
    n = len(arr)
    if out is None:
        out = [None] * n
    elif length(out) != n:
        raise LengthMismatchError(
            f"Input and output sequences must be the same length ({n} != {length(out)})"
        )
    if n == 0:
        return out

    fcn = partial(lam, k)
    return fill(out, [fcn(to_number(accessor(e))) for e in arr])
