"""
Runtime detection of input kinds and numeric coercion
"""
from __future__ import annotations

import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd

NAN = float("nan")


def is_number(x: Any) -> bool:
    """Real scalar (including numpy scalars and 0-d arrays), excluding booleans."""
    if isinstance(x, (bool, np.bool_)):
        return False
    if isinstance(x, numbers.Real):
        return True
    return isinstance(x, np.ndarray) and x.ndim == 0 and x.dtype.kind in "iuf"


def is_matrix_like(x: Any) -> bool:
    """Exposes a flat data buffer, a 2-D shape, a dtype tag and a length."""
    if isinstance(x, (np.ndarray, pd.Series)):
        return False
    shape = getattr(x, "shape", None)
    return (
        hasattr(x, "data")
        and isinstance(getattr(x, "dtype", None), str)
        and isinstance(getattr(x, "length", None), int)
        and isinstance(shape, tuple)
        and len(shape) == 2
    )


def is_typed_array(x: Any) -> bool:
    if isinstance(x, np.ndarray):
        return x.ndim >= 1
    return isinstance(x, pd.Series)


def is_plain_sequence(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes, bytearray))


def is_array_like(x: Any) -> bool:
    return is_typed_array(x) or is_plain_sequence(x)


def infer_input_kind(x: Any) -> str:
    """
    Classify an input for the dispatcher.
    Returns: "number", "matrix", "typed_array", "array" or "unknown"
    """
    if is_number(x):
        return "number"
    if is_matrix_like(x):
        return "matrix"
    if is_typed_array(x):
        return "typed_array"
    if is_plain_sequence(x):
        return "array"
    return "unknown"


def to_number(v: Any) -> float:
    """Coerce an element to float; anything that is not a real number becomes NaN."""
    if is_number(v):
        return float(v)
    return NAN
