"""
Output data types and the casting rules into them
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

import numpy as np

from weibull_quantile.transformers.base import InvalidOptionError

GENERIC = "generic"

# `generic` means a plain Python list; it has no numpy counterpart.
DTYPES: Dict[str, Optional[np.dtype]] = {
    GENERIC: None,
    "int8": np.dtype("int8"),
    "uint8": np.dtype("uint8"),
    "uint8_clamped": np.dtype("uint8"),
    "int16": np.dtype("int16"),
    "uint16": np.dtype("uint16"),
    "int32": np.dtype("int32"),
    "uint32": np.dtype("uint32"),
    "float32": np.dtype("float32"),
    "float64": np.dtype("float64"),
}

NUMERIC_KINDS = "iuf"

DtypeLike = Union[str, np.dtype]


def list_dtypes() -> List[str]:
    return list(DTYPES.keys())


def is_known(name: Any) -> bool:
    return isinstance(name, str) and name in DTYPES


def dtype_name(dtype: DtypeLike) -> str:
    """Name of a dtype in the table, accepting numpy dtypes."""
    if isinstance(dtype, str):
        if dtype not in DTYPES:
            raise InvalidOptionError(
                f"Unrecognized data type: {dtype}",
                option="dtype",
                suggestion=f"Use one of: {', '.join(list_dtypes())}",
            )
        return dtype
    name = np.dtype(dtype).name
    if name not in DTYPES:
        raise InvalidOptionError(
            f"Unsupported storage data type: {name}",
            option="dtype",
            suggestion="Numeric storage (int8..uint32, float32, float64) is required",
        )
    return name


def numpy_dtype(dtype: DtypeLike) -> np.dtype:
    name = dtype_name(dtype)
    if name == GENERIC:
        raise InvalidOptionError(
            "Data type `generic` has no numeric array representation",
            option="dtype",
            suggestion="Use a numeric dtype such as float64",
        )
    return DTYPES[name]


def same_storage(requested: Optional[str], current: DtypeLike) -> bool:
    """Whether output of dtype `requested` can be written into storage of dtype `current`."""
    if requested is None:
        return True
    if requested == GENERIC:
        return False
    try:
        return numpy_dtype(requested) == numpy_dtype(current)
    except InvalidOptionError:
        return False


def cast(values: Any, dtype: DtypeLike) -> np.ndarray:
    """Convert float64 results into the representation of `dtype`.

    Integer targets drop non-finite values to 0, truncate toward zero and wrap
    modulo 2**bits. `uint8_clamped` clamps to [0, 255] and rounds half to even.
    """
    name = dtype_name(dtype)
    target = numpy_dtype(name)
    values = np.asarray(values, dtype=np.float64)

    if name == "uint8_clamped":
        clamped = np.nan_to_num(values, nan=0.0, posinf=255.0, neginf=0.0)
        return np.rint(np.clip(clamped, 0.0, 255.0)).astype(target)

    if target.kind in "iu":
        bits = target.itemsize * 8
        modulus = 2.0 ** bits
        finite = np.where(np.isfinite(values), values, 0.0)
        wrapped = np.mod(np.trunc(finite), modulus)
        if target.kind == "i":
            wrapped = np.where(wrapped >= modulus / 2, wrapped - modulus, wrapped)
        return wrapped.astype(target)

    return values.astype(target)
