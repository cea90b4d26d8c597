"""
Quantile strategies, one per input kind
"""
from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, List, Optional, Union

import numpy as np
import pandas as pd

from weibull_quantile import dtypes
from weibull_quantile.config import settings
from weibull_quantile.matrix import matrix
from weibull_quantile.transformers import accessor, array, deepset, number
from weibull_quantile.transformers import matrix as matrix_quantile
from weibull_quantile.transformers.base import BaseQuantileTransformer, InvalidOptionError
from weibull_quantile.utils.logging import get_logger
from weibull_quantile.utils.type_inference import (
    is_array_like,
    is_matrix_like,
    is_number,
    is_plain_sequence,
    is_typed_array,
)

logger = get_logger(__name__)


def _allocate_flat(n: int, dtype: Optional[str]) -> Union[List[Any], np.ndarray]:
    """New flat output: a list for `generic`, a zeroed numpy array otherwise."""
    if dtype is None or dtype == dtypes.GENERIC:
        return [None] * n
    return np.zeros(n, dtype=dtypes.numpy_dtype(dtype))


def _in_place_error(requested: str, current: Any) -> InvalidOptionError:
    return InvalidOptionError(
        f"Cannot write `{requested}` output into `{current}` storage in place",
        option="dtype",
        suggestion="Drop `dtype` or set `copy` to True",
    )


class NumberTransformer(BaseQuantileTransformer):
    INPUT_KIND = "number"
    OUTPUT_TYPE = "number"

    @classmethod
    def can_transform(cls, x, options) -> bool:
        return is_number(x)

    def transform(self, x):
        return number.quantile(float(x), self.options.lambda_, self.options.k)


class MatrixTransformer(BaseQuantileTransformer):
    INPUT_KIND = "matrix"
    OUTPUT_TYPE = "matrix"

    @classmethod
    def can_transform(cls, x, options) -> bool:
        return is_matrix_like(x)

    def validate_params(self, x):
        dtype = self.options.dtype
        if dtype == dtypes.GENERIC:
            raise InvalidOptionError(
                "Matrices do not support the `generic` data type",
                option="dtype",
                suggestion="Use a numeric dtype such as float64",
            )
        if not self.options.copy_ and not dtypes.same_storage(dtype, x.dtype):
            raise _in_place_error(dtype, x.dtype)

    def transform(self, x):
        if self.options.copy_:
            out: Any = matrix(x.shape, self.options.dtype or settings.default_dtype)
        else:
            out = x
        return matrix_quantile.quantile(out, x, self.options.lambda_, self.options.k)


class AccessorTransformer(BaseQuantileTransformer):
    """Values come from `accessor(element)`; results always go to a new sequence."""
    INPUT_KIND = "accessor"
    OUTPUT_TYPE = "array"

    @classmethod
    def can_transform(cls, x, options) -> bool:
        return options.accessor is not None and is_array_like(x)

    def validate_params(self, x):
        if self.options.path is not None:
            logger.debug("both accessor and path given; ignoring path %r", self.options.path)
        if not self.options.copy_:
            logger.debug("accessor input never mutates; allocating a new output")

    def transform(self, x):
        out = _allocate_flat(len(x), self.options.dtype)
        return accessor.quantile(x, self.options.accessor, self.options.lambda_, self.options.k, out=out)


class DeepSetTransformer(BaseQuantileTransformer):
    """Values live at a nested path in each element and are overwritten in place."""
    INPUT_KIND = "deepset"
    OUTPUT_TYPE = "array"

    @classmethod
    def can_transform(cls, x, options) -> bool:
        return options.path is not None and options.accessor is None and is_array_like(x)

    def validate_params(self, x):
        self._path = deepset.Path(self.options.path, self.options.sep)

    def transform(self, x):
        return deepset.quantile(x, self.options.lambda_, self.options.k, self._path)


class TypedArrayTransformer(BaseQuantileTransformer):
    """numpy arrays of any shape and pandas Series."""
    INPUT_KIND = "typed_array"
    OUTPUT_TYPE = "typed_array"

    @classmethod
    def can_transform(cls, x, options) -> bool:
        return is_typed_array(x)

    def validate_params(self, x):
        if self.options.copy_:
            return
        storage = x.dtype
        if not isinstance(storage, np.dtype) or storage.name not in dtypes.DTYPES:
            raise InvalidOptionError(
                f"In-place output requires storage of a supported dtype, got `{storage}`",
                option="copy",
                suggestion="Set `copy` to True",
            )
        if not dtypes.same_storage(self.options.dtype, storage):
            raise _in_place_error(self.options.dtype, storage.name)

    def transform(self, x):
        if isinstance(x, pd.Series):
            return self._transform_series(x)

        lam, k = self.options.lambda_, self.options.k
        if not self.options.copy_:
            return array.quantile(x, x, lam, k)
        dtype = self.options.dtype or settings.default_dtype
        if dtype == dtypes.GENERIC:
            return array.quantile([None] * x.size, x, lam, k)
        return array.quantile(np.zeros(x.shape, dtype=dtypes.numpy_dtype(dtype)), x, lam, k)

    def _transform_series(self, x: pd.Series):
        lam, k = self.options.lambda_, self.options.k
        values = x.to_numpy()

        if not self.options.copy_:
            x.iloc[:] = array.quantile(np.zeros(len(x), dtype=x.dtype), values, lam, k)
            return x
        dtype = self.options.dtype or settings.default_dtype
        if dtype == dtypes.GENERIC:
            return array.quantile([None] * len(x), values, lam, k)
        out = array.quantile(np.zeros(len(x), dtype=dtypes.numpy_dtype(dtype)), values, lam, k)
        return pd.Series(out, index=x.index, name=x.name)


class ArrayTransformer(BaseQuantileTransformer):
    """Plain Python sequences (lists, tuples, ranges)."""
    INPUT_KIND = "array"
    OUTPUT_TYPE = "array"

    @classmethod
    def can_transform(cls, x, options) -> bool:
        return is_plain_sequence(x)

    def validate_params(self, x):
        dtype = self.options.dtype
        if not self.options.copy_ and dtype not in (None, dtypes.GENERIC) and isinstance(x, MutableSequence):
            raise _in_place_error(dtype, dtypes.GENERIC)

    def transform(self, x):
        if self.options.copy_ or not isinstance(x, MutableSequence):
            if not self.options.copy_:
                logger.debug("%s is immutable; allocating a new output", type(x).__name__)
            out = _allocate_flat(len(x), self.options.dtype)
        else:
            out = x
        return array.quantile(out, x, self.options.lambda_, self.options.k)


__all__ = [
    "NumberTransformer",
    "MatrixTransformer",
    "AccessorTransformer",
    "DeepSetTransformer",
    "TypedArrayTransformer",
    "ArrayTransformer",
]
