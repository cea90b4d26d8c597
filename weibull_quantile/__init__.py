"""
Weibull distribution quantile function

Evaluates lambda * (-ln(1 - p)) ** (1 / k) for numbers, sequences, records
(through an accessor or a nested path), numpy arrays, pandas Series and
matrices.

Usage:
    from weibull_quantile import quantile, matrix

    quantile(0.5)                                   # 0.6931...
    quantile([0.1, 0.2], {"lambda": 2, "k": 3})
    quantile(records, accessor=lambda d: d["x"])
    quantile(records, path="x/1", sep="/")          # overwrites in place
    quantile(matrix(data, (5, 2), "float32"), dtype="uint8")
"""

__version__ = "1.0.0"

from .matrix import Matrix, matrix
from .quantile_service import QuantileService, quantile, quantile_service
from .transformers.base import (
    AccessorTypeError,
    InvalidOptionError,
    LengthMismatchError,
    MatrixShapeError,
    PathLookupError,
    QuantileError,
)
from .transformers.partial import partial

__all__ = [
    'quantile',
    'partial',
    'matrix',
    'Matrix',
    'QuantileService',
    'quantile_service',
    'QuantileError',
    'InvalidOptionError',
    'AccessorTypeError',
    'LengthMismatchError',
    'MatrixShapeError',
    'PathLookupError',
]
