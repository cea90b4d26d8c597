"""
Quantile transformers for each input kind

Usage:
    from weibull_quantile.transformers.registry import registry

    transformer_class = registry.resolve(data, options)
    result = transformer_class(options).transform(data)

The per-kind modules (`number`, `partial`, `array`, `accessor`, `deepset`,
`matrix`) can also be called directly with explicit output containers.
"""

from .base import (
    AccessorTypeError,
    BaseQuantileTransformer,
    InvalidOptionError,
    LengthMismatchError,
    MatrixShapeError,
    PathLookupError,
    QuantileError,
)

__all__ = [
    'BaseQuantileTransformer',
    'QuantileError',
    'InvalidOptionError',
    'AccessorTypeError',
    'LengthMismatchError',
    'MatrixShapeError',
    'PathLookupError',
]
