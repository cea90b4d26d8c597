from .quantile import MatrixPayload, QuantileOptions, QuantileRequest, QuantileResponse

__all__ = [
    'QuantileOptions',
    'QuantileRequest',
    'QuantileResponse',
    'MatrixPayload',
]
