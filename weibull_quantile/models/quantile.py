from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator

from weibull_quantile import dtypes
from weibull_quantile.config import settings
from weibull_quantile.matrix import Matrix
from weibull_quantile.transformers.base import AccessorTypeError, InvalidOptionError


# ---------------------------------------------------
# Options bag
# ---------------------------------------------------
class QuantileOptions(BaseModel):
    """Validated options for a quantile call. `lambda` and `copy` may also be passed as `lambda_` / `copy_`."""

    model_config = ConfigDict(
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
        frozen=True,
    )

    lambda_: float = Field(default_factory=lambda: settings.default_lambda, alias="lambda")
    k: float = Field(default_factory=lambda: settings.default_k)
    accessor: Optional[Callable[..., Any]] = None
    path: Optional[str] = None
    sep: str = Field(default_factory=lambda: settings.default_sep)
    copy_: StrictBool = Field(True, alias="copy")
    dtype: Optional[str] = None

    @field_validator("lambda_", "k", mode="before")
    @classmethod
    def _check_real(cls, v: Any) -> float:
        if isinstance(v, (bool, np.bool_)) or not isinstance(v, numbers.Real):
            raise ValueError(f"must be a real number, got {type(v).__name__}")
        return float(v)

    @field_validator("sep")
    @classmethod
    def _check_sep(cls, v: str) -> str:
        if not v:
            raise ValueError("separator must be a non-empty string")
        return v

    @field_validator("dtype")
    @classmethod
    def _check_dtype(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not dtypes.is_known(v):
            raise ValueError(f"unrecognized data type `{v}`; use one of {', '.join(dtypes.list_dtypes())}")
        return v

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "QuantileOptions":
        """Merge an options mapping and keyword arguments, then validate everything up front."""
        raw: Dict[str, Any] = dict(options or {})
        raw.update(kwargs)

        accessor = raw.get("accessor")
        if "accessor" in raw and not callable(accessor):
            raise AccessorTypeError(
                f"Accessor must be callable, got {type(accessor).__name__}",
                option="accessor",
                suggestion="Pass a function mapping an element to its value",
            )

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            err = e.errors()[0]
            option = ".".join(str(part) for part in err["loc"]) or None
            raise InvalidOptionError(
                f"Invalid option `{option}`: {err['msg']}",
                option=option,
            ) from e


# ---------------------------------------------------
# HTTP request / response
# ---------------------------------------------------
def encode_float(v: Any) -> Union[float, str, None]:
    """JSON-safe float: NaN -> null, infinities -> "Infinity" / "-Infinity"."""
    v = float(v)
    if math.isnan(v):
        return None
    if math.isinf(v):
        return "Infinity" if v > 0 else "-Infinity"
    return v


class MatrixPayload(BaseModel):
    data: List[Optional[float]]
    shape: Tuple[int, int]
    dtype: str = "float64"


class QuantileRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: Union[MatrixPayload, List[Optional[float]], float]
    lambda_: Optional[float] = Field(None, alias="lambda")
    k: Optional[float] = None
    dtype: Optional[str] = None

    def to_input(self) -> Any:
        if isinstance(self.data, MatrixPayload):
            values = [math.nan if v is None else v for v in self.data.data]
            return Matrix(values, self.data.shape, self.data.dtype)
        if isinstance(self.data, list):
            return list(self.data)
        return self.data

    def to_options(self) -> Dict[str, Any]:
        options = {"lambda": self.lambda_, "k": self.k, "dtype": self.dtype}
        return {key: value for key, value in options.items() if value is not None}


class QuantileResponse(BaseModel):
    kind: str  # "number" | "array" | "matrix"
    result: Any
    shape: Optional[List[int]] = None
    dtype: Optional[str] = None

    @classmethod
    def from_result(cls, result: Any) -> "QuantileResponse":
        if isinstance(result, Matrix):
            return cls(
                kind="matrix",
                result=[encode_float(v) for v in result.data.tolist()],
                shape=list(result.shape),
                dtype=result.dtype,
            )
        if isinstance(result, np.ndarray):
            return cls(
                kind="array",
                result=[encode_float(v) for v in result.reshape(-1).tolist()],
                shape=list(result.shape),
                dtype=result.dtype.name,
            )
        if isinstance(result, list):
            return cls(
                kind="array",
                result=[encode_float(v) for v in result],
                shape=[len(result)],
                dtype=dtypes.GENERIC,
            )
        return cls(kind="number", result=encode_float(result))
