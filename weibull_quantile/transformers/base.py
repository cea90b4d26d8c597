"""
Base transformer class and error taxonomy
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from weibull_quantile.models.quantile import QuantileOptions


class QuantileError(Exception):
    """Base exception for quantile evaluation errors"""
    def __init__(self, message: str, option: Optional[str] = None, suggestion: Optional[str] = None):
        self.message = message
        self.option = option
        self.suggestion = suggestion
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "option": self.option,
            "suggestion": self.suggestion,
        }


class InvalidOptionError(QuantileError, ValueError):
    """An option has an unsupported value (unknown dtype, wrong type, ...)"""


class AccessorTypeError(QuantileError, TypeError):
    """The `accessor` option is not callable"""


class LengthMismatchError(QuantileError, ValueError):
    """Output and input containers differ in length"""


class MatrixShapeError(QuantileError, ValueError):
    """A matrix buffer does not match its declared shape"""


class PathLookupError(QuantileError, KeyError):
    """A deep path segment cannot be resolved"""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.message


class BaseQuantileTransformer(ABC):
    """Base class for the per-input-kind quantile strategies.

    The dispatcher asks each registered class, in registration order, whether
    it can handle an input; the first match is instantiated with the validated
    options, checks any input-dependent constraints and performs the transform.
    """

    # Subclasses must define these
    INPUT_KIND: str = None
    OUTPUT_TYPE: str = None

    def __init__(self, options: "QuantileOptions"):
        self.options = options

    @classmethod
    @abstractmethod
    def can_transform(cls, x: Any, options: "QuantileOptions") -> bool:
        """Check if this transformer handles the input under the given options"""
        pass

    def validate_params(self, x: Any) -> None:
        """Validate options that depend on the concrete input. Runs before any element is read."""
        pass

    @abstractmethod
    def transform(self, x: Any) -> Any:
        """Evaluate the quantile function for the input"""
        pass

    def get_description(self) -> str:
        """Return human-readable description of this transform"""
        return f"Weibull quantile over {self.INPUT_KIND} input"
