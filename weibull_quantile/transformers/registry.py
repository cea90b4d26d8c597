"""
Quantile strategy registry
"""
from typing import Any, Dict, List, Optional, Type

from .base import BaseQuantileTransformer, QuantileError
from .input_transforms import *


class QuantileTransformRegistry:
    """Registry of input-kind strategies. Registration order is detection order."""

    def __init__(self):
        self._transformers: Dict[str, Type[BaseQuantileTransformer]] = {}
        self._register_all()

    def _register_all(self):
        """Register all available transformers"""
        self.register(NumberTransformer)
        self.register(MatrixTransformer)
        # accessor/path options claim any array-like input before the plain kinds
        self.register(AccessorTransformer)
        self.register(DeepSetTransformer)
        self.register(TypedArrayTransformer)
        self.register(ArrayTransformer)

    def register(self, transformer_class: Type[BaseQuantileTransformer]):
        """Register a transformer class"""
        if not issubclass(transformer_class, BaseQuantileTransformer):
            raise ValueError(f"{transformer_class} must be a subclass of BaseQuantileTransformer")

        input_kind = transformer_class.INPUT_KIND
        if input_kind is None:
            raise ValueError(f"{transformer_class} must define INPUT_KIND")

        self._transformers[input_kind] = transformer_class

    def get(self, input_kind: str) -> Optional[Type[BaseQuantileTransformer]]:
        """Get transformer class by input kind"""
        return self._transformers.get(input_kind)

    def create(self, input_kind: str, options) -> BaseQuantileTransformer:
        """Create transformer instance"""
        transformer_class = self.get(input_kind)
        if transformer_class is None:
            raise QuantileError(
                f"Unknown input kind: {input_kind}",
                suggestion=f"Available kinds: {', '.join(self.list())}"
            )

        return transformer_class(options)

    def resolve(self, x: Any, options) -> Optional[Type[BaseQuantileTransformer]]:
        """First registered transformer class able to handle `x`, or None"""
        for transformer_class in self._transformers.values():
            if transformer_class.can_transform(x, options):
                return transformer_class
        return None

    def list(self) -> List[str]:
        """List registered input kinds in detection order"""
        return list(self._transformers.keys())

    def get_definition(self, input_kind: str) -> Optional[Dict]:
        """Get transformer definition for discovery"""
        transformer_class = self.get(input_kind)
        if transformer_class is None:
            return None

        return {
            "output_type": transformer_class.OUTPUT_TYPE,
            "description": (transformer_class.__doc__ or "No description available").strip()
        }

    def get_all_definitions(self) -> Dict[str, Dict]:
        """Get all transformer definitions"""
        return {
            input_kind: self.get_definition(input_kind)
            for input_kind in self.list()
        }


# Global registry instance
registry = QuantileTransformRegistry()
