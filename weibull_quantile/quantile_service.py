"""
Quantile service - detects the input kind and routes to the matching strategy
"""
from typing import Any, Dict, List, Mapping, Optional

from weibull_quantile.models.quantile import QuantileOptions
from weibull_quantile.transformers.number import NAN
from weibull_quantile.transformers.registry import registry
from weibull_quantile.utils.logging import get_logger
from weibull_quantile.utils.type_inference import infer_input_kind

logger = get_logger(__name__)


class QuantileService:
    """Evaluates the Weibull quantile function over any supported input"""

    def __init__(self):
        self.registry = registry

    def get_available_kinds(self) -> List[str]:
        """Input kinds in detection order"""
        return self.registry.list()

    def get_all_kinds(self) -> Dict[str, Any]:
        """Catalog of input kinds and their outputs"""
        return self.registry.get_all_definitions()

    def apply(self, x: Any, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Any:
        """
        Evaluate the quantile function for `x`.

        Options (mapping and/or keyword arguments):
            lambda / lambda_  scale parameter
            k                 shape parameter
            accessor          callable extracting a value from each element
            path, sep         nested field to read and overwrite in each element
            copy / copy_      False to write into the input where possible
            dtype             output data type for new arrays and matrices

        All options are validated before the input is read. Inputs that are
        neither numbers, matrices nor sequences evaluate to NaN.
        """
        opts = QuantileOptions.from_options(options, **kwargs)

        transformer_class = self.registry.resolve(x, opts)
        if transformer_class is None:
            logger.debug("unsupported input of type %s (%s); returning NaN",
                         type(x).__name__, infer_input_kind(x))
            return NAN

        transformer = transformer_class(opts)
        transformer.validate_params(x)
        logger.debug("routing %s input to %s", type(x).__name__, transformer_class.__name__)
        return transformer.transform(x)


# Global service instance
quantile_service = QuantileService()


def quantile(x: Any, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Any:
    """Evaluate the Weibull quantile function; see `QuantileService.apply`."""
    return quantile_service.apply(x, options, **kwargs)
