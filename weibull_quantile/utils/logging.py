import logging
from typing import Optional

from weibull_quantile.config import settings

PACKAGE_LOGGER = "weibull_quantile"
DEFAULT_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str = PACKAGE_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package logger, configuring the latter once."""
    root = logging.getLogger(PACKAGE_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(settings.log_format or DEFAULT_FORMAT, "%H:%M:%S")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.setLevel(level or settings.log_level)
    return logging.getLogger(name)
