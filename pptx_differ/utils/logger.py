"""Central logging configuration for the differ."""
from __future__ import annotations

import logging
from typing import Optional

_DEFAULT_LEVEL = logging.INFO
_PACKAGE_LOGGER = "pptx_differ"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger with default configuration applied."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    return logger


def set_verbose(verbose: bool) -> None:
    """Switch the package loggers between DEBUG and the default level."""
    logging.getLogger(_PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else _DEFAULT_LEVEL)
