"""
Console logging for the deployment helper.

Usage:
    >>> from tckt_deploy.logger import setup_logging
    >>> setup_logging("DEBUG")
    >>> logging.getLogger("tckt_deploy.compiler").debug("Reading TCKT.sol")
"""

import logging
import threading
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "tckt_deploy"
LOG_FORMAT = "%(message)s"

_lock = threading.Lock()
_configured = False


def setup_logging(level: Union[int, str] = logging.INFO, console: Optional[Console] = None) -> None:
    """
    Attach a single RichHandler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level name or number.
        console: Rich console to render to. Defaults to stderr.
    """
    global _configured

    numeric_level = level if isinstance(level, int) else getattr(logging, str(level).upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    with _lock:
        package_logger.setLevel(numeric_level)
        if _configured:
            return

        handler = RichHandler(
            console=console or Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        _configured = True
