# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool = False) -> None:
    """
    Route the package loggers through rich on stderr.

    Args:
        verbose: Log at DEBUG level instead of WARNING
    """
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    logger = logging.getLogger("ganttfmt")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
