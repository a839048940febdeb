# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route all log records through a rich handler on stderr.

    Safe to call more than once; later calls only adjust the level.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(isinstance(handler, RichHandler) for handler in root.handlers):
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="[%X]"))
    root.addHandler(handler)
