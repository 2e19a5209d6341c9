"""
Diagnostics logger for the tracelog package itself.

The library stays silent unless the host application configures the
standard ``logging`` module.
"""

import logging


logger = logging.getLogger("tracelog")
logger.addHandler(logging.NullHandler())


def set_verbose(verbose: bool) -> None:
    """Switch package diagnostics between DEBUG and INFO."""

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


__all__ = [
    "logger",
    "set_verbose",
]
