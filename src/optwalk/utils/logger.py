"""Minimal logging utilities for optwalk.

All walker messages are DEBUG level and go to loggers under "optwalk."; the
library never installs handlers. To see why a value turned into a word or a
parameter was refused:

    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> from optwalk import ArgWalker
    >>> walker = ArgWalker(["--fruit=banana"])
    >>> list(walker)  # doctest: +SKIP
    DEBUG:optwalk.walker.core:Unclaimed value for --fruit returned as word
    [Flag(name='--fruit', index=0), Word(value='banana', index=0)]
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "optwalk.".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("walker").name
        'optwalk.walker'
    """
    if not (name == "optwalk" or name.startswith("optwalk.")):
        name = f"optwalk.{name}"
    return logging.getLogger(name)
