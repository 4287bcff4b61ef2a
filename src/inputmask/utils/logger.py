"""Loggers for the inputmask package.

Every module logs through a child of the ``inputmask`` logger, so an
application can tune the whole engine with one call:

    >>> import logging
    >>> logging.getLogger("inputmask").setLevel(logging.DEBUG)

The engine only emits DEBUG records (compilation, cache misses, mask
selection, session setup). A NullHandler on the package logger keeps them
silent until the application configures logging.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "inputmask"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``inputmask`` hierarchy.

    Module names already under the package (``__name__`` of any inputmask
    module) are used as is; any other name is nested below the package logger.

        >>> get_logger("inputmask.compiler").name
        'inputmask.compiler'
        >>> get_logger("widgets").name
        'inputmask.widgets'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
