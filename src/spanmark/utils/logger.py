"""Logger namespacing for Spanmark.

Every module logs through ``get_logger(__name__)`` so that applications can
tune the whole library with one ``logging.getLogger("spanmark")`` call.
Spanmark never installs handlers.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for name under "spanmark.".

    Example:
        >>> get_logger("mymodule").name
        'spanmark.mymodule'
    """
    if not (name == "spanmark" or name.startswith("spanmark.")):
        name = f"spanmark.{name}"
    return logging.getLogger(name)
