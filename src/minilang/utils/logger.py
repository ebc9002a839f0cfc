"""Logger namespacing for MiniLang.

Every module logs through ``minilang.<module>`` so one switch on the
``minilang`` logger controls recognizer chatter. The library installs no
handlers; ``minilang -v`` does that for the command line.

Example:
    >>> import logging
    >>> logging.getLogger("minilang").setLevel(logging.DEBUG)
    >>> get_logger("minilang.parser").getEffectiveLevel() == logging.DEBUG
    True
"""

from __future__ import annotations

import logging

_ROOT = "minilang"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under the ``minilang`` namespace.

    Module names already inside the package are used as is, anything else
    is prefixed, so ``get_logger("scratch")`` logs as ``minilang.scratch``.
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
