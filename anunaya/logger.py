"""Logging setup for the sequencer."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

_PACKAGE_LOGGER = "anunaya"
_FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"

_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


class _SequencerHandler(logging.StreamHandler):
    """Stream handler installed by :func:`setup_logger`."""


def setup_logger(verbosity: int, filter: str) -> int:
    """Configure logging for the given verbosity and return the chosen level.

    Verbosity 0 logs errors, 1 warnings, 2 info, 3 debug and anything higher
    trace messages. The level applies to the logger named ``filter`` and to
    the sequencer's own loggers.
    """
    level = _LEVELS.get(verbosity, TRACE)

    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, _SequencerHandler)]:
        root.removeHandler(handler)
    handler = _SequencerHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger(filter).setLevel(level)
    logging.getLogger(_PACKAGE_LOGGER).setLevel(level)
    return level