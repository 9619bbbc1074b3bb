"""Environment-variable helpers for the command-line front end.

Notes
-----
These are intentionally forgiving: invalid inputs fall back to defaults rather
than raising, so a stray value never prevents an evaluation from running.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "YLMPY_LOG_LEVEL"


def parse_log_level_env(name: str = LOG_LEVEL_ENV, *, default: int = logging.WARNING) -> int:
    """Parse a logging level from an environment variable.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Level used when the variable is unset or invalid.

    Returns
    -------
    int
        A level accepted by :meth:`logging.Logger.setLevel`. Both names
        (``"debug"``, ``"INFO"``) and integers (``"10"``) are understood.
    """

    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return default
