"""Index-precondition checks shared by the public evaluators.

All checks run before any index arithmetic is performed and raise
:class:`~ylmpy.exceptions.InvalidArgumentError` on violation.
"""

from __future__ import annotations

import logging
import operator
from typing import NoReturn

from ylmpy.exceptions import InvalidArgumentError

log = logging.getLogger(__name__)


def _fail(msg: str) -> NoReturn:
    log.debug(msg)
    raise InvalidArgumentError(msg)


def as_index(value, name: str, caller: str) -> int:
    """Convert ``value`` to a Python ``int``.

    Parameters
    ----------
    value:
        Any object implementing ``__index__`` (``int``, numpy integer scalar).
    name:
        Argument name used in the error message.
    caller:
        Name of the public function, used in the error message.

    Returns
    -------
    int
        The integer value.
    """

    if isinstance(value, bool):
        _fail(f"{caller}: {name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        _fail(f"{caller}: {name} must be an integer, got {type(value).__name__}")


def check_degree(l: int, caller: str) -> int:  # noqa: E741
    l = as_index(l, "l", caller)  # noqa: E741
    if l < 0:
        _fail(f"{caller}: l must be non-negative, got l={l}")
    return l


def check_unsigned_order(l, m, caller: str) -> tuple[int, int]:  # noqa: E741
    """Validate ``0 <= m <= l`` and return both as ints."""

    l = check_degree(l, caller)  # noqa: E741
    m = as_index(m, "m", caller)
    if m < 0:
        _fail(f"{caller}: m must be non-negative, got m={m}")
    if m > l:
        _fail(f"{caller}: m > l (l={l}, m={m})")
    return l, m


def check_signed_order(l: int, value, name: str, caller: str) -> int:  # noqa: E741
    """Validate ``|value| <= l`` for an already validated degree ``l``."""

    value = as_index(value, name, caller)
    if abs(value) > l:
        _fail(f"{caller}: |{name}| > l (l={l}, {name}={value})")
    return value
