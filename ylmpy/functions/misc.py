"""Numeric primitives consumed by the Wigner small-d evaluator.

Both functions work on plain integers and return floats. ``lnfac`` lets
factorial ratios be formed in log-space, so that ratios of factorials that
individually overflow a double stay representable.
"""

from __future__ import annotations

import logging
import math

from scipy.special import comb, gammaln

from ylmpy.exceptions import InvalidArgumentError

log = logging.getLogger(__name__)


def binomial(n: int, k: int) -> float:
    """
    Binomial coefficient as a floating point value.

    Args:
        n (int): Size of the set, n >= 0.
        k (int): Size of the subset.

    Returns:
        (float): ``n! / (k! (n - k)!)``, or ``0.0`` when ``k < 0`` or ``k > n``.
            Coefficients beyond the double range give ``inf``.
    """
    value = comb(n, k, exact=True)
    try:
        return float(value)
    except OverflowError:
        return math.inf


def lnfac(n: int) -> float:
    """
    Natural logarithm of ``n!``.

    Args:
        n (int): Argument of the factorial, n >= 0.

    Returns:
        (float): ``ln(n!)``.

    Raises:
        InvalidArgumentError: If ``n`` is negative.
    """
    if n < 0:
        msg = f"lnfac: n must be non-negative, got n={n}"
        log.debug(msg)
        raise InvalidArgumentError(msg)
    return float(gammaln(n + 1))
