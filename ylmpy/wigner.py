"""Wigner small-d rotation matrix elements.

The elements follow Condon & Odabasi (1980, *Atomic Structure*). They relate a
spherical harmonic in a frame whose z-axis is the rotation axis to the frame
whose z'-axis points towards the observer, inclined by ``angle``:

.. math::

    Y_l^m(\\theta, \\phi) = \\sum_{k=-l}^{l} d^{(l)}_{km}(\\mathrm{angle}) Y_l^k(\\theta', \\phi').
"""

from __future__ import annotations

from math import cos, exp, sin

from ylmpy.functions.misc import binomial, lnfac
from ylmpy.validation import check_degree, check_signed_order


def dlkm(l: int, k: int, m: int, angle: float) -> float:  # noqa: E741
    """Compute the Wigner small-d element :math:`d^{(l)}_{km}(\\mathrm{angle})`.

    .. math::

        d^{(l)}_{km}(\\beta) = \\sqrt{\\frac{(l+k)!(l-k)!}{(l+m)!(l-m)!}}
        \\sum_{r} (-1)^{l-m-r} \\binom{l+m}{l-k-r} \\binom{l-m}{r}
        \\cos^{k+m+2r}\\frac{\\beta}{2} \\sin^{2l-m-k-2r}\\frac{\\beta}{2},

    with ``r`` running from ``max(0, -m-k)`` to ``min(l-k, l-m)``.

    Parameters
    ----------
    l:
        The degree, ``l >= 0``.
    k:
        The order in the rotated frame, ``-l <= k <= l``.
    m:
        The azimuthal order, ``-l <= m <= l``.
    angle:
        The rotation angle in radians.

    Returns
    -------
    float
        :math:`d^{(l)}_{km}(\\mathrm{angle})`.

    Raises
    ------
    InvalidArgumentError
        If ``|k| > l`` or ``|m| > l``.

    Notes
    -----
    The square-root prefactor is evaluated as the exponential of a sum of
    log-factorials. The individual factorials overflow a double for
    ``l + |k| > 170`` while their ratio does not.
    """

    l = check_degree(l, "dlkm")  # noqa: E741
    k = check_signed_order(l, k, "k", "dlkm")
    m = check_signed_order(l, m, "m", "dlkm")

    lower = max(0, -m - k)
    upper = min(l - k, l - m)

    cos_half_angle = cos(angle / 2.0)
    sin_half_angle = sin(angle / 2.0)

    total = 0.0
    for r in range(lower, upper + 1):
        # Pair each binomial with its power before multiplying the halves.
        term = (binomial(l + m, l - k - r) * cos_half_angle ** (k + m + 2 * r)) * (
            binomial(l - m, r) * sin_half_angle ** (2 * l - m - k - 2 * r)
        )
        if (l - m - r) % 2 == 1:
            total -= term
        else:
            total += term

    # Grouped so that the exponent is exactly zero when k == m.
    total *= exp(0.5 * ((lnfac(l + k) - lnfac(l + m)) + (lnfac(l - k) - lnfac(l - m))))

    return total
