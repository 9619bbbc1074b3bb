"""Normalisation factors of the spherical harmonics.

The spherical harmonic is composed as

.. math::

    Y_l^m(\\theta, \\phi) = N_l^m P_l^{|m|}(\\cos\\theta) e^{i m \\phi},

with :math:`P_l^{|m|}` from :func:`ylmpy.legendre.plmcos`. The azimuthal
factor is left to the caller.
"""

from __future__ import annotations

from math import factorial, pi, sqrt

import numpy as np

from ylmpy.functions.cpu_numba import ylmnorm_magnitude
from ylmpy.validation import check_degree, check_signed_order

TABULATED_LMAX = 4


def _build_ylmnorm_table(lmax: int) -> np.ndarray:
    # table[l, m] = sqrt((2l + 1) / (4 pi) * (l - m)! / (l + m)!) for 0 <= m <= l, else 0
    table = np.zeros((lmax + 1, lmax + 1))
    for l in range(lmax + 1):  # noqa: E741
        for m in range(l + 1):
            table[l, m] = sqrt(
                (2 * l + 1) / (4 * pi) * factorial(l - m) / factorial(l + m)
            )
    table.flags.writeable = False
    return table


YLMNORM_TABLE = _build_ylmnorm_table(TABULATED_LMAX)


def ylmnorm(l: int, m: int) -> float:  # noqa: E741
    """Compute the normalisation factor :math:`N_l^m` of :math:`Y_l^m`.

    .. math::

        N_l^m = (-1)^m \\sqrt{\\frac{2l+1}{4\\pi} \\frac{(l-|m|)!}{(l+|m|)!}}
        \\quad (m > 0), \\qquad
        N_l^m = \\sqrt{\\frac{2l+1}{4\\pi} \\frac{(l-|m|)!}{(l+|m|)!}}
        \\quad (m \\le 0).

    The Condon-Shortley phase therefore only flips the sign for positive odd
    ``m``. For ``l <= 4`` the magnitude is read from a precomputed table.

    Parameters
    ----------
    l:
        The degree, ``l >= 0``.
    m:
        The azimuthal order, ``-l <= m <= l``.

    Returns
    -------
    float
        :math:`N_l^m`.

    Raises
    ------
    InvalidArgumentError
        If ``|m| > l``.
    """

    l = check_degree(l, "ylmnorm")  # noqa: E741
    m = check_signed_order(l, m, "m", "ylmnorm")

    if l <= TABULATED_LMAX:
        norm = float(YLMNORM_TABLE[l, abs(m)])
    else:
        norm = ylmnorm_magnitude(l, abs(m))

    if m > 0 and m % 2 == 1:
        return -norm
    return norm
