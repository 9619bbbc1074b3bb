from numba import jit

import numpy as np

# (2n - 1)!! for n = 0..13, with (-1)!! = 1. E.g. ODDFAC[5] = 9!! = 945.
MAX_ODDFAC_ARG = 13
ODDFAC = np.array(
    [
        1.0,
        1.0,
        3.0,
        15.0,
        105.0,
        945.0,
        10395.0,
        135135.0,
        2027025.0,
        34459425.0,
        654729075.0,
        13749310575.0,
        316234143225.0,
        7905853580625.0,
    ]
)
ODDFAC.flags.writeable = False

INV4PI = 0.25 / np.pi


@jit(nopython=True, nogil=True, error_model="numpy")
def pmm_cos(m: int, sintheta: float):
    """The function `pmm_cos` evaluates the diagonal associated Legendre function
    P_m^m(cos(theta)) = (2m - 1)!! sin(theta)^m.

    Parameters
    ----------
    m : int
        The order m >= 0.
    sintheta : float
        sin(theta).

    Returns
    -------
        The value of P_m^m(cos(theta)).

    """
    if m == 0:
        return 1.0
    if m == 1:
        return sintheta
    if m == 2:
        return 3.0 * sintheta * sintheta
    if m == 3:
        return 15.0 * sintheta * sintheta * sintheta
    if m == 4:
        return 105.0 * sintheta * sintheta * sintheta * sintheta
    if m <= MAX_ODDFAC_ARG:
        return ODDFAC[m] * sintheta**m

    # Continue the double factorial beyond the table: 27 * 29 * ... * (2m - 1)
    oddfactors = ODDFAC[MAX_ODDFAC_ARG]
    for i in range(2 * MAX_ODDFAC_ARG + 1, 2 * m, 2):
        oddfactors *= i
    return oddfactors * sintheta**m


@jit(nopython=True, nogil=True, error_model="numpy")
def plm_cos(l: int, m: int, sintheta: float, costheta: float):
    """The function `plm_cos` evaluates P_l^m(cos(theta)) with the upward recurrence in l,
    starting from the diagonal value P_m^m. No (-1)^m phase is applied.

    Parameters
    ----------
    l : int
        The degree, l >= m.
    m : int
        The order, m >= 0.
    sintheta : float
        sin(theta).
    costheta : float
        cos(theta).

    Returns
    -------
        The value of P_l^m(cos(theta)).

    """
    pmm = pmm_cos(m, sintheta)
    if l == m:
        return pmm

    pm1m = costheta * pmm * (2 * m + 1)  # P_{m+1}^m
    if l == m + 1:
        return pm1m

    plm = 0.0
    for i in range(m + 2, l + 1):
        plm = (costheta * (2 * i - 1) * pm1m - (i + m - 1) * pmm) / (i - m)
        pmm = pm1m
        pm1m = plm

    return plm


@jit(nopython=True, nogil=True, error_model="numpy")
def deriv1_plm_cos(l: int, m: int, sintheta: float, costheta: float):
    """The function `deriv1_plm_cos` evaluates dP_l^m(cos(theta))/dtheta.

    Division by sin(theta) follows IEEE semantics: sin(theta) = 0 gives inf or nan.

    """
    return (
        -(l + 1) * costheta * plm_cos(l, m, sintheta, costheta)
        + (l - m + 1) * plm_cos(l + 1, m, sintheta, costheta)
    ) / sintheta


@jit(nopython=True, nogil=True, error_model="numpy")
def deriv2_plm_cos(l: int, m: int, sintheta: float, costheta: float):
    """The function `deriv2_plm_cos` evaluates d^2P_l^m(cos(theta))/dtheta^2.

    Division by sin(theta)^2 follows IEEE semantics: sin(theta) = 0 gives inf or nan.

    """
    inv_sqr_sintheta = 1.0 / (sintheta * sintheta)

    return (
        (l + 1)
        * (1.0 + (l + 2) * costheta * costheta * inv_sqr_sintheta)
        * plm_cos(l, m, sintheta, costheta)
        - 2.0
        * (l - m + 1)
        * (l + 2)
        * costheta
        * inv_sqr_sintheta
        * plm_cos(l + 1, m, sintheta, costheta)
        + (l - m + 1)
        * (l - m + 2)
        * inv_sqr_sintheta
        * plm_cos(l + 2, m, sintheta, costheta)
    )


@jit(nopython=True, nogil=True)
def ylmnorm_magnitude(l: int, abs_m: int):
    """The function `ylmnorm_magnitude` computes |N_l^m| = sqrt((2l + 1) / (4 pi) * (l - |m|)! / (l + |m|)!)
    without evaluating either factorial.

    Parameters
    ----------
    l : int
        The degree l >= 0.
    abs_m : int
        The absolute value of the order, abs_m <= l.

    Returns
    -------
        The magnitude of the normalisation factor.

    """
    # Every factor of (l - |m|)! cancels against (l + |m|)!, leaving the
    # product (l - |m| + 1) * ... * (l + |m|) in the denominator.
    fac_division = 1.0
    if abs_m != 0:
        for i in range(l - abs_m + 1, l + abs_m + 1):
            fac_division *= i
        fac_division = 1.0 / fac_division

    return np.sqrt(INV4PI * (2 * l + 1) * fac_division)
