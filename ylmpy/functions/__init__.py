"""Low-level numerical kernels and special functions.

This subpackage contains the numeric primitives (binomial coefficients and
log-factorials) and the Numba-compiled scalar kernels used by the public
evaluators.
"""
