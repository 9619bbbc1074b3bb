from .exceptions import InvalidArgumentError
from .functions.misc import binomial, lnfac
from .legendre import deriv1_plmcos_dtheta, deriv2_plmcos_dtheta, plmcos
from .normalization import ylmnorm
from .wigner import dlkm

__version__ = "0.1.0"
