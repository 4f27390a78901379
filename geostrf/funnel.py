"""
The oceanographic "funnel": the range of Absolute Salinity, Conservative
Temperature and pressure over which the polynomial approximations to the
TEOS-10 equation of state were fitted [1]_.  Outside it, the fit is not
certified accurate.

.. [1] McDougall, T.J., D.R. Jackett, D.G. Wright and R. Feistel, 2003:
   Accurate and computationally efficient algorithms for potential
   temperature and density of seawater.  J. Atmos. Ocean. Tech., 20,
   730-741.
"""

import numpy as np
import numba as nb

from .eos.gsw import SSO
from .eos.tools import vectorize_eos

# fmt: off
c0  =  0.017947064327968736
c1  = -6.076099099929818
c2  =  4.883198653547851
c3  = -11.88081601230542
c4  =  13.34658511480257
c5  = -8.722761043208607
c6  =  2.082038908808201
c7  = -7.389420998107497
c8  = -2.110913185058476
c9  =  0.2295491578006229
c10 = -0.9891538123307282
c11 = -0.08987150128406496
c12 =  0.3831132432071728
c13 =  1.054318231187074
c14 =  1.065556599652796
c15 = -0.7997496801694032
c16 =  0.3850133554097069
c17 = -2.078616693017569
c18 =  0.8756340772729538
c19 = -2.079022768390933
c20 =  1.596435439942262
c21 =  0.1338002171109174
c22 =  1.242891021876471
# fmt: on

# Coefficients of the dissolved air correction to the freezing temperature
a_sat = 0.014289763856964
b_sat = 0.057000649899720


@nb.njit
def CT_freezing_poly(SA, p, saturation_fraction=0.0):
    """
    Conservative Temperature at which seawater freezes, by polynomial.

    Parameters
    ----------
    SA : float
        Absolute Salinity [g/kg]
    p : float
        sea pressure [dbar]
    saturation_fraction : float, Default 0.0
        Saturation fraction of dissolved air in seawater, between 0 and 1.

    Returns
    -------
    CT_freezing : float
        Freezing Conservative Temperature [deg C]
    """
    SA_r = SA * 1e-2
    x = np.sqrt(SA_r)
    p_r = p * 1e-4

    # fmt: off
    CT_freezing = (c0
        + SA_r*(c1 + x*(c2 + x*(c3 + x*(c4 + x*(c5 + c6*x)))))
        + p_r*(c7 + p_r*(c8 + c9*p_r))
        + SA_r*p_r*(c10 + p_r*(c12 + p_r*(c15 + c21*SA_r))
            + SA_r*(c13 + c17*p_r + c19*SA_r)
            + x*(c11 + p_r*(c14 + c18*p_r) + SA_r*(c16 + c20*p_r + c22*SA_r))))
    # fmt: on

    return CT_freezing - saturation_fraction * 1e-3 * (2.4 - a_sat * SA) * (
        1.0 + b_sat * (1.0 - SA / SSO)
    )


@nb.njit
def _infunnel(SA, CT, p):
    """Scalar version of `infunnel`, returning a bool."""
    if np.isnan(SA) or np.isnan(CT) or np.isnan(p):
        return False
    if p > 8000.0 or SA < 0.0 or SA > 42.0:
        return False
    if p < 500.0:
        return CT >= CT_freezing_poly(SA, p)
    if CT < CT_freezing_poly(SA, 500.0):
        return False
    if p < 6500.0:
        return SA >= p * 5e-3 - 2.5 and CT <= 31.66666666666667 - p * 3.333333333333334e-3
    return SA >= 30.0 and CT <= 10.0


def infunnel(SA, CT, p):
    """
    Check whether data lies inside the oceanographic funnel.

    Parameters
    ----------
    SA, CT, p : float or ndarray
        Absolute Salinity [g/kg], Conservative Temperature [deg C], and sea
        pressure [dbar].  Must be broadcastable to each other.

    Returns
    -------
    in_funnel : bool or ndarray of bool
        True where (`SA`, `CT`, `p`) lies inside the funnel, False where it
        lies outside or any input is NaN.
    """
    return vectorize_eos(_infunnel)(SA, CT, p)


__all__ = ["infunnel", "CT_freezing_poly"]
