"""
Specific Volume using 75-term polyTEOS10-75t [1]_ approximation to the TEOS-10 Gibbs Sea Water standard [2]_

Functions:

specvol :: compute specific volume from Absolute Salinity, Conservative Temperature and
    pressure

specvol_SSO_0 :: compute specific volume at the Standard Ocean Reference Salinity
    (SSO = 35.16504 g/kg) and a Conservative Temperature of 0 deg C

specvol_anom :: compute the specific volume anomaly, relative to the specific
    volume at (SSO, 0 deg C) and the same pressure

To make vectorized versions of these functions, see
`geostrf.eos.tools.vectorize_eos`.

Note that the 75-term equation has been fitted in a restricted range of
parameter space, and is most accurate inside the "oceanographic funnel"
described in McDougall et al. (2003).  See `geostrf.funnel.infunnel` to test
whether data lies outside this funnel.

.. [1] Roquet, F., G. Madec, T.J. McDougall, P.M. Barker, 2015: Accurate
       polynomial expressions for the density and specifc volume of seawater
       using the TEOS-10 standard. Ocean Modelling., 90, pp. 29-43.

.. [2] McDougall, T.J. and P.M. Barker, 2011: Getting started with TEOS-10 and 
       the Gibbs Seawater (GSW) Oceanographic Toolbox, 28pp., SCOR/IAPSO WG127, 
       ISBN 978-0-646-55621-5. 
"""

# Check values computed on 15/05/2023:
#
# >>> specvol(35, 25, 2000)
# 0.000969429311180351


import numpy as np
import numba as nb

tfac = 0.025

# sfac is very nearly 1/(40*(35.16504/35))
sfac = 0.0248826675584615

# deltaSA = 24 g/kg, offset = deltaSA*sfac
offset = 5.971840214030754e-1

# fmt: off
v000 =  1.0769995862e-3
v001 = -6.0799143809e-5
v002 =  9.9856169219e-6
v003 = -1.1309361437e-6
v004 =  1.0531153080e-7
v005 = -1.2647261286e-8
v006 =  1.9613503930e-9
v010 = -1.5649734675e-5
v011 =  1.8505765429e-5
v012 = -1.1736386731e-6
v013 = -3.6527006553e-7
v014 =  3.1454099902e-7
v020 =  2.7762106484e-5
v021 = -1.1716606853e-5
v022 =  2.1305028740e-6
v023 =  2.8695905159e-7
v030 = -1.6521159259e-5
v031 =  7.9279656173e-6
v032 = -4.6132540037e-7
v040 =  6.9111322702e-6
v041 = -3.4102187482e-6
v042 = -6.3352916514e-8
v050 = -8.0539615540e-7
v051 =  5.0736766814e-7
v060 =  2.0543094268e-7
v100 = -3.1038981976e-4
v101 =  2.4262468747e-5
v102 = -5.8484432984e-7
v103 =  3.6310188515e-7
v104 = -1.1147125423e-7
v110 =  3.5009599764e-5
v111 = -9.5677088156e-6
v112 = -5.5699154557e-6
v113 = -2.7295696237e-7
v120 = -3.7435842344e-5
v121 = -2.3678308361e-7
v122 =  3.9137387080e-7
v130 =  2.4141479483e-5
v131 = -3.4558773655e-6
v132 =  7.7618888092e-9
v140 = -8.7595873154e-6
v141 =  1.2956717783e-6
v150 = -3.3052758900e-7
v200 =  6.6928067038e-4
v201 = -3.4792460974e-5
v202 = -4.8122251597e-6
v203 =  1.6746303780e-8
v210 = -4.3592678561e-5
v211 =  1.1100834765e-5
v212 =  5.4620748834e-6
v220 =  3.5907822760e-5
v221 =  2.9283346295e-6
v222 = -6.5731104067e-7
v230 = -1.4353633048e-5
v231 =  3.1655306078e-7
v240 =  4.3703680598e-6
v300 = -8.5047933937e-4
v301 =  3.7470777305e-5
v302 =  4.9263106998e-6
v310 =  3.4532461828e-5
v311 = -9.8447117844e-6
v312 = -1.3544185627e-6
v320 = -1.8698584187e-5
v321 = -4.8826139200e-7
v330 =  2.2863324556e-6
v400 =  5.8086069943e-4
v401 = -1.7322218612e-5
v402 = -1.7811974727e-6
v410 = -1.1959409788e-5
v411 =  2.5909225260e-6
v420 =  3.8595339244e-6
v500 = -2.1092370507e-4
v501 =  3.0927427253e-6
v510 =  1.3864594581e-6
v600 =  3.1932457305e-5
# fmt: on

# Standard Ocean Reference Salinity [g/kg]
SSO = 35.16504

# pressure scaling of the polynomial's third variable
pfac = 1e-4


# If ndarray inputs are needed, it is best to use @nb.vectorize.  That is,
# apply `.tools.vectorize_eos`.  A vectorized function specified
# for scalars is about twice as fast as a signatureless njit'ed function
# applied to ndarrays.
@nb.njit
def specvol(SA, CT, p):
    """
    GSW specific volume.

    Parameters
    ----------
    SA : float
        Absolute Salinity [g/kg]
    CT : float
        Conservative Temperature [deg C]
    p : float
        sea pressure (i.e. absolute pressure - 10.1325 dbar)  [dbar]

    Returns
    -------
    specvol : float
        Specific volume [m3 kg-1]
    """
    (x, y, z) = _process(SA, CT, p)
    return _specvol(x, y, z)


@nb.njit
def specvol_SSO_0(p):
    """
    GSW specific volume at SA = SSO and CT = 0 deg C.

    This is the reference state for the specific volume anomaly used by
    dynamic height and the Montgomery streamfunction.

    Parameters
    ----------
    p : float
        sea pressure [dbar]

    Returns
    -------
    specvol_SSO_0 : float
        Specific volume at (SSO, 0 deg C, p) [m3 kg-1]
    """
    return specvol(SSO, 0.0, p)


@nb.njit
def specvol_anom(SA, CT, p):
    """
    GSW specific volume anomaly, relative to (SSO, 0 deg C) at the same pressure.

    Parameters
    ----------
    SA, CT, p : float
        See `specvol`

    Returns
    -------
    specvol_anom : float
        Specific volume anomaly [m3 kg-1]
    """
    return specvol(SA, CT, p) - specvol_SSO_0(p)


@nb.njit
def _process(SA, CT, p):
    SA = np.maximum(SA, 0)
    x = np.sqrt(sfac * SA + offset)
    y = CT * tfac
    z = p * pfac
    return (x, y, z)


# fmt: off
@nb.njit
def _specvol(x, y, z):
    return (v000 + x*(v100 + x*(v200 + x*(v300 + x*(v400 + x*(v500 + x*v600)))))
       + y*(v010 + x*(v110 + x*(v210 + x*(v310 + x*(v410 + x*v510))))
       + y*(v020 + x*(v120 + x*(v220 + x*(v320 + x*v420)))
       + y*(v030 + x*(v130 + x*(v230 + x*v330))
       + y*(v040 + x*(v140 + x* v240)
       + y*(v050 + x* v150
       + y* v060)))))
    + z*(   v001 + x*(v101 + x*(v201 + x*(v301 + x*(v401 + x*v501))))
       + y*(v011 + x*(v111 + x*(v211 + x*(v311 + x*v411)))
       + y*(v021 + x*(v121 + x*(v221 + x*v321))
       + y*(v031 + x*(v131 + x* v231)
       + y*(v041 + x* v141
       + y* v051))))
    + z*(   v002 + x*(v102 + x*(v202 + x*(v302 + x*v402)))
       + y*(v012 + x*(v112 + x*(v212 + x*v312))
       + y*(v022 + x*(v122 + x* v222)
       + y*(v032 + x* v132
       + y* v042)))
    + z*(   v003 + x*(v103 + x* v203)
       + y*(v013 + x* v113
       + y* v023)
    + z*(   v004 + x* v104
       + y* v014
    + z*(   v005
    + z*    v006))))))

# fmt: on
