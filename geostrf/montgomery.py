"""Montgomery geostrophic streamfunction"""

from .dynheight import _dynamic_height, _summarize, db2Pa
from .eos.gsw import specvol, SSO
from .eos.tools import vectorize_eos
from .lib import _process_profiles, _process_eos, _process_interp


def montgomery_streamfunction(
    SA, CT, p, interp="curve", eos=specvol, verbose=False
):
    """Calculate the Montgomery geostrophic streamfunction

    This is the geostrophic streamfunction for flow in a specific volume
    anomaly surface (Montgomery, 1937), relative to the flow at the first
    bottle.  The reference values for the specific volume anomaly are
    SA = SSO = 35.16504 g/kg and CT = 0 deg C.  It is the sum of
    `p * δ(SA, CT, p)` (in Pa) and the dynamic height anomaly, the latter
    integrated with nodes no more than 1 dbar apart.

    Parameters
    ----------
    SA, CT, p, interp, eos, verbose :
        See `geostrf.dynamic_height`.

    Returns
    -------
    geo_strf_Montgomery : ndarray or xarray.DataArray

        Montgomery geostrophic streamfunction [m2 s-2], shaped like `SA`.

    in_funnel : ndarray or xarray.DataArray of bool

        As for `geostrf.dynamic_height`.  The reference state (SSO, 0 deg C)
        lies inside the funnel, so only the dynamic height contributes.

    Notes
    -----
    .. [1] IOC, SCOR and IAPSO, 2010: The international thermodynamic
       equation of seawater - 2010: Calculation and use of thermodynamic
       properties.  Intergovernmental Oceanographic Commission, Manuals and
       Guides No. 56, UNESCO (English), 196 pp.  See Eqn. (3.28.1).

    .. [2] Montgomery, R. B., 1937: A suggested method for representing
       gradient flow in isentropic surfaces.  Bull. Amer. Meteor. Soc. 18,
       210-212.
    """

    interp = _process_interp(interp)
    eos = _process_eos(eos)
    SA, CT, p, restore = _process_profiles(SA, CT, p)

    h, ok = _dynamic_height(SA, CT, p, 1.0, interp, eos)

    eos_ufunc = vectorize_eos(eos)
    strf = db2Pa * p * (eos_ufunc(SA, CT, p) - eos_ufunc(SSO, 0.0, p)) + h

    if verbose:
        _summarize("Montgomery streamfunction", strf, ok)

    return restore(strf), restore(ok)


__all__ = ["montgomery_streamfunction"]
