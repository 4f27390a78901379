import numpy as np
import numba as nb

from .interp1d import _interp_two
from .linear import _linterp
from .rr68 import _rr68interp
from ..lib import _process_profiles, _process_interp, valid_range_1, xr_to_np

kernels = {"linear": _linterp, "curve": _rr68interp}


def make_interpolator(interp="curve"):
    """Select the interpolation kernel.

    Parameters
    ----------
    interp : str, Default "curve"

        - If "curve", the Reiniger and Ross (1968) curve fitting kernel,
          falling back to linear interpolation between the top two and bottom
          two bottles of each cast.
        - If "linear" (or "lin"), the linear interpolation kernel.

        Other values are treated as "curve", with a warning.

    Returns
    -------
    f : function
        `numba.njit`'ed kernel with parameters `(x, X, Y, i)`.  See
        `.linear._linterp`.
    """
    return kernels[_process_interp(interp)]


@nb.njit
def _interp_casts(f, p_i, SA, CT, p):
    # Interpolate each cast (column) of SA, CT to the pressures p_i
    nk, nc = SA.shape
    SA_i = np.full((len(p_i), nc), np.nan)
    CT_i = np.full((len(p_i), nc), np.nan)
    for c in range(nc):
        k, K = valid_range_1(SA[:, c] + CT[:, c] + p[:, c])
        if K - k < 1:
            continue
        P = p[k:K, c].copy()
        S = SA[k:K, c].copy()
        T = CT[k:K, c].copy()
        for j in range(len(p_i)):
            if K - k == 1:
                if p_i[j] == P[0]:
                    SA_i[j, c], CT_i[j, c] = S[0], T[0]
            else:
                SA_i[j, c], CT_i[j, c] = _interp_two(f, p_i[j], P, S, T)
    return SA_i, CT_i


def interp_SA_CT(SA, CT, p, p_i, interp="curve"):
    """
    Interpolate Absolute Salinity and Conservative Temperature to given pressures.

    Parameters
    ----------
    SA, CT, p : ndarray or xarray.DataArray

        Absolute Salinity [g/kg], Conservative Temperature [deg C], and sea
        pressure [dbar] of one cast (1D) or of many casts (2D, vertical
        dimension first).  See `dynamic_height` for the allowed shapes.

        `p` must increase monotonically down each cast.  Casts may be padded
        with NaN below their last valid bottle.

    p_i : float or 1D array

        Pressures [dbar] at which to interpolate.

    interp : str, Default "curve"

        Interpolation method; see `make_interpolator`.

    Returns
    -------
    SA_i, CT_i : ndarray

        `SA` and `CT` interpolated to `p_i`, with shape `(len(p_i), ncasts)`,
        or `(len(p_i),)` for a single cast input as 1D, or
        `(1, len(p_i))` for a single cast input as a row.
        NaN where `p_i` lies outside a cast's valid range.
    """
    f = kernels[_process_interp(interp)]
    SA, CT, p, restore = _process_profiles(SA, CT, p)
    p_i = np.atleast_1d(np.asarray(xr_to_np(p_i), dtype=np.float64)).ravel()
    SA_i, CT_i = _interp_casts(f, p_i, SA, CT, p)
    return restore(SA_i), restore(CT_i)
