"""Dynamic height anomaly, the geostrophic streamfunction on isobaric surfaces"""

import numpy as np
import numba as nb

from .eos.gsw import specvol, SSO
from .funnel import _infunnel
from .interp1d import make_interpolator
from .interp1d.interp1d import _interp_bracket
from .lib import (
    _process_profiles,
    _process_eos,
    _process_delta_p,
    _process_interp,
    valid_range_1,
)

# Conversion from dbar to Pa
db2Pa = 1e4


@nb.njit
def _anom(eos, SA, CT, p):
    return eos(SA, CT, p) - eos(SSO, 0.0, p)


@nb.njit
def _dyn_height_1(f, SA, CT, p, delta_p, eos):
    """
    Dynamic height anomaly of one cast.

    Parameters
    ----------
    f : function
        Interpolation kernel; see `.interp1d.linear._linterp`.

    SA, CT, p : ndarray(float, 1d)
        One cast, with no NaN's and at least one bottle.

    delta_p : float
        Maximum pressure interval [dbar] between nodes of the integration.

    eos : function
        Specific volume as a function of (SA, CT, p).

    Returns
    -------
    h : ndarray(float, 1d)
        Dynamic height anomaly [m2 s-2] at each bottle, 0 at the first.

    ok : ndarray(bool, 1d)
        True where every node contributing to `h` was inside the funnel.
    """
    n = len(p)
    h = np.empty(n, dtype=np.float64)
    ok = np.empty(n, dtype=np.bool_)
    h[0] = 0.0
    ok[0] = _infunnel(SA[0], CT[0], p[0])

    total = 0.0
    for i in range(n - 1):
        dp = p[i + 1] - p[i]
        valid = ok[i]
        a_top = _anom(eos, SA[i], CT[i], p[i])
        k = int(np.ceil(dp / delta_p))
        if k <= 1:
            a_bot = _anom(eos, SA[i + 1], CT[i + 1], p[i + 1])
            total += 0.5 * (a_top + a_bot) * dp
            valid = valid and _infunnel(SA[i + 1], CT[i + 1], p[i + 1])
        else:
            p_top = p[i]
            for j in range(1, k + 1):
                if j == k:
                    p_j = p[i + 1]
                    s, t = SA[i + 1], CT[i + 1]
                else:
                    p_j = p[i] + dp * (j / k)
                    s, t = _interp_bracket(f, p_j, p, SA, CT, i + 1)
                a_bot = _anom(eos, s, t, p_j)
                total += 0.5 * (a_top + a_bot) * (p_j - p_top)
                valid = valid and _infunnel(s, t, p_j)
                a_top = a_bot
                p_top = p_j
        h[i + 1] = -db2Pa * total
        ok[i + 1] = valid
    return h, ok


@nb.njit
def _dyn_height(f, SA, CT, p, delta_p, eos):
    # Loop over casts, i.e. columns of SA, CT, p.  Casts are independent;
    # bottles within a cast are integrated in order.
    nk, nc = SA.shape
    h = np.full((nk, nc), np.nan)
    ok = np.zeros((nk, nc), dtype=np.bool_)
    for c in range(nc):
        k, K = valid_range_1(SA[:, c] + CT[:, c] + p[:, c])
        if K - k < 1:
            continue
        h1, ok1 = _dyn_height_1(
            f,
            SA[k:K, c].copy(),
            CT[k:K, c].copy(),
            p[k:K, c].copy(),
            delta_p,
            eos,
        )
        h[k:K, c] = h1
        ok[k:K, c] = ok1
    return h, ok


def _dynamic_height(SA, CT, p, delta_p, interp, eos):
    # As `dynamic_height` but on canonical (nk, ncasts) arrays
    f = make_interpolator(interp)
    return _dyn_height(f, SA, CT, p, delta_p, eos)


def dynamic_height(
    SA, CT, p, delta_p=1.0, interp="curve", eos=specvol, verbose=False
):
    """Calculate the dynamic height anomaly, referenced to the first bottle

    The dynamic height anomaly is the geostrophic streamfunction for the
    difference between the horizontal velocity at the pressure concerned, `p`,
    and the horizontal velocity at the first bottle (usually, the sea surface).
    It is minus the pressure integral of the specific volume anomaly, whose
    reference values are SA = SSO = 35.16504 g/kg and CT = 0 deg C.

    Between each pair of bottles, the specific volume anomaly is integrated by
    the trapezoidal rule on equally spaced nodes no further apart than
    `delta_p`, at which `SA` and `CT` are interpolated from the bottle data.

    Parameters
    ----------
    SA, CT : ndarray or xarray.DataArray

        Absolute Salinity [g/kg] and Conservative Temperature [deg C].
        Either 1D, being one cast, or 2D with the vertical dimension first,
        so `SA[:, n]` is the `n`'th cast.  A 2D array with one row is taken
        to be a single cast stored as a row; the output is then a row too.

        Casts may be padded with NaN, in which case only the first contiguous
        block of valid data in each cast is used.

    p : ndarray or xarray.DataArray

        Sea pressure [dbar], increasing monotonically down each cast.
        For 2D `SA` of shape (M, N), `p` can be (M, N), or (M, 1) or 1D of
        length M (the same pressures for every cast), or (1, N) or 1D of
        length N (copied down each column).

    delta_p : float, Default 1.0

        Maximum pressure interval [dbar] between the integration nodes.

    interp : str, Default "curve"

        Vertical interpolation between bottles.  Use `'curve'` for the
        Reiniger and Ross (1968) curve fitting method, and `'linear'` for
        linear interpolation.  Other values are treated as `'curve'`.

    eos : function, Default `geostrf.eos.gsw.specvol`

        Specific volume [m3 kg-1] as a `numba.njit`'ed function of scalar
        (SA, CT, p), or the name of one known to `geostrf.eos.load_eos`.

    verbose : bool, Default False

        Whether to print a summary of the calculation.

    Returns
    -------
    dyn_height : ndarray or xarray.DataArray

        Dynamic height anomaly [m2 s-2], shaped like `SA`.  Exactly 0 at the
        first valid bottle of each cast and NaN where the data is invalid.

    in_funnel : ndarray or xarray.DataArray of bool

        True where every node used to compute `dyn_height`, from the first
        bottle down to this one, lies inside the oceanographic funnel.

    Raises
    ------
    DimensionMismatchError
        If the shapes of `SA`, `CT` and `p` disagree.

    InsufficientLevelsError
        If `p` is a scalar or there are fewer than two vertical levels.

    Notes
    -----
    .. [1] IOC, SCOR and IAPSO, 2010: The international thermodynamic
       equation of seawater - 2010: Calculation and use of thermodynamic
       properties.  Intergovernmental Oceanographic Commission, Manuals and
       Guides No. 56, UNESCO (English), 196 pp.  See section 3.27.

    .. [2] Reiniger, R. F. and C. K. Ross, 1968: A method of interpolation
       with application to oceanographic data.  Deep-Sea Res. 15, 185-193.
    """

    interp = _process_interp(interp)
    eos = _process_eos(eos)
    delta_p = _process_delta_p(delta_p)
    SA, CT, p, restore = _process_profiles(SA, CT, p)

    h, ok = _dynamic_height(SA, CT, p, delta_p, interp, eos)

    if verbose:
        _summarize("Dynamic height", h, ok)

    return restore(h), restore(ok)


def _summarize(name, x, ok):
    nk, nc = x.shape
    n_valid = np.sum(np.isfinite(x))
    print(
        f"{name}: {nc} casts of {nk} levels; {n_valid - np.sum(ok)} of"
        f" {n_valid} valid values from outside the funnel"
    )


__all__ = ["dynamic_height"]
