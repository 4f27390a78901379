"""Library of simple functions for geostrf"""

import warnings

import numpy as np
import numba as nb
import xarray as xr

from .errors import DimensionMismatchError, InsufficientLevelsError
from .eos.tools import load_eos


@nb.njit
def valid_range_1(X):
    """The index to the first finite value and to the first NaN after the former

    Parameters
    ----------
    X : 1D array
        Input array possibly containing some NaN elements

    Returns
    -------
    k : int
        First `k` such that `X[k]` is finite.
        If `X[i]` is NaN for all `i`, then `k = len(X)`.

    K : int
        If `X[i]` is NaN for all `i > k`, then `K = len(X)`.
        If `X[i]` is finite for all `i > k`, then `K = len(X)`.
        Otherwise, `K` is the first index after `k` such that `X[K]` is NaN.

    Notes
    -----
    `X[i]` is non-NaN for `i = k, ..., K - 1`.
    `K - k` is the size of the first contiguous block of valid values of `X`.
    """
    k = K = len(X)

    # Find k = index to first valid data site
    for i in range(K):
        if np.isfinite(X[i]):
            k = i
            break

    # Find K, such that K-1 = index to last valid data site
    for i in range(k, K):
        if not np.isfinite(X[i]):
            K = i
            break

    return k, K


def xr_to_np(S):
    """Convert xarray into numpy array"""
    if hasattr(S, "values"):
        S = S.values
    return S


def _xr_out(s, sxr):
    # Return xarrays if inputs were xarrays
    if isinstance(sxr, xr.DataArray) and s.shape == sxr.shape:
        out = xr.full_like(sxr, 0, dtype=s.dtype)
        out.data = s
        return out
    else:
        return s


def _process_profiles(SA, CT, p):
    """Reconcile the shapes of `SA`, `CT` and `p` into one canonical orientation.

    Parameters
    ----------
    SA, CT : ndarray or xarray.DataArray

        Absolute Salinity and Conservative Temperature.  Either 1D (a single
        cast) or 2D with the vertical dimension first, i.e. `SA[k, n]` is the
        `k`'th bottle of the `n`'th cast.  A 2D array with one row is a
        single cast stored as a row.

    p : ndarray or xarray.DataArray

        Sea pressure.  For 2D `SA` of shape (M, N), `p` can be (M, N), or
        (M, 1) or 1D of length M (copied across casts), or (1, N) or 1D of
        length N (copied down each column).  For 1D `SA`, `p` must match.

    Returns
    -------
    SA, CT, p : ndarray

        2D float64 arrays of shape (nk, ncasts), vertical dimension first.

    restore : function

        Maps a (nk, ncasts) result back to the shape and orientation of the
        input `SA`, as an xarray.DataArray if `SA` was one.

    Raises
    ------
    DimensionMismatchError
        If `SA` and `CT` differ in shape, or `p` cannot be broadcast to them.

    InsufficientLevelsError
        If `p` is a scalar, or there are fewer than two vertical levels.
    """

    SA_in = SA
    SA, CT, p = (np.asarray(xr_to_np(x), dtype=np.float64) for x in (SA, CT, p))

    if SA.shape != CT.shape:
        raise DimensionMismatchError(
            f"SA and CT need to have the same dimensions; got {SA.shape} and {CT.shape}"
        )
    if SA.ndim not in (1, 2):
        raise DimensionMismatchError(
            f"SA and CT must be 1 or 2 dimensional; got {SA.ndim} dimensions"
        )
    if p.size == 1:
        raise InsufficientLevelsError("Need more than one pressure")

    if SA.ndim == 1:
        if p.shape != SA.shape:
            raise DimensionMismatchError(
                f"p must match the shape of SA for a single cast; got {p.shape} and {SA.shape}"
            )
        SA, CT, p = (x.reshape(-1, 1) for x in (SA, CT, p))

        def restore(x):
            return _xr_out(x[:, 0], SA_in)

    else:
        M, N = SA.shape
        if p.ndim == 1:
            # A 1D vector of pressures is preferentially the vertical coordinate
            if len(p) == M:
                p = p.reshape(M, 1)
            elif len(p) == N:
                p = p.reshape(1, N)
        if p.shape in ((M, 1), (1, N)):
            p = np.broadcast_to(p, (M, N))
        elif p.shape != (M, N):
            raise DimensionMismatchError(
                f"Inputs array dimensions do not agree; SA is {SA.shape} but p is {p.shape}"
            )

        if M == 1:
            # A single cast stored as a row
            SA, CT, p = (x.T for x in (SA, CT, p))

            def restore(x):
                return _xr_out(x.T, SA_in)

        else:

            def restore(x):
                return _xr_out(x, SA_in)

    if SA.shape[0] < 2:
        raise InsufficientLevelsError(
            f"Need at least two pressure levels; got {SA.shape[0]}"
        )

    SA, CT, p = (np.require(x, dtype=np.float64, requirements="C") for x in (SA, CT, p))
    return SA, CT, p, restore


def _process_interp(interp):
    """Convert the interpolation option into one of "curve" or "linear".

    Call this directly from a public function, so any warning is attributed
    to the caller of that function.
    """
    if isinstance(interp, str):
        key = interp.strip().lower()
        if key in ("linear", "lin"):
            return "linear"
        if key == "curve":
            return "curve"
    warnings.warn(
        f'Unrecognized interpolation "{interp}"; using "curve". '
        'Expected one of "curve" or "linear".',
        UserWarning,
        3,
    )
    return "curve"


def _process_eos(eos):
    # Process equation of state argument into a numba.njit'ed scalar function
    if isinstance(eos, str):
        eos = load_eos(eos)
    if not callable(eos):
        raise ValueError("If `eos` is not a str, expected a function.")
    return eos


def _process_delta_p(delta_p):
    delta_p = float(delta_p)
    if not (np.isfinite(delta_p) and delta_p > 0):
        raise ValueError(f"delta_p must be positive and finite; got {delta_p}")
    return delta_p
