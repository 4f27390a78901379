"""Core functions to interpolate two dependent variables (Absolute Salinity
and Conservative Temperature) in terms of one independent variable (pressure),
given an interpolation kernel (such as in `.linear` or `.rr68`).

The kernels only ever see evaluation sites strictly inside a bracketing pair
of bottles.  Everything else (the bottles themselves, a degenerate pair of
bottles at the same pressure, and sites outside the bracket) is handled here.
"""

import numpy as np
import numba as nb

from ..errors import DegenerateBracketError


@nb.njit
def _interp_bracket(f, x, X, Y, Z, i):
    """
    Apply a given kernel of interpolation to two dependent data arrays,
    within a known bracket.

    Parameters
    ----------
    f : function

        The "kernel" of interpolation, with parameters `(x, X, Y, i)` and
        returning `Y` as a function of `X` interpolated to `x`.  It is only
        called when `X[i-1] < x < X[i]`.

    x : float
        Evaluation site

    X : ndarray(float, 1d)
        The independent data, monotonically increasing.

    Y, Z : ndarray(float, 1d)
        The dependent data, with the same length as `X`.

    i : int
        The bracket, `1 <= i <= len(X) - 1`, such that `X[i-1] <= x <= X[i]`.

    Returns
    -------
    y, z : float
        The values of `Y` and `Z` interpolated to `X` at `x`.

    Raises
    ------
    DegenerateBracketError
        If `x` is not within `[X[i-1], X[i]]`.
    """
    if x == X[i - 1] or X[i] == X[i - 1]:
        if x != X[i - 1]:
            raise DegenerateBracketError("Interpolation site outside its bracket")
        return Y[i - 1], Z[i - 1]
    if x == X[i]:
        return Y[i], Z[i]
    if not (X[i - 1] < x < X[i]):
        raise DegenerateBracketError("Interpolation site outside its bracket")
    return f(x, X, Y, i), f(x, X, Z, i)


@nb.njit
def _interp_two(f, x, X, Y, Z):
    """As `_interp_bracket` but first finds the bracket containing `x`.

    Returns NaN's if `x` is NaN or outside `[X[0], X[-1]]`.
    """
    if np.isnan(x) or x < X[0] or X[-1] < x or np.isnan(X[0]):
        return np.nan, np.nan

    # Having guaranteed X[0] <= x <= X[-1], merge the cases x == X[0] and
    # X[i-1] < x <= X[i] so that 1 <= i <= len(X) - 1.
    i = max(1, np.searchsorted(X, x))
    return _interp_bracket(f, x, X, Y, Z, i)
