"""Kernel for the "curve fitting" interpolation of Reiniger and Ross (1968) [1]_

Within the bracket `X[i-1] < x < X[i]`, two parabolas are formed: one through
the bracketing pair and the bottle above it, one through the bracketing pair
and the bottle below it.  Each is written as the linear interpolant plus a
correction proportional to the deviation of a linear extrapolation (from the
pair of bottles above, or below) from the linear interpolant.  The result is
the mean of the two parabolas, each weighted by the other's deviation from the
linear interpolant, so the parabola that bends least dominates.  Where a
neighbouring bottle is missing, the kernel reduces to linear interpolation.

.. [1] Reiniger, R. F. and C. K. Ross, 1968: A method of interpolation with
   application to oceanographic data.  Deep-Sea Res. 15, 185-193.
"""
import numba as nb

from .linear import _linterp


@nb.njit
def _rr68interp(x, X, Y, i):
    """
    The "kernel" of Reiniger and Ross (1968) interpolation.

    Parameters
    ----------
    x, X, Y, i :
        As in `.linear._linterp`.  The bottles `X[i-2]` and `X[i+1]` are used
        when they exist.

    Returns
    -------
    y : float
        The value of `Y` interpolated to `X` at `x`.
    """

    L = _linterp(x, X, Y, i)

    # No bottle above or below the bracket
    if i < 2 or i > len(X) - 2:
        return L

    pa, p0, p1, pb = X[i - 2], X[i - 1], X[i], X[i + 1]
    if pa == p0 or pb == p1:
        return L
    ya, y0, y1, yb = Y[i - 2], Y[i - 1], Y[i], Y[i + 1]

    # Linear extrapolations from the pairs above and below
    A = (ya - y0) * ((x - p0) / (pa - p0)) + y0
    C = (yb - y1) * ((x - p1) / (pb - p1)) + y1

    # Parabolas through (pa, p0, p1) and through (p0, p1, pb)
    P1 = L + (A - L) * ((x - p1) / (pa - p1))
    P2 = L + (C - L) * ((x - p0) / (pb - p0))

    d1 = abs(P1 - L)
    d2 = abs(P2 - L)
    if d1 + d2 == 0.0:
        return L
    return (d2 * P1 + d1 * P2) / (d1 + d2)
