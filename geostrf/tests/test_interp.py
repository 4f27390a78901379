import numpy as np
import pytest

from geostrf.errors import DegenerateBracketError
from geostrf.interp1d import make_interpolator, interp_SA_CT
from geostrf.interp1d.interp1d import _interp_bracket
from geostrf.interp1d.linear import _linterp
from geostrf.interp1d.rr68 import _rr68interp

# Irregularly spaced bottles, with a curved profile
P = np.array([0.0, 10.0, 25.0, 40.0, 60.0, 100.0])
S = np.array([34.1, 34.3, 34.9, 35.2, 35.0, 34.8])
T = np.array([25.3, 24.1, 18.7, 12.2, 9.9, 6.4])

kernels = [_linterp, _rr68interp]


@pytest.mark.parametrize("f", kernels)
@pytest.mark.parametrize("i", range(1, len(P)))
def test_bracket_endpoints_exact(f, i):
    assert _interp_bracket(f, P[i - 1], P, S, T, i) == (S[i - 1], T[i - 1])
    assert _interp_bracket(f, P[i], P, S, T, i) == (S[i], T[i])


@pytest.mark.parametrize("f", kernels)
def test_degenerate_bracket(f):
    X = np.array([0.0, 10.0, 10.0, 20.0])
    Y = np.array([1.0, 2.0, 3.0, 4.0])
    Z = np.array([5.0, 6.0, 7.0, 8.0])
    assert _interp_bracket(f, 10.0, X, Y, Z, 2) == (2.0, 6.0)


@pytest.mark.parametrize("f", kernels)
@pytest.mark.parametrize("x", [-1.0, 12.0, np.nan])
def test_outside_bracket(f, x):
    X = np.array([0.0, 10.0, 20.0])
    Y = np.array([1.0, 2.0, 3.0])
    with pytest.raises(DegenerateBracketError):
        _interp_bracket(f, x, X, Y, Y, 1)


def test_outside_degenerate_bracket():
    X = np.array([0.0, 10.0, 10.0, 20.0])
    Y = np.array([1.0, 2.0, 3.0, 4.0])
    with pytest.raises(DegenerateBracketError):
        _interp_bracket(_linterp, 5.0, X, Y, Y, 2)


def test_linear_midpoint():
    X = np.array([0.0, 10.0])
    Y = np.array([1.0, 3.0])
    Z = np.array([-4.0, 4.0])
    y, z = _interp_bracket(_linterp, 5.0, X, Y, Z, 1)
    assert np.isclose(y, 2.0) and np.isclose(z, 0.0)


def test_rr68_reproduces_parabola():
    X = np.array([0.0, 10.0, 20.0, 30.0, 40.0])
    Y = 1e-3 * X**2 + 0.02 * X + 34.0
    Z = -2e-3 * (X - 15.0) ** 2 + 20.0

    # Interior bracket, with bottles above and below: exact for a parabola
    for x in (12.5, 15.0, 17.0, 24.0, 29.0):
        i = int(np.searchsorted(X, x))
        y, z = _interp_bracket(_rr68interp, x, X, Y, Z, i)
        assert np.isclose(y, 1e-3 * x**2 + 0.02 * x + 34.0, rtol=0, atol=1e-12)
        assert np.isclose(z, -2e-3 * (x - 15.0) ** 2 + 20.0, rtol=0, atol=1e-12)

    # Top and bottom brackets lack a neighbour, so fall back to linear
    for x, i in ((5.0, 1), (35.0, 4)):
        assert _interp_bracket(_rr68interp, x, X, Y, Z, i) == _interp_bracket(
            _linterp, x, X, Y, Z, i
        )


def test_rr68_linear_data():
    X = np.array([0.0, 10.0, 25.0, 40.0, 60.0])
    Y = 0.01 * X + 34.0
    for x in np.linspace(10.0, 40.0, 13):
        i = max(1, int(np.searchsorted(X, x)))
        y, _ = _interp_bracket(_rr68interp, x, X, Y, Y, i)
        assert np.isclose(y, 0.01 * x + 34.0, rtol=0, atol=1e-12)


def test_rr68_within_parabolas():
    # The blend is a weighted mean of two parabolas, so lies between them
    X, Y = P, S
    x, i = 30.0, 3
    L = _linterp(x, X, Y, i)
    A = (Y[1] - Y[2]) * ((x - X[2]) / (X[1] - X[2])) + Y[2]
    C = (Y[4] - Y[3]) * ((x - X[3]) / (X[4] - X[3])) + Y[3]
    P1 = L + (A - L) * ((x - X[3]) / (X[1] - X[3]))
    P2 = L + (C - L) * ((x - X[2]) / (X[4] - X[2]))
    y = _rr68interp(x, X, Y, i)
    assert min(P1, P2) <= y <= max(P1, P2)
    assert y != L


def test_make_interpolator():
    assert make_interpolator("linear") is _linterp
    assert make_interpolator("LIN") is _linterp
    assert make_interpolator() is _rr68interp
    assert make_interpolator("curve") is _rr68interp
    with pytest.warns(UserWarning) as record:
        assert make_interpolator("spline") is _rr68interp
    assert [w.filename for w in record if w.category is UserWarning] == [__file__]

    with pytest.warns(UserWarning) as record:
        interp_SA_CT(S, T, P, 5.0, "spline")
    assert [w.filename for w in record if w.category is UserWarning] == [__file__]


@pytest.mark.parametrize("interp", ["curve", "linear"])
def test_interp_SA_CT_1d(interp):
    p_i = np.array([-5.0, 0.0, 5.0, 25.0, 33.3, 100.0, 120.0])
    SA_i, CT_i = interp_SA_CT(S, T, P, p_i, interp)
    assert SA_i.shape == CT_i.shape == p_i.shape

    # Outside the cast
    assert np.isnan(SA_i[[0, -1]]).all() and np.isnan(CT_i[[0, -1]]).all()

    # At bottles
    assert SA_i[1] == S[0] and SA_i[3] == S[2] and SA_i[5] == S[-1]
    assert CT_i[1] == T[0] and CT_i[3] == T[2] and CT_i[5] == T[-1]

    # Between bottles
    assert np.all(np.isfinite(SA_i[[2, 4]]))


def test_interp_SA_CT_casts():
    # Two casts, the second shallower, padded with NaN
    SA = np.stack((S, S), axis=1)
    CT = np.stack((T, T), axis=1)
    SA[3:, 1] = np.nan
    CT[3:, 1] = np.nan
    p_i = np.array([5.0, 20.0, 50.0])

    SA_i, CT_i = interp_SA_CT(SA, CT, P, p_i)
    assert SA_i.shape == (3, 2)

    SA_1, CT_1 = interp_SA_CT(S[:3], T[:3], P[:3], p_i[:2])
    assert np.array_equal(SA_i[:2, 1], SA_1)
    assert np.array_equal(CT_i[:2, 1], CT_1)
    assert np.isnan(SA_i[2, 1]) and np.isfinite(SA_i[2, 0])
