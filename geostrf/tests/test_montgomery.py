import numpy as np
import pytest

from geostrf import dynamic_height, montgomery_streamfunction
from geostrf.eos import vectorize_eos
from geostrf.eos.gsw import specvol_anom

specvol_anom_ufunc = vectorize_eos(specvol_anom)


def make_casts(nc=3, nk=9):
    p = np.linspace(0, 1, nk) ** 1.5 * 2000.0
    SA = 34.5 + 0.6 * np.sqrt(p / 2000.0)[:, None] + np.linspace(0, 0.1, nc)
    CT = 2.0 + 20.0 * np.exp(-p / 300.0)[:, None] - np.linspace(0, 1.0, nc)
    return SA, CT, p


@pytest.mark.parametrize("interp", ["curve", "linear"])
def test_montgomery_composition(interp):
    SA, CT, p = make_casts()
    strf, ok = montgomery_streamfunction(SA, CT, p, interp)
    h, ok_h = dynamic_height(SA, CT, p, 1.0, interp)

    expected = 1e4 * p[:, None] * specvol_anom_ufunc(SA, CT, p[:, None]) + h
    assert strf.shape == SA.shape
    assert np.allclose(strf, expected, rtol=1e-12, atol=1e-12)
    assert np.array_equal(ok, ok_h)


def test_montgomery_worked_example():
    SA = np.array([34.7118, 34.8915])
    CT = np.array([28.8099, 28.4392])
    p = np.array([10.0, 50.0])
    strf, ok = montgomery_streamfunction(SA, CT, p)

    # At the first bottle, only the p * anomaly term remains
    assert np.isclose(strf[0], 1e4 * 10.0 * specvol_anom(SA[0], CT[0], 10.0))
    assert strf[0] > 0
    assert np.all(ok)


def test_montgomery_row_column_symmetry():
    SA, CT, p = make_casts(nc=1)
    strf_col, _ = montgomery_streamfunction(SA, CT, p[:, None])
    strf_row, _ = montgomery_streamfunction(SA.T, CT.T, p[None, :])
    assert strf_row.shape == (1, p.size)
    assert np.array_equal(strf_row, strf_col.T)


def test_montgomery_verbose(capsys):
    SA, CT, p = make_casts()
    montgomery_streamfunction(SA, CT, p, verbose=True)
    assert "Montgomery streamfunction: 3 casts of 9 levels" in capsys.readouterr().out


def test_montgomery_unknown_interp_warns_at_caller():
    SA, CT, p = make_casts()
    with pytest.warns(UserWarning) as record:
        strf, _ = montgomery_streamfunction(SA, CT, p, interp="quadratic")
    assert [w.filename for w in record if w.category is UserWarning] == [__file__]
    assert np.array_equal(strf, montgomery_streamfunction(SA, CT, p)[0])
