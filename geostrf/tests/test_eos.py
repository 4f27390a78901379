import numpy as np
import pytest

from geostrf.eos import load_eos, vectorize_eos
from geostrf.eos.gsw import specvol, specvol_SSO_0, specvol_anom, SSO

specvol_ufunc = vectorize_eos(specvol)
specvol_anom_ufunc = vectorize_eos(specvol_anom)


# Check value from Roquet et al (2015), as computed by the GSW toolbox
def test_checkval():
    assert np.round(specvol(35.0, 25.0, 2000.0), decimals=18) == 9.694293111803510e-04


@pytest.mark.parametrize("p", [0.0, 10.0, 1000.0, 6000.0])
def test_anom_zero_at_reference(p):
    assert specvol_anom(SSO, 0.0, p) == 0.0
    assert specvol_SSO_0(p) == specvol(SSO, 0.0, p)


def test_anom_sign():
    # Warm, fresh water is lighter than the reference state
    assert specvol_anom(34.7, 28.8, 10.0) > 0
    # Cold, salty water is denser
    assert specvol_anom(36.0, -1.0, 10.0) < 0


def test_ufunc_array():
    # Smoketest: broadcasting
    s = np.full((4, 5), 35.0)
    t = np.full((5,), 25.0)
    p = 2000.0
    res = specvol_ufunc(s, t, p)
    assert res.shape == s.shape
    assert np.allclose(res, specvol(35.0, 25.0, 2000.0), rtol=0, atol=1e-18)


def test_ufunc_nan():
    res = specvol_anom_ufunc(np.array([35.0, np.nan]), 10.0, 100.0)
    assert np.isfinite(res[0]) and np.isnan(res[1])


def test_load_eos():
    assert load_eos("gsw") is specvol
    assert load_eos("gsw", "_anom") is specvol_anom
    with pytest.raises(ValueError):
        load_eos("jmd95")
    with pytest.raises(ValueError):
        load_eos("gsw", "_nonexistent")
