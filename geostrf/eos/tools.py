"""Tools for handling the Equation of State"""

import functools as ft
import numpy as np
import numba as nb
import importlib

# Dictionary mapping names of modules in the same directory as this file to
# the name of the specific volume function they provide.
modules = {"gsw": "specvol"}


@ft.lru_cache(maxsize=10)
def load_eos(eos, derivs=""):
    """Load EOS function from library.

    Parameters
    ----------
    eos : str

        Currently only `'gsw'`, giving the 75 term approximation [1]_ of the
        TEOS-10 [2]_ specific volume.

    derivs : str, Default ""

        Suffix appended to the function name.  For example, "" loads the
        specific volume itself and "_anom" loads the specific volume anomaly.

    Returns
    -------
    fn: function

        `numba.njit`'ed function of (Absolute Salinity, Conservative
        Temperature, pressure), accepting scalar inputs.

    Notes
    -----
    .. [1] Roquet, F., G. Madec, Trevor J. McDougall, and Paul M. Barker. “Accurate
       Polynomial Expressions for the Density and Specific Volume of Seawater Using
       the TEOS-10 Standard.” Ocean Modelling 90 (June 2015): 29-43.
       https://doi.org/10.1016/j.ocemod.2015.04.002.

    .. [2] McDougall, T.J. and P.M. Barker, 2011: Getting started with TEOS-10 and
       the Gibbs Seawater (GSW) Oceanographic Toolbox, 28pp., SCOR/IAPSO WG127,
       SBN 978-0-646-55621-5.
    """

    if eos in modules:
        fcn_name = modules[eos] + derivs
        try:
            fn = getattr(importlib.import_module("geostrf.eos." + eos), fcn_name)
        except AttributeError:
            raise ValueError(f"Equation of state {eos} has no function {fcn_name}")
    else:
        raise ValueError(
            f"Equation of state {eos} not (yet) implemented."
            " Currently, eos must be one of " + modules.__str__()
        )

    return fn


@ft.lru_cache(maxsize=10)
def vectorize_eos(eos):
    """Convert an `eos` function that takes scalar inputs into one taking arrays.

    Parameters
    ----------
    eos : function
        Any function taking three scalar inputs and returning one scalar
        output, such as the equation of state.

    Returns
    -------
    eos_vec : function
        A `@numba.vectorize`'d version of `eos`, which can take array inputs and
        returns one array output.  The array inputs' shape need not match
        exactly, but must be broadcastable to each other.
    """

    @nb.vectorize
    def eos_vec(s, t, p):
        return eos(s, t, p)

    # suppress RuntimeWarning when NaN's present in `s` array.
    # see https://github.com/numba/numba/issues/4793
    def eos_vec_nowarning(s, t, p):
        with np.errstate(invalid="ignore"):
            return eos_vec(s, t, p)

    return eos_vec_nowarning
