"""
Functions for interpolating Absolute Salinity and Conservative Temperature in
the vertical, between the bottles of a cast, either linearly or by the
"curve fitting" method of Reiniger and Ross (1968).
"""
from .tools import make_interpolator, interp_SA_CT
