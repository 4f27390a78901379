"""Geostrophic velocity between casts, from a geostrophic streamfunction

Thin wrappers over the Gibbs SeaWater (GSW) Oceanographic Toolbox, accepting
the same array layouts and xarray inputs as `geostrf.dynamic_height`.
"""

import numpy as np
import gsw

from .errors import DimensionMismatchError, InsufficientLevelsError
from .lib import xr_to_np


def coriolis(lat):
    """Coriolis parameter [s-1] at latitude `lat` [degrees North]"""
    return gsw.f(xr_to_np(lat))


def distance(lon, lat):
    """
    Great-circle distance between consecutive points on a spherical Earth.

    Parameters
    ----------
    lon, lat : 1D array
        Longitude [degrees East] and latitude [degrees North] of each cast.

    Returns
    -------
    dist : 1D array
        `dist[j]` is the distance [m] from cast `j` to cast `j + 1`.
    """
    lon, lat = (np.asarray(xr_to_np(x), dtype=np.float64) for x in (lon, lat))
    if lon.shape != lat.shape or lon.ndim != 1:
        raise DimensionMismatchError("lon and lat must be 1D and of equal length")
    return gsw.distance(lon, lat)


def geostrophic_velocity(geo_strf, lon, lat):
    """
    Geostrophic velocity between adjacent casts.

    Parameters
    ----------
    geo_strf : ndarray
        Geostrophic streamfunction [m2 s-2], such as from `dynamic_height` or
        `montgomery_streamfunction`, 2D with the vertical dimension first so
        `geo_strf[:, j]` is the `j`'th cast.  A 1D `geo_strf` is one level.

    lon, lat : 1D array
        Longitude [degrees East] and latitude [degrees North] of each cast.

    Returns
    -------
    vel : ndarray
        `vel[:, j]` is the geostrophic velocity [m s-1] between casts `j` and
        `j + 1`, relative to the reference of `geo_strf`, perpendicular to
        the line joining the casts: `(geo_strf[:, j+1] - geo_strf[:, j]) / (f * dist)`
        with `f` the Coriolis parameter at the mid-point latitude.

    mid_lon, mid_lat : 1D array
        Longitude and latitude of the mid-point between adjacent casts.
    """
    geo_strf = np.asarray(xr_to_np(geo_strf), dtype=np.float64)
    lon, lat = (np.asarray(xr_to_np(x), dtype=np.float64) for x in (lon, lat))

    if geo_strf.ndim == 1:
        geo_strf = geo_strf.reshape(1, -1)
    if (
        geo_strf.ndim != 2
        or lon.ndim != 1
        or geo_strf.shape[1] != lon.size
        or lon.shape != lat.shape
    ):
        raise DimensionMismatchError(
            f"geo_strf has {geo_strf.shape[-1]} casts but lon and lat have"
            f" {lon.size} and {lat.size} elements"
        )
    if lon.size < 2:
        raise InsufficientLevelsError("Need at least two casts")

    return gsw.geostrophic_velocity(geo_strf, lon, lat)


__all__ = ["coriolis", "distance", "geostrophic_velocity"]
