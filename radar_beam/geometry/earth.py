"""
WGS84 Earth Radius Model
========================

Local (latitude-dependent) Earth radius on the WGS84 reference ellipsoid,
and the effective radius used by the standard 4/3 refraction model.

All functions accept scalars or numpy arrays.
"""

import numpy as np


# =============================================================================
# Earth Constants
# =============================================================================

# WGS84 ellipsoid parameters
EARTH_RADIUS_MAJOR_M = 6378137.0  # semi-major axis, meters
EARTH_INV_FLATTENING = 298.257223563
EARTH_RADIUS_MINOR_M = EARTH_RADIUS_MAJOR_M * (1.0 - 1.0 / EARTH_INV_FLATTENING)

# Standard atmosphere: radio waves bend as if Earth were 4/3 larger
EFFECTIVE_RADIUS_FACTOR = 4.0 / 3.0


def earth_radius(lat_deg):
    """
    Calculate the geocentric Earth radius at a given latitude (WGS84).

    Parameters
    ----------
    lat_deg : float or array_like
        Geodetic latitude in degrees

    Returns
    -------
    radius : float or ndarray
        Distance from the Earth's center to the ellipsoid surface in meters

    Notes
    -----
    R(lat) = sqrt((a^4 cos^2 + b^4 sin^2) / (a^2 cos^2 + b^2 sin^2))

    The result equals the semi-major axis at the equator and the
    semi-minor axis at the poles. NaN input gives NaN output.
    """
    a = EARTH_RADIUS_MAJOR_M
    b = EARTH_RADIUS_MINOR_M
    lat = np.radians(lat_deg)

    cos_lat_2 = np.cos(lat) ** 2
    sin_lat_2 = np.sin(lat) ** 2

    numerator = a**4 * cos_lat_2 + b**4 * sin_lat_2
    denominator = a**2 * cos_lat_2 + b**2 * sin_lat_2

    radius = np.sqrt(numerator / denominator)
    if np.ndim(radius) == 0:
        return float(radius)
    return radius


def effective_earth_radius(lat_deg):
    """Earth radius at ``lat_deg`` scaled by the 4/3 refraction factor [m]."""
    return earth_radius(lat_deg) * 4.0 / 3.0
