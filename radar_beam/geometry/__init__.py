"""
Beam Geometry Module
====================

Radar beam propagation in the vertical plane through the site:

- WGS84 local Earth radius
- 4/3 effective-Earth-radius refraction model
- Beam altitude and ground distance versus slant range
- Evenly sampled beam paths

References
----------
- Doviak, R.J. & Zrnic, D.S. (1993). Doppler Radar and Weather
  Observations. Academic Press.
- NIMA TR8350.2 (2000). Department of Defense World Geodetic System 1984.
"""

from radar_beam.geometry.earth import (
    # Earth constants
    EARTH_RADIUS_MAJOR_M,
    EARTH_RADIUS_MINOR_M,
    EARTH_INV_FLATTENING,
    EFFECTIVE_RADIUS_FACTOR,
    earth_radius,
    effective_earth_radius,
)

from radar_beam.geometry.beam import (
    # Beam propagation
    AtmosphericPoint,
    BeamPath,
    beam_point,
    iter_beam_points,
    sample_beam,
)

__all__ = [
    # Earth constants
    "EARTH_RADIUS_MAJOR_M",
    "EARTH_RADIUS_MINOR_M",
    "EARTH_INV_FLATTENING",
    "EFFECTIVE_RADIUS_FACTOR",
    "earth_radius",
    "effective_earth_radius",
    # Beam propagation
    "AtmosphericPoint",
    "BeamPath",
    "beam_point",
    "iter_beam_points",
    "sample_beam",
]
