"""
Beam Propagation Above the Ellipsoid
====================================

Altitude and ground distance of a radar beam under the standard 4/3
effective-Earth-radius refraction model, for a single range sample and
for an evenly sampled range interval.

References
----------
- Doviak, R.J. & Zrnic, D.S. (1993). Doppler Radar and Weather
  Observations, 2nd ed. Academic Press. Eqs. 2.28b and 2.28c.
- wradlib.georef.misc.bin_altitude / site_distance
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple

import numpy as np

from radar_beam.geometry.earth import effective_earth_radius


@dataclass(frozen=True)
class AtmosphericPoint:
    """
    One sample of a beam path.

    Attributes
    ----------
    altitude_m : float
        Beam height above the ellipsoid in meters
    distance_m : float
        Great-circle distance from the site along the ground in meters
    """
    altitude_m: float
    distance_m: float


def beam_point(
    range_m: float,
    elevation_deg: float,
    lat_deg: float,
    site_alt_m: float,
) -> AtmosphericPoint:
    """
    Calculate beam altitude and ground distance at a given slant range.

    Parameters
    ----------
    range_m : float
        Slant range along the beam in meters
    elevation_deg : float
        Elevation angle of the beam in degrees
    lat_deg : float
        Site latitude in degrees
    site_alt_m : float
        Site altitude above the ellipsoid in meters

    Returns
    -------
    point : AtmosphericPoint
        Beam altitude and ground distance

    Notes
    -----
    The altitude follows from the law of cosines in the vertical plane
    through the site and the Earth's center:

        z = sqrt(r^2 + (R' + h0)^2 + 2 r (R' + h0) sin(el)) - R'
        s = R' asin(r cos(el) / (R' + z))

    with R' = 4/3 R(lat). Combinations for which the asin argument leaves
    [-1, 1] give NaN.
    """
    el = np.radians(elevation_deg)
    r_eff = effective_earth_radius(lat_deg)
    sr = r_eff + site_alt_m

    with np.errstate(invalid="ignore"):
        z = np.sqrt(range_m * range_m + sr * sr + range_m * sr * 2.0 * np.sin(el)) - r_eff
        s = r_eff * np.arcsin((range_m * np.cos(el)) / (r_eff + z))

    return AtmosphericPoint(altitude_m=float(z), distance_m=float(s))


def iter_beam_points(
    max_range_m: float,
    n_sections: int,
    elevation_deg: float,
    lat_deg: float,
    site_alt_m: float,
) -> Iterator[AtmosphericPoint]:
    """
    Lazily sample a beam at ``n_sections + 1`` equally spaced ranges.

    The first point is the site itself (range 0), the last one is at
    ``max_range_m``. Points come in ascending range order.

    Raises
    ------
    ValueError
        If ``n_sections`` is not a positive integer
    """
    if isinstance(n_sections, bool) or not isinstance(n_sections, (int, np.integer)):
        raise ValueError(f"n_sections must be an integer, got {n_sections!r}")
    if n_sections < 1:
        raise ValueError(f"n_sections must be at least 1, got {n_sections}")

    step = max_range_m / n_sections
    return (
        beam_point(step * i, elevation_deg, lat_deg, site_alt_m)
        for i in range(n_sections + 1)
    )


@dataclass(eq=False)
class BeamPath:
    """
    Sampled path of a single beam.

    Attributes
    ----------
    elevation_deg : float
        Elevation angle of the beam in degrees
    points : tuple of AtmosphericPoint
        Samples in ascending range order
    ranges_m : ndarray
        Slant range of each sample in meters
    """
    elevation_deg: float
    points: Tuple[AtmosphericPoint, ...]
    ranges_m: np.ndarray = field(repr=False)

    @property
    def altitudes_m(self) -> np.ndarray:
        """Beam altitude at each sample [m]."""
        return np.array([p.altitude_m for p in self.points])

    @property
    def distances_m(self) -> np.ndarray:
        """Ground distance at each sample [m]."""
        return np.array([p.distance_m for p in self.points])

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[AtmosphericPoint]:
        return iter(self.points)

    def altitude_at_distance(self, distance_m: float) -> float:
        """
        Interpolate the beam altitude at a ground distance.

        Returns NaN beyond the last sample.
        """
        distances = self.distances_m
        valid = np.isfinite(distances)
        if not valid.any():
            return float("nan")
        return float(np.interp(
            distance_m,
            distances[valid],
            self.altitudes_m[valid],
            right=np.nan,
        ))


def sample_beam(
    max_range_m: float,
    n_sections: int,
    elevation_deg: float,
    lat_deg: float,
    site_alt_m: float,
) -> BeamPath:
    """
    Sample a beam over ``[0, max_range_m]`` and collect it into a BeamPath.

    See :func:`iter_beam_points` for the sampling rule.
    """
    points = tuple(
        iter_beam_points(max_range_m, n_sections, elevation_deg, lat_deg, site_alt_m)
    )
    step = max_range_m / n_sections
    ranges = np.array([step * i for i in range(n_sections + 1)])
    return BeamPath(elevation_deg=elevation_deg, points=points, ranges_m=ranges)
