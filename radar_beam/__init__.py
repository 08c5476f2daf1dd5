"""
radar-beam: Radar beam height and ground distance above the WGS84 ellipsoid.

Computes where a radar beam launched at a given elevation angle travels
under standard atmospheric refraction (4/3 effective Earth radius), and
expands tiered elevation schedules into the angles of a volume scan.

Modules
-------
geometry
    WGS84 Earth radius, beam altitude/distance, range sampling
scan
    Tiered elevation schedules
config
    Diagram configuration (JSON/YAML)
core
    Beam diagram computation (one beam path per elevation angle)
utils
    Result export (JSON, CSV)
plotting
    Beam diagram rendering (PNG, SVG)
"""

__version__ = "0.1.0"
__author__ = "radar-beam Contributors"

from radar_beam.geometry import (
    AtmosphericPoint,
    BeamPath,
    earth_radius,
    beam_point,
    iter_beam_points,
    sample_beam,
)
from radar_beam.scan import ElevationTier, ElevationSchedule, iter_elevations
from radar_beam.config import DiagramConfig
from radar_beam.core import BeamDiagram, DiagramResult

__all__ = [
    "__version__",
    "AtmosphericPoint",
    "BeamPath",
    "earth_radius",
    "beam_point",
    "iter_beam_points",
    "sample_beam",
    "ElevationTier",
    "ElevationSchedule",
    "iter_elevations",
    "DiagramConfig",
    "BeamDiagram",
    "DiagramResult",
]
