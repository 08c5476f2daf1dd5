"""
Scan strategy: tiered elevation schedules.
"""

from radar_beam.scan.elevations import (
    ELEVATION_CODE_TO_DEGREE_FACTOR,
    DEFAULT_ELEVATION_TIERS,
    ElevationTier,
    ElevationSchedule,
    tier_ranges,
    iter_elevations,
)

__all__ = [
    "ELEVATION_CODE_TO_DEGREE_FACTOR",
    "DEFAULT_ELEVATION_TIERS",
    "ElevationTier",
    "ElevationSchedule",
    "tier_ranges",
    "iter_elevations",
]
