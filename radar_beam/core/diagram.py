"""
Beam diagram computation.

Ties the pieces together: expand the elevation schedule, then sample
one beam path per elevation angle at the configured site.
"""

import logging
from typing import Dict, Any, Iterable, Iterator, List, Tuple
from pathlib import Path
from dataclasses import dataclass
import numpy as np

from radar_beam.config.settings import DiagramConfig
from radar_beam.config.manager import ConfigurationManager, ConfigurationError
from radar_beam.geometry.beam import BeamPath, sample_beam
from radar_beam.geometry.earth import (
    EFFECTIVE_RADIUS_FACTOR,
    earth_radius,
    effective_earth_radius,
)

logger = logging.getLogger(__name__)


@dataclass
class DiagramResult:
    """Beam paths for every elevation angle of a schedule.

    Attributes:
        elevations_deg: Elevation angles in schedule order [deg]
        paths: One BeamPath per elevation angle
        config: Configuration used for the run
        metadata: Site and sampling summary
    """
    elevations_deg: np.ndarray
    paths: List[BeamPath]
    config: DiagramConfig
    metadata: Dict[str, Any]

    def pairs(self) -> Iterator[Tuple[float, BeamPath]]:
        """Yield ``(elevation_deg, BeamPath)`` in schedule order."""
        for path in self.paths:
            yield path.elevation_deg, path

    def altitudes_at_distance(self, distance_m: float) -> np.ndarray:
        """Beam altitude of every path at one ground distance [m]."""
        return np.array([p.altitude_at_distance(distance_m) for p in self.paths])

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "elevations_deg": self.elevations_deg.tolist(),
            "beams": [
                {
                    "elevation_deg": path.elevation_deg,
                    "range_m": path.ranges_m.tolist(),
                    "altitude_m": path.altitudes_m.tolist(),
                    "distance_m": path.distances_m.tolist(),
                }
                for path in self.paths
            ],
            "metadata": self.metadata,
        }


class BeamDiagram:
    """High-level interface for computing beam diagrams.

    Example:
        >>> from radar_beam import BeamDiagram
        >>> diagram = BeamDiagram({
        ...     "site": {"latitude_deg": 36.0, "altitude_m": 50.0},
        ...     "range": {"max_range_km": 200, "n_sections": 40},
        ... })
        >>> result = diagram.run()
        >>> for elevation, path in result.pairs():
        ...     print(f"{elevation:4.1f} deg: {path.altitudes_m[-1] / 1000:.2f} km")
    """

    def __init__(self, config: Dict[str, Any] | str | Path | DiagramConfig):
        """Initialize the diagram.

        Args:
            config: Configuration dictionary, JSON/YAML path, or DiagramConfig
        """
        self.config_manager = ConfigurationManager()

        if isinstance(config, DiagramConfig):
            self.config = config
            self.validation_errors = config.validate()
            for error in self.validation_errors:
                logger.warning(f"Configuration warning: {error}")
        elif isinstance(config, (dict, str, Path)):
            loaded = self.config_manager.load_config(config)
            self.config = loaded.config
            self.validation_errors = loaded.validation_errors
        else:
            raise TypeError(f"Invalid config type: {type(config)}")

    def run(self) -> DiagramResult:
        """Compute one beam path per elevation angle.

        Returns:
            DiagramResult with paths in schedule order

        Raises:
            ConfigurationError: If the configuration failed validation
        """
        if self.validation_errors:
            raise ConfigurationError(
                "Cannot compute beam diagram: " + "; ".join(self.validation_errors)
            )

        site = self.config.site
        sampling = self.config.range
        elevations = self.config.scan.schedule().angles()

        logger.info(
            f"Computing {len(elevations)} beams at lat={site.latitude_deg} deg, "
            f"alt={site.altitude_m} m, max range={sampling.max_range_km} km"
        )

        paths = self.quick_paths(
            elevations,
            max_range_km=sampling.max_range_km,
            n_sections=sampling.n_sections,
            latitude_deg=site.latitude_deg,
            altitude_m=site.altitude_m,
        )

        metadata = {
            "latitude_deg": site.latitude_deg,
            "site_altitude_m": site.altitude_m,
            "earth_radius_m": earth_radius(site.latitude_deg),
            "effective_earth_radius_m": effective_earth_radius(site.latitude_deg),
            "refraction_factor": EFFECTIVE_RADIUS_FACTOR,
            "max_range_m": sampling.max_range_m,
            "n_sections": sampling.n_sections,
            "n_beams": len(paths),
        }

        return DiagramResult(
            elevations_deg=np.array(elevations, dtype=float),
            paths=paths,
            config=self.config,
            metadata=metadata,
        )

    @staticmethod
    def quick_paths(
        elevations: Iterable[float],
        max_range_km: float = 300.0,
        n_sections: int = 100,
        latitude_deg: float = 36.0,
        altitude_m: float = 0.0,
    ) -> List[BeamPath]:
        """Sample one beam per elevation angle without a configuration.

        Args:
            elevations: Elevation angles [deg]
            max_range_km: Maximum slant range [km]
            n_sections: Number of range intervals
            latitude_deg: Site latitude [deg]
            altitude_m: Site altitude [m]

        Returns:
            List of BeamPath in the order of ``elevations``
        """
        max_range_m = max_range_km * 1000.0
        paths = [
            sample_beam(max_range_m, n_sections, el, latitude_deg, altitude_m)
            for el in elevations
        ]
        logger.debug(f"Sampled {len(paths)} beams with {n_sections + 1} points each")
        return paths

    def save_result(
        self,
        result: DiagramResult,
        output_path: str,
        format: str = "json",
    ) -> str:
        """Save a result to file.

        Args:
            result: Result returned by run()
            output_path: Output file path
            format: json, csv, png or svg

        Returns:
            Path to the saved file
        """
        if format.lower() in ("png", "svg"):
            from radar_beam.plotting import plot_beam_diagram
            return plot_beam_diagram(result, output_path, format=format.lower())

        from radar_beam.utils.output import OutputFormatter
        return OutputFormatter().save(result, output_path, format=format)
