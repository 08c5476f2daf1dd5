"""
Beam diagram configuration data structures.

Defines the configuration schema for a beam diagram run: radar site,
elevation schedule, range sampling, plot axes and output.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Any
import json
import math

import yaml

from radar_beam.scan.elevations import DEFAULT_ELEVATION_TIERS, ElevationSchedule

OUTPUT_FORMATS = ["json", "csv", "png", "svg"]

# Tier codes are stored as unsigned 16-bit values
MAX_TIER_CODE = 65535


@dataclass
class SiteConfig:
    """Radar site configuration.

    Attributes:
        latitude_deg: Geodetic latitude of the site in degrees
        altitude_m: Antenna altitude above the ellipsoid in meters
    """
    latitude_deg: float = 36.0
    altitude_m: float = 0.0


@dataclass
class ScanConfig:
    """Elevation schedule configuration.

    Attributes:
        tiers: ``[start, step]`` pairs in tenths of a degree
    """
    tiers: List[List[int]] = field(
        default_factory=lambda: [list(t) for t in DEFAULT_ELEVATION_TIERS]
    )

    def schedule(self) -> ElevationSchedule:
        """Elevation schedule built from the tiers."""
        return ElevationSchedule.from_pairs(self.tiers)


@dataclass
class RangeConfig:
    """Range sampling configuration.

    Attributes:
        max_range_km: Maximum slant range in km
        n_sections: Number of range intervals (samples = n_sections + 1)
    """
    max_range_km: float = 300.0
    n_sections: int = 100

    @property
    def max_range_m(self) -> float:
        """Maximum slant range in meters."""
        return self.max_range_km * 1000.0


@dataclass
class PlotConfig:
    """Beam diagram axes.

    Attributes:
        max_distance_km: End of the ground-distance axis
        max_altitude_km: End of the altitude axis
        distance_major_step_km: Major grid spacing on the distance axis
        distance_minor_step_km: Minor grid spacing on the distance axis
        altitude_major_step_km: Major grid spacing on the altitude axis
        altitude_minor_step_km: Minor grid spacing on the altitude axis
    """
    max_distance_km: int = 300
    max_altitude_km: int = 20
    distance_major_step_km: int = 50
    distance_minor_step_km: int = 10
    altitude_major_step_km: int = 5
    altitude_minor_step_km: int = 1


@dataclass
class OutputConfig:
    """Output format configuration.

    Attributes:
        format: Output file format (json, csv, png, svg)
        output_path: Directory for output files
    """
    format: str = "json"
    output_path: str = "./output"


@dataclass
class DiagramConfig:
    """Complete beam diagram configuration.

    Example JSON input:
        {
            "site": {"latitude_deg": 36.0, "altitude_m": 120.0},
            "scan": {"tiers": [[0, 5], [50, 10], [100, 20], [200, 50], [400, 0]]},
            "range": {"max_range_km": 300, "n_sections": 100},
            "output": {"format": "csv"}
        }
    """
    site: SiteConfig = field(default_factory=SiteConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    range: RangeConfig = field(default_factory=RangeConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "DiagramConfig":
        """Create DiagramConfig from a dictionary.

        Missing sections and keys fall back to their defaults.

        Args:
            config_dict: Configuration dictionary

        Returns:
            DiagramConfig instance
        """
        site_dict = config_dict.get("site", {})
        site = SiteConfig(
            latitude_deg=site_dict.get("latitude_deg", 36.0),
            altitude_m=site_dict.get("altitude_m", 0.0),
        )

        scan_dict = config_dict.get("scan", {})
        tiers = scan_dict.get("tiers")
        if isinstance(tiers, str):
            tiers = ElevationSchedule.parse(tiers).pairs()
        scan = ScanConfig(tiers=[list(t) for t in tiers]) if tiers is not None else ScanConfig()

        range_dict = config_dict.get("range", {})
        range_config = RangeConfig(
            max_range_km=range_dict.get("max_range_km", 300.0),
            n_sections=range_dict.get("n_sections", 100),
        )

        plot_dict = config_dict.get("plot", {})
        plot = PlotConfig(
            max_distance_km=plot_dict.get("max_distance_km", 300),
            max_altitude_km=plot_dict.get("max_altitude_km", 20),
            distance_major_step_km=plot_dict.get("distance_major_step_km", 50),
            distance_minor_step_km=plot_dict.get("distance_minor_step_km", 10),
            altitude_major_step_km=plot_dict.get("altitude_major_step_km", 5),
            altitude_minor_step_km=plot_dict.get("altitude_minor_step_km", 1),
        )

        out_dict = config_dict.get("output", {})
        output = OutputConfig(
            format=out_dict.get("format", "json"),
            output_path=out_dict.get("output_path", "./output"),
        )

        return cls(
            site=site,
            scan=scan,
            range=range_config,
            plot=plot,
            output=output,
        )

    @classmethod
    def from_json(cls, json_path: str) -> "DiagramConfig":
        """Load configuration from a JSON file.

        Args:
            json_path: Path to JSON configuration file

        Returns:
            DiagramConfig instance
        """
        with open(json_path, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "DiagramConfig":
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            DiagramConfig instance
        """
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}
        return cls.from_dict(config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Configuration as nested dictionary
        """
        return {
            "site": {
                "latitude_deg": self.site.latitude_deg,
                "altitude_m": self.site.altitude_m,
            },
            "scan": {
                "tiers": [list(t) for t in self.scan.tiers],
            },
            "range": {
                "max_range_km": self.range.max_range_km,
                "n_sections": self.range.n_sections,
            },
            "plot": {
                "max_distance_km": self.plot.max_distance_km,
                "max_altitude_km": self.plot.max_altitude_km,
                "distance_major_step_km": self.plot.distance_major_step_km,
                "distance_minor_step_km": self.plot.distance_minor_step_km,
                "altitude_major_step_km": self.plot.altitude_major_step_km,
                "altitude_minor_step_km": self.plot.altitude_minor_step_km,
            },
            "output": {
                "format": self.output.format,
                "output_path": self.output.output_path,
            },
        }

    def to_json(self, json_path: str, indent: int = 2) -> None:
        """Save configuration to JSON file.

        Args:
            json_path: Output file path
            indent: JSON indentation level
        """
        with open(json_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    def validate(self) -> list:
        """Validate configuration parameters.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        # Validate site
        if not math.isfinite(self.site.latitude_deg) or not -90 <= self.site.latitude_deg <= 90:
            errors.append("latitude must be between -90 and 90 degrees")

        if not math.isfinite(self.site.altitude_m):
            errors.append("site altitude must be finite")

        # Validate range sampling
        if not math.isfinite(self.range.max_range_km) or self.range.max_range_km <= 0:
            errors.append("max_range_km must be positive")

        n_sections = self.range.n_sections
        if isinstance(n_sections, bool) or not isinstance(n_sections, int) or n_sections < 1:
            errors.append("n_sections must be a positive integer")

        errors.extend(self._validate_tiers())

        # Validate plot axes
        for name in (
            "distance_major_step_km", "distance_minor_step_km",
            "altitude_major_step_km", "altitude_minor_step_km",
        ):
            if getattr(self.plot, name) <= 0:
                errors.append(f"{name} must be positive")

        if self.plot.max_distance_km <= 0 or self.plot.max_altitude_km <= 0:
            errors.append("plot axis extents must be positive")

        # Validate output format
        if self.output.format.lower() not in OUTPUT_FORMATS:
            errors.append(f"Invalid output format: {self.output.format}")

        return errors

    def _validate_tiers(self) -> list:
        """Check tiers for shape, value range, ordering and zero steps."""
        tiers = self.scan.tiers
        if not tiers:
            return ["elevation schedule must contain at least one tier"]

        errors = []
        for i, tier in enumerate(tiers):
            if len(tier) != 2:
                errors.append(f"tier {i} must be a [start, step] pair")
                continue
            start, step = tier
            if not all(isinstance(v, int) and not isinstance(v, bool) for v in (start, step)):
                errors.append(f"tier {i} values must be integers")
            elif not (0 <= start <= MAX_TIER_CODE and 0 <= step <= MAX_TIER_CODE):
                errors.append(f"tier {i} values must be between 0 and {MAX_TIER_CODE}")
            elif step == 0 and i < len(tiers) - 1:
                errors.append(f"tier {i} has zero step but is not the last tier")

        if errors:
            return errors

        starts = [t[0] for t in tiers]
        if any(b <= a for a, b in zip(starts, starts[1:])):
            errors.append("tier starts must be strictly ascending")

        return errors
