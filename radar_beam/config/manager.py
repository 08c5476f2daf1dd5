"""
Configuration Manager for beam diagram runs.

Handles loading and validation of diagram configurations from
dictionaries, JSON and YAML files.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dataclasses import dataclass

from radar_beam.config.settings import DiagramConfig
from radar_beam.scan.elevations import DEFAULT_ELEVATION_TIERS

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a diagram is run with an invalid configuration."""
    pass


@dataclass
class LoadedConfiguration:
    """Container for a loaded and validated configuration.

    Attributes:
        config: The diagram configuration settings
        is_valid: Whether the configuration passed validation
        validation_errors: List of validation error messages
    """
    config: DiagramConfig
    is_valid: bool
    validation_errors: list


class ConfigurationManager:
    """Manages beam diagram configurations.

    Example:
        >>> manager = ConfigurationManager()
        >>> loaded = manager.load_config({
        ...     "site": {"latitude_deg": 52.0},
        ...     "range": {"max_range_km": 250, "n_sections": 50}
        ... })
        >>> loaded.is_valid
        True
    """

    def __init__(self, base_path: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            base_path: Base path for relative file references.
                      Defaults to current working directory.
        """
        self.base_path = Path(base_path) if base_path else Path.cwd()

    def load_config(
        self,
        config_source: Dict[str, Any] | str | Path,
    ) -> LoadedConfiguration:
        """Load and validate a configuration.

        Args:
            config_source: Configuration dictionary, JSON path, or YAML path

        Returns:
            LoadedConfiguration with the parsed config and validation result

        Raises:
            ValueError: If the file suffix is not .json, .yaml or .yml
            TypeError: If config_source is of an unsupported type
        """
        if isinstance(config_source, dict):
            config = DiagramConfig.from_dict(config_source)
        elif isinstance(config_source, (str, Path)):
            path = self.resolve_path(str(config_source))
            if path.suffix.lower() == '.json':
                config = DiagramConfig.from_json(str(path))
            elif path.suffix.lower() in ('.yaml', '.yml'):
                config = DiagramConfig.from_yaml(str(path))
            else:
                raise ValueError(f"Unsupported config file format: {path.suffix}")
            logger.info(f"Loaded configuration from {path}")
        else:
            raise TypeError(f"Invalid config source type: {type(config_source)}")

        validation_errors = config.validate()
        is_valid = len(validation_errors) == 0

        if not is_valid:
            for error in validation_errors:
                logger.warning(f"Configuration validation error: {error}")

        return LoadedConfiguration(
            config=config,
            is_valid=is_valid,
            validation_errors=validation_errors,
        )

    def resolve_path(self, path: str) -> Path:
        """Resolve a path relative to base_path.

        Args:
            path: Relative or absolute path string

        Returns:
            Resolved absolute Path
        """
        p = Path(path)
        if p.is_absolute():
            return p
        return (self.base_path / p).resolve()

    @staticmethod
    def create_example_config() -> Dict[str, Any]:
        """Create an example configuration dictionary.

        Returns:
            Example configuration with every section filled in
        """
        return {
            "site": {
                "latitude_deg": 36.0,
                "altitude_m": 0.0,
            },
            "scan": {
                "tiers": [list(t) for t in DEFAULT_ELEVATION_TIERS],
            },
            "range": {
                "max_range_km": 300.0,
                "n_sections": 100,
            },
            "plot": {
                "max_distance_km": 300,
                "max_altitude_km": 20,
            },
            "output": {
                "format": "json",
                "output_path": "./output",
            },
        }

    def save_example_config(self, output_path: str) -> None:
        """Save an example configuration file.

        Args:
            output_path: Path to save the example JSON
        """
        example = self.create_example_config()
        with open(output_path, 'w') as f:
            json.dump(example, f, indent=2)
        logger.info(f"Saved example configuration to {output_path}")
