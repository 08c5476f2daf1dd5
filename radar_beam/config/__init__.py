"""
Configuration management for beam diagram runs.

This module provides:
- DiagramConfig: Data class for diagram parameters
- ConfigurationManager: Loading and validation of configurations
"""

from radar_beam.config.settings import (
    DiagramConfig,
    SiteConfig,
    ScanConfig,
    RangeConfig,
    PlotConfig,
    OutputConfig,
)
from radar_beam.config.manager import (
    ConfigurationManager,
    ConfigurationError,
    LoadedConfiguration,
)

__all__ = [
    "DiagramConfig",
    "SiteConfig",
    "ScanConfig",
    "RangeConfig",
    "PlotConfig",
    "OutputConfig",
    "ConfigurationManager",
    "ConfigurationError",
    "LoadedConfiguration",
]
