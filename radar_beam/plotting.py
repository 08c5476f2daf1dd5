"""
Beam diagram plotting.

Draws altitude versus ground distance for every beam of a diagram, on a
grid with separate major and minor line spacing per axis.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from radar_beam.config.settings import PlotConfig

logger = logging.getLogger(__name__)


class GridLineKind(Enum):
    """Grid line weight."""
    MAJOR = "major"
    MINOR = "minor"


@dataclass
class AxisConfig:
    """
    One plot axis.

    Attributes
    ----------
    start : int
        First value on the axis
    end : int
        Last value on the axis (inclusive)
    major_step : int
        Spacing of major grid lines
    minor_step : int
        Spacing of minor grid lines
    """
    start: int
    end: int
    major_step: int
    minor_step: int


def grid_line_positions(axis: AxisConfig, kind: GridLineKind) -> List[int]:
    """Grid line positions from ``start`` to ``end`` inclusive."""
    step = axis.major_step if kind is GridLineKind.MAJOR else axis.minor_step
    if step <= 0:
        raise ValueError(f"{kind.value} grid step must be positive, got {step}")
    return list(range(axis.start, axis.end + 1, step))


def axes_from_config(plot: PlotConfig):
    """Distance and altitude axes (in km) for a plot configuration."""
    x_axis = AxisConfig(
        start=0,
        end=int(plot.max_distance_km),
        major_step=int(plot.distance_major_step_km),
        minor_step=int(plot.distance_minor_step_km),
    )
    y_axis = AxisConfig(
        start=0,
        end=int(plot.max_altitude_km),
        major_step=int(plot.altitude_major_step_km),
        minor_step=int(plot.altitude_minor_step_km),
    )
    return x_axis, y_axis


def plot_beam_diagram(
    result,  # DiagramResult
    output_path: str,
    format: str = "png",
    dpi: int = 150,
) -> str:
    """
    Render a beam diagram to an image file.

    Parameters
    ----------
    result : DiagramResult
        Beam paths to draw
    output_path : str
        Image file path
    format : str
        png or svg
    dpi : int
        Resolution for raster output

    Returns
    -------
    path : str
        Path to the saved image
    """
    x_axis, y_axis = axes_from_config(result.config.plot)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(12, 6))

    for kind, style in (
        (GridLineKind.MINOR, dict(color="0.9", linewidth=0.5)),
        (GridLineKind.MAJOR, dict(color="0.7", linewidth=1.0)),
    ):
        for x in grid_line_positions(x_axis, kind):
            ax.axvline(x, zorder=0, **style)
        for y in grid_line_positions(y_axis, kind):
            ax.axhline(y, zorder=0, **style)

    colors = plt.cm.viridis(np.linspace(0, 1, max(len(result.paths), 1)))
    for color, (elevation, path) in zip(colors, result.pairs()):
        ax.plot(
            path.distances_m / 1000.0,
            path.altitudes_m / 1000.0,
            color=color,
            linewidth=1.0,
            label=f"{elevation:.1f}°",
        )

    ax.set_xlim(x_axis.start, x_axis.end)
    ax.set_ylim(y_axis.start, y_axis.end)
    ax.set_xticks(grid_line_positions(x_axis, GridLineKind.MAJOR))
    ax.set_yticks(grid_line_positions(y_axis, GridLineKind.MAJOR))
    ax.set_xlabel('Ground distance [km]')
    ax.set_ylabel('Beam altitude [km]')
    ax.set_title(
        f"Beam heights, lat {result.metadata['latitude_deg']:.1f}°, "
        f"site {result.metadata['site_altitude_m']:.0f} m (4/3 Earth)"
    )
    if result.paths:
        ax.legend(loc='upper left', fontsize=7, ncol=2, title='Elevation')

    plt.tight_layout()
    plt.savefig(output_path, format=format, dpi=dpi, bbox_inches='tight')
    plt.close(fig)

    logger.info(f"Saved beam diagram plot to {output_path}")
    return str(output_path)
