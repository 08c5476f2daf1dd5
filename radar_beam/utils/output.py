"""
Output Formatter for exporting beam diagrams.

Supports:
- CSV: One row per elevation angle and range sample
- JSON: Full structured output with metadata and configuration
"""

import json
import logging
from pathlib import Path
from datetime import datetime
import numpy as np

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["elevation_deg", "range_m", "altitude_m", "distance_m"]


class OutputFormatter:
    """Formatter for exporting beam diagram results.

    Example:
        >>> formatter = OutputFormatter()
        >>> formatter.save(result, "beams.json", format="json")
        >>> formatter.save(result, "beams.csv", format="csv")
    """

    def save(
        self,
        result,  # DiagramResult
        output_path: str,
        format: str = "json",
        **kwargs,
    ) -> str:
        """Save a diagram result to file.

        Args:
            result: DiagramResult object
            output_path: Output file path
            format: Output format (csv, json)
            **kwargs: Additional format-specific options

        Returns:
            Path to saved file

        Raises:
            ValueError: If format is not supported
        """
        format = format.lower()

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if format == "json":
            return self._save_json(result, output_path, **kwargs)
        elif format == "csv":
            return self._save_csv(result, output_path, **kwargs)
        else:
            raise ValueError(f"Unsupported format: {format}")

    def _save_json(
        self,
        result,
        output_path: Path,
        indent: int = 2,
        **kwargs,
    ) -> str:
        """Save result to JSON format."""
        data = result.to_dict()
        data["metadata"] = {
            "format_version": "1.0",
            "created": datetime.now().isoformat(),
            "software": "radar-beam",
            **result.metadata,
        }
        data["configuration"] = result.config.to_dict()

        with open(output_path, 'w') as f:
            json.dump(_finite_or_none(data), f, indent=indent)

        logger.info(f"Saved JSON output to {output_path}")
        return str(output_path)

    def _save_csv(
        self,
        result,
        output_path: Path,
        delimiter: str = ",",
        **kwargs,
    ) -> str:
        """Save result to CSV format (long table, one row per sample)."""
        blocks = [
            np.column_stack([
                np.full(len(path), path.elevation_deg),
                path.ranges_m,
                path.altitudes_m,
                path.distances_m,
            ])
            for path in result.paths
        ]
        data = np.vstack(blocks) if blocks else np.empty((0, len(CSV_COLUMNS)))

        np.savetxt(
            output_path,
            data,
            delimiter=delimiter,
            header=delimiter.join(CSV_COLUMNS),
            comments='',
            fmt="%.6f",
        )

        logger.info(f"Saved CSV output to {output_path}")
        return str(output_path)


def _finite_or_none(value):
    """Replace NaN and infinities with None so the output is strict JSON."""
    if isinstance(value, dict):
        return {k: _finite_or_none(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite_or_none(v) for v in value]
    if isinstance(value, float) and not np.isfinite(value):
        return None
    return value
