"""
Utility functions for exporting results.

Classes
-------
OutputFormatter
    Save beam diagrams as JSON or CSV
"""

from radar_beam.utils.output import OutputFormatter

__all__ = [
    "OutputFormatter",
]
