"""
Core computation for beam diagrams.

- BeamDiagram: Schedule expansion and per-angle beam sampling
- DiagramResult: Beam paths of one run
"""

from radar_beam.core.diagram import BeamDiagram, DiagramResult

__all__ = [
    "BeamDiagram",
    "DiagramResult",
]
