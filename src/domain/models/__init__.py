"""Domain models package."""

from .heatmap import HeatmapCell, HeatmapDay, HeatmapGrid, MonthLabel
from .identifiers import Judge, ProblemIdentifier
from .problem import SolvedProblem, StoredProblem, format_epoch

__all__ = [
    "HeatmapCell",
    "HeatmapDay",
    "HeatmapGrid",
    "Judge",
    "MonthLabel",
    "ProblemIdentifier",
    "SolvedProblem",
    "StoredProblem",
    "format_epoch",
]
