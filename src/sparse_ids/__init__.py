"""
sparse-ids

Sparse integer-keyed container with stable ids.
"""

from .core.id_map import Entry, SparseIdMap
from .analysis.occupancy import OccupancySummary, summarize_occupancy

__all__ = [
    "Entry",
    "SparseIdMap",
    "OccupancySummary",
    "summarize_occupancy",
]
