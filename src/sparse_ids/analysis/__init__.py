"""
Inspection helpers: which ids are in use and how densely.
"""

from .occupancy import OccupancySummary, find_holes, summarize_occupancy

__all__ = ["OccupancySummary", "find_holes", "summarize_occupancy"]
