"""
Core container types.
"""

from .id_map import Entry, SparseIdMap

__all__ = ["Entry", "SparseIdMap"]
