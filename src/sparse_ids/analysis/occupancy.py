from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from sparse_ids.core.id_map import SparseIdMap


@dataclass(frozen=True)
class OccupancySummary:
    size: int
    next_free_id: int
    last_id: int
    holes: List[int]
    density: float  # size / next_free_id, 1.0 when empty


def find_holes(id_map: SparseIdMap[Any]) -> List[int]:
    """
    Unoccupied ids below ``next_free_id``.

    Automatic append never hands these out again.
    """
    upper = id_map.next_free_id()
    return [i for i in range(upper) if not id_map.contains_id(i)]


def summarize_occupancy(id_map: SparseIdMap[Any]) -> OccupancySummary:
    upper = id_map.next_free_id()
    size = id_map.size()
    return OccupancySummary(
        size=size,
        next_free_id=upper,
        last_id=upper - 1,
        holes=find_holes(id_map),
        density=size / upper if upper else 1.0,
    )
