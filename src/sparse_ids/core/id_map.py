"""
Sparse integer-keyed container.

Ids stay attached to their values when other entries are removed, so the set
of occupied ids may contain holes.
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import index as op_index
from typing import Any, Dict, Generic, Iterable, Iterator, Optional, TypeVar

from sparse_ids.utils.config import config
from sparse_ids.utils.logging import logger

V = TypeVar("V")


def _as_id(id: Any) -> Optional[int]:
    """Integer form of `id`, or None when it is not an integer."""
    try:
        return op_index(id)
    except TypeError:
        return None


@dataclass(frozen=True)
class Entry(Generic[V]):
    """An occupied slot of a :class:`SparseIdMap`."""

    id: int
    value: V


class SparseIdMap(Generic[V]):
    """
    Mapping from small non-negative integer ids to values.

    Iteration order (``entries``, ``ids``, ``values``) follows the backing
    dict and is unspecified. The same holds for which id ``index_of``
    reports when several entries hold equal values.

    ``contains``, ``index_of`` and ``next_free_id`` scan every entry, so a
    loop of ``find_or_add`` over n distinct values costs O(n^2).

    Compound operations (``add``, ``find_or_add``) are not atomic; callers
    sharing an instance across threads must lock around them.
    """

    def __init__(self) -> None:
        self._store: Dict[int, V] = {}

    def get(self, id: Any, default: Optional[V] = None) -> Optional[V]:
        key = _as_id(id)
        if key is None:
            return default
        return self._store.get(key, default)

    def contains_id(self, id: Any) -> bool:
        key = _as_id(id)
        return key is not None and key in self._store

    def put(self, id: int, value: V) -> None:
        """
        Store ``value`` under ``id``, replacing any previous value.

        Raises:
            TypeError: ``id`` is not an integer.
            ValueError: ``id`` is negative.
        """
        key = _as_id(id)
        if key is None:
            raise TypeError(f"Id must be an integer, got {type(id).__name__}.")
        if key < 0:
            raise ValueError(f"Id must be non-negative, got {key}.")
        if config.debug:
            action = "replace" if key in self._store else "insert"
            logger.debug("%s id=%d value=%r", action, key, value)
        self._store[key] = value

    def remove(self, id: Any) -> None:
        key = _as_id(id)
        if key is None or key not in self._store:
            return
        del self._store[key]
        if config.debug:
            logger.debug("remove id=%d", key)

    def next_free_id(self) -> int:
        """
        One more than the largest occupied id, or 0 when empty.

        Holes below the maximum are never returned.
        """
        return max(self._store, default=-1) + 1

    def last_id(self) -> int:
        """Largest occupied id, or -1 when empty."""
        return max(self._store, default=-1)

    def add(self, value: V) -> int:
        id = self.next_free_id()
        self.put(id, value)
        return id

    def index_of(self, value: V) -> int:
        """
        Return the id of some entry equal to ``value``, or -1.

        With duplicate values the returned id depends on dict traversal
        order and must not be relied upon.
        """
        for id, stored in self._store.items():
            if value == stored:
                return id
        return -1

    def contains(self, value: V) -> bool:
        return any(value == stored for stored in self._store.values())

    def find_or_add(self, value: V) -> int:
        id = self.index_of(value)
        if id != -1:
            return id
        return self.add(value)

    def size(self) -> int:
        return len(self._store)

    def entries(self) -> Iterator[Entry[V]]:
        """
        Yield every occupied entry once.

        Each call starts a fresh traversal. Mutating the map while a
        traversal is open is undefined.
        """
        for id, value in self._store.items():
            yield Entry(id, value)

    def ids(self) -> Iterable[int]:
        return self._store.keys()

    def values(self) -> Iterable[V]:
        return self._store.values()

    def clear(self) -> None:
        self._store.clear()

    def copy(self) -> "SparseIdMap[V]":
        dup = type(self)()
        dup._store = dict(self._store)
        return dup

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r})"
