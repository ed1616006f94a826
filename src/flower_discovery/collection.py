"""
Collection store: the user's discovered flowers.

Single-writer: every mutation takes an internal lock, builds a new list,
persists the whole snapshot, and only then swaps it in. If the write fails
the in-memory state is left as it was, so readers never observe a change
that was not persisted.

Persisted keys (via any ``PersistentStore``):
  - ``flowers.json``          the collection, newest first
  - ``widget_summary.json``   small derived summary for home-screen widgets
"""

from __future__ import annotations

import json
import logging
import threading
from collections import Counter
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from flower_discovery.merge import MergeStats, merge, sort_newest_first
from flower_discovery.schemas import Flower

if TYPE_CHECKING:
    from uuid import UUID

    from flower_discovery.schemas import Continent, FlowerDetails
    from flower_discovery.store import PersistentStore

logger = logging.getLogger(__name__)

FLOWERS_KEY = "flowers.json"
WIDGET_SUMMARY_KEY = "widget_summary.json"

_FLOWER_LIST = TypeAdapter(list[Flower])


class CollectionStore:
    """Ordered-by-recency set of flowers keyed by id."""

    def __init__(self, store: PersistentStore, key: str = FLOWERS_KEY) -> None:
        self._store = store
        self._key = key
        self._lock = threading.RLock()
        self._flowers: list[Flower] = self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> list[Flower]:
        raw = self._store.get(self._key)
        if raw is None:
            return []
        flowers = _FLOWER_LIST.validate_json(raw)
        logger.debug("Loaded %d flowers from %s", len(flowers), self._key)
        return sort_newest_first(flowers)

    def _commit(self, flowers: list[Flower]) -> None:
        """Persist ``flowers`` then make them the current state."""
        self._store.set(self._key, _FLOWER_LIST.dump_json(flowers, indent=2))
        self._flowers = flowers
        self._store.set(WIDGET_SUMMARY_KEY, json.dumps(self._summary(flowers)).encode())

    def _mutate(self, change: Callable[[list[Flower]], list[Flower]]) -> None:
        with self._lock:
            working = [f.model_copy(deep=True) for f in self._flowers]
            self._commit(sort_newest_first(change(working)))

    # -- mutations ------------------------------------------------------------

    def add(self, flower: Flower) -> None:
        """Add a flower; an existing id is replaced instead of duplicated."""

        def change(flowers: list[Flower]) -> list[Flower]:
            kept = [f for f in flowers if f.id != flower.id]
            if len(kept) != len(flowers):
                logger.debug("Flower %s already present, updating", flower.id)
            return [*kept, flower.model_copy(deep=True)]

        self._mutate(change)

    def toggle_favorite(self, flower_id: UUID) -> Flower:
        """Flip the favorite flag of one flower and return the updated copy."""
        with self._lock:
            self._require(flower_id)

            def change(flowers: list[Flower]) -> list[Flower]:
                for f in flowers:
                    if f.id == flower_id:
                        f.is_favorite = not f.is_favorite
                return flowers

            self._mutate(change)
            return self._require(flower_id)

    def update_details(self, flower_id: UUID, details: FlowerDetails) -> Flower:
        """Attach provider-generated details to a stored flower."""
        with self._lock:
            self._require(flower_id)

            def change(flowers: list[Flower]) -> list[Flower]:
                for f in flowers:
                    if f.id == flower_id:
                        f.apply_details(details)
                return flowers

            self._mutate(change)
            return self._require(flower_id)

    def replace_all(self, flowers: Iterable[Flower]) -> None:
        """Replace the whole collection (e.g. with a merge result)."""
        replacement = [f.model_copy(deep=True) for f in flowers]
        with self._lock:
            self._commit(sort_newest_first(replacement))

    def merge_in(self, incoming: Iterable[Flower]) -> MergeStats:
        """Merge ``incoming`` into the collection, newest effective date wins."""
        with self._lock:
            result = merge(incoming, self._flowers)
            self._commit([f.model_copy(deep=True) for f in result.merged])
            return result.stats

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._flowers)

    def snapshot(self) -> list[Flower]:
        """Copy of the collection, newest first."""
        with self._lock:
            return [f.model_copy(deep=True) for f in self._flowers]

    def get(self, flower_id: UUID) -> Flower | None:
        with self._lock:
            for f in self._flowers:
                if f.id == flower_id:
                    return f.model_copy(deep=True)
        return None

    def _require(self, flower_id: UUID) -> Flower:
        flower = self.get(flower_id)
        if flower is None:
            raise KeyError(flower_id)
        return flower

    def most_recent(self) -> Flower | None:
        with self._lock:
            return self._flowers[0].model_copy(deep=True) if self._flowers else None

    def recent(self, n: int) -> list[Flower]:
        """The ``n`` newest flowers by effective date."""
        with self._lock:
            return [f.model_copy(deep=True) for f in self._flowers[: max(n, 0)]]

    def favorites(self) -> list[Flower]:
        with self._lock:
            return [f.model_copy(deep=True) for f in self._flowers if f.is_favorite]

    def discovered_species(self) -> set[str]:
        """Scientific names already in the collection, for selector exclusions."""
        with self._lock:
            return {f.scientific_name for f in self._flowers if f.scientific_name}

    def continent_stats(self) -> dict[Continent, int]:
        with self._lock:
            return dict(Counter(f.continent for f in self._flowers if f.continent is not None))

    def widget_summary(self) -> dict[str, Any]:
        with self._lock:
            return self._summary(self._flowers)

    @staticmethod
    def _summary(flowers: list[Flower]) -> dict[str, Any]:
        latest = flowers[0] if flowers else None
        continents = Counter(str(f.continent) for f in flowers if f.continent is not None)
        return {
            "total": len(flowers),
            "favorites": sum(1 for f in flowers if f.is_favorite),
            "continents": dict(continents),
            "latest": None
            if latest is None
            else {
                "id": str(latest.id),
                "name": latest.name,
                "date": latest.effective_date.isoformat(),
                "location": latest.discovery_location_name,
            },
        }
