"""
Newest-wins reconciliation of two flower collections.

Used for restoring backups, importing cloud copies and syncing a shared
folder. Flowers are matched by ``id``; when both sides hold the same id,
the copy with the strictly later ``effective_date`` wins, otherwise the
existing copy is kept.

Incoming flowers are applied in order against the running merged state, so
duplicates inside ``incoming`` resolve the same way: the latest one wins.

Properties:
  - merge(X, X) leaves X unchanged, with every flower counted as kept
  - result is the union by id, sorted newest first
  - inputs are never mutated
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID

    from flower_discovery.schemas import Flower

logger = logging.getLogger(__name__)


@dataclass
class MergeStats:
    """Counts of what a merge did with each incoming flower."""

    new_flowers: int = 0
    updated_flowers: int = 0
    kept_existing: int = 0

    @property
    def total(self) -> int:
        return self.new_flowers + self.updated_flowers + self.kept_existing


@dataclass
class MergeResult:
    merged: list[Flower] = field(default_factory=list)
    stats: MergeStats = field(default_factory=MergeStats)


def sort_newest_first(flowers: Iterable[Flower]) -> list[Flower]:
    """Sort by effective date, newest first."""
    return sorted(flowers, key=lambda f: f.effective_date, reverse=True)


def merge(incoming: Iterable[Flower], existing: Iterable[Flower]) -> MergeResult:
    """Merge ``incoming`` into ``existing`` by id, newest effective date wins.

    Args:
        incoming: Flowers from a backup, cloud copy or transfer.
        existing: The current local collection.

    Returns:
        MergeResult with the merged collection (newest first) and stats.
    """
    merged: dict[UUID, Flower] = {f.id: f for f in existing}
    stats = MergeStats()

    for flower in incoming:
        current = merged.get(flower.id)
        if current is None:
            merged[flower.id] = flower
            stats.new_flowers += 1
            logger.debug("Added new flower %r (%s)", flower.name, flower.id)
        elif flower.effective_date > current.effective_date:
            merged[flower.id] = flower
            stats.updated_flowers += 1
            logger.debug("Updated %r with newer version", flower.name)
        else:
            stats.kept_existing += 1

    result = sort_newest_first(merged.values())
    logger.info(
        "Merge complete: %d flowers (%d new, %d updated, %d kept)",
        len(result),
        stats.new_flowers,
        stats.updated_flowers,
        stats.kept_existing,
    )
    return MergeResult(merged=result, stats=stats)
