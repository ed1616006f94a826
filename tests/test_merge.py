"""Tests for newest-wins merging."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from uuid import uuid4

from flower_discovery.merge import MergeStats, merge, sort_newest_first
from flower_discovery.schemas import Flower


class TestMerge:
    """Union by id, strictly newer effective date wins."""

    def test_merge_into_empty(self, make_flower: Callable[..., Flower]) -> None:
        a, b = make_flower("A", day=1), make_flower("B", day=2)
        result = merge([a, b], [])
        assert [f.name for f in result.merged] == ["B", "A"]
        assert result.stats == MergeStats(new_flowers=2)

    def test_idempotent(self, make_flower: Callable[..., Flower]) -> None:
        flowers = [make_flower("A", day=1), make_flower("B", day=3), make_flower("C", day=2)]
        result = merge(flowers, flowers)
        assert {f.id for f in result.merged} == {f.id for f in flowers}
        assert result.stats == MergeStats(kept_existing=3)

    def test_newer_incoming_replaces(self, make_flower: Callable[..., Flower]) -> None:
        old = make_flower("A", day=1)
        new = old.model_copy(update={"generated_date": datetime(2025, 6, 5, tzinfo=UTC)})
        new.is_favorite = True
        result = merge([new], [old])
        assert result.merged == [new]
        assert result.stats.updated_flowers == 1

    def test_equal_dates_keep_existing(self, make_flower: Callable[..., Flower]) -> None:
        existing = make_flower("A", day=1)
        incoming = existing.model_copy(update={"name": "Renamed"})
        result = merge([incoming], [existing])
        assert result.merged[0].name == "A"
        assert result.stats.kept_existing == 1

    def test_discovery_date_takes_precedence(self, make_flower: Callable[..., Flower]) -> None:
        existing = make_flower("A", day=10)
        incoming = existing.model_copy(
            update={
                "generated_date": datetime(2025, 6, 1, tzinfo=UTC),
                "discovery_date": datetime(2025, 6, 20, tzinfo=UTC),
            }
        )
        result = merge([incoming], [existing])
        assert result.merged[0].discovery_date == datetime(2025, 6, 20, tzinfo=UTC)

    def test_duplicates_in_incoming_latest_wins_in_any_order(
        self,
        make_flower: Callable[..., Flower],
    ) -> None:
        a1 = make_flower("A", day=1)
        a2 = a1.model_copy(update={"generated_date": datetime(2025, 6, 2, tzinfo=UTC)})

        forward = merge([a2, a1], [])
        backward = merge([a1, a2], [])
        assert forward.merged == [a2]
        assert backward.merged == [a2]

    def test_inputs_not_mutated(self, make_flower: Callable[..., Flower]) -> None:
        existing = [make_flower("A", day=1)]
        incoming = [make_flower("B", day=2)]
        merge(incoming, existing)
        assert len(existing) == 1
        assert len(incoming) == 1

    def test_stats_total(self, make_flower: Callable[..., Flower]) -> None:
        shared = make_flower("A", day=1)
        result = merge([shared, make_flower("B", day=2)], [shared])
        assert result.stats.total == 2


class TestSort:
    def test_newest_first_by_effective_date(self, make_flower: Callable[..., Flower]) -> None:
        a = make_flower("A", day=5)
        b = make_flower("B", day=1, discovery_date=datetime(2025, 6, 9, tzinfo=UTC))
        c = make_flower("C", day=3, id=uuid4())
        assert [f.name for f in sort_newest_first([a, b, c])] == ["B", "A", "C"]
