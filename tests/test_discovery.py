"""Tests for turning selections into stored flowers."""

from __future__ import annotations

import random
from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import Mock, patch

import pytest

from flower_discovery.collection import CollectionStore
from flower_discovery.discovery import (
    PENDING_FLOWER_KEY,
    FlowerDiscovery,
    build_flower,
    image_prompt_for,
)
from flower_discovery.exceptions import NetworkFailure, NoResult, SelectionExhausted
from flower_discovery.providers import StaticLocationProvider
from flower_discovery.reference import SPECIES
from flower_discovery.schemas import Continent, FlowerDetails, LocationSnapshot, WeatherSnapshot
from flower_discovery.selector import ContextualSelector, FlowerContext, Selection, bouquet_for
from flower_discovery.store import MemoryStore
from flower_discovery.temporal import Season, TimeOfDay, holiday_for, resolve

TOKYO = LocationSnapshot(
    latitude=35.68, longitude=139.69, place_name="Shibuya, Tokyo", country="Japan", city="Tokyo"
)
NOW = datetime(2026, 4, 8, 10, 0, tzinfo=UTC)
SYDNEY = timezone(timedelta(hours=11))
DETAILS = FlowerDetails(
    meaning="Renewal",
    properties="Edible blossoms",
    origins="Himalayas",
    detailed_description="Pale pink clusters.",
    continent="Asia",
)


def selection(holiday_day: tuple[int, int] | None = None, contextual: bool = True) -> Selection:
    holiday = holiday_for(datetime(2026, *holiday_day).date()) if holiday_day else None
    cherry = next(s for s in SPECIES if s.scientific_name == "Prunus serrulata")
    return Selection(
        species=cherry,
        context=FlowerContext(
            city="Tokyo",
            country="Japan",
            season=Season.SPRING,
            holiday=holiday,
            weather=WeatherSnapshot(condition="Sunny", temperature=17.0),
        ),
        contextual=contextual,
    )


class TestBuildFlower:
    """Pure mapping from selection to Flower."""

    def test_botanical_fields_copied(self) -> None:
        flower = build_flower(selection(), TOKYO, NOW)
        assert flower.name == "Japanese Cherry"
        assert flower.scientific_name == "Prunus serrulata"
        assert flower.family == "Rosaceae"
        assert flower.common_names == ["Japanese Cherry", "Oriental Cherry", "Hill Cherry"]
        assert flower.continent == Continent.ASIA
        assert flower.discovery_date == NOW
        assert not flower.is_bouquet

    def test_context_recorded(self) -> None:
        flower = build_flower(selection(), TOKYO, NOW)
        assert flower.contextual_generation is True
        assert flower.generation_context is not None
        assert flower.generation_context.startswith("Inspired by the beauty of Tokyo")
        assert flower.discovery_location_name == "Shibuya, Tokyo"
        assert flower.discovery_latitude == 35.68
        assert flower.discovery_weather_condition == "Sunny"
        assert flower.discovery_day_of_week == "Wednesday"
        assert flower.discovery_formatted_date == "8th April 2026"

    def test_uniform_pick_has_no_context_text(self) -> None:
        flower = build_flower(selection(contextual=False), None, NOW)
        assert flower.contextual_generation is False
        assert flower.generation_context is None
        assert flower.discovery_location_name is None

    def test_local_time_stored_as_utc(self) -> None:
        local = datetime(2026, 4, 9, 6, 0, tzinfo=SYDNEY)
        flower = build_flower(selection(), TOKYO, local)
        assert flower.generated_date == datetime(2026, 4, 8, 19, 0, tzinfo=UTC)
        assert flower.generated_date.utcoffset() == timedelta(0)
        assert flower.discovery_day_of_week == "Thursday"
        assert flower.discovery_formatted_date == "9th April 2026"

    def test_descriptor_used_when_given(self) -> None:
        flower = build_flower(selection(), TOKYO, NOW, descriptor="red and white Japanese lotus")
        assert flower.descriptor == "red and white Japanese lotus"

    def test_bouquet_on_worthy_holiday(self) -> None:
        flower = build_flower(selection(holiday_day=(11, 13)), TOKYO, NOW)
        assert flower.is_bouquet
        assert flower.name == "1st Anniversary Bouquet"
        assert flower.holiday_name == "Wedding Anniversary"
        assert flower.bouquet_flowers == ["white roses", "peonies", "eucalyptus"]
        assert flower.discovery_location_name == "Sintra, Portugal"
        assert flower.meaning is not None
        assert "1st" in flower.meaning

    def test_bouquet_prompt(self) -> None:
        sel = selection(holiday_day=(2, 14))
        prompt = image_prompt_for(sel, bouquet_for(sel.context))
        assert "red roses, pink lilies" in prompt
        assert "Valentine's Day" in prompt


class TestFlowerDiscovery:
    """End-to-end discovery with fake providers."""

    def make(self, **providers: object) -> tuple[FlowerDiscovery, CollectionStore]:
        collection = CollectionStore(MemoryStore())
        discovery = FlowerDiscovery(
            collection,
            selector=ContextualSelector(rng=random.Random(4)),
            location_provider=StaticLocationProvider(TOKYO),
            **providers,  # type: ignore[arg-type]
        )
        return discovery, collection

    def test_discover_stores_flower(self) -> None:
        image = Mock()
        image.generate.return_value = b"png-bytes"
        details = Mock()
        details.generate.return_value = DETAILS
        weather = Mock()
        weather.current.return_value = WeatherSnapshot(condition="Cloudy", temperature=12.0)

        discovery, collection = self.make(
            image_provider=image, detail_provider=details, weather_provider=weather
        )
        flower = discovery.discover(now=NOW)

        assert collection.get(flower.id) == flower
        assert flower.image_data == b"png-bytes"
        assert flower.meaning == "Renewal"
        assert flower.discovery_weather_condition == "Cloudy"
        weather.current.assert_called_once_with(35.68, 139.69)
        image.generate.assert_called_once()

    def test_provider_failures_degrade(self, caplog: pytest.LogCaptureFixture) -> None:
        image = Mock()
        image.generate.side_effect = NetworkFailure("offline")
        details = Mock()
        details.generate.side_effect = NoResult("empty")
        weather = Mock()
        weather.current.side_effect = NetworkFailure("offline")

        discovery, collection = self.make(
            image_provider=image, detail_provider=details, weather_provider=weather
        )
        with caplog.at_level("WARNING", logger="flower_discovery.discovery"):
            flower = discovery.discover(now=NOW)

        assert len(collection) == 1
        assert flower.image_data is None
        assert flower.meaning is None
        assert flower.discovery_weather_condition is None
        assert "Image generation failed" in caplog.text

    def test_never_repeats_species(self) -> None:
        discovery, collection = self.make()
        for _ in range(len(SPECIES)):
            discovery.discover(now=NOW)
        names = [f.scientific_name for f in collection.snapshot()]
        assert len(set(names)) == len(SPECIES)

        with pytest.raises(SelectionExhausted):
            discovery.discover(now=NOW)

    def test_calendar_follows_local_time(self) -> None:
        discovery, _ = self.make()
        christmas_morning = datetime(2025, 12, 25, 7, 30, tzinfo=SYDNEY)

        with patch.object(
            discovery.selector, "require_next", wraps=discovery.selector.require_next
        ) as require_next:
            flower = discovery.discover(now=christmas_morning)

        context = resolve(require_next.call_args.args[3])
        assert context.time_of_day == TimeOfDay.MORNING
        assert context.holiday is not None
        assert context.holiday.name == "Christmas"
        assert flower.generated_date == datetime(2025, 12, 24, 20, 30, tzinfo=UTC)


class TestPendingFlower:
    """Hold a discovery back until it is revealed."""

    def make(self) -> tuple[FlowerDiscovery, CollectionStore, MemoryStore]:
        store = MemoryStore()
        collection = CollectionStore(store)
        discovery = FlowerDiscovery(
            collection,
            selector=ContextualSelector(rng=random.Random(4)),
            location_provider=StaticLocationProvider(TOKYO),
            pending_store=store,
        )
        return discovery, collection, store

    def test_discover_holds_flower(self) -> None:
        discovery, collection, store = self.make()
        flower = discovery.discover(now=NOW)

        assert len(collection) == 0
        assert store.get(PENDING_FLOWER_KEY) is not None
        assert flower.discovery_date is None
        assert discovery.pending() == flower

    def test_only_one_pending(self) -> None:
        discovery, _, _ = self.make()
        first = discovery.discover(now=NOW)
        again = discovery.discover(now=NOW + timedelta(hours=1))
        assert again.id == first.id

    def test_reveal_moves_into_collection(self) -> None:
        discovery, collection, store = self.make()
        flower = discovery.discover(now=NOW)
        revealed_at = NOW + timedelta(days=1, hours=2)

        revealed = discovery.reveal_pending(now=revealed_at)

        assert revealed is not None
        assert revealed.id == flower.id
        assert revealed.generated_date == NOW
        assert revealed.discovery_date == revealed_at
        assert revealed.discovery_date > revealed.generated_date
        assert revealed.discovery_day_of_week == "Thursday"
        assert revealed.discovery_formatted_date == "9th April 2026"
        assert collection.get(flower.id) == revealed
        assert store.get(PENDING_FLOWER_KEY) is None
        assert discovery.pending() is None

    def test_reveal_keeps_generation_weather(self) -> None:
        discovery, _, _ = self.make()
        discovery.weather_provider = Mock()
        discovery.weather_provider.current.return_value = WeatherSnapshot(
            condition="Rainy", temperature=9.0
        )
        discovery.discover(now=NOW)

        revealed = discovery.reveal_pending(now=NOW + timedelta(hours=5))
        assert revealed is not None
        assert revealed.discovery_weather_condition == "Rainy"

    def test_reveal_with_nothing_pending(self) -> None:
        discovery, collection, _ = self.make()
        assert discovery.reveal_pending(now=NOW) is None
        assert len(collection) == 0

    def test_failed_reveal_keeps_pending(self) -> None:
        discovery, collection, _ = self.make()
        flower = discovery.discover(now=NOW)

        with (
            patch.object(collection, "add", side_effect=OSError("disk full")),
            pytest.raises(OSError),
        ):
            discovery.reveal_pending(now=NOW)
        assert discovery.pending() == flower

    def test_pending_species_not_repeated_after_reveal(self) -> None:
        discovery, collection, _ = self.make()
        first = discovery.discover(now=NOW)
        discovery.reveal_pending(now=NOW)
        second = discovery.discover(now=NOW)
        assert second.scientific_name != first.scientific_name
        assert collection.discovered_species() == {first.scientific_name}
