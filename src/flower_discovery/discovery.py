"""
Discovery: turn a selection into a stored Flower.

    location / weather providers ──► selector.require_next ──► build_flower
                                                                   │
                            image provider, detail provider ◄──────┘
                                                                   │
                                                    collection.add ◄┘

With a ``pending_store`` the new flower is held back as the pending (hidden)
flower under ``pending_flower.json`` instead of being added straight away.
``reveal_pending`` stamps its ``discovery_date`` and moves it into the
collection. At most one flower is pending at a time.

Calendar context (holiday, zodiac, season, time of day) is resolved from
local time; stored timestamps are UTC.

Provider failures never abort a discovery. They are logged and the flower
is stored with whatever could be gathered (no image, no details, no place).
Selection failures (``SelectionExhausted``) propagate to the caller.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from flower_discovery.exceptions import ProviderFailure
from flower_discovery.schemas import Flower
from flower_discovery.selector import ContextualSelector, bouquet_for

if TYPE_CHECKING:
    from flower_discovery.collection import CollectionStore
    from flower_discovery.providers import (
        DetailProvider,
        ImageProvider,
        LocationProvider,
        WeatherProvider,
    )
    from flower_discovery.schemas import LocationSnapshot, WeatherSnapshot
    from flower_discovery.selector import BouquetPlan, Selection
    from flower_discovery.store import PersistentStore

logger = logging.getLogger(__name__)

PENDING_FLOWER_KEY = "pending_flower.json"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def image_prompt_for(selection: Selection, bouquet: BouquetPlan | None = None) -> str:
    if bouquet is not None:
        flowers = ", ".join(bouquet.flowers) if bouquet.flowers else "seasonal flowers"
        return f"A hand-tied bouquet of {flowers} for {bouquet.holiday_name}, {bouquet.theme}"
    return selection.species.image_prompt


def build_flower(
    selection: Selection,
    location: LocationSnapshot | None = None,
    now: datetime | None = None,
    descriptor: str | None = None,
) -> Flower:
    """Materialise ``selection`` as a Flower, without calling any provider.

    ``now`` should be local time; the stored dates are its UTC equivalent
    while the weekday and display date follow the local calendar.
    """
    now = now or _local_now()
    stamp = now.astimezone(UTC) if now.tzinfo is not None else now
    species = selection.species
    context = selection.context
    bouquet = bouquet_for(context)

    flower = Flower(
        name=bouquet.display_name if bouquet else species.primary_common_name,
        descriptor=bouquet.theme if bouquet else (descriptor or species.primary_common_name.lower()),
        generated_date=stamp,
        discovery_date=stamp,
        scientific_name=species.scientific_name,
        common_names=list(species.common_names),
        family=species.family,
        native_regions=list(species.native_regions),
        blooming_season=species.blooming_season,
        conservation_status=species.conservation_status,
        uses=list(species.uses),
        interesting_facts=list(species.facts),
        care_instructions=species.care_instructions,
        rarity_level=species.rarity,
        short_description=species.description,
        continent=species.primary_continent,
        contextual_generation=selection.contextual,
        generation_context=context.narrative() if selection.contextual else None,
    )

    if bouquet is not None:
        flower.is_bouquet = True
        flower.bouquet_flowers = bouquet.flowers
        flower.holiday_name = bouquet.holiday_name
        if bouquet.personal_message:
            flower.meaning = bouquet.personal_message

    if location is not None:
        flower.discovery_latitude = location.latitude
        flower.discovery_longitude = location.longitude
        flower.discovery_location_name = location.place_name
    if bouquet is not None and bouquet.location:
        flower.discovery_location_name = bouquet.location

    flower.capture_weather_and_date(context.weather, now)
    return flower


class FlowerDiscovery:
    """Runs one discovery end to end and records it in the collection."""

    def __init__(
        self,
        collection: CollectionStore,
        selector: ContextualSelector | None = None,
        image_provider: ImageProvider | None = None,
        detail_provider: DetailProvider | None = None,
        location_provider: LocationProvider | None = None,
        weather_provider: WeatherProvider | None = None,
        pending_store: PersistentStore | None = None,
    ) -> None:
        self.collection = collection
        self.selector = selector or ContextualSelector()
        self.image_provider = image_provider
        self.detail_provider = detail_provider
        self.location_provider = location_provider
        self.weather_provider = weather_provider
        self.pending_store = pending_store

    def _location(self) -> LocationSnapshot | None:
        if self.location_provider is None:
            return None
        try:
            return self.location_provider.current()
        except ProviderFailure as err:
            logger.warning("Location unavailable: %s", err)
            return None

    def _weather(self, location: LocationSnapshot | None) -> WeatherSnapshot | None:
        if self.weather_provider is None or location is None:
            return None
        try:
            return self.weather_provider.current(location.latitude, location.longitude)
        except ProviderFailure as err:
            logger.warning("Weather unavailable: %s", err)
            return None

    # -- pending flower -------------------------------------------------------

    def pending(self) -> Flower | None:
        """The generated but not yet revealed flower, if any."""
        if self.pending_store is None:
            return None
        raw = self.pending_store.get(PENDING_FLOWER_KEY)
        if not raw:
            return None
        return Flower.model_validate_json(raw)

    def reveal_pending(self, now: datetime | None = None) -> Flower | None:
        """Reveal the pending flower: stamp it, add it to the collection, clear it.

        Returns None when nothing is pending. The pending key is only cleared
        after the collection has persisted the flower.
        """
        flower = self.pending()
        if flower is None or self.pending_store is None:
            return None

        now = now or _local_now()
        flower.discovery_date = now.astimezone(UTC) if now.tzinfo is not None else now
        # Weather stays as captured at generation; weekday and date follow the reveal.
        flower.capture_weather_and_date(None, now)

        self.collection.add(flower)
        self.pending_store.delete(PENDING_FLOWER_KEY)
        logger.info("Revealed %s", flower.name)
        return flower

    # -- discovery ------------------------------------------------------------

    def discover(self, now: datetime | None = None) -> Flower:
        """Select, build, enrich and store the next flower.

        ``now`` defaults to the local time. With a ``pending_store`` the
        flower is held as pending instead of being added; if one is already
        pending it is returned unchanged and nothing new is generated.

        Raises:
            SelectionExhausted: Every catalog species is already collected.
        """
        waiting = self.pending()
        if waiting is not None:
            logger.info("%s is still waiting to be revealed", waiting.name)
            return waiting

        now = now or _local_now()
        location = self._location()
        weather = self._weather(location)

        excluded = self.collection.discovered_species()
        selection = self.selector.require_next(excluded, location, weather, now)
        descriptor = self.selector.build_descriptor(selection.context)
        flower = build_flower(selection, location, now, descriptor)
        bouquet = bouquet_for(selection.context)

        if self.image_provider is not None:
            try:
                flower.image_data = self.image_provider.generate(image_prompt_for(selection, bouquet))
            except ProviderFailure as err:
                logger.warning("Image generation failed for %s: %s", flower.name, err)

        if self.detail_provider is not None:
            try:
                details = self.detail_provider.generate(flower.descriptor, selection.context)
            except ProviderFailure as err:
                logger.warning("Detail generation failed for %s: %s", flower.name, err)
            else:
                personal_message = flower.meaning if flower.is_bouquet else None
                flower.apply_details(details)
                if personal_message:
                    flower.meaning = personal_message
                if flower.continent is None:
                    flower.continent = selection.species.primary_continent

        if self.pending_store is not None:
            flower.discovery_date = None
            self.pending_store.set(PENDING_FLOWER_KEY, flower.model_dump_json(indent=2).encode())
            logger.info("Generated %s, waiting to be revealed", flower.name)
            return flower

        self.collection.add(flower)
        logger.info(
            "Discovered %s (%s)%s",
            flower.name,
            flower.scientific_name,
            " [contextual]" if flower.contextual_generation else "",
        )
        return flower
