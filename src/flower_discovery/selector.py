"""
Contextual selector: decides which species (or holiday bouquet) comes next.

Selection pipeline for ``ContextualSelector.select_next``:

    now ──► temporal.resolve ──► season / zodiac / holiday / time of day
    location.country ──► continent (geography table)
    catalog ─► minus excluded ─► on continent? ─► in season? ─► uniform pick

The continent and season filters only narrow the candidates when they
leave something behind, so a selection fails only when every species is
excluded. ``choose`` adds the caller-side policy: one time in
``contextual_chance`` try the contextual pipeline, otherwise pick uniformly.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Collection
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from flower_discovery.catalog import SpeciesCatalog
from flower_discovery.exceptions import SelectionExhausted
from flower_discovery.reference.geography import COUNTRY_COLORS, continent_for_country
from flower_discovery.temporal import Season, TimeOfDay, resolve

if TYPE_CHECKING:
    from flower_discovery.reference.holidays import Holiday
    from flower_discovery.reference.species import BotanicalSpecies
    from flower_discovery.reference.zodiac import ZodiacSign
    from flower_discovery.schemas import LocationSnapshot, WeatherSnapshot

logger = logging.getLogger(__name__)

BASE_FLOWERS = ("rose", "orchid", "lily", "dahlia", "iris", "bloom", "blossom", "wildflower", "lotus")

_TIME_OF_DAY_MOODS: dict[TimeOfDay, str] = {
    TimeOfDay.MORNING: "dawn-kissed",
    TimeOfDay.EVENING: "sunset-hued",
    TimeOfDay.NIGHT: "moonlit",
}


@dataclass
class FlowerContext:
    """Snapshot of everything that biased a selection. Never persisted."""

    place_name: str | None = None
    country: str | None = None
    city: str | None = None
    season: Season | None = None
    holiday: Holiday | None = None
    zodiac: ZodiacSign | None = None
    time_of_day: TimeOfDay | None = None
    weather: WeatherSnapshot | None = None

    def narrative(self) -> str | None:
        """One clause per known field, in a fixed order, joined into prose."""
        clauses: list[str] = []
        if self.city:
            clauses.append(f"Inspired by the beauty of {self.city}")
        if self.holiday:
            clauses.append(f"Celebrating {self.holiday.name}")
        if self.zodiac:
            clauses.append(f"Embodying the spirit of {self.zodiac.name}")
        if self.season:
            clauses.append(f"Blooming in the heart of {self.season}")
        if self.weather:
            clauses.append(
                f"Found on a {self.weather.condition.lower()} day at "
                f"{self.weather.temperature:.0f}°{self.weather.unit}"
            )
        return ". ".join(clauses) if clauses else None


@dataclass(frozen=True)
class BouquetPlan:
    """What a holiday bouquet should be called and made of."""

    holiday_name: str
    display_name: str
    theme: str
    flowers: list[str] = field(default_factory=list)
    location: str | None = None
    personal_message: str | None = None


@dataclass(frozen=True)
class Selection:
    """A chosen species together with the context it was chosen in."""

    species: BotanicalSpecies
    context: FlowerContext
    contextual: bool


def bouquet_flowers_from_theme(theme: str) -> list[str]:
    """Split "love with red roses and pink lilies" into its flower names."""
    _, _, flowers = theme.partition(" with ")
    if not flowers:
        return []
    parts = re.split(r",\s*|\s+and\s+", flowers)
    return [p.strip() for p in parts if p.strip()]


def bouquet_for(context: FlowerContext) -> BouquetPlan | None:
    """Bouquet plan for a bouquet-worthy holiday in ``context``."""
    holiday = context.holiday
    if holiday is None or not holiday.is_bouquet_worthy or not holiday.bouquet_theme:
        return None
    return BouquetPlan(
        holiday_name=holiday.name,
        display_name=holiday.custom_flower_name or f"{holiday.name} Bouquet",
        theme=holiday.bouquet_theme,
        flowers=bouquet_flowers_from_theme(holiday.bouquet_theme),
        location=holiday.custom_location,
        personal_message=holiday.personal_message,
    )


class ContextualSelector:
    """Pick the next species, biased by place and calendar."""

    def __init__(
        self,
        catalog: SpeciesCatalog | None = None,
        rng: random.Random | None = None,
        contextual_chance: int = 4,
    ) -> None:
        if contextual_chance < 1:
            msg = "contextual_chance must be >= 1"
            raise ValueError(msg)
        self.catalog = catalog or SpeciesCatalog()
        self.rng = rng or random.Random()
        self.contextual_chance = contextual_chance

    def build_context(
        self,
        location: LocationSnapshot | None = None,
        weather: WeatherSnapshot | None = None,
        now: datetime | None = None,
    ) -> FlowerContext:
        """Combine location, weather and the calendar into a FlowerContext."""
        now = now or datetime.now()
        temporal = resolve(now, location.latitude if location else None)
        return FlowerContext(
            place_name=location.place_name if location else None,
            country=location.country if location else None,
            city=location.city if location else None,
            season=temporal.season,
            holiday=temporal.holiday,
            zodiac=temporal.zodiac,
            time_of_day=temporal.time_of_day,
            weather=weather,
        )

    def should_use_contextual(self) -> bool:
        """The 1-in-N gate deciding whether to try contextual selection."""
        return self.rng.randint(1, self.contextual_chance) == 1

    def select_next(
        self,
        excluded: Collection[str] = (),
        location: LocationSnapshot | None = None,
        weather: WeatherSnapshot | None = None,
        now: datetime | None = None,
    ) -> Selection | None:
        """Contextual pick of an undiscovered species, or None if none remain."""
        context = self.build_context(location, weather, now)
        continent = continent_for_country(context.country)
        species = self.catalog.contextual_species(
            continent, context.season, excluding=excluded, rng=self.rng
        )
        if species is None:
            logger.info("Catalog exhausted: all %d species excluded", len(self.catalog))
            return None
        logger.debug(
            "Contextual pick %s (continent=%s, season=%s)",
            species.scientific_name,
            continent,
            context.season,
        )
        return Selection(species=species, context=context, contextual=True)

    def choose(
        self,
        excluded: Collection[str] = (),
        location: LocationSnapshot | None = None,
        weather: WeatherSnapshot | None = None,
        now: datetime | None = None,
    ) -> Selection | None:
        """Apply the contextual gate, then pick contextually or uniformly."""
        if self.should_use_contextual():
            return self.select_next(excluded, location, weather, now)

        species = self.catalog.random_species(excluding=excluded, rng=self.rng)
        if species is None:
            logger.info("Catalog exhausted: all %d species excluded", len(self.catalog))
            return None
        context = self.build_context(location, weather, now)
        return Selection(species=species, context=context, contextual=False)

    def require_next(
        self,
        excluded: Collection[str] = (),
        location: LocationSnapshot | None = None,
        weather: WeatherSnapshot | None = None,
        now: datetime | None = None,
    ) -> Selection:
        """Like ``choose`` but raises SelectionExhausted instead of returning None."""
        selection = self.choose(excluded, location, weather, now)
        if selection is None:
            raise SelectionExhausted(len(excluded))
        return selection

    def build_descriptor(self, context: FlowerContext) -> str | None:
        """Short prompt fragment such as ``"red and white Danish moonlit rose"``.

        Returns None when the context holds nothing to draw on.
        """
        elements: list[str] = []
        if context.country and context.country in COUNTRY_COLORS:
            elements.append(COUNTRY_COLORS[context.country])
        if context.city and self.rng.randint(1, 2) == 1:
            elements.append(f"{context.city}-inspired")
        if context.season and self.rng.randint(1, 3) == 1:
            elements.append(context.season.lower())
        if context.holiday:
            elements.append(context.holiday.descriptor)
        if context.zodiac and self.rng.randint(1, 3) == 1:
            elements.append(context.zodiac.descriptor)
        if context.time_of_day and self.rng.randint(1, 3) == 1:
            elements.append(_TIME_OF_DAY_MOODS[context.time_of_day])

        if not elements:
            return None

        base = self.rng.choice(BASE_FLOWERS)
        if len(elements) == 1:
            return f"{elements[0]} {base}"
        picked = self.rng.sample(elements, k=self.rng.randint(1, 2))
        return " ".join(picked) + f" {base}"
