"""
Species catalog: lookup and filtering over the bundled reference data.

The catalog is immutable; construct one per use (or share one) freely.
Every method that picks at random takes a ``random.Random`` so callers can
seed it.
"""

from __future__ import annotations

import random
from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING

from flower_discovery.reference.species import SPECIES, BotanicalSpecies

if TYPE_CHECKING:
    from flower_discovery.schemas import Continent, RarityLevel


def matches_season(species: BotanicalSpecies, season: str) -> bool:
    """Case-insensitive substring match of a season name in the blooming text."""
    return season.casefold() in species.blooming_season.casefold()


class SpeciesCatalog:
    """Read-only collection of botanical species keyed by scientific name."""

    def __init__(self, species: Iterable[BotanicalSpecies] = SPECIES) -> None:
        self._species: tuple[BotanicalSpecies, ...] = tuple(species)
        self._by_name = {s.scientific_name: s for s in self._species}
        if len(self._by_name) != len(self._species):
            msg = "Duplicate scientific name in species catalog"
            raise ValueError(msg)

    def __len__(self) -> int:
        return len(self._species)

    def __contains__(self, scientific_name: object) -> bool:
        return scientific_name in self._by_name

    def all(self) -> list[BotanicalSpecies]:
        return list(self._species)

    def get(self, scientific_name: str) -> BotanicalSpecies | None:
        return self._by_name.get(scientific_name)

    def available(self, excluding: Collection[str] = ()) -> list[BotanicalSpecies]:
        """Species whose scientific name is not in ``excluding``, in catalog order."""
        return [s for s in self._species if s.scientific_name not in excluding]

    def random_species(
        self,
        excluding: Collection[str] = (),
        rng: random.Random | None = None,
    ) -> BotanicalSpecies | None:
        """Uniform pick from the unexcluded species, or None if all are excluded."""
        candidates = self.available(excluding)
        if not candidates:
            return None
        return (rng or random.Random()).choice(candidates)

    def by_rarity(self, rarity: RarityLevel) -> list[BotanicalSpecies]:
        return [s for s in self._species if s.rarity == rarity]

    def by_continent(self, continent: Continent) -> list[BotanicalSpecies]:
        return [s for s in self._species if continent in s.continents]

    def by_family(self, family: str) -> list[BotanicalSpecies]:
        return [s for s in self._species if s.family == family]

    def for_season(self, season: str) -> list[BotanicalSpecies]:
        return [s for s in self._species if matches_season(s, season)]

    def search(self, query: str) -> list[BotanicalSpecies]:
        """Match ``query`` against scientific names, common names and family."""
        q = query.casefold()
        return [
            s
            for s in self._species
            if q in s.scientific_name.casefold()
            or any(q in name.casefold() for name in s.common_names)
            or q in s.family.casefold()
        ]

    def contextual_species(
        self,
        continent: Continent | None,
        season: str | None,
        excluding: Collection[str] = (),
        rng: random.Random | None = None,
    ) -> BotanicalSpecies | None:
        """Pick a species biased towards ``continent`` and ``season``.

        Each filter is applied only if it leaves at least one candidate, so
        the result is None only when every species is excluded.
        """
        candidates = self.available(excluding)
        if not candidates:
            return None

        if continent is not None:
            on_continent = [s for s in candidates if continent in s.continents]
            if on_continent:
                candidates = on_continent

        if season:
            in_season = [s for s in candidates if matches_season(s, season)]
            if in_season:
                candidates = in_season

        return (rng or random.Random()).choice(candidates)
