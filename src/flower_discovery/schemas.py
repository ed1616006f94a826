"""
Domain models for flower discovery.

Pydantic models for everything that is persisted or transferred between
devices. These define the canonical JSON schema: datetimes are ISO-8601,
image bytes are base64.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flower_discovery.date_utils import format_discovery_date


def _now() -> datetime:
    return datetime.now(UTC)


# =============================================================================
# Enumerations
# =============================================================================


class RarityLevel(StrEnum):
    """How rare a species is in the wild."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    VERY_RARE = "Very Rare"
    ENDANGERED = "Endangered"
    EXTINCT = "Extinct in Wild"

    @property
    def sort_order(self) -> int:
        return list(RarityLevel).index(self)


class Continent(StrEnum):
    """Continents used for species ranges and discovery statistics."""

    NORTH_AMERICA = "North America"
    SOUTH_AMERICA = "South America"
    EUROPE = "Europe"
    AFRICA = "Africa"
    ASIA = "Asia"
    OCEANIA = "Oceania"
    ANTARCTICA = "Antarctica"

    @classmethod
    def parse(cls, value: str | None) -> Continent | None:
        """Map free text (e.g. from a detail provider) to a Continent, or None."""
        if not value:
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


# =============================================================================
# Ownership
# =============================================================================


class FlowerOwner(BaseModel):
    """One link in a flower's chain of custody."""

    id: UUID = Field(default_factory=uuid4)
    name: str
    device_id: str = "unknown"
    transfer_date: datetime = Field(default_factory=_now)
    location: str | None = None


class TransferMetadata(BaseModel):
    """Envelope data describing a single-flower hand-off."""

    transfer_id: UUID = Field(default_factory=uuid4)
    transfer_date: datetime = Field(default_factory=_now)
    sender: FlowerOwner


# =============================================================================
# Collaborator snapshots
# =============================================================================


class LocationSnapshot(BaseModel):
    """Last known position, as reported by a location provider."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    place_name: str | None = None
    country: str | None = None
    city: str | None = None


class WeatherSnapshot(BaseModel):
    """Current conditions at the discovery location."""

    condition: str
    temperature: float
    unit: str = "C"


class FlowerDetails(BaseModel):
    """Descriptive text produced by a detail provider."""

    meaning: str
    properties: str
    origins: str
    detailed_description: str
    continent: str


# =============================================================================
# Flower
# =============================================================================


class Flower(BaseModel):
    """A discovered flower instance in the user's collection."""

    model_config = ConfigDict(ser_json_bytes="base64", val_json_bytes="base64")

    id: UUID = Field(default_factory=uuid4)
    name: str
    descriptor: str
    image_data: bytes | None = None
    generated_date: datetime = Field(default_factory=_now)
    is_favorite: bool = False
    discovery_date: datetime | None = None

    # Botanical information copied from the catalog species
    scientific_name: str | None = None
    common_names: list[str] | None = None
    family: str | None = None
    native_regions: list[str] | None = None
    blooming_season: str | None = None
    conservation_status: str | None = None
    uses: list[str] | None = None
    interesting_facts: list[str] | None = None
    care_instructions: str | None = None
    rarity_level: RarityLevel | None = None

    # Filled in asynchronously by the detail provider
    meaning: str | None = None
    properties: str | None = None
    origins: str | None = None
    detailed_description: str | None = None
    short_description: str | None = None
    continent: Continent | None = None

    contextual_generation: bool = False
    generation_context: str | None = None

    is_bouquet: bool = False
    bouquet_flowers: list[str] | None = None
    holiday_name: str | None = None

    discovery_latitude: float | None = None
    discovery_longitude: float | None = None
    discovery_location_name: str | None = None
    discovery_weather_condition: str | None = None
    discovery_temperature: float | None = None
    discovery_temperature_unit: str | None = None
    discovery_day_of_week: str | None = None
    discovery_formatted_date: str | None = None

    original_owner: FlowerOwner | None = None
    owners: list[FlowerOwner] = Field(default_factory=list)
    transfer_token: str | None = None
    is_giftable: bool = True

    @field_validator("generated_date", "discovery_date")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # Naive and aware datetimes cannot be compared; treat naive as UTC.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def effective_date(self) -> datetime:
        """Discovery date if set, else generation date. Used for sort and merge."""
        return self.discovery_date or self.generated_date

    @property
    def has_ownership_history(self) -> bool:
        return self.original_owner is not None or bool(self.owners)

    @property
    def owner_count(self) -> int:
        """Everyone who has held this flower, including the current holder."""
        count = 1 if self.original_owner is not None else 0
        return count + len(self.owners) + 1

    def apply_details(self, details: FlowerDetails) -> None:
        """Copy provider-generated details onto this flower."""
        self.meaning = details.meaning
        self.properties = details.properties
        self.origins = details.origins
        self.detailed_description = details.detailed_description
        self.continent = Continent.parse(details.continent)

    def capture_weather_and_date(
        self,
        weather: WeatherSnapshot | None,
        now: datetime | None = None,
    ) -> None:
        """Record discovery weather plus the weekday and a display date."""
        now = now or _now()
        if weather is not None:
            self.discovery_weather_condition = weather.condition
            self.discovery_temperature = weather.temperature
            self.discovery_temperature_unit = weather.unit
        self.discovery_day_of_week = now.strftime("%A")
        self.discovery_formatted_date = format_discovery_date(now)

    # -- transfer chain -------------------------------------------------------

    def prepare_for_transfer(self, owner: FlowerOwner) -> TransferMetadata:
        """Record ``owner`` as the sender and issue a fresh one-time token."""
        if self.original_owner is None and not self.owners:
            self.original_owner = owner
        else:
            self.owners.append(owner)
        self.transfer_token = str(uuid4())
        return TransferMetadata(sender=owner)

    def complete_transfer(self) -> None:
        self.transfer_token = None

    def cancel_transfer(self) -> None:
        """Undo the last ``prepare_for_transfer``."""
        if self.owners:
            self.owners.pop()
        elif self.original_owner is not None:
            self.original_owner = None
        self.transfer_token = None


# =============================================================================
# Transfer / backup documents
# =============================================================================


def _require_id(record: Any) -> None:
    # A document record without an id would decode with a fresh uuid4 and
    # look like a new flower on every import.
    if isinstance(record, dict) and "id" not in record:
        msg = "flower record has no id"
        raise ValueError(msg)


class FlowerDocument(BaseModel):
    """A single flower sent to another device (``.flower`` file)."""

    version: int = 1
    flower: Flower
    transfer_metadata: TransferMetadata

    @field_validator("flower", mode="before")
    @classmethod
    def _flower_has_id(cls, value: Any) -> Any:
        _require_id(value)
        return value


class BouquetMetadata(BaseModel):
    """Provenance and integrity data for a collection backup."""

    export_date: datetime = Field(default_factory=_now)
    device_id: str = "unknown"
    device_name: str = "unknown"
    app_version: str = "unknown"
    total_flowers: int
    exporter_name: str | None = None
    exporter_location: str | None = None
    checksum: str


class BouquetDocument(BaseModel):
    """A whole collection backup (``.bouquet`` file)."""

    version: int = 1
    flowers: list[Flower]
    metadata: BouquetMetadata

    @field_validator("flowers", mode="before")
    @classmethod
    def _flowers_have_ids(cls, value: Any) -> Any:
        if isinstance(value, list):
            for item in value:
                _require_id(item)
        return value
