"""Country lookups used by the contextual selector.

Country names match what reverse geocoders return in English
(``"United States"``, ``"United Kingdom"``). Countries missing from
``COUNTRY_CONTINENTS`` simply disable the continent filter.
"""

from __future__ import annotations

from flower_discovery.schemas import Continent

_NA = Continent.NORTH_AMERICA
_SA = Continent.SOUTH_AMERICA
_EU = Continent.EUROPE
_AF = Continent.AFRICA
_AS = Continent.ASIA
_OC = Continent.OCEANIA

COUNTRY_CONTINENTS: dict[str, Continent] = {
    # North America
    "United States": _NA,
    "Canada": _NA,
    "Mexico": _NA,
    "Guatemala": _NA,
    "Costa Rica": _NA,
    "Panama": _NA,
    "Cuba": _NA,
    "Jamaica": _NA,
    # South America
    "Brazil": _SA,
    "Argentina": _SA,
    "Chile": _SA,
    "Peru": _SA,
    "Colombia": _SA,
    "Ecuador": _SA,
    "Uruguay": _SA,
    "Venezuela": _SA,
    # Europe
    "Portugal": _EU,
    "Spain": _EU,
    "France": _EU,
    "Italy": _EU,
    "Germany": _EU,
    "United Kingdom": _EU,
    "Ireland": _EU,
    "Netherlands": _EU,
    "Belgium": _EU,
    "Switzerland": _EU,
    "Austria": _EU,
    "Greece": _EU,
    "Sweden": _EU,
    "Norway": _EU,
    "Denmark": _EU,
    "Finland": _EU,
    "Poland": _EU,
    "Bulgaria": _EU,
    # Africa
    "South Africa": _AF,
    "Kenya": _AF,
    "Morocco": _AF,
    "Egypt": _AF,
    "Nigeria": _AF,
    "Tanzania": _AF,
    "Ethiopia": _AF,
    "Madagascar": _AF,
    # Asia
    "Japan": _AS,
    "China": _AS,
    "India": _AS,
    "South Korea": _AS,
    "Thailand": _AS,
    "Vietnam": _AS,
    "Indonesia": _AS,
    "Malaysia": _AS,
    "Singapore": _AS,
    "Philippines": _AS,
    "Turkey": _AS,
    "Iran": _AS,
    # Oceania
    "Australia": _OC,
    "New Zealand": _OC,
    "Fiji": _OC,
    "Papua New Guinea": _OC,
}

# Flag-colour phrases mixed into contextual descriptors
COUNTRY_COLORS: dict[str, str] = {
    "Portugal": "red and green Portuguese",
    "Spain": "red and yellow Spanish",
    "France": "blue, white and red French",
    "Italy": "green, white and red Italian",
    "Germany": "black, red and gold German",
    "Brazil": "green and yellow Brazilian",
    "Japan": "red and white Japanese",
    "India": "saffron, white and green Indian",
    "Mexico": "green, white and red Mexican",
    "Canada": "red and white Canadian maple",
    "Australia": "green and gold Australian",
    "United Kingdom": "red, white and blue British",
    "Ireland": "green, white and orange Irish",
    "Netherlands": "orange Dutch",
    "Greece": "blue and white Greek",
    "Sweden": "blue and yellow Swedish",
    "Norway": "red, white and blue Norwegian",
    "Denmark": "red and white Danish",
    "Switzerland": "red and white Swiss",
    "Austria": "red and white Austrian",
}


def continent_for_country(country: str | None) -> Continent | None:
    """Continent for a country name, or None if unknown."""
    if not country:
        return None
    return COUNTRY_CONTINENTS.get(country.strip())
