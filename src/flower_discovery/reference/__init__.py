"""Static reference data.

Tables that never change at runtime: species records, holidays, zodiac
ranges and country lookups.

Adding a new module:
1. Create ``reference/{name}.py`` with constants/dataclasses
2. Re-export from this ``__init__.py``
"""

from flower_discovery.reference.geography import COUNTRY_COLORS as COUNTRY_COLORS
from flower_discovery.reference.geography import COUNTRY_CONTINENTS as COUNTRY_CONTINENTS
from flower_discovery.reference.geography import continent_for_country as continent_for_country
from flower_discovery.reference.holidays import HOLIDAYS as HOLIDAYS
from flower_discovery.reference.holidays import Holiday as Holiday
from flower_discovery.reference.species import SPECIES as SPECIES
from flower_discovery.reference.species import BotanicalSpecies as BotanicalSpecies
from flower_discovery.reference.zodiac import ZODIAC_SIGNS as ZODIAC_SIGNS
from flower_discovery.reference.zodiac import ZodiacSign as ZodiacSign
