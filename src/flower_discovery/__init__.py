"""Flower Discovery - contextual botanical discovery, collection and gifting.

Architecture::

    reference/     Static tables (species, holidays, zodiac, country lookups)
    catalog.py     Species lookup and filtering
    temporal.py    Date -> season / zodiac / holiday / time of day
    selector.py    Next-species choice biased by place and calendar
    discovery.py   Selection + providers -> stored Flower
    collection.py  The user's collection (lock, atomic snapshot persistence)
    merge.py       Newest-wins reconciliation by flower id
    codec.py       .bouquet backups and .flower gifts (versioned JSON)
    store.py       Key/blob persistence (file and in-memory)
    datasources/   External APIs (Open-Meteo current weather)
    flows/         Prefect orchestration (auto-backup, restore, cloud sync)
    services/      Shared utilities (HTTP client with retry)

Data flow: temporal + catalog -> selector -> discovery -> collection -> codec / merge

Extension points:
  - New data source:   datasources/__init__.py
  - New reference table: reference/__init__.py
"""

__version__ = "0.1.0"

from flower_discovery.config import Settings
from flower_discovery.schemas import Flower

__all__ = ["Flower", "Settings", "__version__"]
