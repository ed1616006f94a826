"""Dated holidays that bias selection and can trigger a bouquet.

Holidays are keyed by (month, day) and repeat every year. Floating holidays
(Mother's Day, Father's Day, Thanksgiving) use a fixed approximate date.
The wedding anniversary is not in the table: its name and message depend on
the year, so ``temporal.holiday_for`` builds it on the fly from the
``ANNIVERSARY_*`` constants below.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Holiday:
    """A calendar occasion with optional personal overrides."""

    name: str
    descriptor: str
    is_bouquet_worthy: bool = False
    bouquet_theme: str | None = None
    custom_location: str | None = None
    personal_message: str | None = None
    custom_flower_name: str | None = None


HOLIDAYS: dict[tuple[int, int], Holiday] = {
    (1, 1): Holiday(
        "New Year",
        "celebration sparkle",
        is_bouquet_worthy=True,
        bouquet_theme="fresh beginnings with white and gold",
    ),
    (1, 25): Holiday("Burns Night", "highland thistle"),
    (2, 14): Holiday(
        "Valentine's Day",
        "romantic red heart",
        is_bouquet_worthy=True,
        bouquet_theme="love and passion with red roses and pink lilies",
    ),
    (3, 8): Holiday(
        "International Women's Day",
        "empowering purple",
        is_bouquet_worthy=True,
        bouquet_theme="strength and beauty with purple orchids and yellow tulips",
    ),
    (3, 17): Holiday(
        "St. Patrick's Day",
        "lucky emerald shamrock",
        is_bouquet_worthy=True,
        bouquet_theme="Irish luck with green carnations and white roses",
        custom_location="Dublin, Ireland",
    ),
    (3, 20): Holiday("Spring Equinox", "balanced light"),
    (4, 22): Holiday("Earth Day", "wild meadow"),
    (4, 25): Holiday(
        "Freedom Day",
        "red carnation",
        custom_location="Lisbon, Portugal",
        custom_flower_name="Cravo de Abril",
    ),
    (5, 1): Holiday(
        "May Day",
        "spring festival",
        is_bouquet_worthy=True,
        bouquet_theme="spring celebration with mixed wildflowers",
    ),
    (5, 12): Holiday(
        "Mother's Day",
        "maternal love",
        is_bouquet_worthy=True,
        bouquet_theme="appreciation with pink peonies and white gardenias",
        personal_message="For the one who taught us to love flowers.",
    ),
    (6, 16): Holiday(
        "Father's Day",
        "paternal strength",
        is_bouquet_worthy=True,
        bouquet_theme="strength with sunflowers and blue delphiniums",
    ),
    (6, 21): Holiday("Midsummer", "sun-drenched solstice"),
    (7, 14): Holiday("Bastille Day", "tricolour lavender", custom_location="Paris, France"),
    (10, 31): Holiday(
        "Halloween",
        "mystical autumn",
        is_bouquet_worthy=True,
        bouquet_theme="mysterious beauty with orange marigolds and deep purple roses",
    ),
    (11, 2): Holiday(
        "Day of the Dead",
        "marigold remembrance",
        custom_location="Oaxaca, Mexico",
        custom_flower_name="Cempasúchil",
    ),
    (11, 28): Holiday(
        "Thanksgiving",
        "grateful harvest",
        is_bouquet_worthy=True,
        bouquet_theme="gratitude with autumn chrysanthemums and wheat stalks",
    ),
    (12, 24): Holiday("Christmas Eve", "candlelit pine"),
    (12, 25): Holiday(
        "Christmas",
        "festive winter holly",
        is_bouquet_worthy=True,
        bouquet_theme="festive joy with red poinsettias and white roses",
    ),
    (12, 31): Holiday("New Year's Eve", "midnight firework"),
}

# Wedding anniversary rule: recurs on this date, counted from the wedding year.
ANNIVERSARY_MONTH = 11
ANNIVERSARY_DAY = 13
ANNIVERSARY_REFERENCE_YEAR = 2025
ANNIVERSARY_LOCATION = "Sintra, Portugal"
ANNIVERSARY_FLOWER_NAME = "Anniversary Bouquet"
ANNIVERSARY_THEME = "lasting love with white roses, peonies and eucalyptus"
