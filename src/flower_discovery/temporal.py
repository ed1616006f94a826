"""
Temporal context: season, zodiac sign, holiday and time of day.

Everything here is a pure function of a date/time and (for seasons) the
hemisphere, so it is safe to call from any thread.

Season table (Northern / Southern):

    Mar-May    Spring / Autumn
    Jun-Aug    Summer / Winter
    Sep-Nov    Autumn / Spring
    Dec-Feb    Winter / Summer
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from flower_discovery.date_utils import ordinal
from flower_discovery.reference.holidays import (
    ANNIVERSARY_DAY,
    ANNIVERSARY_FLOWER_NAME,
    ANNIVERSARY_LOCATION,
    ANNIVERSARY_MONTH,
    ANNIVERSARY_REFERENCE_YEAR,
    ANNIVERSARY_THEME,
    HOLIDAYS,
    Holiday,
)
from flower_discovery.reference.zodiac import ZODIAC_SIGNS, ZodiacSign


class Hemisphere(StrEnum):
    NORTHERN = "northern"
    SOUTHERN = "southern"


class Season(StrEnum):
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"
    WINTER = "Winter"


class TimeOfDay(StrEnum):
    MORNING = "morning"
    EVENING = "evening"
    NIGHT = "night"


_NORTHERN_SEASONS: dict[int, Season] = {
    3: Season.SPRING, 4: Season.SPRING, 5: Season.SPRING,
    6: Season.SUMMER, 7: Season.SUMMER, 8: Season.SUMMER,
    9: Season.AUTUMN, 10: Season.AUTUMN, 11: Season.AUTUMN,
    12: Season.WINTER, 1: Season.WINTER, 2: Season.WINTER,
}  # fmt: skip

_OPPOSITE: dict[Season, Season] = {
    Season.SPRING: Season.AUTUMN,
    Season.SUMMER: Season.WINTER,
    Season.AUTUMN: Season.SPRING,
    Season.WINTER: Season.SUMMER,
}


@dataclass(frozen=True)
class TemporalContext:
    """Calendar-derived context for one instant."""

    season: Season
    zodiac: ZodiacSign | None
    holiday: Holiday | None
    time_of_day: TimeOfDay | None
    hemisphere: Hemisphere


def hemisphere_for_latitude(latitude: float | None) -> Hemisphere:
    """Southern only for negative latitudes; unknown position counts as Northern."""
    if latitude is not None and latitude < 0:
        return Hemisphere.SOUTHERN
    return Hemisphere.NORTHERN


def season_for(month: int, hemisphere: Hemisphere = Hemisphere.NORTHERN) -> Season:
    """Meteorological season for a month (1-12)."""
    try:
        season = _NORTHERN_SEASONS[month]
    except KeyError:
        msg = f"Month must be in 1..12, got {month}"
        raise ValueError(msg) from None
    if hemisphere is Hemisphere.SOUTHERN:
        return _OPPOSITE[season]
    return season


def zodiac_for(month: int, day: int) -> ZodiacSign | None:
    """Zodiac sign whose inclusive date range contains (month, day)."""
    for sign in ZODIAC_SIGNS:
        if sign.contains(month, day):
            return sign
    return None


def wedding_anniversary(year: int) -> Holiday | None:
    """The anniversary holiday for ``year``, or None before the first one."""
    years = year - ANNIVERSARY_REFERENCE_YEAR
    if years < 1:
        return None
    nth = ordinal(years)
    return Holiday(
        name="Wedding Anniversary",
        descriptor="anniversary white rose",
        is_bouquet_worthy=True,
        bouquet_theme=ANNIVERSARY_THEME,
        custom_location=ANNIVERSARY_LOCATION,
        personal_message=f"Happy {nth} wedding anniversary! Every year more in bloom.",
        custom_flower_name=f"{nth} {ANNIVERSARY_FLOWER_NAME}",
    )


def holiday_for(day: date) -> Holiday | None:
    """Holiday falling on ``day``, if any."""
    if (day.month, day.day) == (ANNIVERSARY_MONTH, ANNIVERSARY_DAY):
        return wedding_anniversary(day.year)
    return HOLIDAYS.get((day.month, day.day))


def time_of_day(hour: int) -> TimeOfDay | None:
    """Bucket an hour: morning 5-8, evening 17-20, night 21-4, otherwise None."""
    if 5 <= hour <= 8:
        return TimeOfDay.MORNING
    if 17 <= hour <= 20:
        return TimeOfDay.EVENING
    if hour >= 21 or hour <= 4:
        return TimeOfDay.NIGHT
    return None


def resolve(now: datetime, latitude: float | None = None) -> TemporalContext:
    """Resolve the full temporal context for ``now`` at ``latitude``.

    ``now`` is interpreted in its own timezone (or as naive local time), so
    pass a local time if holidays should follow the user's calendar.
    """
    hemisphere = hemisphere_for_latitude(latitude)
    return TemporalContext(
        season=season_for(now.month, hemisphere),
        zodiac=zodiac_for(now.month, now.day),
        holiday=holiday_for(now.date()),
        time_of_day=time_of_day(now.hour),
        hemisphere=hemisphere,
    )
