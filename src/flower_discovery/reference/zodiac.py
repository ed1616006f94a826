"""Western zodiac date ranges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ZodiacSign:
    """A sign and its inclusive (month, day) range."""

    name: str
    descriptor: str
    start_month: int
    start_day: int
    end_month: int
    end_day: int

    def contains(self, month: int, day: int) -> bool:
        """True if ``(month, day)`` falls in this sign, both ends inclusive."""
        start = (self.start_month, self.start_day)
        end = (self.end_month, self.end_day)
        point = (month, day)
        if start <= end:
            return start <= point <= end
        # Range wraps the year boundary (Capricorn)
        return point >= start or point <= end


ZODIAC_SIGNS: tuple[ZodiacSign, ...] = (
    ZodiacSign("Aries", "fiery ram", 3, 21, 4, 19),
    ZodiacSign("Taurus", "earthly bull", 4, 20, 5, 20),
    ZodiacSign("Gemini", "twin butterfly", 5, 21, 6, 20),
    ZodiacSign("Cancer", "lunar crab", 6, 21, 7, 22),
    ZodiacSign("Leo", "golden lion", 7, 23, 8, 22),
    ZodiacSign("Virgo", "harvest maiden", 8, 23, 9, 22),
    ZodiacSign("Libra", "balanced scale", 9, 23, 10, 22),
    ZodiacSign("Scorpio", "mysterious scorpion", 10, 23, 11, 21),
    ZodiacSign("Sagittarius", "adventurous archer", 11, 22, 12, 21),
    ZodiacSign("Capricorn", "mountain goat", 12, 22, 1, 19),
    ZodiacSign("Aquarius", "water bearer", 1, 20, 2, 18),
    ZodiacSign("Pisces", "dreamy fish", 2, 19, 3, 20),
)
