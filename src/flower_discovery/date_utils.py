"""Shared date-formatting helpers."""

from __future__ import annotations

from datetime import date


def ordinal(n: int) -> str:
    """English ordinal for a positive integer: 1st, 2nd, 3rd, 4th, 11th, 21st."""
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_discovery_date(day: date) -> str:
    """Display date stored on a discovered flower, e.g. ``15th June 2025``."""
    return f"{ordinal(day.day)} {day.strftime('%B')} {day.year}"
