from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

# Index 0 is Monday, matching date.weekday().
FRENCH_WEEKDAYS = (
    "lundi",
    "mardi",
    "mercredi",
    "jeudi",
    "vendredi",
    "samedi",
    "dimanche",
)

FRENCH_MONTHS = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)

SERVICE_DAYS = 4
THURSDAY = 3


@dataclass(frozen=True)
class MenuPeriods:
    current: str
    upcoming: str
    is_last_day: bool


def week_start(today: date) -> date:
    """Sunday opening the service week that contains ``today``."""
    days_since_sunday = (today.weekday() + 1) % 7
    return today - timedelta(days=days_since_sunday)


def format_period(start: date) -> str:
    end = start + timedelta(days=SERVICE_DAYS)
    return (
        f"Du {FRENCH_WEEKDAYS[start.weekday()]} {start.day} "
        f"au {FRENCH_WEEKDAYS[end.weekday()]} {end.day} {FRENCH_MONTHS[end.month - 1]}"
    )


def compute_periods(today: date) -> MenuPeriods:
    sunday = week_start(today)
    return MenuPeriods(
        current=format_period(sunday),
        upcoming=format_period(sunday + timedelta(days=7)),
        is_last_day=today.weekday() == THURSDAY,
    )
