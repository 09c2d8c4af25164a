"""Utility helpers for the North Rhine-Westphalia public holiday calendar."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class Holiday:
    """Simple representation of a public holiday."""

    code: str
    date: date
    name: str
    localized_name: str


def _calculate_easter_sunday(year: int) -> date:
    """Return the Gregorian Easter Sunday for *year* using the Anonymous algorithm."""

    # Anonymous Gregorian algorithm (Meeus/Jones/Butcher)
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = 1 + (h + l - 7 * m + 114) % 31
    return date(year, month, day)


def get_nrw_public_holidays(year: int) -> list[Holiday]:
    """Return the public holidays observed in North Rhine-Westphalia for *year*."""

    easter = _calculate_easter_sunday(year)

    return [
        Holiday("new_years_day", date(year, 1, 1), "New Year's Day", "Neujahr"),
        Holiday("good_friday", easter - timedelta(days=2), "Good Friday", "Karfreitag"),
        Holiday("easter_monday", easter + timedelta(days=1), "Easter Monday", "Ostermontag"),
        Holiday("labour_day", date(year, 5, 1), "Labour Day", "Tag der Arbeit"),
        Holiday("ascension_day", easter + timedelta(days=39), "Ascension Day", "Christi Himmelfahrt"),
        Holiday("whit_monday", easter + timedelta(days=50), "Whit Monday", "Pfingstmontag"),
        Holiday("corpus_christi", easter + timedelta(days=60), "Corpus Christi", "Fronleichnam"),
        Holiday("german_unity_day", date(year, 10, 3), "German Unity Day", "Tag der Deutschen Einheit"),
        Holiday("all_saints_day", date(year, 11, 1), "All Saints' Day", "Allerheiligen"),
        Holiday("christmas_day", date(year, 12, 25), "Christmas Day", "1. Weihnachtstag"),
        Holiday("boxing_day", date(year, 12, 26), "Boxing Day", "2. Weihnachtstag"),
    ]


def holidays_for(year: int) -> set[str]:
    """Return the ISO dates of every public holiday in *year*."""

    return {holiday.date.isoformat() for holiday in get_nrw_public_holidays(year)}


def is_holiday(day: date, holiday_set: set[str]) -> bool:
    return day.isoformat() in holiday_set


__all__ = [
    "Holiday",
    "get_nrw_public_holidays",
    "holidays_for",
    "is_holiday",
]
