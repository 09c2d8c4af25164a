from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, timezone
from typing import Sequence

from dienstplan.core.enums import DayType
from dienstplan.schemas.schedule import GeneratedSchedule, ScheduleDay
from dienstplan.services.assignment import AssignmentEngine, DayContext, SchedulerEmployee
from dienstplan.services.holidays import holidays_for, is_holiday
from dienstplan.services.shifts import NON_CASHIER_AREAS, cashier_shifts_for, get_area_shift_template

logger = logging.getLogger(__name__)

# Indexed by weekday, 0 = Sunday.
WEEKDAY_NAMES = ("Sonntag", "Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag")
WEEKDAY_ABBREVIATIONS = ("So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa.")
MONTH_NAMES = (
    "Januar",
    "Februar",
    "März",
    "April",
    "Mai",
    "Juni",
    "Juli",
    "August",
    "September",
    "Oktober",
    "November",
    "Dezember",
)

EMPTY_ROSTER_WARNING = "Es sind keine Mitarbeitenden angelegt - Dienstplan enthält nur Platzhalter."


def resolve_target_month(month: str | None, today: date) -> tuple[int, int]:
    """
    Parse a ``YYYY-MM`` selector into ``(year, month)``.

    Anything missing or malformed falls back to the month containing *today*.
    """

    fallback = (today.year, today.month)
    if not month or not month.strip():
        return fallback

    parts = month.strip().split("-")
    if len(parts) < 2:
        return fallback
    try:
        year = int(parts[0])
        month_number = int(parts[1])
    except ValueError:
        return fallback

    if not 1 <= month_number <= 12 or not date.min.year <= year <= date.max.year:
        return fallback
    return year, month_number


def weekday_index(day: date) -> int:
    """Return the weekday with Sunday as 0."""

    return day.isoweekday() % 7


def classify_day(day: date, holiday_set: set[str]) -> DayType:
    if is_holiday(day, holiday_set):
        return DayType.HOLIDAY
    if weekday_index(day) in (0, 6):
        return DayType.WEEKEND
    return DayType.WORKDAY


def month_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[month - 1]} {year}"


def readable_date(day: date) -> str:
    return f"{WEEKDAY_ABBREVIATIONS[weekday_index(day)]}, {day:%d.%m.}"


def generate_schedule(
    employees: Sequence[SchedulerEmployee],
    month: str | None = None,
    *,
    today: date | None = None,
) -> GeneratedSchedule:
    """
    Build the shift plan for one month.

    Days are filled in calendar order; within a day all cashier shifts come
    first, followed by one slot per secondary area. Every slot yields a
    record, so unfillable slots surface as OPEN entries plus a warning
    instead of an error.
    """

    year, month_number = resolve_target_month(month, today or date.today())
    holiday_set = holidays_for(year)
    engine = AssignmentEngine(employees)
    days: list[ScheduleDay] = []

    for day_number in range(1, calendar.monthrange(year, month_number)[1] + 1):
        current_day = date(year, month_number, day_number)
        day_type = classify_day(current_day, holiday_set)
        weekend_or_holiday = day_type is not DayType.WORKDAY
        context = DayContext(
            day_number=day_number,
            date_iso=current_day.isoformat(),
            weekday_index=weekday_index(current_day),
            weekend_or_holiday=weekend_or_holiday,
        )

        shifts = [
            engine.fill_cashier_slot(context, template)
            for template in cashier_shifts_for(weekend_or_holiday)
        ]
        for area in NON_CASHIER_AREAS:
            template = get_area_shift_template(area, weekend_or_holiday)
            shifts.append(engine.fill_area_slot(context, area, template))

        days.append(
            ScheduleDay(
                date_iso=context.date_iso,
                readable_date=readable_date(current_day),
                weekday_index=context.weekday_index,
                weekday_name=WEEKDAY_NAMES[context.weekday_index],
                type=day_type,
                shifts=shifts,
            )
        )

    if not engine.has_employees:
        engine.warnings.append(EMPTY_ROSTER_WARNING)

    summary = engine.summary
    logger.info(
        "Generated schedule for %04d-%02d: %d employees, cashier %d/%d, areas %d/%d, %d warnings",
        year,
        month_number,
        len(employees),
        summary.filled_cashier_shifts,
        summary.total_cashier_shifts,
        summary.filled_area_slots,
        summary.total_area_slots,
        len(engine.warnings),
    )

    return GeneratedSchedule(
        month_key=f"{year:04d}-{month_number:02d}",
        month_label=month_label(year, month_number),
        generated_at=datetime.now(timezone.utc),
        days=days,
        summary=summary,
        warnings=engine.warnings,
    )
