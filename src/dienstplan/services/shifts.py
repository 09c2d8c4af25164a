"""Static shift templates for the cashier desk and the secondary work areas."""

from __future__ import annotations

from dataclasses import dataclass

from dienstplan.core.enums import EmployeeArea


@dataclass(frozen=True)
class ShiftTemplate:
    id: str
    label: str
    start: str
    end: str
    hours: float


@dataclass(frozen=True)
class AreaShiftTemplate:
    label: str
    start: str | None
    end: str | None
    hours: float
    closed: bool = False
    note: str | None = None


CASHIER_WEEKDAY_SHIFTS: tuple[ShiftTemplate, ...] = (
    ShiftTemplate("W-1", "Frühdienst", "06:00", "13:00", 7),
    ShiftTemplate("W-2", "Mittelschicht", "13:00", "18:00", 5),
    ShiftTemplate("W-3", "Spätdienst", "18:00", "22:00", 4),
)

CASHIER_WEEKEND_SHIFTS: tuple[ShiftTemplate, ...] = (
    ShiftTemplate("WE-1", "Frühdienst", "07:00", "13:00", 6),
    ShiftTemplate("WE-2", "Mittelschicht", "13:00", "18:00", 5),
    ShiftTemplate("WE-3", "Spätdienst", "18:00", "22:00", 4),
)

CASHIER_SHIFT_IDS: tuple[str, ...] = tuple(
    shift.id for shift in (*CASHIER_WEEKDAY_SHIFTS, *CASHIER_WEEKEND_SHIFTS)
)

_SHIFT_BY_ID: dict[str, ShiftTemplate] = {
    shift.id: shift for shift in (*CASHIER_WEEKDAY_SHIFTS, *CASHIER_WEEKEND_SHIFTS)
}

AREA_LABELS: dict[EmployeeArea, str] = {
    EmployeeArea.BISTRO: "Bistro-Einsatz",
    EmployeeArea.LAGER: "Lager-Einsatz",
    EmployeeArea.WERKSTATT: "Werkstatt-Einsatz",
}

# Slot order for the secondary areas within a day.
NON_CASHIER_AREAS: tuple[EmployeeArea, ...] = (
    EmployeeArea.BISTRO,
    EmployeeArea.LAGER,
    EmployeeArea.WERKSTATT,
)


def cashier_shifts_for(weekend_or_holiday: bool) -> tuple[ShiftTemplate, ...]:
    return CASHIER_WEEKEND_SHIFTS if weekend_or_holiday else CASHIER_WEEKDAY_SHIFTS


def get_area_shift_template(area: EmployeeArea, weekend_or_holiday: bool) -> AreaShiftTemplate:
    """Return the single daily slot for a secondary *area* on the given day type."""

    label = AREA_LABELS.get(area, area.value)

    if area is EmployeeArea.BISTRO:
        if weekend_or_holiday:
            return AreaShiftTemplate(label, "06:00", "08:00", 2)
        return AreaShiftTemplate(label, "05:00", "07:00", 2)

    if area is EmployeeArea.LAGER:
        return AreaShiftTemplate(label, "15:00", "17:00", 2)

    if area is EmployeeArea.WERKSTATT:
        if weekend_or_holiday:
            return AreaShiftTemplate(
                label,
                None,
                None,
                0,
                closed=True,
                note="Werkstatt ist am Wochenende/Feiertag geschlossen.",
            )
        return AreaShiftTemplate(label, "15:00", "18:00", 3)

    # Generic slot without fixed times for areas lacking their own rules.
    return AreaShiftTemplate(label, None, None, 6 if weekend_or_holiday else 8)


def is_cashier_shift_id(value: object) -> bool:
    return isinstance(value, str) and value in _SHIFT_BY_ID


def get_cashier_shift_by_id(shift_id: str) -> ShiftTemplate | None:
    return _SHIFT_BY_ID.get(shift_id)


def cashier_shift_options() -> list[dict[str, str]]:
    """Return display options for every cashier template, e.g. for a fixed-slot picker."""

    options: list[dict[str, str]] = []
    for shift in CASHIER_WEEKDAY_SHIFTS:
        options.append({"id": shift.id, "label": f"{shift.label} (Mo-Fr · {shift.start}-{shift.end})"})
    for shift in CASHIER_WEEKEND_SHIFTS:
        options.append(
            {"id": shift.id, "label": f"{shift.label} (Wochenende/Feiertag · {shift.start}-{shift.end})"}
        )
    return options
