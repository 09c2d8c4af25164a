"""Greedy slot-by-slot assignment of employees to cashier and area shifts.

One :class:`AssignmentEngine` lives for exactly one generation run. It owns
the mutable per-employee state (remaining hours, last assignment days,
counters) together with the running summary and the warning list.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable

from dienstplan.core.enums import EmployeeArea, EmploymentType, ShiftKind, ShiftStatus
from dienstplan.schemas.schedule import AssignedEmployee, ScheduleSummary, ShiftAssignment
from dienstplan.services.availability import FixedSlot, normalize_fixed_slots, normalize_weekdays
from dienstplan.services.shifts import AREA_LABELS, AreaShiftTemplate, ShiftTemplate

logger = logging.getLogger(__name__)

FIXED_ASSIGNMENT_NOTE = "Feste Zuordnung"


@dataclass
class SchedulerEmployee:
    """Roster entry as handed to the generator."""

    id: int
    name: str
    monthly_hours: float
    area: EmployeeArea
    employment_type: EmploymentType
    available_weekdays: list[int] = field(default_factory=list)  # 0 = Sunday ... 6 = Saturday
    weekend_availability: bool = False
    fixed_cashier_slots: list[FixedSlot] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.area = EmployeeArea(self.area)
        self.employment_type = EmploymentType(self.employment_type)


@dataclass
class _EmployeeState:
    employee: SchedulerEmployee
    available_weekdays: frozenset[int]
    fixed_slots: frozenset[FixedSlot]
    remaining_hours: float
    last_cashier_day: int | None = None
    last_area_day: int | None = None
    assigned_cashier_shifts: int = 0
    assigned_area_shifts: int = 0

    @classmethod
    def from_employee(cls, employee: SchedulerEmployee) -> "_EmployeeState":
        return cls(
            employee=employee,
            available_weekdays=frozenset(normalize_weekdays(employee.available_weekdays or [])),
            fixed_slots=frozenset(normalize_fixed_slots(employee.fixed_cashier_slots or [])),
            remaining_hours=employee.monthly_hours,
        )

    @property
    def id(self) -> int:
        return self.employee.id

    @property
    def name(self) -> str:
        return self.employee.name

    @property
    def is_auxiliary(self) -> bool:
        return self.employee.employment_type is EmploymentType.AUSHILFE


@dataclass
class DayContext:
    """What the engine needs to know about the day currently being filled."""

    day_number: int
    date_iso: str
    weekday_index: int
    weekend_or_holiday: bool
    assigned_today: set[int] = field(default_factory=set)


def _collation_key(name: str) -> tuple[str, str]:
    # German dictionary order: umlauts sort with their base letter.
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold(), name


def _compare_names(a: _EmployeeState, b: _EmployeeState) -> int:
    key_a, key_b = _collation_key(a.name), _collation_key(b.name)
    return (key_a > key_b) - (key_a < key_b)


class AssignmentEngine:
    def __init__(self, employees: Iterable[SchedulerEmployee]) -> None:
        self._states: list[_EmployeeState] = [
            _EmployeeState.from_employee(employee) for employee in employees
        ]
        self.summary = ScheduleSummary()
        self.warnings: list[str] = []

    @property
    def has_employees(self) -> bool:
        return bool(self._states)

    def has_area_staff(self, area: EmployeeArea) -> bool:
        return any(state.employee.area is area for state in self._states)

    # -- eligibility ------------------------------------------------------

    @staticmethod
    def _is_eligible(state: _EmployeeState, context: DayContext, hours: float) -> bool:
        if state.remaining_hours < hours:
            return False
        if state.id in context.assigned_today:
            return False
        if context.weekend_or_holiday:
            return state.employee.weekend_availability
        return context.weekday_index in state.available_weekdays

    # -- selection --------------------------------------------------------

    def select_fixed_cashier_employee(
        self, context: DayContext, shift: ShiftTemplate
    ) -> _EmployeeState | None:
        slot = FixedSlot(weekday=context.weekday_index, shift_id=shift.id)
        candidates = [
            state
            for state in self._states
            if state.employee.area is EmployeeArea.KASSE
            and state.employee.employment_type is EmploymentType.ANGESTELLTER
            and slot in state.fixed_slots
            and self._is_eligible(state, context, shift.hours)
        ]
        if not candidates:
            return None

        def _compare(a: _EmployeeState, b: _EmployeeState) -> int:
            if a.remaining_hours != b.remaining_hours:
                return -1 if a.remaining_hours > b.remaining_hours else 1
            return _compare_names(a, b)

        return sorted(candidates, key=cmp_to_key(_compare))[0]

    def select_cashier_employee(
        self, context: DayContext, shift: ShiftTemplate
    ) -> _EmployeeState | None:
        candidates = [
            state
            for state in self._states
            if state.employee.area is EmployeeArea.KASSE
            and self._is_eligible(state, context, shift.hours)
        ]
        if not candidates:
            return None

        # Auxiliary staff who worked the desk yesterday are only used when
        # nobody else is left.
        preferred = [
            state
            for state in candidates
            if not state.is_auxiliary
            or state.last_cashier_day is None
            or context.day_number - state.last_cashier_day > 1
        ]
        pool = preferred or candidates

        def _spacing(state: _EmployeeState) -> float:
            if state.last_cashier_day is None:
                return float("inf")
            return context.day_number - state.last_cashier_day

        def _compare(a: _EmployeeState, b: _EmployeeState) -> int:
            if a.is_auxiliary or b.is_auxiliary:
                spacing_a, spacing_b = _spacing(a), _spacing(b)
                if spacing_a != spacing_b:
                    return -1 if spacing_a > spacing_b else 1
            if a.remaining_hours != b.remaining_hours:
                return -1 if a.remaining_hours > b.remaining_hours else 1
            if a.assigned_cashier_shifts != b.assigned_cashier_shifts:
                return a.assigned_cashier_shifts - b.assigned_cashier_shifts
            return _compare_names(a, b)

        return sorted(pool, key=cmp_to_key(_compare))[0]

    def select_area_employee(
        self, context: DayContext, area: EmployeeArea, slot_hours: float
    ) -> _EmployeeState | None:
        candidates = [
            state
            for state in self._states
            if state.employee.area is area and self._is_eligible(state, context, slot_hours)
        ]
        if not candidates:
            return None

        def _compare(a: _EmployeeState, b: _EmployeeState) -> int:
            if a.remaining_hours != b.remaining_hours:
                return -1 if a.remaining_hours > b.remaining_hours else 1
            last_a = float("-inf") if a.last_area_day is None else a.last_area_day
            last_b = float("-inf") if b.last_area_day is None else b.last_area_day
            if last_a != last_b:
                return -1 if last_a < last_b else 1
            return _compare_names(a, b)

        return sorted(candidates, key=cmp_to_key(_compare))[0]

    # -- slot filling -----------------------------------------------------

    def fill_cashier_slot(self, context: DayContext, shift: ShiftTemplate) -> ShiftAssignment:
        self.summary.total_cashier_shifts += 1
        slot_fields = dict(
            id=f"{context.date_iso}-cashier-{shift.id}",
            kind=ShiftKind.CASHIER,
            area=EmployeeArea.KASSE,
            label=f"Kasse {shift.label}",
            start=shift.start,
            end=shift.end,
            hours=shift.hours,
        )

        fixed = self.select_fixed_cashier_employee(context, shift)
        state = fixed or self.select_cashier_employee(context, shift)
        if state is None:
            note = f"Keine verfügbare Person für Kasse ({shift.start}-{shift.end}) am {context.date_iso}"
            return self._open_slot(slot_fields, note)

        self.summary.filled_cashier_shifts += 1
        context.assigned_today.add(state.id)
        state.remaining_hours -= shift.hours
        state.last_cashier_day = context.day_number
        state.assigned_cashier_shifts += 1
        return ShiftAssignment(
            **slot_fields,
            status=ShiftStatus.ASSIGNED,
            employee=self._assigned(state),
            note=FIXED_ASSIGNMENT_NOTE if fixed is not None else None,
        )

    def fill_area_slot(
        self, context: DayContext, area: EmployeeArea, template: AreaShiftTemplate
    ) -> ShiftAssignment:
        slot_fields = dict(
            kind=ShiftKind.AREA,
            area=area,
            label=template.label,
            start=template.start,
            end=template.end,
            hours=template.hours,
        )
        area_key = area.value

        if template.closed:
            return ShiftAssignment(
                **slot_fields,
                id=f"{context.date_iso}-{area_key}-closed",
                status=ShiftStatus.CLOSED,
                note=template.note,
            )

        self.summary.total_area_slots += 1
        area_label = AREA_LABELS.get(area, area_key)

        if not self.has_area_staff(area):
            note = f"Kein Personal für {area_label} angelegt."
            return self._open_slot({**slot_fields, "id": f"{context.date_iso}-{area_key}-missing"}, note)

        slot_fields["id"] = f"{context.date_iso}-{area_key}"
        state = self.select_area_employee(context, area, template.hours)
        if state is None:
            if context.weekend_or_holiday:
                note = (
                    f"Keine freigegebenen Ressourcen für {area_label} am {context.date_iso} "
                    "(Wochenende/Feiertag)."
                )
            else:
                note = f"Kein verfügbares Personal für {area_label} am {context.date_iso}."
            return self._open_slot(slot_fields, note)

        self.summary.filled_area_slots += 1
        context.assigned_today.add(state.id)
        state.remaining_hours -= template.hours
        state.last_area_day = context.day_number
        state.assigned_area_shifts += 1
        return ShiftAssignment(
            **slot_fields,
            status=ShiftStatus.ASSIGNED,
            employee=self._assigned(state),
        )

    def _open_slot(self, slot_fields: dict, note: str) -> ShiftAssignment:
        logger.debug("Open slot %s: %s", slot_fields["id"], note)
        self.warnings.append(note)
        return ShiftAssignment(**slot_fields, status=ShiftStatus.OPEN, note=note)

    @staticmethod
    def _assigned(state: _EmployeeState) -> AssignedEmployee:
        return AssignedEmployee(
            id=state.id,
            name=state.name,
            employment_type=state.employee.employment_type,
        )
