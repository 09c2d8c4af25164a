from collections import defaultdict
from datetime import date

import pytest

from dienstplan.core.enums import DayType, ShiftStatus
from dienstplan.services.availability import FixedSlot
from dienstplan.services.scheduler import (
    EMPTY_ROSTER_WARNING,
    generate_schedule,
    month_label,
    readable_date,
    resolve_target_month,
)

from .factories import ALL_WEEKDAYS, build_scheduler_employee

TODAY = date(2024, 7, 15)


def _mixed_roster():
    return [
        build_scheduler_employee(
            id=1,
            name="Anna Becker",
            monthly_hours=160,
            weekend_availability=True,
            fixed_cashier_slots=[FixedSlot(1, "W-1")],
        ),
        build_scheduler_employee(id=2, name="Jörg Schäfer", monthly_hours=120, available_weekdays=[1, 2, 3]),
        build_scheduler_employee(
            id=3, name="Lena Wolf", monthly_hours=60, employment_type="AUSHILFE", weekend_availability=True
        ),
        build_scheduler_employee(
            id=4, name="Mehmet Yilmaz", monthly_hours=45, employment_type="AUSHILFE", available_weekdays=[2, 4]
        ),
        build_scheduler_employee(id=5, name="Sophie Krüger", monthly_hours=40, area="BISTRO", weekend_availability=True),
        build_scheduler_employee(id=6, name="Tim Hoffmann", monthly_hours=30, area="LAGER"),
        build_scheduler_employee(id=7, name="Uwe Brandt", monthly_hours=45, area="WERKSTATT"),
    ]


@pytest.mark.parametrize(
    ("month", "expected"),
    [
        ("2024-05", (2024, 5)),
        ("2024-2", (2024, 2)),
        (" 2023-12 ", (2023, 12)),
        (None, (2024, 7)),
        ("", (2024, 7)),
        ("2024-13", (2024, 7)),
        ("2024-00", (2024, 7)),
        ("abcd-05", (2024, 7)),
        ("2024", (2024, 7)),
    ],
)
def test_resolve_target_month(month, expected) -> None:
    assert resolve_target_month(month, TODAY) == expected


@pytest.mark.parametrize(("month", "days"), [("2024-02", 29), ("2023-02", 28), ("2023-04", 30), ("2023-01", 31)])
def test_day_count_matches_month(month: str, days: int) -> None:
    schedule = generate_schedule(_mixed_roster(), month)

    assert len(schedule.days) == days
    assert [day.date_iso for day in schedule.days][0] == f"{month}-01"
    assert schedule.month_key == month


def test_labels_and_day_classification() -> None:
    schedule = generate_schedule([], "2024-05")
    by_date = {day.date_iso: day for day in schedule.days}

    assert schedule.month_label == "Mai 2024"
    assert month_label(2024, 3) == "März 2024"
    assert readable_date(date(2024, 5, 6)) == "Mo., 06.05."

    assert by_date["2024-05-01"].type is DayType.HOLIDAY
    assert by_date["2024-05-04"].type is DayType.WEEKEND
    assert by_date["2024-05-04"].weekday_index == 6
    assert by_date["2024-05-05"].weekday_name == "Sonntag"
    assert by_date["2024-05-06"].type is DayType.WORKDAY
    # Whit Monday: holiday wins and switches to the weekend templates.
    assert by_date["2024-05-20"].type is DayType.HOLIDAY
    assert [shift.id for shift in by_date["2024-05-20"].shifts][:3] == [
        "2024-05-20-cashier-WE-1",
        "2024-05-20-cashier-WE-2",
        "2024-05-20-cashier-WE-3",
    ]


def test_slot_order_within_a_day() -> None:
    schedule = generate_schedule(_mixed_roster(), "2024-05")
    monday = next(day for day in schedule.days if day.date_iso == "2024-05-06")

    assert [(shift.kind.value, shift.area.value) for shift in monday.shifts] == [
        ("CASHIER", "KASSE"),
        ("CASHIER", "KASSE"),
        ("CASHIER", "KASSE"),
        ("AREA", "BISTRO"),
        ("AREA", "LAGER"),
        ("AREA", "WERKSTATT"),
    ]


@pytest.mark.parametrize("month", ["2023-12", "2024-02", "2024-05", "2024-10"])
def test_schedule_invariants(month: str) -> None:
    roster = _mixed_roster()
    schedule = generate_schedule(roster, month)
    budgets = {employee.id: employee.monthly_hours for employee in roster}
    worked: dict[int, float] = defaultdict(float)

    for day in schedule.days:
        assigned_today = [shift.employee.id for shift in day.shifts if shift.employee is not None]
        assert len(assigned_today) == len(set(assigned_today))

        for shift in day.shifts:
            assert (shift.status is ShiftStatus.ASSIGNED) == (shift.employee is not None)
            if shift.status is ShiftStatus.CLOSED:
                assert shift.hours == 0
            if shift.employee is not None:
                worked[shift.employee.id] += shift.hours

    assert all(worked[employee_id] <= budgets[employee_id] for employee_id in worked)


def test_summary_and_warnings_for_empty_roster() -> None:
    schedule = generate_schedule([], "2023-04")
    summary = schedule.summary

    assert summary.total_cashier_shifts == 90
    assert summary.filled_cashier_shifts == 0
    # 30 days of bistro + warehouse, workshop only on the 18 working days.
    assert summary.total_area_slots == 78
    assert summary.filled_area_slots == 0
    assert len(schedule.warnings) == 90 + 78 + 1
    assert schedule.warnings[-1] == EMPTY_ROSTER_WARNING
    assert all(
        shift.status in (ShiftStatus.OPEN, ShiftStatus.CLOSED) for day in schedule.days for shift in day.shifts
    )


def test_single_cashier_without_weekend_availability() -> None:
    roster = [build_scheduler_employee(id=1, name="Anna", monthly_hours=20, available_weekdays=ALL_WEEKDAYS)]
    schedule = generate_schedule(roster, "2023-01")
    by_date = {day.date_iso: day for day in schedule.days}

    def cashier(day_iso: str) -> list:
        return [shift for shift in by_date[day_iso].shifts if shift.kind.value == "CASHIER"]

    saturday = cashier("2023-01-07")
    assert all(shift.status is ShiftStatus.OPEN for shift in saturday)
    assert any("2023-01-07" in warning for warning in schedule.warnings)

    monday = cashier("2023-01-02")
    assert [shift.status for shift in monday] == [ShiftStatus.ASSIGNED, ShiftStatus.OPEN, ShiftStatus.OPEN]
    assert cashier("2023-01-03")[0].status is ShiftStatus.ASSIGNED
    # 6 hours left: too few for the early shift, enough for the mid shift.
    wednesday = cashier("2023-01-04")
    assert [shift.status for shift in wednesday] == [ShiftStatus.OPEN, ShiftStatus.ASSIGNED, ShiftStatus.OPEN]
    # 1 hour left: everything from here on stays open.
    assert all(
        shift.status is ShiftStatus.OPEN
        for day in schedule.days[4:]
        for shift in day.shifts
        if shift.kind.value == "CASHIER"
    )
    assert schedule.summary.filled_cashier_shifts == 3


def test_fixed_slot_is_honoured_every_monday() -> None:
    roster = [
        build_scheduler_employee(id=1, name="Berta", monthly_hours=300),
        build_scheduler_employee(id=2, name="Anna", monthly_hours=200, fixed_cashier_slots=[FixedSlot(1, "W-2")]),
    ]
    schedule = generate_schedule(roster, "2024-05")
    working_mondays = [day for day in schedule.days if day.weekday_index == 1 and day.type is DayType.WORKDAY]

    assert [day.date_iso for day in working_mondays] == ["2024-05-06", "2024-05-13", "2024-05-27"]
    for day in working_mondays:
        mid = next(shift for shift in day.shifts if shift.id == f"{day.date_iso}-cashier-W-2")
        assert mid.employee is not None and mid.employee.id == 2
        assert mid.note == "Feste Zuordnung"


def test_oversized_weekday_values_do_not_abort_generation() -> None:
    roster = [build_scheduler_employee(id=1, name="Anna", available_weekdays=[10**400, 1])]

    schedule = generate_schedule(roster, "2024-05")

    monday = next(day for day in schedule.days if day.date_iso == "2024-05-06")
    assert monday.shifts[0].employee is not None and monday.shifts[0].employee.id == 1


def test_generation_is_deterministic() -> None:
    first = generate_schedule(_mixed_roster(), "2024-05")
    second = generate_schedule(_mixed_roster(), "2024-05")

    assert first.model_dump(exclude={"generated_at"}) == second.model_dump(exclude={"generated_at"})


def test_serialized_field_names() -> None:
    payload = generate_schedule(_mixed_roster(), "2024-05").model_dump(by_alias=True, mode="json")

    assert set(payload) == {"monthKey", "monthLabel", "generatedAt", "days", "summary", "warnings"}
    assert set(payload["summary"]) == {
        "totalCashierShifts",
        "filledCashierShifts",
        "totalAreaSlots",
        "filledAreaSlots",
    }
    first_day = payload["days"][0]
    assert {"dateISO", "readableDate", "weekdayIndex", "weekdayName", "type", "shifts"} <= set(first_day)
    assert first_day["type"] == "HOLIDAY"
    assigned = next(
        shift for day in payload["days"] for shift in day["shifts"] if shift["status"] == "ASSIGNED"
    )
    assert set(assigned["employee"]) == {"id", "name", "employmentType"}
