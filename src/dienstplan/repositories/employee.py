from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dienstplan.core.enums import EmployeeArea, EmploymentType
from dienstplan.db.models.employee import Employee
from dienstplan.schemas.employee import EmployeeCreate, EmployeeUpdate
from dienstplan.services.assignment import SchedulerEmployee
from dienstplan.services.availability import (
    normalize_fixed_slots,
    normalize_weekdays,
    parse_stored_fixed_slots,
    parse_stored_weekdays,
)


def _keeps_fixed_slots(area: EmployeeArea, employment_type: EmploymentType) -> bool:
    return EmployeeArea(area) is EmployeeArea.KASSE and EmploymentType(employment_type) is EmploymentType.ANGESTELLTER


def _normalize_employee(employee: Employee) -> None:
    """Bring list columns into the canonical form the generator expects."""

    employee.available_weekdays = normalize_weekdays(employee.available_weekdays or [])
    if _keeps_fixed_slots(employee.area, employee.employment_type):
        slots = normalize_fixed_slots(employee.fixed_cashier_slots or [])
        employee.fixed_cashier_slots = [slot.as_dict() for slot in slots]
    else:
        employee.fixed_cashier_slots = []


async def list_employees(session: AsyncSession) -> list[Employee]:
    result = await session.execute(select(Employee).order_by(Employee.created_at.desc(), Employee.id.desc()))
    return list(result.scalars().all())


async def create_employee(session: AsyncSession, payload: EmployeeCreate) -> Employee:
    employee = Employee(**payload.model_dump())
    _normalize_employee(employee)
    session.add(employee)
    await session.flush()
    await session.refresh(employee)
    return employee


async def get_employee(session: AsyncSession, employee_id: int) -> Employee | None:
    return await session.get(Employee, employee_id)


async def update_employee(session: AsyncSession, employee: Employee, payload: EmployeeUpdate) -> Employee:
    data: dict[str, Any] = payload.model_dump(exclude_unset=True)
    for field, value in data.items():
        setattr(employee, field, value)
    _normalize_employee(employee)
    await session.flush()
    await session.refresh(employee)
    return employee


async def delete_employee(session: AsyncSession, employee: Employee) -> None:
    await session.delete(employee)


def to_scheduler_employee(employee: Employee) -> SchedulerEmployee:
    slots = (
        parse_stored_fixed_slots(employee.fixed_cashier_slots)
        if _keeps_fixed_slots(employee.area, employee.employment_type)
        else []
    )
    return SchedulerEmployee(
        id=employee.id,
        name=employee.name,
        monthly_hours=employee.monthly_hours,
        area=employee.area,
        employment_type=employee.employment_type,
        available_weekdays=parse_stored_weekdays(employee.available_weekdays),
        weekend_availability=employee.weekend_availability,
        fixed_cashier_slots=slots,
    )


async def load_roster(session: AsyncSession) -> list[SchedulerEmployee]:
    """Snapshot every stored employee for one generation run."""

    result = await session.execute(select(Employee).order_by(Employee.id))
    return [to_scheduler_employee(employee) for employee in result.scalars().all()]
