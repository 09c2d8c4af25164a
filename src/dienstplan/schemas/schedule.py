from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dienstplan.core.enums import DayType, EmployeeArea, EmploymentType, ShiftKind, ShiftStatus


class ScheduleModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AssignedEmployee(ScheduleModel):
    id: int
    name: str
    employment_type: EmploymentType


class ShiftAssignment(ScheduleModel):
    id: str
    kind: ShiftKind
    area: EmployeeArea
    label: str
    start: str | None = None
    end: str | None = None
    hours: float
    status: ShiftStatus
    employee: AssignedEmployee | None = None
    note: str | None = None


class ScheduleDay(ScheduleModel):
    date_iso: str = Field(alias="dateISO")
    readable_date: str
    weekday_index: int
    weekday_name: str
    type: DayType
    shifts: list[ShiftAssignment] = Field(default_factory=list)


class ScheduleSummary(ScheduleModel):
    total_cashier_shifts: int = 0
    filled_cashier_shifts: int = 0
    total_area_slots: int = 0
    filled_area_slots: int = 0


class GeneratedSchedule(ScheduleModel):
    month_key: str
    month_label: str
    generated_at: datetime
    days: list[ScheduleDay]
    summary: ScheduleSummary
    warnings: list[str] = Field(default_factory=list)
