from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from dienstplan.core.enums import EmployeeArea, EmploymentType
from dienstplan.services.availability import parse_stored_fixed_slots, parse_stored_weekdays

CashierShiftId = Literal["W-1", "W-2", "W-3", "WE-1", "WE-2", "WE-3"]
Weekday = Annotated[int, Field(ge=0, le=6)]


class EmployeeModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FixedCashierSlot(EmployeeModel):
    weekday: Weekday
    shift_id: CashierShiftId


class EmployeeBase(EmployeeModel):
    name: str = Field(min_length=2)
    monthly_hours: int = Field(gt=0, le=400)
    area: EmployeeArea
    employment_type: EmploymentType
    available_weekdays: list[Weekday] = Field(min_length=1)
    weekend_availability: bool
    fixed_cashier_slots: list[FixedCashierSlot] = Field(default_factory=list)


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeRead(EmployeeBase):
    id: int
    available_weekdays: list[int]
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)

    @field_validator("available_weekdays", mode="before")
    @classmethod
    def _parse_weekdays(cls, value: Any) -> list[int]:
        return parse_stored_weekdays(value)

    @field_validator("fixed_cashier_slots", mode="before")
    @classmethod
    def _parse_fixed_slots(cls, value: Any) -> list[dict[str, Any]]:
        return [slot.as_dict() for slot in parse_stored_fixed_slots(value)]

    @model_validator(mode="after")
    def _drop_slots_for_non_cashiers(self) -> "EmployeeRead":
        if self.area is not EmployeeArea.KASSE or self.employment_type is not EmploymentType.ANGESTELLTER:
            self.fixed_cashier_slots = []
        return self


class EmployeeUpdate(EmployeeModel):
    name: str | None = Field(default=None, min_length=2)
    monthly_hours: int | None = Field(default=None, gt=0, le=400)
    area: EmployeeArea | None = None
    employment_type: EmploymentType | None = None
    available_weekdays: list[Weekday] | None = Field(default=None, min_length=1)
    weekend_availability: bool | None = None
    fixed_cashier_slots: list[FixedCashierSlot] | None = None

    @model_validator(mode="after")
    def _reject_explicit_nulls(self) -> "EmployeeUpdate":
        # Omitted fields stay unchanged; a field sent as null would clear a required column.
        cleared = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if cleared:
            raise ValueError(f"Fields cannot be null: {', '.join(cleared)}")
        return self


class CashierShiftOption(BaseModel):
    id: str
    label: str
