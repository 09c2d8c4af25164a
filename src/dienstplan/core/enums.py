from enum import Enum


class EmployeeArea(str, Enum):  # type: ignore[call-arg]
    KASSE = "KASSE"
    BISTRO = "BISTRO"
    LAGER = "LAGER"
    WERKSTATT = "WERKSTATT"


class EmploymentType(str, Enum):  # type: ignore[call-arg]
    ANGESTELLTER = "ANGESTELLTER"
    AUSHILFE = "AUSHILFE"


class ShiftKind(str, Enum):  # type: ignore[call-arg]
    CASHIER = "CASHIER"
    AREA = "AREA"


class ShiftStatus(str, Enum):  # type: ignore[call-arg]
    ASSIGNED = "ASSIGNED"
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class DayType(str, Enum):  # type: ignore[call-arg]
    WORKDAY = "WORKDAY"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"
