from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, DateTime, Integer, String
from sqlalchemy import Enum as SqlEnum
from sqlalchemy.orm import Mapped, mapped_column

from dienstplan.core.enums import EmployeeArea, EmploymentType
from dienstplan.db.base import Base


class Employee(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    monthly_hours: Mapped[int] = mapped_column(Integer, nullable=False)
    area: Mapped[EmployeeArea] = mapped_column(
        SqlEnum(
            EmployeeArea,
            name="employeearea",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=EmployeeArea.KASSE,
    )
    employment_type: Mapped[EmploymentType] = mapped_column(
        SqlEnum(
            EmploymentType,
            name="employmenttype",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=EmploymentType.ANGESTELLTER,
    )
    # 0 = Sunday ... 6 = Saturday
    available_weekdays: Mapped[list[int]] = mapped_column(JSON, nullable=False, default=list)
    weekend_availability: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    fixed_cashier_slots: Mapped[list[dict]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=sa.func.now(), nullable=False)
