"""Seed a demo roster for local development.

Run this after applying Alembic migrations:

    python -m alembic upgrade head
    python scripts/seed_demo.py
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from dienstplan.core.config import get_settings
from dienstplan.db.models.employee import Employee
from dienstplan.repositories import employee as employee_repo
from dienstplan.schemas.employee import EmployeeCreate
from dienstplan.services.scheduler import generate_schedule

logger = logging.getLogger("seed_demo")

WEEKDAYS = [1, 2, 3, 4, 5]

DEMO_EMPLOYEES: list[dict[str, Any]] = [
    {
        "name": "Anna Becker",
        "monthly_hours": 160,
        "area": "KASSE",
        "employment_type": "ANGESTELLTER",
        "available_weekdays": WEEKDAYS,
        "weekend_availability": True,
        "fixed_cashier_slots": [{"weekday": 1, "shift_id": "W-1"}, {"weekday": 3, "shift_id": "W-1"}],
    },
    {
        "name": "Jörg Schäfer",
        "monthly_hours": 140,
        "area": "KASSE",
        "employment_type": "ANGESTELLTER",
        "available_weekdays": WEEKDAYS,
        "weekend_availability": False,
        "fixed_cashier_slots": [{"weekday": 2, "shift_id": "W-2"}],
    },
    {
        "name": "Lena Wolf",
        "monthly_hours": 60,
        "area": "KASSE",
        "employment_type": "AUSHILFE",
        "available_weekdays": [0, 5, 6],
        "weekend_availability": True,
    },
    {
        "name": "Mehmet Yilmaz",
        "monthly_hours": 50,
        "area": "KASSE",
        "employment_type": "AUSHILFE",
        "available_weekdays": [1, 3, 5],
        "weekend_availability": True,
    },
    {
        "name": "Sophie Krüger",
        "monthly_hours": 40,
        "area": "BISTRO",
        "employment_type": "AUSHILFE",
        "available_weekdays": [0, 1, 2, 3, 4, 5, 6],
        "weekend_availability": True,
    },
    {
        "name": "Tim Hoffmann",
        "monthly_hours": 30,
        "area": "LAGER",
        "employment_type": "ANGESTELLTER",
        "available_weekdays": WEEKDAYS,
        "weekend_availability": False,
    },
    {
        "name": "Uwe Brandt",
        "monthly_hours": 45,
        "area": "WERKSTATT",
        "employment_type": "ANGESTELLTER",
        "available_weekdays": WEEKDAYS,
        "weekend_availability": False,
    },
]


async def seed() -> None:
    settings = get_settings()
    engine = create_async_engine(settings.database_url, future=True)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async with session_factory() as session:
        existing = await session.scalar(select(func.count(Employee.id)))
        if existing:
            logger.info("Roster already holds %s employees, skipping seed", existing)
        else:
            for data in DEMO_EMPLOYEES:
                await employee_repo.create_employee(session, EmployeeCreate(**data))
            await session.commit()
            logger.info("Seeded %s demo employees", len(DEMO_EMPLOYEES))

        roster = await employee_repo.load_roster(session)

    await engine.dispose()

    schedule = generate_schedule(roster)
    summary = schedule.summary
    logger.info(
        "Preview %s: cashier %s/%s, areas %s/%s, %s warnings",
        schedule.month_label,
        summary.filled_cashier_shifts,
        summary.total_cashier_shifts,
        summary.filled_area_slots,
        summary.total_area_slots,
        len(schedule.warnings),
    )


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    asyncio.run(seed())


if __name__ == "__main__":
    main()
