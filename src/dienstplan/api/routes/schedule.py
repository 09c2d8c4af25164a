from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from dienstplan.db.session import get_db_session
from dienstplan.repositories import employee as employee_repo
from dienstplan.schemas.schedule import GeneratedSchedule
from dienstplan.services.scheduler import generate_schedule

router = APIRouter()


@router.get("", response_model=GeneratedSchedule)
async def get_schedule(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    month: Annotated[str | None, Query(description="Target month as YYYY-MM")] = None,
) -> GeneratedSchedule:
    """Generate the plan for *month* from the current roster; invalid months fall back to today."""
    roster = await employee_repo.load_roster(session)
    return generate_schedule(roster, month)
