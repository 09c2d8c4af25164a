import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from dienstplan.db.session import get_db_session
from dienstplan.repositories import employee as employee_repo
from dienstplan.schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=list[EmployeeRead])
async def list_employees(
    session: Annotated[AsyncSession, Depends(get_db_session)]
) -> list[EmployeeRead]:
    employees = await employee_repo.list_employees(session)
    return [EmployeeRead.model_validate(employee) for employee in employees]


@router.post("/", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: EmployeeCreate, session: Annotated[AsyncSession, Depends(get_db_session)]
) -> EmployeeRead:
    employee = await employee_repo.create_employee(session, payload)
    await session.commit()
    await session.refresh(employee)
    logger.info("Created employee %s (%s)", employee.id, employee.area.value)
    return EmployeeRead.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> EmployeeRead:
    employee = await employee_repo.get_employee(session, employee_id)
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    employee = await employee_repo.update_employee(session, employee, payload)
    await session.commit()
    await session.refresh(employee)
    logger.info("Updated employee %s", employee_id)
    return EmployeeRead.model_validate(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int, session: Annotated[AsyncSession, Depends(get_db_session)]
) -> None:
    employee = await employee_repo.get_employee(session, employee_id)
    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    await employee_repo.delete_employee(session, employee)
    await session.commit()
    logger.info("Deleted employee %s", employee_id)
