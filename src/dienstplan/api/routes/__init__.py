from fastapi import APIRouter

from . import employees, schedule, shifts

api_router = APIRouter()

api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(schedule.router, prefix="/schedule", tags=["schedule"])
api_router.include_router(shifts.router, prefix="/shifts", tags=["shifts"])
