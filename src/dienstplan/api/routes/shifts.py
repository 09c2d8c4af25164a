from fastapi import APIRouter

from dienstplan.schemas.employee import CashierShiftOption
from dienstplan.services.shifts import cashier_shift_options

router = APIRouter()


@router.get("/cashier-options", response_model=list[CashierShiftOption])
async def list_cashier_options() -> list[CashierShiftOption]:
    return [CashierShiftOption(**option) for option in cashier_shift_options()]
