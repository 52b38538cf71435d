"""Cycle catalog endpoints."""

from fastapi import APIRouter

from api.schemas.responses import CycleInfo, DateTypeInfo
from paycycle.engine import supported_date_types
from paycycle.models import CycleType

router = APIRouter(prefix="/cycles", tags=["Cycles"])


@router.get("", response_model=list[CycleInfo])
async def list_cycles():
    """List cycle types with the date types payroll editors offer for each."""
    return [
        CycleInfo(
            value=cycle.value,
            display_name=cycle.display_name,
            date_types=[
                DateTypeInfo(
                    value=date_type.value,
                    display_name=date_type.display_name,
                    requires_value=date_type.requires_value,
                )
                for date_type in supported_date_types(cycle)
            ],
        )
        for cycle in CycleType
    ]
