"""Payroll pack endpoints."""

from datetime import date
from typing import Optional

from fastapi import APIRouter

from api.config import PAYCYCLE_DEFAULT_PERIODS
from api.routes.schedules import build_schedule_response, generator
from api.schemas.responses import PayrollSummary, ScheduleResponse
from paycycle.engine import choose_periods, describe_schedule
from paycycle.models import PayrollDefinition
from paycycle.packs import PayrollPack

router = APIRouter(prefix="/payrolls", tags=["Payrolls"])

# Preloaded pack (set by main.py)
pack: Optional[PayrollPack] = None


def set_pack(p: Optional[PayrollPack]):
    global pack
    pack = p


def _loaded_pack() -> PayrollPack:
    # An empty pack answers 404 for every payroll
    return pack if pack is not None else PayrollPack()


def _summary(payroll: PayrollDefinition) -> PayrollSummary:
    config = payroll.config
    return PayrollSummary(
        id=payroll.id,
        name=payroll.name,
        region=payroll.region,
        cycle_type=config.cycle_type.value,
        date_type=config.date_type.value,
        date_value=config.date_value,
        description=describe_schedule(config),
        holiday_count=len(config.holidays),
    )


@router.get("", response_model=list[PayrollSummary])
async def list_payrolls(cycle_type: Optional[str] = None):
    """
    List payrolls from the preloaded pack.

    Optionally filter by cycle type: weekly, fortnightly, bi_monthly,
    monthly, quarterly
    """
    payrolls = _loaded_pack().payrolls
    if cycle_type:
        payrolls = [p for p in payrolls if p.config.cycle_type.value == cycle_type]
    return [_summary(p) for p in payrolls]


@router.get("/{payroll_id}", response_model=PayrollSummary)
async def get_payroll(payroll_id: str):
    """Get one payroll from the preloaded pack."""
    return _summary(_loaded_pack().get_payroll(payroll_id))


@router.get("/{payroll_id}/schedule", response_model=ScheduleResponse)
async def get_payroll_schedule(
    payroll_id: str,
    start_date: Optional[date] = None,
    periods: Optional[int] = None,
):
    """
    Generate a schedule for a preloaded payroll.

    start_date defaults to the payroll's own start_date, then today.
    """
    payroll = _loaded_pack().get_payroll(payroll_id)
    start = start_date or payroll.start_date or date.today()
    periods = choose_periods(periods, payroll.periods, default=PAYCYCLE_DEFAULT_PERIODS)
    results = generator.generate(start, payroll.config, periods)
    return build_schedule_response(results, payroll.config)
