"""Schedule generation endpoints."""

import logging

from fastapi import APIRouter

from api.config import PAYCYCLE_DEFAULT_PERIODS, PAYCYCLE_MAX_PERIODS
from api.schemas.requests import BatchScheduleRequest, ScheduleRequest
from api.schemas.responses import (
    BatchOutcome,
    BatchResponse,
    ErrorBody,
    PayrollDateResponse,
    ScheduleResponse,
    ScheduleSummary,
)
from paycycle.engine import (
    BatchScheduler,
    ScheduleGenerator,
    choose_periods,
    describe_schedule,
    summarize,
)
from paycycle.exceptions import InvalidConfigurationError
from paycycle.models import PayrollDateResult, ScheduleConfig, ScheduleOutcome
from paycycle.models import ScheduleRequest as EngineScheduleRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["Schedules"])

generator = ScheduleGenerator(max_periods=PAYCYCLE_MAX_PERIODS)


def build_schedule_response(
    results: list[PayrollDateResult], config: ScheduleConfig
) -> ScheduleResponse:
    return ScheduleResponse(
        results=[PayrollDateResponse.from_result(r) for r in results],
        summary=ScheduleSummary(
            description=describe_schedule(config),
            periods=len(results),
            first_eft_date=results[0].adjusted_eft_date.isoformat(),
            last_eft_date=results[-1].adjusted_eft_date.isoformat(),
            adjusted_count=sum(1 for r in results if r.was_adjusted),
        ),
    )


def _outcome_to_response(outcome: ScheduleOutcome) -> BatchOutcome:
    return BatchOutcome(
        payroll_id=outcome.payroll_id,
        ok=outcome.ok,
        results=[PayrollDateResponse.from_result(r) for r in outcome.results],
        error=ErrorBody(**outcome.error.to_dict()) if outcome.error else None,
    )


@router.post("", response_model=ScheduleResponse)
async def create_schedule(request: ScheduleRequest):
    """
    Generate a pay run schedule.

    Each period is calculated from the previous period's adjusted EFT date.
    Invalid configurations return 422 with {code, message, details}.
    """
    config = request.config.to_config(request.holidays)
    periods = choose_periods(request.periods, default=PAYCYCLE_DEFAULT_PERIODS)
    results = generator.generate(request.start_date, config, periods)
    logger.info(
        "Generated %s schedule",
        config.cycle_type.value,
        extra={"periods": periods},
    )
    return build_schedule_response(results, config)


@router.post("/batch", response_model=BatchResponse)
async def create_schedule_batch(request: BatchScheduleRequest):
    """
    Generate schedules for many payrolls.

    A failing payroll is reported in its own outcome; the others still run.
    """
    requests: list[EngineScheduleRequest] = []
    rejected: dict[int, ScheduleOutcome] = {}
    for index, payroll in enumerate(request.payrolls):
        try:
            config = payroll.config.to_config(payroll.holidays)
        except InvalidConfigurationError as e:
            e.payroll_id = payroll.payroll_id
            rejected[index] = ScheduleOutcome(payroll_id=payroll.payroll_id, error=e)
            continue
        requests.append(
            EngineScheduleRequest(
                payroll_id=payroll.payroll_id,
                start_date=payroll.start_date,
                config=config,
                periods=choose_periods(payroll.periods, default=PAYCYCLE_DEFAULT_PERIODS),
            )
        )

    generated = iter(BatchScheduler(generator=generator).generate_batch(requests))
    # Keep request order, slotting in payrolls rejected before generation
    outcomes = [
        rejected[index] if index in rejected else next(generated)
        for index in range(len(request.payrolls))
    ]

    summary = summarize(outcomes)
    return BatchResponse(
        outcomes=[_outcome_to_response(o) for o in outcomes],
        total=summary.total,
        succeeded=summary.succeeded,
        failed=summary.failed,
    )
