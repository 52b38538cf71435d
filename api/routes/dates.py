"""Business day adjustment endpoints."""

from fastapi import APIRouter

from api.schemas.requests import AdjustDateRequest
from api.schemas.responses import AdjustDateResponse
from paycycle.calendars import parse_holidays
from paycycle.engine import BusinessDayAdjuster
from paycycle.exceptions import InvalidConfigurationError
from paycycle.models import AdjustmentRule

router = APIRouter(prefix="/dates", tags=["Dates"])


@router.post("/adjust", response_model=AdjustDateResponse)
async def adjust(request: AdjustDateRequest):
    """
    Move a date to a business day.

    Business days are returned unchanged. Weekends are Saturday and Sunday.
    """
    try:
        rule = AdjustmentRule(request.rule.strip().lower())
    except ValueError:
        raise InvalidConfigurationError(
            message=f"Unsupported adjustment_rule '{request.rule}'",
            details={"field": "rule", "value": request.rule},
        )

    adjuster = BusinessDayAdjuster.for_holidays(parse_holidays(request.holidays))
    adjusted = adjuster.adjust(request.date, rule)
    return AdjustDateResponse(
        original=request.date.isoformat(),
        adjusted=adjusted.isoformat(),
        rule=rule.value,
        is_business_day=adjuster.is_business_day(request.date),
    )
