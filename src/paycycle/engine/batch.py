"""
PayCycle Batch Scheduler

Generates schedules for many payrolls in one run. A failing payroll is
reported in its own outcome and the batch carries on.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..models import ScheduleOutcome, ScheduleRequest
from .schedule_generator import ScheduleGenerator

logger = logging.getLogger(__name__)


@dataclass
class BatchSummary:
    """Counts for a finished batch."""
    total: int
    succeeded: int
    failed: int
    failed_payroll_ids: list[str] = field(default_factory=list)


@dataclass
class BatchScheduler:
    """
    Runs the schedule generator over a batch of payroll requests.

    Usage:
        scheduler = BatchScheduler()
        outcomes = scheduler.generate_batch(requests)
        for outcome in outcomes:
            if not outcome.ok:
                report(outcome.payroll_id, outcome.error)
    """

    generator: ScheduleGenerator = field(default_factory=ScheduleGenerator)

    def generate_batch(self, requests: Iterable[ScheduleRequest]) -> list[ScheduleOutcome]:
        """Generate one outcome per request, in request order."""
        outcomes = [
            self.generator.try_generate(
                payroll_id=request.payroll_id,
                start_date=request.start_date,
                config=request.config,
                periods=request.periods,
            )
            for request in requests
        ]

        summary = summarize(outcomes)
        logger.info(
            "Batch complete: %d payrolls, %d succeeded, %d failed",
            summary.total,
            summary.succeeded,
            summary.failed,
        )
        return outcomes


def summarize(outcomes: list[ScheduleOutcome]) -> BatchSummary:
    failed = [o.payroll_id for o in outcomes if not o.ok]
    return BatchSummary(
        total=len(outcomes),
        succeeded=len(outcomes) - len(failed),
        failed=len(failed),
        failed_payroll_ids=failed,
    )


def generate_batch(requests: Iterable[ScheduleRequest]) -> list[ScheduleOutcome]:
    """
    Generate schedules for a batch of payrolls.

    Convenience function that creates a temporary scheduler.
    """
    return BatchScheduler().generate_batch(requests)
