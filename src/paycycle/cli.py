"""
PayCycle CLI

Command-line interface for payroll packs.

Usage:
    paycycle generate payrolls.yaml --periods 6
    paycycle generate payrolls.yaml --payroll PAY-001 --start 2025-01-31 --json
    paycycle validate payrolls.yaml
    paycycle describe payrolls.yaml

Exit codes:
    0  success
    1  one or more payrolls failed
    2  the pack could not be loaded
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from typing import Any, Optional

from . import __version__
from .engine import BatchScheduler, choose_periods, describe_schedule, summarize
from .exceptions import PayCycleError
from .logging_config import configure_logging
from .models import ScheduleOutcome, ScheduleRequest
from .packs import PayrollPack, PayrollPackLoader

EXIT_OK = 0
EXIT_PAYROLL_FAILED = 1
EXIT_PACK_ERROR = 2


def _parse_date_arg(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD")


def _load_pack(path: str, strict: bool = False) -> Optional[PayrollPack]:
    """Load a pack, printing the error and returning None on failure."""
    loader = PayrollPackLoader(strict_combinations=strict)
    try:
        return loader.load(path)
    except PayCycleError as e:
        print(f"ERROR [{e.code}] {e.message}", file=sys.stderr)
        for error in e.details.get("errors", []):
            print(f"  - {error}", file=sys.stderr)
        return None


def build_requests(
    pack: PayrollPack,
    payroll_id: Optional[str] = None,
    start: Optional[date] = None,
    periods: Optional[int] = None,
    today: Optional[date] = None,
) -> list[ScheduleRequest]:
    """
    Build batch requests for the pack's payrolls.

    Start date precedence: explicit start, then the payroll's own
    start_date, then today. Period count: explicit, payroll, default.

    Raises:
        PayrollNotFoundError: if payroll_id is not in the pack
    """
    payrolls = [pack.get_payroll(payroll_id)] if payroll_id else pack.payrolls
    today = today or date.today()
    return [
        ScheduleRequest(
            payroll_id=payroll.id,
            start_date=start or payroll.start_date or today,
            config=payroll.config,
            periods=choose_periods(periods, payroll.periods),
        )
        for payroll in payrolls
    ]


def print_outcome(outcome: ScheduleOutcome) -> None:
    """Print one payroll's schedule as a table."""
    print(f"Payroll {outcome.payroll_id}")
    print("-" * 60)
    if not outcome.ok:
        print(f"  FAILED [{outcome.error.code}] {outcome.error.message}")
        print()
        return

    print(f"  {'#':>3}  {'Original EFT':<12}  {'EFT':<12}  {'Processing':<12}")
    for i, result in enumerate(outcome.results, start=1):
        marker = "*" if result.was_adjusted else " "
        print(
            f"  {i:>3}  {result.original_eft_date.isoformat():<12}  "
            f"{result.adjusted_eft_date.isoformat():<11}{marker}  "
            f"{result.processing_date.isoformat():<12}"
        )
    print()


def cmd_generate(args: argparse.Namespace) -> int:
    """Generate schedules for a pack's payrolls."""
    pack = _load_pack(args.pack)
    if pack is None:
        return EXIT_PACK_ERROR

    try:
        requests = build_requests(pack, args.payroll, args.start, args.periods)
    except PayCycleError as e:
        print(f"ERROR [{e.code}] {e.message}", file=sys.stderr)
        return EXIT_PAYROLL_FAILED

    outcomes = BatchScheduler().generate_batch(requests)
    summary = summarize(outcomes)

    if args.json:
        payload: dict[str, Any] = {
            "pack": pack.name,
            "outcomes": [o.to_dict() for o in outcomes],
            "summary": {
                "total": summary.total,
                "succeeded": summary.succeeded,
                "failed": summary.failed,
            },
        }
        print(json.dumps(payload, indent=2))
    else:
        for outcome in outcomes:
            print_outcome(outcome)
        print(f"{summary.succeeded}/{summary.total} payrolls generated")

    return EXIT_OK if summary.failed == 0 else EXIT_PAYROLL_FAILED


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate a pack, rejecting unusual cycle/date type combinations."""
    pack = _load_pack(args.pack, strict=True)
    if pack is None:
        return EXIT_PACK_ERROR

    print("VALIDATION PASSED")
    print("-" * 40)
    print(f"  Payrolls: {len(pack.payrolls)}")
    print(f"  Holidays: {len(pack.holidays)}")
    return EXIT_OK


def cmd_describe(args: argparse.Namespace) -> int:
    """Describe each payroll's schedule in words."""
    pack = _load_pack(args.pack)
    if pack is None:
        return EXIT_PACK_ERROR

    print(f"{'Payroll':<16} {'Region':<10} Schedule")
    print("-" * 60)
    for payroll in pack.payrolls:
        print(f"{payroll.id:<16} {payroll.region or '-':<10} {describe_schedule(payroll.config)}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="PayCycle payroll schedule CLI",
        prog="paycycle",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to PAYCYCLE_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate pay run schedules")
    gen_parser.add_argument("pack", help="Payroll pack file (YAML or JSON)")
    gen_parser.add_argument("--payroll", default=None, help="Only this payroll ID")
    gen_parser.add_argument(
        "--start",
        type=_parse_date_arg,
        default=None,
        help="Base date YYYY-MM-DD (defaults to the payroll's start_date, then today)",
    )
    gen_parser.add_argument("--periods", type=int, default=None, help="Periods to generate")
    gen_parser.add_argument("--json", action="store_true", help="Emit JSON")
    gen_parser.set_defaults(func=cmd_generate)

    # Validate command
    val_parser = subparsers.add_parser("validate", help="Validate a payroll pack")
    val_parser.add_argument("pack", help="Payroll pack file (YAML or JSON)")
    val_parser.set_defaults(func=cmd_validate)

    # Describe command
    desc_parser = subparsers.add_parser("describe", help="Describe payroll schedules")
    desc_parser.add_argument("pack", help="Payroll pack file (YAML or JSON)")
    desc_parser.set_defaults(func=cmd_describe)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_PAYROLL_FAILED

    configure_logging(args.log_level, json_format=False)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
