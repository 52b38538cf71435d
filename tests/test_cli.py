"""
Tests for the paycycle command-line interface.
"""
import json
import logging
from datetime import date

import pytest

from paycycle.cli import build_requests, main
from paycycle.exceptions import PayrollNotFoundError
from paycycle.packs import load_payroll_pack


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the handler main() attaches, which writes to a captured stream."""
    yield
    logger = logging.getLogger("paycycle")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestBuildRequests:
    """Start date and period precedence."""

    def test_pack_values_used(self, pack_file):
        pack = load_payroll_pack(pack_file)
        requests = build_requests(pack, today=date(2025, 6, 1))
        assert [(r.payroll_id, r.start_date, r.periods) for r in requests] == [
            ("PAY-001", date(2025, 1, 31), 3),
            ("PAY-002", date(2025, 6, 1), 12),
        ]

    def test_explicit_values_win(self, pack_file):
        pack = load_payroll_pack(pack_file)
        requests = build_requests(pack, "PAY-001", start=date(2025, 3, 31), periods=5)
        assert len(requests) == 1
        assert requests[0].start_date == date(2025, 3, 31)
        assert requests[0].periods == 5

    def test_zero_periods_not_replaced(self, pack_file):
        requests = build_requests(load_payroll_pack(pack_file), periods=0)
        assert [r.periods for r in requests] == [0, 0]

    def test_unknown_payroll(self, pack_file):
        with pytest.raises(PayrollNotFoundError):
            build_requests(load_payroll_pack(pack_file), "PAY-404")


class TestCommands:
    """End-to-end command runs."""

    def test_generate_json(self, pack_file, capsys):
        code = main(["generate", str(pack_file), "--payroll", "PAY-001", "--json"])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["summary"] == {"total": 1, "succeeded": 1, "failed": 0}
        results = data["outcomes"][0]["results"]
        assert [r["adjusted_eft_date"] for r in results] == ["2025-02-28", "2025-03-31", "2025-04-30"]

    def test_generate_table(self, pack_file, capsys):
        code = main(["generate", str(pack_file), "--start", "2025-01-06", "--periods", "2"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Payroll PAY-002" in out
        assert "2025-01-17" in out
        assert "2/2 payrolls generated" in out

    def test_generate_failure_exit_code(self, pack_file, capsys):
        code = main(["generate", str(pack_file), "--periods", "100"])
        assert code == 1
        assert "FAILED [PC_INVALID_CONFIGURATION]" in capsys.readouterr().out

    def test_generate_zero_periods_fails(self, pack_file, capsys):
        code = main(["generate", str(pack_file), "--periods", "0"])
        assert code == 1
        assert "FAILED [PC_INVALID_CONFIGURATION]" in capsys.readouterr().out

    def test_generate_unknown_payroll(self, pack_file, capsys):
        assert main(["generate", str(pack_file), "--payroll", "PAY-404"]) == 1
        assert "PC_PAYROLL_NOT_FOUND" in capsys.readouterr().err

    def test_missing_pack(self, tmp_path, capsys):
        assert main(["generate", str(tmp_path / "missing.yaml")]) == 2
        assert "PC_PACK_LOAD_ERROR" in capsys.readouterr().err

    def test_validate(self, pack_file, capsys):
        assert main(["validate", str(pack_file)]) == 0
        assert "VALIDATION PASSED" in capsys.readouterr().out

    def test_validate_rejects_unusual_combination(self, tmp_path, capsys):
        path = tmp_path / "odd.yaml"
        path.write_text("payrolls:\n  - {id: P1, cycle_type: weekly, date_type: eom}\n")
        assert main(["validate", str(path)]) == 2
        assert "P1" in capsys.readouterr().err

    def test_describe(self, pack_file, capsys):
        assert main(["describe", str(pack_file)]) == 0
        out = capsys.readouterr().out
        assert "Monthly - 31st of the Month" in out
        assert "Weekly - Friday" in out

    def test_no_command(self, capsys):
        assert main([]) == 1
