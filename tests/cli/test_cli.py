"""
tests/cli/test_cli.py

Covers:
  - Month summary output
  - Single-date resolution
  - Exception validation listing
  - Exit status on malformed input and unknown countries
  - National holidays visible to exception validation
"""

import json
import sys

import pytest

from workday_calc import cli

CASE = {
    "policy": {"sunday_off": True, "saturday_off_pattern": "SECOND_ONLY", "effective_from": "2025-01-01"},
    "holidays": [
        {"id": "h-ms", "start_date": "2025-02-26", "type": "FESTIVAL", "description": "Maha Shivaratri"},
    ],
    "exceptions": [
        {
            "id": "e-sunday",
            "date": "2025-02-09",
            "override_type": "FORCE_HOLIDAY",
            "applies_to_all_classes": True,
            "reason": "Already off",
        },
    ],
}


@pytest.fixture
def case_file(tmp_path):
    path = tmp_path / "case.json"
    path.write_text(json.dumps(CASE), encoding="utf-8")
    return str(path)


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["workday-calc", *argv])
    monkeypatch.delenv("WORKDAY_CALC_COUNTRY", raising=False)
    cli.main()


class TestCli:

    def test_month_summary(self, monkeypatch, capsys, case_file):
        run(monkeypatch, "--input", case_file, "--month", "2025-02", "--today", "2025-02-01")
        out = capsys.readouterr().out
        assert "=== Working days 2025-02 ===" in out
        assert "Working days: 22" in out
        assert "Maha Shivaratri" in out
        assert "Feb 26, 2025" in out

    def test_single_date(self, monkeypatch, capsys, case_file):
        run(monkeypatch, "--input", case_file, "--date", "2025-02-15")
        status = json.loads(capsys.readouterr().out)
        assert status["reason"] == "REGULAR"
        assert status["is_working_day"] is True

    def test_validate_exceptions(self, monkeypatch, capsys, case_file):
        run(monkeypatch, "--input", case_file, "--month", "2025-02", "--today", "2025-02-01", "--validate-exceptions")
        out = capsys.readouterr().out
        assert "e-sunday: RedundantException (date)" in out

    def test_explain(self, monkeypatch, capsys, case_file):
        run(monkeypatch, "--input", case_file, "--month", "2025-02", "--today", "2025-02-01", "--explain")
        out = capsys.readouterr().out
        explain = json.loads(out.split("=== Explain / Evidence ===\n", 1)[1])
        assert explain["window"]["days"] == 28

    def test_bad_date_exits(self, monkeypatch, case_file):
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, "--input", case_file, "--date", "15/02/2025")
        assert exc_info.value.code == 2

    def test_validate_exceptions_sees_national_holidays(self, monkeypatch, capsys, tmp_path):
        case = dict(CASE, exceptions=[
            {
                "id": "e-july4",
                "date": "2025-07-04",
                "override_type": "FORCE_WORKING",
                "applies_to_all_classes": True,
                "reason": "Inventory day",
            },
        ])
        path = tmp_path / "july.json"
        path.write_text(json.dumps(case), encoding="utf-8")
        run(
            monkeypatch,
            "--input", str(path), "--month", "2025-07", "--today", "2025-07-01",
            "--country", "US", "--validate-exceptions",
        )
        out = capsys.readouterr().out
        assert "e-july4: ok" in out
        assert "already a working day" not in out
        assert "Working days: 26" in out

    def test_null_description_does_not_crash(self, monkeypatch, capsys, tmp_path):
        case = dict(CASE, holidays=[{"id": "h-x", "start_date": "2025-02-26", "type": "FESTIVAL", "description": None}])
        path = tmp_path / "nulls.json"
        path.write_text(json.dumps(case), encoding="utf-8")
        run(monkeypatch, "--input", str(path), "--month", "2025-02", "--today", "2025-02-01")
        assert "Working days: 22" in capsys.readouterr().out

    def test_unknown_country_exits(self, monkeypatch, case_file):
        with pytest.raises(SystemExit) as exc_info:
            run(monkeypatch, "--input", case_file, "--month", "2025-02", "--today", "2025-02-01", "--country", "ZZ")
        assert exc_info.value.code == 2
