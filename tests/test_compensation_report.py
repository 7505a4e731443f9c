"""Tests for the console report script."""
from __future__ import annotations

import importlib.util
from pathlib import Path

from rich.console import Console

from compcalc.core.config import GoalSettings
from compcalc.schemas import CompensationInput
from compcalc.services import CompensationService

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "compensation_report.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("compensation_report", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _render(tables) -> str:
    console = Console(record=True, width=120)
    for table in tables:
        console.print(table)
    return console.export_text()


def test_build_tables_renders_summary_and_goal() -> None:
    report = _load_script()
    summary = CompensationService(GoalSettings()).summarize(CompensationInput())

    text = _render(report.build_tables(summary))

    assert "106.000,00 €" in text
    assert "Goal Simulation: €10M ARR" in text
    assert "26.667" in text
    assert "20 % win rate" in text


def test_build_tables_marks_missed_floor() -> None:
    report = _load_script()
    summary = CompensationService(GoalSettings()).summarize(
        CompensationInput(sql_floor_per_quarter=150, enterprise_acv=0)
    )

    text = _render(report.build_tables(summary))

    assert "SQL Bonus (below floor)" in text
    assert "n/a" in text


def test_main_rejects_malformed_override() -> None:
    report = _load_script()

    assert report.main(["--field", "annualSqls"]) == 2
    assert report.main(["--field", "annualSqls=many"]) == 2


def test_main_prints_report(capsys) -> None:
    report = _load_script()

    assert report.main(["--field", "annualSqls=320"]) == 0
    assert "Compensation Summary" in capsys.readouterr().out


def test_build_tables_shows_overflow_as_not_available() -> None:
    report = _load_script()
    summary = CompensationService(GoalSettings()).summarize(
        CompensationInput(subscribers=1e200, subscriber_plan=1e200)
    )

    text = _render(report.build_tables(summary))

    calculated = next(line for line in text.splitlines() if "Calculated ARR" in line)
    assert "n/a" in calculated
    assert "106.000,00 €" in text


def test_main_survives_overflowing_fields(capsys) -> None:
    report = _load_script()

    assert report.main(["--field", "subscribers=1e200", "--field", "subscriberPlan=1e200"]) == 0
    assert "n/a" in capsys.readouterr().out
