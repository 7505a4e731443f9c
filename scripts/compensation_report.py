#!/usr/bin/env python3
"""Print a compensation summary and the ARR goal simulation to the console."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rich.console import Console
from rich.table import Table

from compcalc.core import get_settings
from compcalc.core.formatting import (
    format_currency,
    format_number,
    format_percent,
    humanize_currency,
)
from compcalc.core.logger import configure_logging, get_logger, timeit
from compcalc.schemas import CompensationInput, CompensationSummary
from compcalc.services import CompensationService, FormStateError, apply_field_changes

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--field",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Override a form field, e.g. --field annualSqls=320 (repeatable)",
    )
    return parser.parse_args(argv)


def _split_field(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep:
        raise FormStateError(f"Expected NAME=VALUE, got {raw!r}")
    return name.strip(), value


def build_tables(summary: CompensationSummary, symbol: str = "€") -> list[Table]:
    """Lay out the summary and the two goal scenarios as rich tables."""

    output = summary.output
    goal = output.goal

    compensation = Table(title="Compensation Summary", show_header=False)
    compensation.add_column("Item")
    compensation.add_column("Amount", justify="right")
    compensation.add_row("Base Salary", format_currency(summary.inputs.base_salary, symbol))
    compensation.add_row("Signup Bonus", format_currency(output.self_serve_bonus, symbol))
    sql_label = "SQL Bonus" if output.is_floor_met else "SQL Bonus (below floor)"
    compensation.add_row(sql_label, format_currency(output.sql_bonus, symbol))
    compensation.add_row("Total OTE", format_currency(output.total_compensation, symbol))
    compensation.add_row("Bonus as % of Total", format_percent(summary.bonus_share_percent))
    compensation.add_row("Monthly Average", format_currency(summary.monthly_average, symbol))
    compensation.add_row(
        "Progress to next bonus",
        f"{format_number(summary.signup_progress.remainder)} / "
        f"{format_number(summary.signup_progress.threshold)}",
    )
    compensation.add_row(
        "Calculated ARR", format_currency(output.total_calculated_arr, symbol)
    )

    target = humanize_currency(goal.target_arr, symbol=symbol)
    scenarios = Table(title=f"Goal Simulation: {target} ARR")
    scenarios.add_column("Scenario")
    scenarios.add_column("Needed", justify="right")
    scenarios.add_column("Resulting Bonus", justify="right")
    scenarios.add_row(
        "Gap to close", format_currency(goal.arr_gap, symbol), ""
    )
    scenarios.add_row(
        "A: Self-serve subscribers",
        format_number(goal.additional_subscribers_needed),
        format_currency(goal.goal_self_serve_bonus, symbol),
    )
    scenarios.add_row(
        "B: Enterprise deals",
        format_number(goal.additional_enterprise_clients_needed),
        "",
    )
    scenarios.add_row(
        f"B: Required SQLs ({format_percent(goal.assumed_win_rate * 100, 0)} win rate)",
        format_number(goal.additional_sqls_needed),
        format_currency(goal.goal_sql_bonus, symbol),
    )
    return [compensation, scenarios]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    try:
        changes = [_split_field(raw) for raw in args.field]
        inputs = apply_field_changes(CompensationInput(), changes)
    except FormStateError as exc:
        logger.error("%s", exc)
        return 2

    service = CompensationService(settings.goal)
    with timeit("Compensation summary", logger=logger):
        summary = service.summarize(inputs)

    warnings = summary.output.warnings + summary.output.goal.warnings + summary.warnings
    for warning in dict.fromkeys(warnings):
        logger.warning("Configuration warning: %s", warning)

    console = Console()
    for table in build_tables(summary, settings.currency_symbol):
        console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
