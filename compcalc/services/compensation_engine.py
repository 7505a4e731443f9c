"""Compensation engine: derive bonuses and total OTE from one snapshot.

The engine is a pure function of its input. It never mutates the snapshot
and never raises for finite numeric input, including zero and negative
values, which simply propagate through the arithmetic. Figures that
overflow to infinity or NaN are reported as ``None`` with the
``non_finite_result`` warning.
"""
from __future__ import annotations

from typing import Optional

from compcalc.core.config import GoalSettings, get_settings
from compcalc.core.logger import get_logger
from compcalc.schemas.compensation import CompensationInput, CompensationOutput
from compcalc.services.bonus_rules import (
    MONTHS_PER_YEAR,
    QUARTERS_PER_YEAR,
    SIGNUP_THRESHOLD_ZERO,
    drop_non_finite,
    signup_increment_bonus,
    signup_remainder,
)
from compcalc.services.goal_simulator import simulate_goal

LOGGER = get_logger(__name__)


def sql_floor_met(inputs: CompensationInput) -> bool:
    """Return whether the average quarter clears the SQL floor (always true when disabled)."""

    if not inputs.sql_floor_enabled:
        return True
    return inputs.annual_sqls / QUARTERS_PER_YEAR >= inputs.sql_floor_per_quarter


def compute(
    inputs: CompensationInput,
    goal: Optional[GoalSettings] = None,
) -> CompensationOutput:
    """Compute the compensation figures for ``inputs``.

    Args:
        inputs: The current form snapshot.
        goal: Target and win rate for the embedded goal simulation; the
            configured ``GOAL_*`` settings when omitted.
    """

    goal = goal or get_settings().goal
    warnings: list[str] = []

    subscriber_arr = inputs.subscribers * inputs.subscriber_plan * MONTHS_PER_YEAR
    enterprise_arr = inputs.enterprise_clients * inputs.enterprise_acv

    if inputs.signup_bonus_threshold == 0:
        warnings.append(SIGNUP_THRESHOLD_ZERO)
    self_serve_bonus = signup_increment_bonus(
        inputs.annual_signups,
        inputs.signup_bonus_threshold,
        inputs.signup_bonus_rate,
    )
    remainder = signup_remainder(inputs.annual_signups, inputs.signup_bonus_threshold)

    # Even split across quarters; missing the floor forfeits the whole SQL bonus.
    quarterly_sqls = inputs.annual_sqls / QUARTERS_PER_YEAR
    is_floor_met = sql_floor_met(inputs)
    sql_bonus = inputs.annual_sqls * inputs.sql_commission if is_floor_met else 0.0

    total_bonus = self_serve_bonus + sql_bonus
    figures = drop_non_finite(
        {
            "subscriber_arr": subscriber_arr,
            "enterprise_arr": enterprise_arr,
            "total_calculated_arr": subscriber_arr + enterprise_arr,
            "self_serve_bonus": self_serve_bonus,
            "sql_bonus": sql_bonus,
            "total_bonus": total_bonus,
            "total_compensation": inputs.base_salary + total_bonus,
        },
        warnings,
    )

    if warnings:
        LOGGER.info("Compensation inputs need attention: %s", ", ".join(warnings))
    LOGGER.debug(
        "Computed compensation total=%s self_serve=%s sql=%s floor_met=%s",
        figures["total_compensation"],
        figures["self_serve_bonus"],
        figures["sql_bonus"],
        is_floor_met,
    )

    return CompensationOutput(
        **figures,
        signup_remainder=remainder,
        quarterly_sqls=quarterly_sqls,
        is_floor_met=is_floor_met,
        goal=simulate_goal(inputs, goal.target_arr, goal.assumed_win_rate),
        warnings=tuple(warnings),
    )
