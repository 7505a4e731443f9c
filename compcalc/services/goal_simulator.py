"""Goal simulation: what it takes to grow ARR to a target.

Two independent scenarios are derived from the same snapshot. Scenario A
closes the whole gap with self-serve subscribers, scenario B with enterprise
deals. Nothing tries to blend the two.
"""
from __future__ import annotations

from typing import Optional

from compcalc.core.logger import get_logger
from compcalc.schemas.compensation import CompensationInput, GoalOutput
from compcalc.services.bonus_rules import (
    ENTERPRISE_ACV_ZERO,
    MONTHS_PER_YEAR,
    SIGNUP_THRESHOLD_ZERO,
    SUBSCRIBER_PLAN_ZERO,
    WIN_RATE_ZERO,
    drop_non_finite,
    signup_increment_bonus,
)

LOGGER = get_logger(__name__)

DEFAULT_TARGET_ARR = 10_000_000.0
DEFAULT_WIN_RATE = 0.20


def simulate_goal(
    inputs: CompensationInput,
    target_arr: float = DEFAULT_TARGET_ARR,
    assumed_win_rate: float = DEFAULT_WIN_RATE,
) -> GoalOutput:
    """Project the bonuses earned by closing ``target_arr - current_arr``.

    The gap is not clamped: a snapshot already past the target yields a
    negative gap and negative counts. Figures that overflow are ``None``
    and flagged with ``non_finite_result``.
    """

    arr_gap = target_arr - inputs.current_arr
    warnings: list[str] = []

    # Scenario A: every additional subscriber is one additional signup.
    annual_plan_value = inputs.subscriber_plan * MONTHS_PER_YEAR
    additional_subscribers: Optional[float] = None
    goal_self_serve_bonus = 0.0
    if annual_plan_value == 0:
        warnings.append(SUBSCRIBER_PLAN_ZERO)
    else:
        additional_subscribers = arr_gap / annual_plan_value
        if inputs.signup_bonus_threshold == 0:
            warnings.append(SIGNUP_THRESHOLD_ZERO)
        goal_self_serve_bonus = signup_increment_bonus(
            additional_subscribers,
            inputs.signup_bonus_threshold,
            inputs.signup_bonus_rate,
        )

    # Scenario B: straight-line commission on the SQLs needed. Unlike the
    # realised SQL bonus, the quarterly floor is not applied here.
    additional_clients: Optional[float] = None
    additional_sqls: Optional[float] = None
    goal_sql_bonus = 0.0
    if inputs.enterprise_acv == 0:
        warnings.append(ENTERPRISE_ACV_ZERO)
    else:
        additional_clients = arr_gap / inputs.enterprise_acv
        if assumed_win_rate == 0:
            warnings.append(WIN_RATE_ZERO)
        else:
            additional_sqls = additional_clients / assumed_win_rate
            goal_sql_bonus = additional_sqls * inputs.sql_commission

    figures = drop_non_finite(
        {
            "arr_gap": arr_gap,
            "additional_subscribers_needed": additional_subscribers,
            "additional_signups_needed": additional_subscribers,
            "goal_self_serve_bonus": goal_self_serve_bonus,
            "additional_enterprise_clients_needed": additional_clients,
            "additional_sqls_needed": additional_sqls,
            "goal_sql_bonus": goal_sql_bonus,
        },
        warnings,
    )

    if warnings:
        LOGGER.info("Goal simulation has undefined figures: %s", ", ".join(warnings))
    LOGGER.debug(
        "Simulated goal target=%s gap=%s self_serve_bonus=%s sql_bonus=%s",
        target_arr,
        figures["arr_gap"],
        figures["goal_self_serve_bonus"],
        figures["goal_sql_bonus"],
    )

    return GoalOutput(
        target_arr=target_arr,
        assumed_win_rate=assumed_win_rate,
        warnings=tuple(warnings),
        **figures,
    )
