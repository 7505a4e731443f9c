"""Unit tests for the compensation engine."""
from __future__ import annotations

import pytest

from compcalc.core.config import GoalSettings, get_settings
from compcalc.schemas import CompensationInput
from compcalc.services import compute
from compcalc.services.bonus_rules import NON_FINITE_RESULT, SIGNUP_THRESHOLD_ZERO


def test_reference_scenario_totals() -> None:
    output = compute(CompensationInput())

    assert output.subscriber_arr == 30_000
    assert output.enterprise_arr == 1_970_000
    assert output.total_calculated_arr == 2_000_000
    assert output.self_serve_bonus == 10_000
    assert output.sql_bonus == 16_000
    assert output.total_bonus == 26_000
    assert output.total_compensation == 106_000
    assert output.warnings == ()


def test_signup_bonus_pays_whole_increments_only() -> None:
    inputs = CompensationInput(
        annual_signups=1200, signup_bonus_threshold=1000, signup_bonus_rate=10_000
    )

    output = compute(inputs)

    assert output.self_serve_bonus == 10_000
    assert output.signup_remainder == 200


@pytest.mark.parametrize("signups", [0, 1, 999, 1000, 1999, 2000, 5432, 10_000])
@pytest.mark.parametrize("threshold", [1, 250, 1000, 3000])
def test_signup_bonus_is_multiple_of_rate(signups: int, threshold: int) -> None:
    rate = 10_000
    inputs = CompensationInput(
        annual_signups=signups, signup_bonus_threshold=threshold, signup_bonus_rate=rate
    )

    output = compute(inputs)

    assert output.self_serve_bonus == (signups // threshold) * rate
    assert output.self_serve_bonus >= 0
    assert output.self_serve_bonus % rate == 0


def test_sql_bonus_with_floor_met() -> None:
    inputs = CompensationInput(
        annual_sqls=400, sql_commission=40, sql_floor_enabled=True, sql_floor_per_quarter=90
    )

    output = compute(inputs)

    assert output.quarterly_sqls == 100
    assert output.is_floor_met is True
    assert output.sql_bonus == 16_000


def test_sql_bonus_is_forfeited_below_floor() -> None:
    inputs = CompensationInput(
        annual_sqls=400, sql_commission=40, sql_floor_enabled=True, sql_floor_per_quarter=150
    )

    output = compute(inputs)

    assert output.is_floor_met is False
    assert output.sql_bonus == 0


def test_floor_exactly_met_pays() -> None:
    inputs = CompensationInput(annual_sqls=360, sql_floor_per_quarter=90)

    assert compute(inputs).sql_bonus == 360 * 40


@pytest.mark.parametrize("annual_sqls", [0, 4, 100, 359, 10_000, 1_000_000])
def test_sql_bonus_without_floor_is_linear(annual_sqls: int) -> None:
    inputs = CompensationInput(
        annual_sqls=annual_sqls,
        sql_commission=40,
        sql_floor_enabled=False,
        sql_floor_per_quarter=10_000_000,
    )

    output = compute(inputs)

    assert output.is_floor_met is True
    assert output.sql_bonus == annual_sqls * 40


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"base_salary": 0},
        {"annual_sqls": 100},
        {"annual_signups": 4321, "signup_bonus_rate": 2500},
        {"sql_floor_enabled": False, "annual_sqls": 12},
    ],
)
def test_total_compensation_is_linear(overrides: dict) -> None:
    inputs = CompensationInput(**overrides)

    output = compute(inputs)

    assert output.total_compensation == (
        inputs.base_salary + output.self_serve_bonus + output.sql_bonus
    )


def test_zero_threshold_pays_no_signup_bonus() -> None:
    inputs = CompensationInput(signup_bonus_threshold=0, annual_signups=1200)

    output = compute(inputs)

    assert output.self_serve_bonus == 0
    assert output.signup_remainder == 1200
    assert SIGNUP_THRESHOLD_ZERO in output.warnings
    assert output.total_compensation == inputs.base_salary + output.sql_bonus


def test_negative_inputs_propagate() -> None:
    inputs = CompensationInput(base_salary=-1000, subscribers=-10, annual_signups=-1500)

    output = compute(inputs)

    assert output.subscriber_arr == -10 * 25 * 12
    assert output.self_serve_bonus == -2 * 10_000
    assert output.signup_remainder == -500
    assert output.total_compensation == -1000 + output.total_bonus


def test_compute_is_idempotent_and_leaves_input_untouched() -> None:
    inputs = CompensationInput(annual_sqls=333, annual_signups=2718)
    before = inputs.model_dump()

    first = compute(inputs)
    second = compute(inputs)

    assert first == second
    assert first.model_dump() == second.model_dump()
    assert inputs.model_dump() == before


def test_compute_embeds_goal_with_given_settings() -> None:
    output = compute(CompensationInput(), GoalSettings(target_arr=3_000_000, assumed_win_rate=0.5))

    assert output.goal.target_arr == 3_000_000
    assert output.goal.arr_gap == 1_000_000
    assert output.goal.assumed_win_rate == 0.5


def test_compute_defaults_goal_to_ten_million() -> None:
    output = compute(CompensationInput(current_arr=2_000_000))

    assert output.goal.arr_gap == 8_000_000
    assert output.goal.assumed_win_rate == pytest.approx(0.20)


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_compute_reads_goal_from_environment(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("GOAL_TARGET_ARR", "5000000")
    monkeypatch.setenv("GOAL_ASSUMED_WIN_RATE", "0.25")

    output = compute(CompensationInput(current_arr=2_000_000))

    assert output.goal.target_arr == 5_000_000
    assert output.goal.arr_gap == 3_000_000
    assert output.goal.assumed_win_rate == 0.25


def test_overflowing_figures_are_reported_as_missing() -> None:
    inputs = CompensationInput(subscribers=1e200, subscriber_plan=1e200)

    output = compute(inputs)

    assert output.subscriber_arr is None
    assert output.total_calculated_arr is None
    assert output.enterprise_arr == 1_970_000
    assert output.total_compensation == 106_000
    assert output.warnings == (NON_FINITE_RESULT,)
    assert "NaN" not in output.model_dump_json()
    assert "Infinity" not in output.model_dump_json()
