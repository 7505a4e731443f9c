"""Schema definitions for the compensation calculator."""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Snapshot(BaseModel):
    """Immutable model that accepts and emits camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CompensationInput(_Snapshot):
    """Business inputs of one compensation scenario.

    Defaults reproduce the reference scenario of the calculator form.
    """

    model_config = ConfigDict(allow_inf_nan=False)

    base_salary: float = 80_000
    current_arr: float = 2_000_000
    subscribers: float = 100
    subscriber_plan: float = 25
    enterprise_clients: float = 40
    enterprise_acv: float = 49_250

    annual_signups: float = 1_200
    signup_bonus_rate: float = 10_000
    signup_bonus_threshold: float = 1_000

    annual_sqls: float = 400
    sql_commission: float = 40
    sql_floor_enabled: bool = True
    sql_floor_per_quarter: float = 90


class GoalOutput(_Snapshot):
    """Two independent ways of closing the gap to the ARR target.

    Figures that cannot be derived, because of a zero divisor or because
    the arithmetic overflowed, are ``None``.
    """

    target_arr: float
    assumed_win_rate: float
    arr_gap: Optional[float]

    additional_subscribers_needed: Optional[float] = None
    additional_signups_needed: Optional[float] = None
    goal_self_serve_bonus: Optional[float] = 0

    additional_enterprise_clients_needed: Optional[float] = None
    additional_sqls_needed: Optional[float] = None
    goal_sql_bonus: Optional[float] = 0

    warnings: tuple[str, ...] = ()


class CompensationOutput(_Snapshot):
    """Figures derived from a :class:`CompensationInput`.

    Monetary figures whose arithmetic overflowed are ``None`` and flagged by
    the ``non_finite_result`` warning.
    """

    subscriber_arr: Optional[float]
    enterprise_arr: Optional[float]
    total_calculated_arr: Optional[float]

    self_serve_bonus: Optional[float]
    signup_remainder: float
    quarterly_sqls: float
    is_floor_met: bool
    sql_bonus: Optional[float]

    total_bonus: Optional[float]
    total_compensation: Optional[float]

    goal: GoalOutput
    warnings: tuple[str, ...] = ()


class SignupProgress(_Snapshot):
    """Progress from the last paid signup increment toward the next one."""

    remainder: float
    threshold: float
    fraction: float


class CompensationSummary(_Snapshot):
    """Compensation output plus the ratios shown next to it."""

    inputs: CompensationInput
    output: CompensationOutput
    bonus_share_percent: Optional[float]
    monthly_average: Optional[float]
    signup_progress: SignupProgress
    arr_difference: Optional[float]
    warnings: tuple[str, ...] = ()


class FieldChange(BaseModel):
    """A single raw form edit applied to the current snapshot."""

    state: CompensationInput = CompensationInput()
    name: str
    value: Union[bool, float, str, None] = None
