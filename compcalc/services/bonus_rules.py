"""Bonus rules shared by the compensation engine and the goal simulator."""
from __future__ import annotations

import math
from typing import Optional

SIGNUP_THRESHOLD_ZERO = "signup_bonus_threshold_zero"
SUBSCRIBER_PLAN_ZERO = "subscriber_plan_zero"
ENTERPRISE_ACV_ZERO = "enterprise_acv_zero"
WIN_RATE_ZERO = "assumed_win_rate_zero"
NON_FINITE_RESULT = "non_finite_result"

MONTHS_PER_YEAR = 12
QUARTERS_PER_YEAR = 4


def signup_increment_bonus(signups: float, threshold: float, rate: float) -> float:
    """Pay ``rate`` once per whole ``threshold`` of signups.

    1200 signups at a threshold of 1000 pay one increment, not 1.2. A zero
    threshold pays nothing.
    """
    if threshold == 0:
        return 0.0
    quotient = signups / threshold
    increments = math.floor(quotient) if math.isfinite(quotient) else quotient
    return increments * rate


def signup_remainder(signups: float, threshold: float) -> float:
    """Signups counted toward the next increment (sign follows ``signups``)."""
    if threshold == 0:
        return signups
    return math.fmod(signups, threshold)


def drop_non_finite(
    figures: dict[str, Optional[float]],
    warnings: list[str],
) -> dict[str, Optional[float]]:
    """Replace overflowed figures with ``None`` and record a warning once."""
    overflowed = [
        key for key, value in figures.items()
        if value is not None and not math.isfinite(value)
    ]
    if not overflowed:
        return figures
    if NON_FINITE_RESULT not in warnings:
        warnings.append(NON_FINITE_RESULT)
    return {key: None if key in overflowed else value for key, value in figures.items()}
