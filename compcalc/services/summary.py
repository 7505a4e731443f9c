"""Service bundling engine output with the ratios shown beside it."""
from __future__ import annotations

from typing import Optional

from compcalc.core.config import GoalSettings, get_settings
from compcalc.core.logger import get_logger
from compcalc.schemas.compensation import (
    CompensationInput,
    CompensationOutput,
    CompensationSummary,
    GoalOutput,
    SignupProgress,
)
from compcalc.services.bonus_rules import MONTHS_PER_YEAR, drop_non_finite
from compcalc.services.compensation_engine import compute
from compcalc.services.goal_simulator import simulate_goal

LOGGER = get_logger(__name__)


class CompensationService:
    """Entry point used by routers and scripts."""

    def __init__(self, goal: Optional[GoalSettings] = None) -> None:
        self.goal = goal or get_settings().goal

    def compute(self, inputs: CompensationInput) -> CompensationOutput:
        return compute(inputs, self.goal)

    def simulate_goal(
        self,
        inputs: CompensationInput,
        target_arr: Optional[float] = None,
        assumed_win_rate: Optional[float] = None,
    ) -> GoalOutput:
        return simulate_goal(
            inputs,
            self.goal.target_arr if target_arr is None else target_arr,
            self.goal.assumed_win_rate if assumed_win_rate is None else assumed_win_rate,
        )

    def summarize(self, inputs: CompensationInput) -> CompensationSummary:
        """Compute ``inputs`` and derive the summary ratios."""

        output = self.compute(inputs)
        total = output.total_compensation
        warnings: list[str] = []

        bonus_share: Optional[float] = None
        if total is not None and output.total_bonus is not None:
            bonus_share = output.total_bonus / total * 100 if total > 0 else 0.0

        threshold = inputs.signup_bonus_threshold
        progress = SignupProgress(
            remainder=output.signup_remainder,
            threshold=threshold,
            fraction=output.signup_remainder / threshold if threshold else 0.0,
        )

        ratios = drop_non_finite(
            {
                "bonus_share_percent": bonus_share,
                "monthly_average": None if total is None else total / MONTHS_PER_YEAR,
                "arr_difference": (
                    None
                    if output.total_calculated_arr is None
                    else output.total_calculated_arr - inputs.current_arr
                ),
            },
            warnings,
        )

        LOGGER.debug("Summarised compensation bonus_share=%s", ratios["bonus_share_percent"])
        return CompensationSummary(
            inputs=inputs,
            output=output,
            signup_progress=progress,
            warnings=tuple(warnings),
            **ratios,
        )
