"""Compensation calculator: OTE engine and ARR goal simulator."""

from .core import get_logger, get_settings
from .schemas import CompensationInput, CompensationOutput, GoalOutput
from .services import compute, simulate_goal

__all__ = [
    "CompensationInput",
    "CompensationOutput",
    "GoalOutput",
    "compute",
    "get_logger",
    "get_settings",
    "simulate_goal",
]
