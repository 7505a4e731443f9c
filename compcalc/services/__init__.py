"""Service layer entrypoints for domain logic."""

from .compensation_engine import compute
from .form_state import (
    FieldValueError,
    FormStateError,
    UnknownFieldError,
    apply_field_change,
    apply_field_changes,
    parse_field_value,
)
from .goal_simulator import simulate_goal
from .summary import CompensationService

__all__ = [
    "CompensationService",
    "FieldValueError",
    "FormStateError",
    "UnknownFieldError",
    "apply_field_change",
    "apply_field_changes",
    "compute",
    "parse_field_value",
    "simulate_goal",
]
