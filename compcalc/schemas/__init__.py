"""Pydantic schemas exchanged by services and routers."""

from .compensation import (
    CompensationInput,
    CompensationOutput,
    CompensationSummary,
    FieldChange,
    GoalOutput,
    SignupProgress,
)

__all__ = [
    "CompensationInput",
    "CompensationOutput",
    "CompensationSummary",
    "FieldChange",
    "GoalOutput",
    "SignupProgress",
]
