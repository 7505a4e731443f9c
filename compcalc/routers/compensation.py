"""JSON routes exposing the compensation engine and goal simulator."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from compcalc.core.logger import get_logger, log_context
from compcalc.schemas.compensation import (
    CompensationInput,
    CompensationOutput,
    CompensationSummary,
    FieldChange,
    GoalOutput,
)
from compcalc.services import (
    CompensationService,
    FieldValueError,
    UnknownFieldError,
    apply_field_change,
)

router = APIRouter(prefix="/compensation", tags=["compensation"])
LOGGER = get_logger(__name__)


def get_compensation_service() -> CompensationService:
    """Return a service instance per request."""

    return CompensationService()


@router.get("/defaults", response_model=CompensationInput, summary="Reference scenario")
async def read_defaults() -> CompensationInput:
    """Return the snapshot the calculator form starts from."""

    return CompensationInput()


@router.post("/compute", response_model=CompensationOutput, summary="Compute compensation")
async def compute_compensation(
    inputs: CompensationInput,
    service: CompensationService = Depends(get_compensation_service),
) -> CompensationOutput:
    return service.compute(inputs)


@router.post("/goal", response_model=GoalOutput, summary="Simulate ARR goal")
async def simulate_goal(
    inputs: CompensationInput,
    target_arr: Optional[float] = Query(None, alias="targetArr", allow_inf_nan=False),
    assumed_win_rate: Optional[float] = Query(None, alias="assumedWinRate", allow_inf_nan=False),
    service: CompensationService = Depends(get_compensation_service),
) -> GoalOutput:
    """Project both growth scenarios, optionally with a custom target or win rate."""

    return service.simulate_goal(inputs, target_arr, assumed_win_rate)


@router.post("/summary", response_model=CompensationSummary, summary="Compensation summary")
async def summarize_compensation(
    inputs: CompensationInput,
    service: CompensationService = Depends(get_compensation_service),
) -> CompensationSummary:
    return service.summarize(inputs)


@router.post("/field", response_model=CompensationInput, summary="Apply a form edit")
async def change_field(change: FieldChange) -> CompensationInput:
    """Apply one raw form edit and return the resulting snapshot."""

    with log_context.bound(field=change.name):
        try:
            return apply_field_change(change.state, change.name, change.value)
        except UnknownFieldError as exc:
            LOGGER.warning("Rejected edit of unknown field")
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except FieldValueError as exc:
            LOGGER.warning("Rejected edit: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
