"""Explicit form-state updates.

The calculator form is modelled as a sequence of immutable
:class:`CompensationInput` snapshots. Each raw edit (text from a number field,
a checkbox toggle) is parsed and folded into a new snapshot; the previous one
is left untouched.
"""
from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Union

from compcalc.core.logger import get_logger
from compcalc.schemas.compensation import CompensationInput

LOGGER = get_logger(__name__)

RawValue = Union[bool, int, float, str, None]

_TRUE_STRINGS = {"true", "on", "1", "yes"}
_FALSE_STRINGS = {"false", "off", "0", "no", ""}


class FormStateError(Exception):
    """Base class for rejected form edits."""


class UnknownFieldError(FormStateError, KeyError):
    """Raised when an edit targets a field the form does not have."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown compensation field: {self.name!r}"


class FieldValueError(FormStateError, ValueError):
    """Raised when a raw value cannot be coerced for its field."""

    def __init__(self, name: str, value: RawValue, reason: str) -> None:
        super().__init__(f"Invalid value {value!r} for {name}: {reason}")
        self.name = name
        self.value = value


def _field_lookup() -> dict[str, str]:
    lookup: dict[str, str] = {}
    for field_name, info in CompensationInput.model_fields.items():
        lookup[field_name] = field_name
        if info.alias:
            lookup[info.alias] = field_name
    return lookup


_FIELDS = _field_lookup()
_BOOLEAN_FIELDS = {
    name
    for name, info in CompensationInput.model_fields.items()
    if info.annotation is bool
}


def resolve_field(name: str) -> str:
    """Map a snake_case or camelCase field name onto the model attribute."""

    try:
        return _FIELDS[name]
    except KeyError:
        raise UnknownFieldError(name) from None


def _parse_bool(name: str, raw: RawValue) -> bool:
    if isinstance(raw, bool):
        return raw
    if raw is None:
        return False
    if isinstance(raw, (int, float)):
        return raw != 0
    text = raw.strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise FieldValueError(name, raw, "expected a checkbox value")


def _parse_number(name: str, raw: RawValue) -> float:
    if isinstance(raw, bool):
        raise FieldValueError(name, raw, "expected a number")
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            raise FieldValueError(name, raw, "value must be finite") from None
    else:
        text = raw.strip()
        # An emptied number input counts as zero.
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            raise FieldValueError(name, raw, "expected a number") from None
    if not math.isfinite(value):
        raise FieldValueError(name, raw, "value must be finite")
    return value


def parse_field_value(name: str, raw: RawValue) -> Union[bool, float]:
    """Coerce a raw form value into the type of field ``name``."""

    field_name = resolve_field(name)
    if field_name in _BOOLEAN_FIELDS:
        return _parse_bool(field_name, raw)
    return _parse_number(field_name, raw)


def apply_field_change(
    state: CompensationInput,
    name: str,
    raw: RawValue,
) -> CompensationInput:
    """Return a new snapshot with ``name`` set to the parsed ``raw`` value."""

    field_name = resolve_field(name)
    value = parse_field_value(field_name, raw)
    LOGGER.debug("Form field %s changed to %r", field_name, value)
    return state.model_copy(update={field_name: value})


def apply_field_changes(
    state: CompensationInput,
    changes: Iterable[tuple[str, RawValue]],
) -> CompensationInput:
    """Fold several ``(name, raw)`` edits into ``state`` in order."""

    for name, raw in changes:
        state = apply_field_change(state, name, raw)
    return state
