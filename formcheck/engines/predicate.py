"""Required-ness and validity predicates.

A control is valid when *any* value dimension it supports signals "has a
value": non-empty text, an in-range number, a checked state, a selected
key, a selected index, or at least one token. Unsupported dimensions
contribute nothing.
"""
from __future__ import annotations

from numbers import Number
from typing import Any

from formcheck.controls.base import ChangeEvent
from formcheck.controls.types import REMOVED_TOKENS_PARAM
from formcheck.controls.view import ControlCapabilityView
from formcheck.core.errors import ErrorCode, try_result
from formcheck.core.logging import engine_logger

log = engine_logger()


def is_value_in_range(value: float, min: float | None = None, max: float | None = None) -> bool:
    """Inclusive range check; a missing bound leaves that side open."""
    in_range = True
    if min is not None:
        in_range = value >= min
    if max is not None:
        in_range = in_range and value <= max
    return in_range


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, (bool, complex))


def _removed_tokens(event: Any) -> list[Any]:
    if event is None or not isinstance(event, ChangeEvent):
        return []
    result = try_result(
        lambda: list(event.get_parameter(REMOVED_TOKENS_PARAM) or []),
        code=ErrorCode.E9004_CAPABILITY_READ_FAILED,
        origin="predicate",
    )
    if result.is_err():
        log.debug("removed_tokens_unreadable", error=result.unwrap_err().message)
        return []
    return result.unwrap()


def is_required(view: ControlCapabilityView, marker_key: str = "required") -> bool:
    """Native ``required`` flag or the custom-data marker; either suffices."""
    return bool(view.required) or bool(view.custom_data(marker_key))


def is_valid(view: ControlCapabilityView, event: Any = None) -> bool:
    """Whether the control currently holds an acceptable value.

    ``event`` is the change event being handled, if any. Tokens it reports
    as removed are not yet gone from the control and are discounted here.
    """
    value = view.value
    if _is_number(value):
        value_valid = is_value_in_range(value, view.min, view.max)
    else:
        value_valid = bool(value)

    if value_valid or view.selected is True:
        return True

    tokens = view.tokens
    if tokens:
        removed = _removed_tokens(event)
        if any(token not in removed for token in tokens):
            return True

    if view.selected_keys:
        return True

    selected_index = view.selected_index
    return selected_index is not None and selected_index != -1
