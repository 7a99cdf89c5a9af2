"""Capability view over an opaque host control.

Every accessor is an independent read: a missing capability, or a host
accessor that raises, reads as ``None`` and never prevents reading any
other capability. Writes to capabilities a control lacks are no-ops.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable

from formcheck.core.errors import ErrorCode, try_result
from formcheck.core.logging import controls_logger

from .base import (
    Bindable,
    Container,
    CustomDataCarrier,
    Identified,
    IndexSelectable,
    KeyedMultiSelectable,
    Kinded,
    MaxBounded,
    MinBounded,
    ObserverListing,
    Requireable,
    Selectable,
    SignalSource,
    StateWritable,
    Tokenized,
    ValueBearing,
)
from .types import Signal, ValueState

log = controls_logger()


def _sequence(value: Any) -> list[Any] | None:
    """``value`` as a list when it is a non-text iterable, else None."""
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        return None
    return list(value)


class ControlCapabilityView:
    """Read/write adapter over a single host control."""

    __slots__ = ("node",)

    def __init__(self, node: Any):
        self.node = node

    def __repr__(self) -> str:
        return f"ControlCapabilityView({self.id or type(self.node).__name__!r})"

    def _read(self, capability: type, call: Callable[[], Any]) -> Any:
        if not isinstance(self.node, capability):
            return None
        result = try_result(call, code=ErrorCode.E9004_CAPABILITY_READ_FAILED, origin="capability_view")
        if result.is_err():
            log.debug(
                "capability_read_failed",
                capability=capability.__name__,
                node=type(self.node).__name__,
                error=result.unwrap_err().message,
            )
            return None
        return result.unwrap()

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def id(self) -> str | None:
        return self._read(Identified, lambda: self.node.get_id())

    @property
    def kind(self) -> str | None:
        kind = self._read(Kinded, lambda: self.node.get_kind())
        return kind if isinstance(kind, str) and kind else None

    @property
    def children(self) -> list[Any]:
        """Structural children, all aggregations flattened in declaration order."""
        aggregations = self._read(Container, lambda: self.node.get_aggregations())
        if not isinstance(aggregations, Mapping):
            return []
        flattened: list[Any] = []
        for aggregation in aggregations.values():
            if aggregation is None:
                continue
            if isinstance(aggregation, (list, tuple)):
                flattened.extend(child for child in aggregation if child is not None)
            else:
                flattened.append(aggregation)
        return flattened

    # ------------------------------------------------------------------
    # Value dimensions
    # ------------------------------------------------------------------

    @property
    def value(self) -> Any:
        return self._read(ValueBearing, lambda: self.node.get_value())

    @property
    def selected(self) -> bool | None:
        return self._read(Selectable, lambda: self.node.get_selected())

    @property
    def selected_keys(self) -> list[str] | None:
        return self._read(KeyedMultiSelectable, lambda: _sequence(self.node.get_selected_keys()))

    @property
    def selected_index(self) -> int | None:
        return self._read(IndexSelectable, lambda: self.node.get_selected_index())

    @property
    def tokens(self) -> list[Any] | None:
        return self._read(Tokenized, lambda: _sequence(self.node.get_tokens()))

    @property
    def min(self) -> float | None:
        return self._read(MinBounded, lambda: self.node.get_min())

    @property
    def max(self) -> float | None:
        return self._read(MaxBounded, lambda: self.node.get_max())

    @property
    def required(self) -> bool | None:
        return self._read(Requireable, lambda: self.node.get_required())

    def custom_data(self, key: str) -> Any:
        return self._read(CustomDataCarrier, lambda: self.node.data(key))

    # ------------------------------------------------------------------
    # Display state & signals
    # ------------------------------------------------------------------

    def write_state(self, state: ValueState) -> None:
        self._read(StateWritable, lambda: self.node.set_value_state(state.value))

    def supports(self, signal: Signal) -> bool:
        return bool(self._read(SignalSource, lambda: self.node.has_event(signal.value)))

    def observers(self, signal: Signal) -> list[Callable[[Any], Any]]:
        """Handlers the host reports for ``signal``; empty if it cannot say."""
        handlers = self._read(ObserverListing, lambda: _sequence(self.node.event_handlers(signal.value)))
        return handlers or []

    def attach(self, signal: Signal, handler: Callable[[Any], Any]) -> bool:
        """Attach ``handler`` if the control fires ``signal``. Returns True if attached."""
        if not self.supports(signal):
            return False
        self.node.attach_event(signal.value, handler)
        return True

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    def binding_parts(self, prop: str) -> list[Any] | None:
        """Bound parts of ``prop`` in declaration order, or None if unbound."""
        info = self._read(Bindable, lambda: self.node.get_binding_info(prop))
        if info is None:
            return None
        parts = info.get("parts") if isinstance(info, Mapping) else getattr(info, "parts", info)
        if parts is None:
            return []
        return _sequence(parts)

    def binding_base_path(self, model: str | None) -> str | None:
        context = self._read(Bindable, lambda: self.node.get_binding_context(model))
        if context is None:
            return None
        if isinstance(context, Mapping):
            return context.get("path")
        return getattr(context, "path", None)
