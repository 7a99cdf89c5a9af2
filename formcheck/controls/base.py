"""Capability protocols for host controls.

A host control implements whichever subset of these it supports. The
engine only ever asks "does this node have capability X?" via
``isinstance`` against the runtime-checkable protocols below; it never
inspects concrete host classes.
"""
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True, slots=True)
class BindingPart:
    """One bound value-part: a path into a (possibly unnamed) model."""
    path: str
    model: str | None = None


@dataclass(frozen=True, slots=True)
class BindingContext:
    """Base path a control's relative bindings resolve against."""
    path: str


@runtime_checkable
class Kinded(Protocol):
    def get_kind(self) -> str: ...


@runtime_checkable
class Container(Protocol):
    """Structural children grouped into named aggregations.

    Each value is a single child, a sequence of children, or None.
    """
    def get_aggregations(self) -> Mapping[str, Any]: ...


@runtime_checkable
class Identified(Protocol):
    def get_id(self) -> str: ...


@runtime_checkable
class ValueBearing(Protocol):
    def get_value(self) -> Any: ...


@runtime_checkable
class Selectable(Protocol):
    def get_selected(self) -> bool | None: ...


@runtime_checkable
class KeyedMultiSelectable(Protocol):
    def get_selected_keys(self) -> Sequence[str] | None: ...


@runtime_checkable
class IndexSelectable(Protocol):
    def get_selected_index(self) -> int | None: ...


@runtime_checkable
class Tokenized(Protocol):
    def get_tokens(self) -> Sequence[Any] | None: ...


@runtime_checkable
class MinBounded(Protocol):
    def get_min(self) -> float | None: ...


@runtime_checkable
class MaxBounded(Protocol):
    def get_max(self) -> float | None: ...


@runtime_checkable
class Requireable(Protocol):
    def get_required(self) -> bool | None: ...


@runtime_checkable
class CustomDataCarrier(Protocol):
    """Out-of-band attribute store (e.g. a "required" marker)."""
    def data(self, key: str) -> Any: ...


@runtime_checkable
class StateWritable(Protocol):
    def set_value_state(self, state: str) -> Any: ...


@runtime_checkable
class SignalSource(Protocol):
    def has_event(self, signal: str) -> bool: ...
    def attach_event(self, signal: str, handler: Callable[[Any], Any]) -> Any: ...


@runtime_checkable
class ObserverListing(Protocol):
    """Optional: exposes handlers currently registered for a signal."""
    def event_handlers(self, signal: str) -> Sequence[Callable[[Any], Any]]: ...


@runtime_checkable
class Bindable(Protocol):
    def get_binding_info(self, prop: str) -> Any: ...
    def get_binding_context(self, model: str | None = None) -> Any: ...


@runtime_checkable
class ChangeEvent(Protocol):
    def get_source(self) -> Any: ...
    def get_parameter(self, name: str) -> Any: ...
