"""In-memory control tree used across the test-suite.

The fakes mirror how a host toolkit exposes controls: each class only
defines the accessors its real counterpart has, so capability probing is
exercised exactly as it would be against the host.
"""
from __future__ import annotations

from typing import Any, Callable

import pytest

from formcheck.controls import BindingContext, BindingPart
from formcheck.engines.binder import ObserverBinder
from formcheck.engines.engine import ValidationEngine


class Element:
    """Base element: identity, kind, aggregations, custom data, events."""

    KIND = "sap.ui.core.Element"
    EVENTS: tuple[str, ...] = ()
    _counter = 0

    def __init__(self, id: str | None = None, *, custom: dict | None = None,
                 binding: list[BindingPart] | None = None,
                 contexts: dict[str | None, BindingContext] | None = None,
                 **aggregations: Any):
        Element._counter += 1
        self._id = id or f"__element{Element._counter}"
        self._custom = dict(custom or {})
        self._binding = binding
        self._contexts = dict(contexts or {})
        self._aggregations = dict(aggregations)
        self.handlers: dict[str, list[Callable[[Any], Any]]] = {}
        self.states: list[str] = []

    def get_kind(self) -> str:
        return self.KIND

    def get_id(self) -> str:
        return self._id

    def get_aggregations(self) -> dict[str, Any]:
        return self._aggregations

    def data(self, key: str) -> Any:
        return self._custom.get(key)

    def set_value_state(self, state: str) -> None:
        self.states.append(state)

    @property
    def value_state(self) -> str | None:
        return self.states[-1] if self.states else None

    def has_event(self, signal: str) -> bool:
        return signal in self.EVENTS

    def attach_event(self, signal: str, handler: Callable[[Any], Any]) -> None:
        self.handlers.setdefault(signal, []).append(handler)

    def event_handlers(self, signal: str) -> list[Callable[[Any], Any]]:
        return list(self.handlers.get(signal, []))

    def fire(self, signal: str, **parameters: Any) -> None:
        event = Event(self, parameters)
        for handler in self.event_handlers(signal):
            handler(event)

    def get_binding_info(self, prop: str) -> list[BindingPart] | None:
        return self._binding if prop == "value" else None

    def get_binding_context(self, model: str | None = None) -> BindingContext | None:
        return self._contexts.get(model)


class Event:
    def __init__(self, source: Any, parameters: dict[str, Any]):
        self._source = source
        self._parameters = parameters

    def get_source(self) -> Any:
        return self._source

    def get_parameter(self, name: str) -> Any:
        return self._parameters.get(name)


class Panel(Element):
    KIND = "sap.m.Panel"


class Input(Element):
    KIND = "sap.m.Input"
    EVENTS = ("liveChange", "change")

    def __init__(self, id: str | None = None, *, value: Any = "", required: bool = False, **kwargs: Any):
        super().__init__(id, **kwargs)
        self.value = value
        self.required = required

    def get_value(self) -> Any:
        return self.value

    def get_required(self) -> bool:
        return self.required


class StepInput(Input):
    KIND = "sap.m.StepInput"
    EVENTS = ("change",)

    def __init__(self, id: str | None = None, *, min: float | None = None, max: float | None = None, **kwargs: Any):
        super().__init__(id, **kwargs)
        self.min = min
        self.max = max

    def get_min(self) -> float | None:
        return self.min

    def get_max(self) -> float | None:
        return self.max


class MultiComboBox(Input):
    KIND = "sap.m.MultiComboBox"
    EVENTS = ("selectionChange", "change")

    def __init__(self, id: str | None = None, *, selected_keys: list[str] | None = None, **kwargs: Any):
        super().__init__(id, **kwargs)
        self.selected_keys = list(selected_keys or [])

    def get_selected_keys(self) -> list[str]:
        return self.selected_keys


class MultiInput(Input):
    KIND = "sap.m.MultiInput"
    EVENTS = ("liveChange", "change", "tokenUpdate")

    def __init__(self, id: str | None = None, *, tokens: list[Any] | None = None, **kwargs: Any):
        super().__init__(id, **kwargs)
        self.tokens = list(tokens or [])

    def get_tokens(self) -> list[Any]:
        return self.tokens


class RadioButtonGroup(Element):
    """No native ``required``; marked via custom data."""
    KIND = "sap.m.RadioButtonGroup"
    EVENTS = ("select",)

    def __init__(self, id: str | None = None, *, selected_index: int = -1, **kwargs: Any):
        super().__init__(id, **kwargs)
        self.selected_index = selected_index

    def get_selected_index(self) -> int:
        return self.selected_index


class CheckBox(Element):
    KIND = "sap.m.CheckBox"
    EVENTS = ("select",)

    def __init__(self, id: str | None = None, *, selected: bool = False, **kwargs: Any):
        super().__init__(id, **kwargs)
        self.selected = selected

    def get_selected(self) -> bool:
        return self.selected


class ColorPicker(Input):
    KIND = "my.app.ColorPicker"


class ListAggregations(Element):
    """Hands out its aggregations as a plain list."""

    def get_aggregations(self) -> list[Any]:
        return [Input("hidden")]


class OpaqueBinding(Input):
    """Binding info that is neither parts nor a sequence of them."""

    def get_binding_info(self, prop: str) -> Any:
        return 42


class Bare:
    """A node with children but no kind."""

    def __init__(self, *children: Any):
        self.children = list(children)

    def get_aggregations(self) -> dict[str, Any]:
        return {"content": self.children}


@pytest.fixture
def binder() -> ObserverBinder:
    return ObserverBinder()


@pytest.fixture
def engine(binder: ObserverBinder) -> ValidationEngine:
    return ValidationEngine(binder=binder)
