"""Host control capabilities and the kind allow-list."""
from .base import (
    BindingContext,
    BindingPart,
    Bindable,
    ChangeEvent,
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
from .registry import BUILTIN_CONTROL_KINDS, allowed_kinds
from .types import OBSERVED_SIGNALS, REMOVED_TOKENS_PARAM, Signal, ValueState
from .view import ControlCapabilityView

__all__ = [
    "BindingContext",
    "BindingPart",
    "Bindable",
    "ChangeEvent",
    "Container",
    "CustomDataCarrier",
    "Identified",
    "IndexSelectable",
    "KeyedMultiSelectable",
    "Kinded",
    "MaxBounded",
    "MinBounded",
    "ObserverListing",
    "Requireable",
    "Selectable",
    "SignalSource",
    "StateWritable",
    "Tokenized",
    "ValueBearing",
    "BUILTIN_CONTROL_KINDS",
    "allowed_kinds",
    "OBSERVED_SIGNALS",
    "REMOVED_TOKENS_PARAM",
    "Signal",
    "ValueState",
    "ControlCapabilityView",
]
