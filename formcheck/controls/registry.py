"""Control kind allow-list.

Kinds are matched case-sensitively on the fully qualified name. Callers
extend the list per call; nothing here is mutable.
"""
from typing import Iterable

BUILTIN_CONTROL_KINDS: frozenset[str] = frozenset({
    "sap.m.Input",
    "sap.m.DatePicker",
    "sap.m.ComboBox",
    "sap.m.TextArea",
    "sap.m.DateRangeSelection",
    "sap.m.DateTimePicker",
    "sap.m.MaskInput",
    "sap.m.TimePicker",
    "sap.m.MultiComboBox",
    "sap.m.MultiInput",
    "sap.m.StepInput",
    # No native "required" property on these two; mark them via custom data
    "sap.m.RadioButtonGroup",
    "sap.m.CheckBox",
})


def allowed_kinds(
    custom_kinds: Iterable[str] = (),
    builtin: frozenset[str] = BUILTIN_CONTROL_KINDS,
) -> frozenset[str]:
    """Built-in kinds plus the caller's custom kinds, as a fresh set."""
    if isinstance(custom_kinds, str):
        custom_kinds = (custom_kinds,)
    return builtin | frozenset(custom_kinds)


def is_builtin(kind: str) -> bool:
    return kind in BUILTIN_CONTROL_KINDS
