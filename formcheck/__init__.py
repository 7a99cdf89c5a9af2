"""Required-field validation for form controls in a UI control tree.

Usage:
    from formcheck import validate

    errors = validate(form, custom_kinds=["my.app.ColorPicker"])
    for error in errors:
        for binding in error.bindings:
            print(error.id, binding.binding_path)
"""

__version__ = "0.1.0"

from formcheck.controls import (
    BUILTIN_CONTROL_KINDS,
    BindingContext,
    BindingPart,
    ControlCapabilityView,
    Signal,
    ValueState,
)
from formcheck.core.config import load_control_kinds
from formcheck.core.errors import AppError, Err, Ok, Result
from formcheck.engines import (
    BindingInformation,
    ValidationEngine,
    ValidationError,
    check,
    discover,
    is_required,
    is_valid,
    is_value_in_range,
    validate,
    validate_control,
)

__all__ = [
    "BUILTIN_CONTROL_KINDS",
    "BindingContext",
    "BindingPart",
    "ControlCapabilityView",
    "Signal",
    "ValueState",
    "load_control_kinds",
    "AppError",
    "Err",
    "Ok",
    "Result",
    "BindingInformation",
    "ValidationEngine",
    "ValidationError",
    "check",
    "discover",
    "is_required",
    "is_valid",
    "is_value_in_range",
    "validate",
    "validate_control",
]
