from formcheck.engines.binder import REVALIDATE, ObserverBinder, RevalidationCallback, get_binder
from formcheck.engines.engine import ValidationEngine, check, get_engine, validate, validate_control
from formcheck.engines.predicate import is_required, is_valid, is_value_in_range
from formcheck.engines.reporting import BindingInformation, ValidationError, build_report
from formcheck.engines.walker import discover

__all__ = [
    "REVALIDATE",
    "ObserverBinder",
    "RevalidationCallback",
    "get_binder",
    "ValidationEngine",
    "check",
    "get_engine",
    "validate",
    "validate_control",
    "is_required",
    "is_valid",
    "is_value_in_range",
    "BindingInformation",
    "ValidationError",
    "build_report",
    "discover",
]
