"""Validation engine

Discovers validatable controls under a root, evaluates each required
control, reflects the result as its display state, keeps that state live
through change observers, and reports which bound fields are missing.
"""
from __future__ import annotations

from typing import Any, Iterable

from formcheck.controls.registry import BUILTIN_CONTROL_KINDS, allowed_kinds
from formcheck.controls.types import ValueState
from formcheck.controls.view import ControlCapabilityView
from formcheck.core.config import Settings, get_settings
from formcheck.core.errors import AppError, Err, Ok, Result, collect_results
from formcheck.core.logging import engine_logger

from .binder import ObserverBinder, get_binder
from .predicate import is_required, is_valid
from .reporting import ValidationError, build_report
from .walker import discover

log = engine_logger()


class ValidationEngine:
    """Orchestrates discovery, predicates, observers and reporting."""

    __slots__ = ("builtin_kinds", "binder", "settings")

    def __init__(
        self,
        builtin_kinds: frozenset[str] = BUILTIN_CONTROL_KINDS,
        binder: ObserverBinder | None = None,
        settings: Settings | None = None,
    ):
        self.builtin_kinds = frozenset(builtin_kinds)
        self.binder = binder or get_binder()
        self.settings = settings or get_settings()

    def discover(self, root: Any, custom_kinds: Iterable[str] = ()) -> list[Any]:
        return discover(root, allowed_kinds(custom_kinds, self.builtin_kinds))

    def validate_control(self, control: Any) -> ValidationError | None:
        """Validate one control.

        Controls that are not required are left untouched and yield None.
        Required controls get their display state written and observers
        attached; an invalid one yields a ``ValidationError``.
        """
        view = ControlCapabilityView(control)
        valid = is_valid(view)

        if not is_required(view, self.settings.REQUIRED_MARKER_KEY):
            return None

        view.write_state(ValueState.NONE if valid else ValueState.ERROR)
        self.binder.ensure_observed(view)

        if valid:
            return None

        report = build_report(view, self.settings.BINDING_PROPERTY)
        log.debug(
            "control_invalid",
            control_id=report.id,
            bindings=[b.binding_path for b in report.bindings],
        )
        return report

    def validate(self, root: Any, custom_kinds: Iterable[str] = ()) -> list[ValidationError]:
        """Validate every discoverable control under ``root``, in tree order."""
        controls = self.discover(root, custom_kinds)
        errors: list[ValidationError] = []
        for control in controls:
            error = self.validate_control(control)
            if error is not None:
                errors.append(error)
        log.info("validation_completed", controls=len(controls), errors=len(errors))
        return errors

    def check(self, root: Any, custom_kinds: Iterable[str] = ()) -> Result[list[Any], list[AppError]]:
        """Like ``validate`` but as a Result.

        Returns:
            Ok(controls) with every discovered control when nothing failed
            Err(errors) with one AppError per failing control, in tree order
        """
        results: list[Result[Any, AppError]] = []
        for control in self.discover(root, custom_kinds):
            error = self.validate_control(control)
            results.append(Ok(control) if error is None else Err(error.to_app_error()))
        return collect_results(results)


_ENGINE: ValidationEngine | None = None


def get_engine() -> ValidationEngine:
    """Return the process-wide engine with the built-in kinds."""
    global _ENGINE
    if _ENGINE is None:
        _ENGINE = ValidationEngine()
    return _ENGINE


def validate(root: Any, custom_kinds: Iterable[str] = ()) -> list[ValidationError]:
    return get_engine().validate(root, custom_kinds)


def validate_control(control: Any) -> ValidationError | None:
    return get_engine().validate_control(control)


def check(root: Any, custom_kinds: Iterable[str] = ()) -> Result[list[Any], list[AppError]]:
    return get_engine().check(root, custom_kinds)
