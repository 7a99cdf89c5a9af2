"""Structured reports for required controls that hold no acceptable value.

Reports identify the control and the data fields its primary property is
bound to; they carry no human-readable message.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from formcheck.controls.view import ControlCapabilityView
from formcheck.core.errors import AppError, required_control


@dataclass(frozen=True, slots=True)
class BindingInformation:
    """A bound data field: final segment, model name and full path."""
    name: str
    model_name: str | None
    binding_path: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "modelName": self.model_name, "bindingPath": self.binding_path}


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A required control with no acceptable value.

    ``bindings`` is empty when the control's primary property is unbound.
    """
    id: str | None
    bindings: tuple[BindingInformation, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "bindings": [b.to_dict() for b in self.bindings]}

    def to_app_error(self) -> AppError:
        """Express this report in the ``AppError`` taxonomy."""
        return required_control(
            self.id,
            [b.to_dict() for b in self.bindings],
            origin="validation_engine",
        )


def _part_attr(part: Any, name: str) -> Any:
    if isinstance(part, Mapping):
        return part.get(name)
    return getattr(part, name, None)


def binding_path(base_path: str | None, path: str) -> str:
    """Join a context base path and a relative binding path with ``/``."""
    return f"{base_path}/{path}" if base_path is not None else path


def binding_information(view: ControlCapabilityView, part: Any) -> BindingInformation:
    model = _part_attr(part, "model")
    full_path = binding_path(view.binding_base_path(model), _part_attr(part, "path") or "")
    return BindingInformation(
        name=full_path[full_path.rfind("/") + 1:],
        model_name=model,
        binding_path=full_path,
    )


def build_report(view: ControlCapabilityView, prop: str = "value") -> ValidationError:
    parts = view.binding_parts(prop) or []
    return ValidationError(
        id=view.id,
        bindings=tuple(binding_information(view, part) for part in parts),
    )
