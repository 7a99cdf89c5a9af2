"""Discovery of validatable controls in a control tree."""
from __future__ import annotations

from typing import Any, Iterable

from formcheck.controls.registry import is_builtin
from formcheck.controls.view import ControlCapabilityView
from formcheck.core.logging import walker_logger

log = walker_logger()


def discover(root: Any, allowed_kinds: Iterable[str]) -> list[Any]:
    """Validatable descendants of ``root`` in depth-first pre-order.

    A child whose kind is in ``allowed_kinds`` is emitted and its own
    children are never visited. Any other child, including one whose kind
    cannot be resolved, is searched recursively. ``root`` itself is never
    emitted. The tree must be acyclic.
    """
    allowed = allowed_kinds if isinstance(allowed_kinds, (set, frozenset)) else frozenset(allowed_kinds)
    found: list[Any] = []
    stack = list(reversed(ControlCapabilityView(root).children))
    visited = 0

    while stack:
        node = stack.pop()
        visited += 1
        view = ControlCapabilityView(node)
        kind = view.kind
        if kind is not None and kind in allowed:
            found.append(node)
            log.debug("control_discovered", kind=kind, control_id=view.id, custom=not is_builtin(kind))
            continue
        stack.extend(reversed(view.children))

    log.debug("controls_discovered", count=len(found), visited=visited)
    return found
