"""Idempotent observer attachment.

Every required control gets one shared re-validation callback per change
signal it fires, no matter how many validation passes touch it. The
binder remembers what it attached per control, keyed by object identity
so host equality never merges two controls, and also consults the host's
own handler listing when the control offers one.
"""
from __future__ import annotations

import weakref
from typing import Any

from formcheck.controls.types import OBSERVED_SIGNALS, Signal, ValueState
from formcheck.controls.view import ControlCapabilityView
from formcheck.core.logging import binder_logger

from .predicate import is_valid

log = binder_logger()


class RevalidationCallback:
    """Keeps a control's display state fresh between validation passes.

    Only the visual state is recomputed; required-ness is not re-checked
    and no report is produced.
    """

    __slots__ = ()

    def __call__(self, event: Any) -> None:
        view = ControlCapabilityView(event.get_source())
        valid = is_valid(view, event)
        view.write_state(ValueState.NONE if valid else ValueState.ERROR)
        log.debug("control_revalidated", control_id=view.id, valid=valid)

    def __repr__(self) -> str:
        return "<formcheck revalidate>"


REVALIDATE = RevalidationCallback()


class ObserverBinder:
    """Attaches ``callback`` at most once per signal per control."""

    __slots__ = ("callback", "_attached")

    def __init__(self, callback: RevalidationCallback = REVALIDATE):
        self.callback = callback
        self._attached: dict[int, set[Signal]] = {}

    def _registered(self, node: Any) -> set[Signal] | None:
        """Signals already attached by this binder; None if ``node`` can't be tracked."""
        key = id(node)
        registered = self._attached.get(key)
        if registered is None:
            try:
                weakref.finalize(node, self._attached.pop, key, None)
            except TypeError:
                return None
            registered = self._attached[key] = set()
        return registered

    def is_observed(self, view: ControlCapabilityView, signal: Signal) -> bool:
        registered = self._registered(view.node)
        if registered is not None and signal in registered:
            return True
        return any(handler is self.callback for handler in view.observers(signal))

    def ensure_observed(self, view: ControlCapabilityView) -> list[Signal]:
        """Attach the callback to every supported, not yet observed signal.

        Returns the signals attached by this call.
        """
        registered = self._registered(view.node)
        attached: list[Signal] = []
        for signal in OBSERVED_SIGNALS:
            if self.is_observed(view, signal):
                continue
            if view.attach(signal, self.callback):
                attached.append(signal)
                if registered is not None:
                    registered.add(signal)
        if attached:
            log.debug("observer_attached", control_id=view.id, signals=[s.value for s in attached])
        return attached


_BINDER = ObserverBinder()


def get_binder() -> ObserverBinder:
    """Return the process-wide binder instance."""
    return _BINDER
