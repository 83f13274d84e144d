"""Picker adapter — ``select`` and ``multiselect`` over whichever backend is active.

Module-level functions operate on a process-wide adapter; construct
``PickerAdapter`` directly for an instance with its own state.
"""

import logging
from collections.abc import Sequence
from typing import Any, Callable

from editor_adapters import levels
from editor_adapters.host import BaseHost, get_host
from editor_adapters.pickers.base import BasePickerBackend, as_list
from editor_adapters.pickers.registry import get_backends
from editor_adapters.result import BackendResult, invoke
from editor_adapters.selector import BackendSelector

logger = logging.getLogger("editor_adapters.pickers.adapter")

OVERRIDE_ENV = "EDITOR_ADAPTERS_PICKER_BACKEND"


class _Once:
    """Wrap a callback so it fires at most once."""

    def __init__(self, callback: Callable):
        self.callback = callback
        self.fired = False

    def __call__(self, value):
        if self.fired:
            logger.debug("Ignoring repeated picker callback")
            return
        self.fired = True
        self.callback(value)


def _is_items(items) -> bool:
    return isinstance(items, Sequence) and not isinstance(items, (str, bytes))


class PickerAdapter:
    """Dispatch selection requests to the resolved backend."""

    def __init__(self, host: BaseHost | None = None, default_backend: str | None = None):
        self._host = host
        self.backends = get_backends(host)
        self.selector = BackendSelector(
            "picker",
            [b.capability for b in self.backends.values()],
            OVERRIDE_ENV,
            default_backend=default_backend,
        )

    @property
    def host(self) -> BaseHost:
        return self._host or get_host()

    def get_backend(self) -> str:
        return self.selector.resolve()

    def set_backend(self, backend: str) -> None:
        self.selector.force(backend)

    def reset_backend(self) -> None:
        self.selector.reset()

    def create(self) -> BasePickerBackend:
        """Return the backend implementation for the active picker."""
        return self.backends[self.selector.resolve()]

    def _validate(self, op: str, items, callback, empty) -> bool:
        if not _is_items(items):
            self.host.report(f"picker.{op}: items must be a sequence, got {type(items).__name__}", levels.ERROR)
            if callable(callback):
                callback(empty)
            return False
        if not callable(callback):
            self.host.report(f"picker.{op}: callback must be callable, got {type(callback).__name__}", levels.ERROR)
            return False
        return True

    def _recover(self, result: BackendResult, guarded: _Once, retry: Callable[[], None]) -> BackendResult:
        if result.ok:
            return result
        if result.backend == "native" or guarded.fired:
            logger.error("Picker %s failed and cannot be retried: %s", result.backend, result.error)
            return result
        logger.warning("Falling back to native picker after %s failed: %s", result.backend, result.error)
        retry()
        return BackendResult(backend="native", ok=True)

    def select(
        self,
        items: Sequence,
        options: dict | None,
        callback: Callable[[Any], None],
    ) -> BackendResult | None:
        """Let the user pick one item.

        ``callback`` receives the chosen item, or None when the user cancels.
        Invalid ``items`` are reported and still call back with None.
        """
        if not self._validate("select", items, callback, None):
            return None

        options = options or {}
        name = self.selector.resolve()
        guarded = _Once(callback)
        result = invoke(name, self.backends[name].select, items, options, guarded)
        native = self.backends["native"]
        return self._recover(result, guarded, lambda: native.select(items, options, guarded))

    def multiselect(
        self,
        items: Sequence,
        options: dict | None,
        callback: Callable[[list], None],
    ) -> BackendResult | None:
        """Let the user pick any number of items.

        ``callback`` receives a list. Backends without a real multiselect
        present a single choice and wrap it into a zero-or-one-element list.
        """
        if not self._validate("multiselect", items, callback, []):
            return None

        options = options or {}
        name = self.selector.resolve()
        backend = self.backends[name]
        guarded = _Once(callback)

        degraded = not backend.supports_multiselect
        if degraded:
            self.host.report(f"Multiselect not supported by {name} picker, using single select", levels.WARN)
            result = invoke(name, backend.select, items, options, as_list(guarded))
        else:
            result = invoke(name, backend.multiselect, items, options, guarded)

        native = self.backends["native"]

        def retry():
            if not degraded:
                self.host.report("Multiselect not supported by native picker, using single select", levels.WARN)
            native.select(items, options, as_list(guarded))

        return self._recover(result, guarded, retry)


_default: PickerAdapter | None = None


def default_adapter() -> PickerAdapter:
    """Get or create the process-wide picker adapter."""
    global _default
    if _default is None:
        _default = PickerAdapter()
    return _default


def select(items: Sequence, options: dict | None, callback: Callable[[Any], None]) -> BackendResult | None:
    return default_adapter().select(items, options, callback)


def multiselect(items: Sequence, options: dict | None, callback: Callable[[list], None]) -> BackendResult | None:
    return default_adapter().multiselect(items, options, callback)


def get_backend() -> str:
    return default_adapter().get_backend()


def set_backend(backend: str) -> None:
    default_adapter().set_backend(backend)


def reset_backend() -> None:
    default_adapter().reset_backend()
