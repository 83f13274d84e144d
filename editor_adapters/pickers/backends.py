"""Picker backends: snacks, telescope and the native host primitive."""

import logging
from typing import Any, Callable, Sequence

from editor_adapters import levels
from editor_adapters.capabilities import NativeCapability, PluginCapability
from editor_adapters.host import BaseHost, get_host
from editor_adapters.pickers.base import BasePickerBackend, as_list

logger = logging.getLogger("editor_adapters.pickers.backends")


class NativePicker(BasePickerBackend):
    """Select through the host's own selection primitive."""

    name = "native"

    def __init__(self, host: BaseHost | None = None):
        self._host = host
        self.capability = NativeCapability(self.name)

    @property
    def host(self) -> BaseHost:
        return self._host or get_host()

    def select(self, items: Sequence, options: dict, callback: Callable[[Any], None]) -> None:
        self.host.select(items, options, callback)


class TelescopePicker(BasePickerBackend):
    """Telescope installs itself as the host's select UI, so selection goes through the host."""

    name = "telescope"

    def __init__(self, native: NativePicker):
        self.native = native
        self.capability = PluginCapability(self.name, "telescope", "pickers")

    def select(self, items: Sequence, options: dict, callback: Callable[[Any], None]) -> None:
        self.native.select(items, options, callback)


class SnacksPicker(BasePickerBackend):
    """snacks.picker — the only backend with a real multiselect."""

    name = "snacks"
    supports_multiselect = True

    def __init__(self, native: NativePicker):
        self.native = native
        self.capability = PluginCapability(self.name, "snacks", "picker")

    def _picker(self):
        probe = self.capability.probe()
        if not probe.available:
            logger.debug("snacks.picker unreachable, selecting natively")
            return None
        return probe.handle.picker

    def select(self, items: Sequence, options: dict, callback: Callable[[Any], None]) -> None:
        picker = self._picker()
        if picker is None:
            self.native.select(items, options, callback)
            return
        picker.select(items, options, callback)

    def multiselect(self, items: Sequence, options: dict, callback: Callable[[list], None]) -> None:
        picker = self._picker()
        if picker is None:
            self.native.host.report("snacks.picker unavailable, using single select", levels.WARN)
            self.native.select(items, options, as_list(callback))
            return

        def confirm(instance):
            callback(list(instance.selected()))
            instance.close()

        picker.pick({"items": list(items)}, {**options, "confirm": confirm})
