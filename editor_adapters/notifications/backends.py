"""Notification backends: noice, snacks and the native host primitive."""

import logging

from editor_adapters import levels
from editor_adapters.capabilities import NativeCapability, PluginCapability
from editor_adapters.host import BaseHost, get_host
from editor_adapters.notifications.base import BaseNotifyBackend

logger = logging.getLogger("editor_adapters.notifications.backends")


class NativeNotifyBackend(BaseNotifyBackend):
    """Send through the host's own notification primitive."""

    name = "native"
    level_kind = levels.NUMERIC

    def __init__(self, host: BaseHost | None = None):
        self._host = host
        self.capability = NativeCapability(self.name)

    @property
    def host(self) -> BaseHost:
        return self._host or get_host()

    def send(self, message: str, level, options: dict) -> None:
        self.host.notify(message, levels.to_numeric(level), options)


class PluginNotifyBackend(BaseNotifyBackend):
    """Send through a plugin's ``notify(message, level, options)`` function.

    The plugin is loaded on every call; when it cannot be reached the
    notification goes to the native backend instead.
    """

    level_kind = levels.STRING

    def __init__(self, name: str, module: str, native: NativeNotifyBackend):
        self.name = name
        self.native = native
        self.capability = PluginCapability(name, module, "notify")

    def send(self, message: str, level, options: dict) -> None:
        probe = self.capability.probe()
        if not probe.available:
            logger.debug("%s unreachable, notifying natively", self.name)
            self.native.send(message, level, options)
            return
        probe.handle.notify(message, levels.to_string(level), options)


def noice_backend(native: NativeNotifyBackend) -> PluginNotifyBackend:
    return PluginNotifyBackend("noice", "noice", native)


def snacks_backend(native: NativeNotifyBackend) -> PluginNotifyBackend:
    return PluginNotifyBackend("snacks", "snacks", native)
