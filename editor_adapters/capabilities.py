"""Capability providers — answer "is plugin X loadable and does it expose Y"."""

import importlib
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger("editor_adapters.capabilities")


@dataclass
class Probe:
    """Outcome of a capability probe."""
    available: bool
    handle: Any = None


class CapabilityProvider(ABC):
    """Abstract base class for backend availability checks."""

    backend_id: str = ""

    @abstractmethod
    def probe(self) -> Probe:
        """Check availability. On success the probe carries a handle to invoke."""


class PluginCapability(CapabilityProvider):
    """Probe an optional plugin module for a specific capability attribute.

    The plugin only counts as available when its module imports and the
    attribute the backend calls into is present; a bare namespace is not enough.
    """

    def __init__(self, backend_id: str, module: str, capability: str):
        self.backend_id = backend_id
        self.module = module
        self.capability = capability

    def probe(self) -> Probe:
        try:
            plugin = importlib.import_module(self.module)
        except Exception as e:
            logger.debug("Plugin %s not loadable: %s", self.module, e)
            return Probe(available=False)

        handle = getattr(plugin, self.capability, None)
        if handle is None:
            # Submodules only become package attributes once imported.
            try:
                importlib.import_module(f"{self.module}.{self.capability}")
            except Exception as e:
                logger.debug("Plugin %s has no '%s': %s", self.module, self.capability, e)
                return Probe(available=False)
            handle = getattr(plugin, self.capability, None)
        if handle is None:
            return Probe(available=False)
        return Probe(available=True, handle=plugin)

    def __repr__(self) -> str:
        return f"PluginCapability({self.backend_id!r}, {self.module}.{self.capability})"


class NativeCapability(CapabilityProvider):
    """The guaranteed fallback. Depends on nothing optional."""

    def __init__(self, backend_id: str = "native"):
        self.backend_id = backend_id

    def probe(self) -> Probe:
        return Probe(available=True)

    def __repr__(self) -> str:
        return f"NativeCapability({self.backend_id!r})"
