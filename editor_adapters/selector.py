"""Backend selector — picks, caches and invalidates the active backend per concern.

Resolution order, first match wins:
    1) an explicit ``force(id)``;
    2) the process-wide override variable (an environment variable);
    3) the ``default_backend`` injected into the selector;
    4) the first available plugin, in priority order;
    5) the native fallback.
"""

import logging
import os
import sys
import threading
from typing import Callable, Sequence

from editor_adapters.capabilities import CapabilityProvider

logger = logging.getLogger("editor_adapters.selector")


class InvalidBackend(ValueError):
    """Raised when an identifier outside a concern's backend set is forced."""


def search_path_key() -> tuple[str, ...]:
    """Snapshot of the plugin search path used to detect plugin installs/removals."""
    return tuple(sys.path)


class BackendSelector:
    """Cached, invalidatable decision procedure for one concern."""

    def __init__(
        self,
        concern: str,
        providers: Sequence[CapabilityProvider],
        override_env: str,
        default_backend: str | None = None,
        track_search_path: bool = False,
        path_key: Callable[[], object] = search_path_key,
    ):
        if not providers:
            raise ValueError("BackendSelector needs at least one provider")
        self.concern = concern
        self.providers = list(providers)
        self.identifiers = tuple(p.backend_id for p in self.providers)
        self.override_env = override_env
        self.default_backend = default_backend
        self.track_search_path = track_search_path
        self._path_key = path_key
        # Reentrant: a plugin may notify while a probe is importing it.
        self._lock = threading.RLock()

        self._cached: str | None = None
        self._resolved = False
        self._forced = False
        self._invalidation_key = None

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    @property
    def cached(self) -> str | None:
        return self._cached

    def resolve(self) -> str:
        """Return the active backend, detecting it if nothing is cached."""
        with self._lock:
            current_key = self._path_key() if self.track_search_path else None
            if (
                self._resolved
                and not self._forced
                and self._invalidation_key is not None
                and current_key != self._invalidation_key
            ):
                logger.info("%s: plugin search path changed, re-detecting backend", self.concern)
                self._clear()

            if self._resolved:
                return self._cached

            backend = self._detect()
            self._cached = backend
            self._resolved = True
            self._invalidation_key = current_key
            logger.info("%s backend resolved: %s", self.concern, backend)
            return backend

    def force(self, backend: str) -> None:
        """Pin the backend. Raises InvalidBackend for unknown identifiers."""
        if backend not in self.identifiers:
            raise InvalidBackend(
                f"Unknown backend: {backend}. Valid {self.concern} backends: {', '.join(self.identifiers)}"
            )
        with self._lock:
            self._cached = backend
            self._resolved = True
            self._forced = True
            self._invalidation_key = None
        logger.debug("%s backend forced: %s", self.concern, backend)

    def reset(self) -> None:
        """Forget the cached backend; the next resolve() detects again."""
        with self._lock:
            self._clear()

    def availability(self) -> dict[str, bool]:
        """Probe every provider without touching the cache."""
        return {p.backend_id: p.probe().available for p in self.providers}

    def _clear(self) -> None:
        self._cached = None
        self._resolved = False
        self._forced = False
        self._invalidation_key = None

    def _configured(self, value: str | None, source: str) -> str | None:
        if not value:
            return None
        if value in self.identifiers:
            return value
        logger.warning("Ignoring unknown %s backend '%s' from %s", self.concern, value, source)
        return None

    def _detect(self) -> str:
        override = self._configured(os.environ.get(self.override_env), self.override_env)
        if override:
            return override

        default = self._configured(self.default_backend, "default_backend")
        if default:
            return default

        for provider in self.providers:
            if provider.probe().available:
                return provider.backend_id

        # The last provider is the native fallback and always probes available.
        return self.identifiers[-1]
