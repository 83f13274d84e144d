"""Notification adapter — one ``notify`` call, whichever backend is active.

Module-level functions operate on a process-wide adapter; construct
``NotificationAdapter`` directly for an instance with its own state.
"""

import logging

from editor_adapters import levels
from editor_adapters.host import BaseHost, get_host
from editor_adapters.notifications.registry import get_backends
from editor_adapters.result import BackendResult, invoke
from editor_adapters.selector import BackendSelector, search_path_key

logger = logging.getLogger("editor_adapters.notifications.adapter")

OVERRIDE_ENV = "EDITOR_ADAPTERS_NOTIFY_BACKEND"


class NotificationAdapter:
    """Dispatch notifications to the resolved backend, falling back to native."""

    def __init__(
        self,
        host: BaseHost | None = None,
        default_backend: str | None = None,
        path_key=search_path_key,
    ):
        self._host = host
        self.backends = get_backends(host)
        self.selector = BackendSelector(
            "notification",
            [b.capability for b in self.backends.values()],
            OVERRIDE_ENV,
            default_backend=default_backend,
            track_search_path=True,
            path_key=path_key,
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

    def notify(self, message: str, level="info", options: dict | None = None) -> BackendResult | None:
        """Show a notification.

        Args:
            message: Text to display. Anything else is reported and dropped.
            level: Level name ("info", "warn", ...) or numeric rank. Defaults to info.
            options: Passed through untouched (title, timeout, ...).

        Returns:
            The result of the delivery that reached the user, or None when
            the message was rejected.
        """
        if not isinstance(message, str):
            self.host.report(
                f"notification.notify: message must be a string, got {type(message).__name__}",
                levels.ERROR,
            )
            return None

        if level is None:
            level = "info"
        options = options or {}

        name = self.selector.resolve()
        backend = self.backends[name]
        result = invoke(name, backend.send, message, levels.for_backend(level, backend.level_kind), options)
        if result.ok or name == "native":
            return result

        logger.warning("Falling back to native notification after %s failed: %s", name, result.error)
        self.backends["native"].send(message, level, options)
        return BackendResult(backend="native", ok=True)


_default: NotificationAdapter | None = None


def default_adapter() -> NotificationAdapter:
    """Get or create the process-wide notification adapter."""
    global _default
    if _default is None:
        _default = NotificationAdapter()
    return _default


def notify(message: str, level="info", options: dict | None = None) -> BackendResult | None:
    return default_adapter().notify(message, level, options)


def get_backend() -> str:
    return default_adapter().get_backend()


def set_backend(backend: str) -> None:
    default_adapter().set_backend(backend)


def reset_backend() -> None:
    default_adapter().reset_backend()
