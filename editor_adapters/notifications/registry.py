"""Notification registry — maps backend identifiers to backend instances."""

from editor_adapters.host import BaseHost
from editor_adapters.notifications.backends import NativeNotifyBackend, noice_backend, snacks_backend
from editor_adapters.notifications.base import BaseNotifyBackend

# Priority order: richest first, native fallback last.
NOTIFY_BACKENDS = ("noice", "snacks", "native")


def get_backends(host: BaseHost | None = None) -> dict[str, BaseNotifyBackend]:
    """Build the notification backends, keyed by identifier in priority order."""
    native = NativeNotifyBackend(host)
    return {
        "noice": noice_backend(native),
        "snacks": snacks_backend(native),
        "native": native,
    }
