"""Notification backends and the notify dispatcher."""

from editor_adapters.notifications.adapter import (
    NotificationAdapter,
    get_backend,
    notify,
    reset_backend,
    set_backend,
)
from editor_adapters.notifications.registry import NOTIFY_BACKENDS

__all__ = [
    "NOTIFY_BACKENDS",
    "NotificationAdapter",
    "get_backend",
    "notify",
    "reset_backend",
    "set_backend",
]
