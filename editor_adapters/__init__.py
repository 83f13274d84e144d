"""editor-adapters — stable notify/select API over swappable editor plugins.

Usage:
    import editor_adapters

    editor_adapters.setup(notification_backend="snacks")
    editor_adapters.notification().notify("Saved", "info", {"title": "Files"})
    editor_adapters.picker().select(["a", "b"], {"prompt": "Pick"}, print)

``setup`` applies once per process; ``reset`` is the matching teardown.
"""

import logging
import os

from editor_adapters import levels
from editor_adapters.config import AdaptersConfig
from editor_adapters.host import get_host
from editor_adapters.notifications import adapter as _notify
from editor_adapters.notifications.adapter import NotificationAdapter
from editor_adapters.pickers import adapter as _pick
from editor_adapters.pickers.adapter import PickerAdapter
from editor_adapters.selector import InvalidBackend

logger = logging.getLogger("editor_adapters")

_setup_called = False
# Override variables setup() replaced, with the value each held before.
_env_saved: dict[str, str | None] = {}


def setup(
    config: AdaptersConfig | None = None,
    notification_backend: str | None = None,
    picker_backend: str | None = None,
) -> None:
    """Record backend preferences as the process-wide override variables.

    Keyword arguments win over ``config``. Later calls only warn.
    """
    global _setup_called
    if _setup_called:
        get_host().report("editor_adapters: setup() called multiple times", levels.WARN)
        return

    if config is not None:
        notification_backend = notification_backend or config.notification_backend
        picker_backend = picker_backend or config.picker_backend

    for env, value in (
        (_notify.OVERRIDE_ENV, notification_backend),
        (_pick.OVERRIDE_ENV, picker_backend),
    ):
        if value:
            _env_saved.setdefault(env, os.environ.get(env))
            os.environ[env] = value
            logger.debug("%s=%s", env, value)

    _setup_called = True


def notification() -> NotificationAdapter:
    """The process-wide notification adapter."""
    return _notify.default_adapter()


def picker() -> PickerAdapter:
    """The process-wide picker adapter."""
    return _pick.default_adapter()


def notification_adapter(**deps) -> NotificationAdapter:
    """A fresh notification adapter with its own state (``host``, ``default_backend``)."""
    return NotificationAdapter(**deps)


def picker_adapter(**deps) -> PickerAdapter:
    """A fresh picker adapter with its own state (``host``, ``default_backend``)."""
    return PickerAdapter(**deps)


def reset() -> None:
    """Undo ``setup`` and forget both cached backends."""
    global _setup_called
    for env, previous in _env_saved.items():
        if previous is None:
            os.environ.pop(env, None)
        else:
            os.environ[env] = previous
    _env_saved.clear()
    _setup_called = False
    notification().reset_backend()
    picker().reset_backend()


__all__ = [
    "AdaptersConfig",
    "InvalidBackend",
    "NotificationAdapter",
    "PickerAdapter",
    "notification",
    "notification_adapter",
    "picker",
    "picker_adapter",
    "reset",
    "setup",
]
