"""Base notification backend abstract class."""

from abc import ABC, abstractmethod

from editor_adapters import levels


class BaseNotifyBackend(ABC):
    """Abstract base class for notification backends."""

    name: str = ""
    level_kind: str = levels.STRING

    @abstractmethod
    def send(self, message: str, level, options: dict) -> None:
        """Deliver a notification. ``level`` is already in this backend's representation."""
