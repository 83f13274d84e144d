"""Base picker backend abstract class."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence


class BasePickerBackend(ABC):
    """Abstract base class for selection backends.

    Backends without a dedicated multiselect leave ``supports_multiselect``
    False; the dispatcher then degrades to a single selection.
    """

    name: str = ""
    supports_multiselect: bool = False

    @abstractmethod
    def select(self, items: Sequence, options: dict, callback: Callable[[Any], None]) -> None:
        """Present ``items``; call back once with the chosen item or None."""

    def multiselect(self, items: Sequence, options: dict, callback: Callable[[list], None]) -> None:
        """Present ``items``; call back once with a (possibly empty) list."""
        raise NotImplementedError(f"{self.name} picker has no multiselect")


def as_list(callback: Callable[[list], None]) -> Callable[[Any], None]:
    """Adapt a multiselect callback to receive a single-select result."""

    def on_choice(selected):
        callback([] if selected is None else [selected])

    return on_choice
