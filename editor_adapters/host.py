"""Editor host — the native notification/selection primitives and the report channel.

``ConsoleHost`` is a terminal rendition built on rich. Editors embedding the
adapters install their own host with ``set_host``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from editor_adapters import levels

logger = logging.getLogger("editor_adapters.host")

_LEVEL_STYLES = {
    levels.TRACE: "dim",
    levels.DEBUG: "cyan",
    levels.INFO: "green",
    levels.WARN: "yellow",
    levels.ERROR: "bold red",
}


class BaseHost(ABC):
    """Abstract base class for the editor collaborator."""

    @abstractmethod
    def notify(self, message: str, level: int, options: dict) -> None:
        """Native notification primitive. Always available, never fails."""

    @abstractmethod
    def select(self, items: Sequence, options: dict, callback: Callable[[Any], None]) -> None:
        """Native selection primitive. Calls back with the item, or None on cancel."""

    @abstractmethod
    def report(self, message: str, level: int = levels.ERROR) -> None:
        """User-visible error/warning channel, independent of notification backends."""


class ConsoleHost(BaseHost):
    """Render notifications and prompts in the terminal."""

    def __init__(self, console: Console | None = None, err_console: Console | None = None):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def notify(self, message: str, level: int, options: dict) -> None:
        style = _LEVEL_STYLES.get(level, "green")
        label = levels.to_string(level).upper()
        title = options.get("title")
        prefix = f"[{style}]{label}[/{style}]"
        if title:
            prefix += f" [bold]{escape(str(title))}[/bold]"
        self.console.print(f"{prefix} {escape(message)}", highlight=False)

    def select(self, items: Sequence, options: dict, callback: Callable[[Any], None]) -> None:
        if not items:
            callback(None)
            return

        format_item = options.get("format_item") or str
        for i, item in enumerate(items, start=1):
            self.console.print(f"  {i}. {format_item(item)}", markup=False, highlight=False)

        answer = Prompt.ask(options.get("prompt", "Select"), console=self.console, default="")
        choice = answer.strip()
        if not choice.isdigit() or not (1 <= int(choice) <= len(items)):
            logger.debug("Selection cancelled (answer=%r)", answer)
            callback(None)
            return
        callback(items[int(choice) - 1])

    def report(self, message: str, level: int = levels.ERROR) -> None:
        style = _LEVEL_STYLES.get(level, "bold red")
        self.err_console.print(f"[{style}]{escape(message)}[/{style}]", highlight=False)


_host: BaseHost | None = None


def get_host() -> BaseHost:
    """Get or create the process-wide host (lazy init)."""
    global _host
    if _host is None:
        _host = ConsoleHost()
    return _host


def set_host(host: BaseHost | None) -> None:
    """Install the process-wide host. ``None`` restores the lazy default."""
    global _host
    _host = host
