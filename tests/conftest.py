"""Shared fixtures: a recording host, fake plugin modules and a clean process state."""

import sys
import textwrap
from types import SimpleNamespace

import pytest

import editor_adapters
from editor_adapters import levels
from editor_adapters.host import BaseHost, set_host
from editor_adapters.notifications.adapter import OVERRIDE_ENV as NOTIFY_ENV
from editor_adapters.pickers.adapter import OVERRIDE_ENV as PICKER_ENV

PLUGIN_MODULES = ("noice", "snacks", "telescope")


class FakeHost(BaseHost):
    """Records every primitive call. ``choice`` is the 1-based pick, None cancels."""

    def __init__(self, choice: int | None = None):
        self.choice = choice
        self.notifications = []
        self.selections = []
        self.reports = []

    def notify(self, message, level, options):
        self.notifications.append((message, level, options))

    def select(self, items, options, callback):
        self.selections.append((items, options))
        callback(None if self.choice is None else items[self.choice - 1])

    def report(self, message, level=levels.ERROR):
        self.reports.append((message, level))


class Plugins:
    """Install and remove fake plugin modules through sys.modules."""

    def __init__(self, monkeypatch):
        self.monkeypatch = monkeypatch

    def install(self, name: str, **attrs):
        module = SimpleNamespace(**attrs)
        self.monkeypatch.setitem(sys.modules, name, module)
        return module

    def remove(self, name: str) -> None:
        self.monkeypatch.setitem(sys.modules, name, None)


class DiskPlugins:
    """Write real plugin packages under a temporary search-path entry."""

    def __init__(self, root, monkeypatch):
        self.root = root
        self.monkeypatch = monkeypatch
        self.names = set()
        root.mkdir()
        monkeypatch.syspath_prepend(str(root))

    def write(self, name: str, files: dict[str, str]) -> None:
        package = self.root / name
        package.mkdir(exist_ok=True)
        for filename, source in files.items():
            (package / filename).write_text(textwrap.dedent(source))
        self.names.add(name)
        # Let the real import system find it instead of the blocking entry.
        self.monkeypatch.delitem(sys.modules, name, raising=False)

    def unload(self) -> None:
        for module in list(sys.modules):
            if module.split(".")[0] in self.names:
                sys.modules.pop(module, None)


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    # A None entry makes the import fail even if the real plugin is installed.
    for name in PLUGIN_MODULES:
        monkeypatch.setitem(sys.modules, name, None)
    monkeypatch.delenv(NOTIFY_ENV, raising=False)
    monkeypatch.delenv(PICKER_ENV, raising=False)
    editor_adapters.reset()
    yield
    editor_adapters.reset()
    set_host(None)


@pytest.fixture
def host():
    fake = FakeHost()
    set_host(fake)
    return fake


@pytest.fixture
def plugins(monkeypatch):
    return Plugins(monkeypatch)


@pytest.fixture
def disk_plugins(tmp_path, monkeypatch):
    disk = DiskPlugins(tmp_path / "plugins", monkeypatch)
    yield disk
    disk.unload()


@pytest.fixture
def make_host():
    """Factory for hosts that answer selections with a fixed choice."""
    return FakeHost
