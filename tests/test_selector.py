"""Tests for the backend selector state machine."""

import pytest

from editor_adapters.capabilities import NativeCapability, PluginCapability
from editor_adapters.selector import BackendSelector, InvalidBackend

ENV = "EDITOR_ADAPTERS_TEST_BACKEND"


def make_selector(default_backend=None, track_search_path=False, path_key=None):
    kwargs = {"path_key": path_key} if path_key else {}
    return BackendSelector(
        "notification",
        [
            PluginCapability("noice", "noice", "notify"),
            PluginCapability("snacks", "snacks", "notify"),
            NativeCapability(),
        ],
        ENV,
        default_backend=default_backend,
        track_search_path=track_search_path,
        **kwargs,
    )


@pytest.fixture(autouse=True)
def no_override(monkeypatch):
    monkeypatch.delenv(ENV, raising=False)


# --- Detection ---

class TestDetection:
    def test_native_without_plugins(self):
        assert make_selector().resolve() == "native"

    def test_priority_order(self, plugins):
        plugins.install("snacks", notify=lambda *a: None)
        plugins.install("noice", notify=lambda *a: None)
        assert make_selector().resolve() == "noice"

    def test_second_plugin(self, plugins):
        plugins.install("snacks", notify=lambda *a: None)
        assert make_selector().resolve() == "snacks"

    def test_capability_required(self, plugins):
        plugins.install("noice")
        assert make_selector().resolve() == "native"

    def test_override_variable(self, monkeypatch, plugins):
        plugins.install("noice", notify=lambda *a: None)
        monkeypatch.setenv(ENV, "native")
        assert make_selector().resolve() == "native"

    def test_unknown_override_ignored(self, monkeypatch, plugins):
        plugins.install("snacks", notify=lambda *a: None)
        monkeypatch.setenv(ENV, "growl")
        assert make_selector().resolve() == "snacks"

    def test_default_backend(self, plugins):
        plugins.install("noice", notify=lambda *a: None)
        assert make_selector(default_backend="snacks").resolve() == "snacks"

    def test_override_beats_default_backend(self, monkeypatch):
        monkeypatch.setenv(ENV, "noice")
        assert make_selector(default_backend="snacks").resolve() == "noice"


# --- Caching ---

class TestCaching:
    def test_starts_unresolved(self):
        selector = make_selector()
        assert selector.is_resolved is False
        assert selector.cached is None

    def test_result_is_cached(self, plugins):
        plugins.install("noice", notify=lambda *a: None)
        selector = make_selector()
        assert selector.resolve() == "noice"

        plugins.remove("noice")
        assert selector.resolve() == "noice"
        assert selector.is_resolved is True

    def test_reset_redetects(self, plugins):
        selector = make_selector()
        assert selector.resolve() == "native"

        plugins.install("noice", notify=lambda *a: None)
        assert selector.resolve() == "native"

        selector.reset()
        assert selector.is_resolved is False
        assert selector.resolve() == "noice"

    def test_availability_does_not_touch_cache(self, plugins):
        plugins.install("snacks", notify=lambda *a: None)
        selector = make_selector()
        assert selector.availability() == {"noice": False, "snacks": True, "native": True}
        assert selector.is_resolved is False


# --- Search path invalidation ---

class TestSearchPathInvalidation:
    def test_path_change_redetects(self, plugins):
        path = ["one"]
        selector = make_selector(track_search_path=True, path_key=lambda: tuple(path))
        assert selector.resolve() == "native"

        plugins.install("noice", notify=lambda *a: None)
        assert selector.resolve() == "native"

        path.append("two")
        assert selector.resolve() == "noice"

    def test_untracked_selector_ignores_path(self, plugins):
        path = ["one"]
        selector = make_selector(track_search_path=False, path_key=lambda: tuple(path))
        assert selector.resolve() == "native"

        plugins.install("noice", notify=lambda *a: None)
        path.append("two")
        assert selector.resolve() == "native"

    def test_forced_backend_survives_path_change(self):
        path = ["one"]
        selector = make_selector(track_search_path=True, path_key=lambda: tuple(path))
        selector.force("snacks")
        path.append("two")
        assert selector.resolve() == "snacks"


# --- force() ---

class TestForce:
    @pytest.mark.parametrize("backend", ["noice", "snacks", "native"])
    def test_force_known(self, backend):
        selector = make_selector()
        selector.force(backend)
        assert selector.resolve() == backend

    def test_force_ignores_plugins(self, plugins):
        plugins.install("noice", notify=lambda *a: None)
        selector = make_selector()
        selector.force("native")
        assert selector.resolve() == "native"

    def test_force_unknown_raises(self):
        selector = make_selector()
        with pytest.raises(InvalidBackend, match="Unknown backend: growl"):
            selector.force("growl")

    def test_force_unknown_keeps_state(self):
        selector = make_selector()
        selector.force("snacks")
        with pytest.raises(InvalidBackend):
            selector.force("not-a-real-id")
        assert selector.resolve() == "snacks"

    def test_invalid_backend_is_value_error(self):
        assert issubclass(InvalidBackend, ValueError)

    def test_requires_providers(self):
        with pytest.raises(ValueError):
            BackendSelector("picker", [], ENV)
