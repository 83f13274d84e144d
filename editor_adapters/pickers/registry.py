"""Picker registry — maps backend identifiers to backend instances."""

from editor_adapters.host import BaseHost
from editor_adapters.pickers.backends import NativePicker, SnacksPicker, TelescopePicker
from editor_adapters.pickers.base import BasePickerBackend

# Priority order: richest first, native fallback last.
PICKER_BACKENDS = ("snacks", "telescope", "native")


def get_backends(host: BaseHost | None = None) -> dict[str, BasePickerBackend]:
    """Build the picker backends, keyed by identifier in priority order."""
    native = NativePicker(host)
    return {
        "snacks": SnacksPicker(native),
        "telescope": TelescopePicker(native),
        "native": native,
    }
