"""Picker backends and the select/multiselect dispatcher."""

from editor_adapters.pickers.adapter import (
    PickerAdapter,
    get_backend,
    multiselect,
    reset_backend,
    select,
    set_backend,
)
from editor_adapters.pickers.registry import PICKER_BACKENDS

__all__ = [
    "PICKER_BACKENDS",
    "PickerAdapter",
    "get_backend",
    "multiselect",
    "reset_backend",
    "select",
    "set_backend",
]
