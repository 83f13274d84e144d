"""Severity level conversion between the numeric and string conventions.

The native host uses small integers (TRACE=0 .. ERROR=4); the plugin
backends take lowercase names. Both conversions are total.
"""

TRACE = 0
DEBUG = 1
INFO = 2
WARN = 3
ERROR = 4

NUMERIC = "numeric"
STRING = "string"

_NAME_TO_LEVEL = {
    "trace": TRACE,
    "debug": DEBUG,
    "info": INFO,
    "warn": WARN,
    "error": ERROR,
}
_LEVEL_TO_NAME = {v: k for k, v in _NAME_TO_LEVEL.items()}


def _is_numeric(level) -> bool:
    return isinstance(level, (int, float)) and not isinstance(level, bool)


def to_numeric(level) -> int:
    """Return the numeric rank for a level given as a name or a number."""
    if _is_numeric(level):
        return level
    if isinstance(level, str):
        return _NAME_TO_LEVEL.get(level.lower(), INFO)
    return INFO


def to_string(level) -> str:
    """Return the lowercase name for a level given as a name or a number."""
    if isinstance(level, str):
        return level.lower()
    if _is_numeric(level):
        return _LEVEL_TO_NAME.get(level, "info")
    return "info"


def for_backend(level, kind: str):
    """Normalize a level to the representation a backend consumes."""
    if kind == NUMERIC:
        return to_numeric(level)
    return to_string(level)
