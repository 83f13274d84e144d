"""Result wrapper for backend invocations."""

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger("editor_adapters.result")


@dataclass
class BackendResult:
    """Outcome of one call into a backend."""
    backend: str
    ok: bool
    error: str | None = None


def invoke(backend: str, fn: Callable, *args) -> BackendResult:
    """Call a backend function, turning any fault into a failed result."""
    try:
        fn(*args)
    except Exception as e:
        logger.warning("Backend %s failed: %s", backend, e)
        return BackendResult(backend=backend, ok=False, error=f"{type(e).__name__}: {e}")
    return BackendResult(backend=backend, ok=True)
