"""Allocation of MQTT packet identifiers and the contexts waiting on them."""

from __future__ import annotations

import threading
from typing import Any

MID_MIN = 1
MID_MAX = 65535


class MidsExhaustedError(RuntimeError):
    """Raised when every packet identifier is already in use."""

    def __init__(self, message: str = "all message ids in use") -> None:
        super().__init__(message)


class MessageIDs:
    """Hands out free packet identifiers and maps them to waiting contexts."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_mid = 0
        self._in_use: dict[int, Any] = {}

    def request(self, context: Any) -> int:
        """Reserve the next free identifier for context and return it."""
        with self._lock:
            for step in range(1, MID_MAX):
                mid = (self._last_mid + step) % MID_MAX
                if mid == 0:
                    continue
                if mid not in self._in_use:
                    self._in_use[mid] = context
                    self._last_mid = mid
                    return mid
        raise MidsExhaustedError()

    def get(self, mid: int) -> Any:
        """Return the context reserved under mid, or None."""
        with self._lock:
            return self._in_use.get(mid)

    def free(self, mid: int) -> None:
        """Release mid so it can be handed out again."""
        with self._lock:
            self._in_use.pop(mid, None)

    def clear(self) -> None:
        """Release every identifier."""
        with self._lock:
            self._in_use.clear()