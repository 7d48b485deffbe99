"""Storage of control packets against their packet identifiers."""

from __future__ import annotations

import threading
from typing import Any

_MID_MIN = 0
_MID_MAX = 65535


def _check_mid(mid: int) -> int:
    if not _MID_MIN <= mid <= _MID_MAX:
        raise ValueError(f"packet identifier {mid} is out of range")
    return mid


class MemoryPersistence:
    """Keeps control packets in memory, keyed by packet identifier."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._packets: dict[int, Any] | None = None

    def open(self) -> None:
        """Prepare an empty store."""
        with self._lock:
            self._packets = {}

    def put(self, mid: int, packet: Any) -> None:
        """Store packet under mid, replacing any earlier one."""
        with self._lock:
            if self._packets is None:
                raise RuntimeError("persistence is not open")
            self._packets[mid] = packet

    def get(self, mid: int) -> Any:
        """Return the packet stored under mid, or None."""
        with self._lock:
            if self._packets is None:
                return None
            return self._packets.get(mid)

    def all(self) -> list[Any]:
        """Return every stored packet."""
        with self._lock:
            if self._packets is None:
                return []
            return list(self._packets.values())

    def delete(self, mid: int) -> None:
        """Remove the packet stored under mid, if any."""
        with self._lock:
            if self._packets is not None:
                self._packets.pop(mid, None)

    def close(self) -> None:
        """Drop the store; open must be called again before put."""
        with self._lock:
            self._packets = None

    def reset(self) -> None:
        """Empty the store and leave it ready for use."""
        with self._lock:
            self._packets = {}


class NoopPersistence:
    """A persistence that discards every packet it is given."""

    def __init__(self) -> None:
        self.is_open = False

    def open(self) -> None:
        """Mark the persistence as open."""
        self.is_open = True

    def put(self, mid: int, packet: Any) -> None:
        """Check mid and discard the packet."""
        _check_mid(mid)

    def get(self, mid: int) -> Any:
        """Check mid; nothing is ever stored, so the result is None."""
        _check_mid(mid)
        return None

    def all(self) -> list[Any]:
        """Return an empty list."""
        return []

    def delete(self, mid: int) -> None:
        """Check mid; there is nothing to remove."""
        _check_mid(mid)

    def close(self) -> None:
        """Mark the persistence as closed."""
        self.is_open = False

    def reset(self) -> None:
        """Leave the persistence open and empty."""
        self.is_open = True