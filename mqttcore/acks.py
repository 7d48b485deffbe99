"""Tracks received publishes so acknowledgements go out in arrival order."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass

from mqttcore.publish import Publish


class PacketNotFoundError(LookupError):
    """Raised when acknowledging a packet that is not being tracked."""

    def __init__(self, message: str = "packet not found") -> None:
        super().__init__(message)


@dataclass
class _Entry:
    publish: Publish
    acknowledged: bool = False


class AcksTracker:
    """Buffers manual acknowledgements until every earlier packet is acked."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._order: list[_Entry] = []

    def add(self, publish: Publish) -> None:
        """Start tracking a publish, unless its packet id is already tracked."""
        with self._lock:
            if any(e.publish.packet_id == publish.packet_id for e in self._order):
                return
            self._order.append(_Entry(publish))

    def mark_as_acked(self, publish: Publish) -> None:
        """Mark the tracked publish with the same packet id as acknowledged."""
        with self._lock:
            for entry in self._order:
                if entry.publish.packet_id == publish.packet_id:
                    entry.acknowledged = True
                    return
        raise PacketNotFoundError()

    def flush(self, do: Callable[[list[Publish]], None]) -> None:
        """Pass the leading run of acknowledged publishes to do, then drop them."""
        with self._lock:
            ready: list[Publish] = []
            for entry in self._order:
                if not entry.acknowledged:
                    break
                ready.append(entry.publish)
            if not ready:
                return
            do(ready)
            del self._order[: len(ready)]

    def reset(self) -> None:
        """Forget every tracked publish; used when the connection drops."""
        with self._lock:
            self._order.clear()