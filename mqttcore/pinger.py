"""Keepalive handling: sending ping requests and watching for responses."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

_log = logging.getLogger(__name__)

PingFailHandler = Callable[[BaseException], None]


class PingTimeoutError(TimeoutError):
    """Raised or reported when a ping response does not arrive in time."""

    def __init__(self, message: str = "ping resp timed out") -> None:
        super().__init__(message)


class PingHandler:
    """Sends pings every keepalive period and detects missing responses."""

    def __init__(
        self,
        fail_handler: PingFailHandler | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._stop: threading.Event | None = None
        self._last_ping: float | None = None
        self._outstanding = 0
        self.fail_handler = fail_handler
        self.debug = logger or _log

    def _fail(self, error: BaseException) -> None:
        if self.fail_handler is not None:
            self.fail_handler(error)

    def start(self, send_ping: Callable[[], None], keepalive: float) -> None:
        """Run the ping loop in the calling thread until stopped or failed.

        send_ping writes a ping request to the connection; keepalive is in
        seconds. The state is checked every quarter of the keepalive.
        """
        if keepalive <= 0:
            raise ValueError("keepalive must be positive")
        stop = threading.Event()
        with self._lock:
            self._stop = stop
        interval = keepalive / 4
        while not stop.wait(interval):
            now = time.monotonic()
            since = None if self._last_ping is None else now - self._last_ping
            if self._outstanding > 0 and since is not None and since > keepalive * 1.5:
                self._fail(PingTimeoutError())
                return
            if since is None or since >= keepalive:
                try:
                    send_ping()
                except Exception as exc:  # noqa: BLE001 - reported to the handler
                    self._fail(exc)
                    return
                with self._lock:
                    self._outstanding += 1
                self._last_ping = time.monotonic()
                self.debug.debug("pingHandler sending ping request")

    def stop(self) -> None:
        """Stop a running ping loop; does nothing if it never started."""
        with self._lock:
            if self._stop is None:
                return
            self.debug.debug("pingHandler stopping")
            self._stop.set()

    def ping_resp(self) -> None:
        """Record that a ping response arrived."""
        self.debug.debug("pingHandler resetting pingOutstanding")
        with self._lock:
            self._outstanding = 0