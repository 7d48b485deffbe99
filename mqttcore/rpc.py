"""Request/response messaging over MQTT v5 using correlation data."""

from __future__ import annotations

import queue
import threading
import time
from typing import Any, Protocol

from mqttcore.publish import Publish, PublishProperties
from mqttcore.subscription import Subscribe, SubscribeOptions

_RESPONSES_SUFFIX = "/responses"


class RPCClient(Protocol):
    """What the handler needs from a connected client."""

    client_id: str
    router: Any

    def subscribe(self, subscribe: Subscribe) -> Any: ...

    def publish(self, publish: Publish) -> Any: ...


class Handler:
    """Sends requests and matches the responses to them by correlation data."""

    def __init__(self, client: RPCClient) -> None:
        self._client = client
        self._lock = threading.Lock()
        self._pending: dict[str, queue.Queue[Publish]] = {}
        self._last_id = 0

    @property
    def response_topic(self) -> str:
        """The topic on which responses to this client's requests arrive."""
        return f"{self._client.client_id}{_RESPONSES_SUFFIX}"

    def _new_correlation_id(self) -> str:
        with self._lock:
            self._last_id = max(time.time_ns(), self._last_id + 1)
            return str(self._last_id)

    def _add(self, correlation_id: str, waiter: queue.Queue[Publish]) -> None:
        with self._lock:
            self._pending[correlation_id] = waiter

    def _take(self, correlation_id: str) -> queue.Queue[Publish] | None:
        with self._lock:
            return self._pending.pop(correlation_id, None)

    def request(self, publish: Publish, timeout: float | None = None) -> Publish:
        """Publish a request and wait for its response.

        Waits forever when timeout is None; otherwise raises TimeoutError
        if no response arrives within timeout seconds.
        """
        correlation_id = self._new_correlation_id()
        waiter: queue.Queue[Publish] = queue.Queue(maxsize=1)
        self._add(correlation_id, waiter)

        if publish.properties is None:
            publish.properties = PublishProperties()
        publish.properties.correlation_data = correlation_id.encode()
        publish.properties.response_topic = self.response_topic
        publish.retain = False

        try:
            self._client.publish(publish)
            return waiter.get(timeout=timeout)
        except queue.Empty:
            raise TimeoutError(
                f"no response to request {correlation_id} within {timeout}s"
            ) from None
        finally:
            self._take(correlation_id)

    def _response_handler(self, publish: Publish) -> None:
        props = publish.properties
        if props is None or props.correlation_data is None:
            return
        waiter = self._take(props.correlation_data.decode(errors="replace"))
        if waiter is None:
            return
        waiter.put_nowait(publish)


def new_handler(client: RPCClient) -> Handler:
    """Create a handler and subscribe the client to its response topic."""
    handler = Handler(client)
    topic = handler.response_topic
    client.router.register_handler(topic, handler._response_handler)
    client.subscribe(Subscribe(subscriptions={topic: SubscribeOptions(qos=1)}))
    return handler