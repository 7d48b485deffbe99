# mqttcore

Building blocks for MQTT v5 clients. The package is plain Python and has
no third-party dependencies.

## Modules

- `mqttcore.properties`: `UserProperty` and `UserProperties`. The second
  is an ordered list of key/value pairs in which keys may repeat. Its
  methods are `add` (chainable), `get`, which returns the first value or
  `""`, and `get_all`. The module also has `bool_to_byte`.
- `mqttcore.control`: dataclasses for CONNECT (`Connect`,
  `ConnectProperties`, `WillMessage`, `WillProperties`), CONNACK (`Connack`,
  `ConnackProperties`), AUTH (`Auth`, `AuthProperties`, `AuthResponse`) and
  DISCONNECT (`Disconnect`, `DisconnectProperties`).
  - `Connack.failed()` is true when the reason code is `0x80` or above.
  - `Auther` is the abstract interface for extended authentication. It has
    two methods, `authenticate` and `authenticated`.
- `mqttcore.publish`: `Publish` and `PublishProperties`.
  - `str(publish)` gives the topic, the QoS, the retain flag, any set
    properties and the payload.
  - `PublishResponse` and `PublishResponseProperties` model the reply to a
    QoS 1 or QoS 2 publish.
- `mqttcore.subscription`: `Subscribe` maps topic filters to
  `SubscribeOptions`. The module also has `SubscribeProperties`, `Suback`,
  `Unsubscribe`, `Unsuback` and their properties classes.
- `mqttcore.acks`: `AcksTracker` holds manual acknowledgements back until
  they can be sent in the order the publishes arrived.
  - `add` starts tracking a publish and ignores duplicate packet ids.
  - `mark_as_acked` marks a tracked publish as acknowledged. It raises
    `PacketNotFoundError` for an unknown packet id.
  - `flush(do)` passes the acknowledged publishes at the front of the queue
    to `do`, then drops them.
  - `reset` empties the tracker.
- `mqttcore.message_ids`: `MessageIDs` hands out packet identifiers from 1
  to 65534 and maps each one to a context object.
  - `request` hands out an identifier. It raises `MidsExhaustedError` when
    every identifier is in use.
  - The other methods are `get`, `free` and `clear`.
- `mqttcore.router`: topic matching and routing.
  - `match`, `route_includes_topic`, `route_split` and `topic_split`
    handle the `+` and `#` wildcards and `$share/<group>/...` filters.
  - `StandardRouter` calls every handler registered on a matching filter.
  - `SingleHandlerRouter` sends every publish to one handler. It raises
    `RuntimeError` if no handler is set.
  - Both routers resolve topic aliases from incoming publishes.
- `mqttcore.persistence`: `MemoryPersistence` keeps packets in a dict keyed
  by packet identifier. `NoopPersistence` discards them. Both have `open`,
  `put`, `get`, `all`, `delete`, `close` and `reset`.
- `mqttcore.pinger`: `PingHandler.start(send_ping, keepalive)` runs the
  keepalive loop in the calling thread. It checks every quarter of the
  keepalive and calls `send_ping` once a keepalive period has passed.
  - If a ping is still unanswered after 1.5 keepalive periods, the handler
    passes a `PingTimeoutError` to its `fail_handler` and stops.
  - `ping_resp` clears the outstanding ping. `stop` ends the loop.
- `mqttcore.topicaliases`: `TAHandler(maximum)` keeps a table of topic
  aliases from 1 to `maximum`. Its `publish_hook` rewrites an outgoing
  `Publish` in place so that it uses an alias instead of a topic.
- `mqttcore.rpc`: request/response over correlation data.
  - `new_handler(client)` registers a handler for `<client_id>/responses`
    on `client.router` and subscribes to that topic at QoS 1.
  - `Handler.request(publish, timeout=None)` publishes the request and
    waits for the matching response. It raises `TimeoutError` when a
    timeout is given and runs out.
  - The client can be any object with `client_id`, `router`,
    `subscribe(subscribe)` and `publish(publish)`.

## Examples

```python
from mqttcore.publish import Publish
from mqttcore.router import StandardRouter, match

assert match("sensors/+/temp", "sensors/kitchen/temp")
assert match("$share/group1/a/b", "a/b")

router = StandardRouter()
router.register_handler("sensors/#", lambda msg: print(msg.topic, msg.payload))
router.route(Publish(topic="sensors/kitchen/temp", payload=b"21.5"))
```

```python
from mqttcore.acks import AcksTracker
from mqttcore.publish import Publish

tracker = AcksTracker()
first, second = Publish(packet_id=1, qos=1), Publish(packet_id=2, qos=1)
tracker.add(first)
tracker.add(second)

sent = []
tracker.mark_as_acked(second)
tracker.flush(sent.extend)  # nothing yet: packet 1 is not acknowledged
tracker.mark_as_acked(first)
tracker.flush(sent.extend)  # sent == [first, second]
```

```python
from mqttcore.publish import Publish
from mqttcore.topicaliases import TAHandler

aliases = TAHandler(4)
msg = Publish(topic="a/b")
aliases.publish_hook(msg)  # msg.topic == "", msg.properties.topic_alias == 1
```

## What it does not do

mqttcore has no network client of its own. It does not open connections,
encode or decode MQTT packets on the wire, or run a broker. The packet
classes are plain data models. The pinger, the RPC handler and the routers
are driven by code that you supply, and that code does the reading and
writing. Storage is in memory only.

## Tests

```
pip install -e .[test]
pytest
```