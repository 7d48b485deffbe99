"""Dispatching of received publishes to handlers by topic filter."""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Callable

from mqttcore.publish import Publish

MessageHandler = Callable[[Publish], None]

_log = logging.getLogger(__name__)

_SHARE_PREFIX = "$share"


def route_split(route: str) -> list[str]:
    """Split a topic filter into levels, dropping a shared subscription prefix."""
    if not route:
        return []
    levels = route.split("/")
    if route.startswith(_SHARE_PREFIX):
        return levels[2:]
    return levels


def topic_split(topic: str) -> list[str]:
    """Split a topic name into its levels."""
    if not topic:
        return []
    return topic.split("/")


def _match_levels(route: list[str], topic: list[str]) -> bool:
    for position, level in enumerate(route):
        if level == "#":
            return True
        if position >= len(topic):
            return False
        if level != "+" and level != topic[position]:
            return False
    return len(route) == len(topic)


def route_includes_topic(route: str, topic: str) -> bool:
    """Return True if the topic filter route, with wildcards, covers topic."""
    return _match_levels(route_split(route), topic_split(topic))


def match(route: str, topic: str) -> bool:
    """Return True if route equals topic or covers it through wildcards."""
    return route == topic or route_includes_topic(route, topic)


def _alias_of(publish: Publish) -> int | None:
    if publish.properties is None:
        return None
    return publish.properties.topic_alias


class StandardRouter:
    """Routes publishes to every handler registered on a matching filter."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._lock = threading.RLock()
        self._subscriptions: dict[str, list[MessageHandler]] = {}
        self._aliases: dict[int, str] = {}
        self.debug = logger or _log

    def register_handler(self, topic: str, handler: MessageHandler) -> None:
        """Add handler for the topic filter; a filter may have several."""
        self.debug.debug("registering handler for: %s", topic)
        with self._lock:
            self._subscriptions.setdefault(topic, []).append(handler)

    def unregister_handler(self, topic: str) -> None:
        """Remove every handler registered for the topic filter."""
        self.debug.debug("unregistering handler for: %s", topic)
        with self._lock:
            self._subscriptions.pop(topic, None)

    def route(self, publish: Publish) -> None:
        """Call each handler whose filter matches the publish's topic."""
        self.debug.debug("routing message for: %s", publish.topic)
        with self._lock:
            alias = _alias_of(publish)
            if alias is not None:
                self.debug.debug("message is using topic aliasing")
                if publish.topic:
                    self.debug.debug(
                        "registering new topic alias '%d' for topic '%s'",
                        alias,
                        publish.topic,
                    )
                    self._aliases[alias] = publish.topic
                topic = self._aliases.get(alias, "")
            else:
                topic = publish.topic
            selected = [
                handler
                for route, handlers in self._subscriptions.items()
                if match(route, topic)
                for handler in handlers
            ]
        for handler in selected:
            handler(publish)


class SingleHandlerRouter:
    """Routes every publish to one handler, resolving topic aliases first."""

    def __init__(
        self,
        handler: MessageHandler | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._lock = threading.Lock()
        self._aliases: dict[int, str] = {}
        self._handler = handler
        self.debug = logger or _log

    def register_handler(self, topic: str, handler: MessageHandler) -> None:
        """Replace the single handler; the topic is ignored."""
        self.debug.debug("registering handler for: %s", topic)
        self._handler = handler

    def unregister_handler(self, topic: str) -> None:
        """Do nothing; the single handler stays in place."""

    def route(self, publish: Publish) -> None:
        """Call the handler with a copy of publish whose alias is resolved."""
        message = dataclasses.replace(publish)
        self.debug.debug("routing message for: %s", message.topic)
        alias = _alias_of(publish)
        if alias is not None:
            self.debug.debug("message is using topic aliasing")
            with self._lock:
                if publish.topic:
                    self._aliases[alias] = publish.topic
                known = self._aliases.get(alias)
            if known is not None:
                message.topic = known
        if self._handler is None:
            raise RuntimeError("no message handler registered")
        self._handler(message)