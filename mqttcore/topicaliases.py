"""Automatic assignment of MQTT v5 topic aliases for outgoing publishes."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from mqttcore.publish import Publish, PublishProperties


class TAHandler:
    """Keeps a table of topic aliases and rewrites publishes to use them.

    Alias 0 is never handed out; usable aliases run from 1 to maximum.
    """

    def __init__(self, maximum: int, aliases: Iterable[str] | None = None) -> None:
        if maximum < 0:
            raise ValueError("maximum must not be negative")
        table = [""] * (maximum + 1) if aliases is None else list(aliases)
        if len(table) != maximum + 1:
            raise ValueError(
                f"alias table must hold {maximum + 1} entries, got {len(table)}"
            )
        self._lock = threading.Lock()
        self._alias_max = maximum
        self._aliases = table

    @property
    def alias_max(self) -> int:
        """The highest alias number that may be assigned."""
        return self._alias_max

    @property
    def aliases(self) -> list[str]:
        """A copy of the alias table, indexed by alias number."""
        with self._lock:
            return list(self._aliases)

    def get_topic(self, alias: int) -> str:
        """Return the topic for an alias, or an empty string if unknown."""
        with self._lock:
            if not 0 <= alias < len(self._aliases):
                return ""
            return self._aliases[alias]

    def get_alias(self, topic: str) -> int:
        """Return the alias assigned to topic, or 0 if it has none."""
        with self._lock:
            try:
                return self._aliases.index(topic)
            except ValueError:
                return 0

    def set_alias(self, topic: str) -> int:
        """Assign the first free alias to topic and return it, or 0 if none is free."""
        with self._lock:
            for alias in range(1, len(self._aliases)):
                if not self._aliases[alias]:
                    self._aliases[alias] = topic
                    return alias
            return 0

    def reset_alias(self, topic: str, alias: int) -> None:
        """Point an existing alias number at a new topic."""
        with self._lock:
            if not 0 <= alias < len(self._aliases):
                raise IndexError(f"topic alias {alias} is out of range")
            self._aliases[alias] = topic

    def publish_hook(self, publish: Publish) -> None:
        """Rewrite publish in place to use a topic alias where one is available."""
        if publish.properties is not None and publish.properties.topic_alias is not None:
            # The caller chose an alias explicitly: remap it to this topic.
            self.reset_alias(publish.topic, publish.properties.topic_alias)
            return

        alias = self.get_alias(publish.topic) or self.set_alias(publish.topic)
        if alias == 0:
            return
        if publish.properties is None:
            publish.properties = PublishProperties()
        publish.properties.topic_alias = alias
        publish.topic = ""