"""Building blocks for MQTT v5 clients: packet models, routing and session helpers."""

__version__ = "0.1.0"

__all__ = [
    "acks",
    "control",
    "message_ids",
    "persistence",
    "pinger",
    "properties",
    "publish",
    "router",
    "rpc",
    "subscription",
    "topicaliases",
]