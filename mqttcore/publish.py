"""Representations of the MQTT v5 publish packet and the responses to it."""

from __future__ import annotations

from dataclasses import dataclass, field

from mqttcore.properties import UserProperties


@dataclass
class PublishProperties:
    """Properties that can be set on a Publish packet."""

    correlation_data: bytes | None = None
    content_type: str = ""
    response_topic: str = ""
    payload_format: int | None = None
    message_expiry: int | None = None
    subscription_identifier: int | None = None
    topic_alias: int | None = None
    user: UserProperties = field(default_factory=UserProperties)


def _format_bytes(data: bytes) -> str:
    return "[" + " ".join(str(b) for b in data) + "]"


@dataclass
class Publish:
    """The MQTT Publish packet."""

    packet_id: int = 0
    qos: int = 0
    retain: bool = False
    topic: str = ""
    properties: PublishProperties | None = None
    payload: bytes = b""

    def __str__(self) -> str:
        parts = [
            f"topic: {self.topic}  qos: {self.qos}  "
            f"retain: {str(self.retain).lower()}\n"
        ]
        props = self.properties
        if props is not None:
            if props.payload_format is not None:
                parts.append(f"PayloadFormat: {props.payload_format}\n")
            if props.message_expiry is not None:
                parts.append(f"MessageExpiry: {props.message_expiry}\n")
            if props.content_type:
                parts.append(f"ContentType: {props.content_type}\n")
            if props.response_topic:
                parts.append(f"ResponseTopic: {props.response_topic}\n")
            if props.correlation_data is not None:
                parts.append(
                    f"CorrelationData: {_format_bytes(props.correlation_data)}\n"
                )
            if props.topic_alias is not None:
                parts.append(f"TopicAlias: {props.topic_alias}\n")
            if props.subscription_identifier is not None:
                parts.append(
                    f"SubscriptionIdentifier: {props.subscription_identifier}\n"
                )
            parts.extend(f"User: {prop.key} : {prop.value}\n" for prop in props.user)
        parts.append(self.payload.decode("utf-8", errors="replace"))
        return "".join(parts)


@dataclass
class PublishResponseProperties:
    """Properties carried by the response to a QoS 1 or QoS 2 publish."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class PublishResponse:
    """The response (Puback, Pubrec or Pubcomp) to a QoS 1 or QoS 2 publish."""

    properties: PublishResponseProperties | None = None
    reason_code: int = 0