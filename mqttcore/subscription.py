"""Representations of the MQTT v5 subscribe and unsubscribe packets and acks."""

from __future__ import annotations

from dataclasses import dataclass, field

from mqttcore.properties import UserProperties


@dataclass
class SubscribeOptions:
    """Options that apply to a single subscription."""

    qos: int = 0
    retain_handling: int = 0
    no_local: bool = False
    retain_as_published: bool = False


@dataclass
class SubscribeProperties:
    """Properties that can be set on a Subscribe packet."""

    subscription_identifier: int | None = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Subscribe:
    """The MQTT Subscribe packet, mapping topic filters to their options."""

    properties: SubscribeProperties | None = None
    subscriptions: dict[str, SubscribeOptions] = field(default_factory=dict)


@dataclass
class SubackProperties:
    """Properties that can be set on a Suback packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Suback:
    """The MQTT Suback packet, one reason code per requested subscription."""

    properties: SubackProperties | None = None
    reasons: bytes = b""


@dataclass
class UnsubscribeProperties:
    """Properties that can be set on an Unsubscribe packet."""

    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsubscribe:
    """The MQTT Unsubscribe packet."""

    topics: list[str] = field(default_factory=list)
    properties: UnsubscribeProperties | None = None


@dataclass
class UnsubackProperties:
    """Properties that can be set on an Unsuback packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsuback:
    """The MQTT Unsuback packet, one reason code per requested topic."""

    reasons: bytes = b""
    properties: UnsubackProperties | None = None