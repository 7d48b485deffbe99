"""Representations of the MQTT v5 connect, auth and disconnect packets."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from mqttcore.properties import UserProperties

_FAILURE_THRESHOLD = 0x80


class Auther(ABC):
    """Implements the extended authentication flows of MQTT v5."""

    @abstractmethod
    def authenticate(self, auth: Auth) -> Auth:
        """Answer an AUTH packet from the server with the next AUTH to send."""

    @abstractmethod
    def authenticated(self) -> None:
        """Called once the server reports that authentication succeeded."""


@dataclass
class AuthProperties:
    """Properties that can be set on an Auth packet."""

    auth_data: bytes | None = None
    auth_method: str = ""
    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Auth:
    """The MQTT Auth packet."""

    properties: AuthProperties | None = None
    reason_code: int = 0


@dataclass
class AuthResponse:
    """The outcome of a client initiated reauthentication."""

    properties: AuthProperties | None = None
    reason_code: int = 0
    success: bool = False


@dataclass
class ConnackProperties:
    """Properties the server may set on a Connack packet."""

    session_expiry_interval: int | None = None
    auth_data: bytes | None = None
    auth_method: str = ""
    response_info: str = ""
    server_reference: str = ""
    reason_string: str = ""
    assigned_client_id: str = ""
    maximum_packet_size: int | None = None
    receive_maximum: int | None = None
    topic_alias_maximum: int | None = None
    server_keep_alive: int | None = None
    maximum_qos: int | None = None
    user: UserProperties = field(default_factory=UserProperties)
    # Features are available unless the server says otherwise.
    wildcard_sub_available: bool = True
    sub_id_available: bool = True
    shared_sub_available: bool = True
    retain_available: bool = True


@dataclass
class Connack:
    """The MQTT Connack packet."""

    properties: ConnackProperties | None = None
    reason_code: int = 0
    session_present: bool = False

    def failed(self) -> bool:
        """Return True when the reason code reports a failure to connect."""
        return self.reason_code >= _FAILURE_THRESHOLD


@dataclass
class ConnectProperties:
    """Properties that can be set on a Connect packet."""

    auth_data: bytes | None = None
    auth_method: str = ""
    session_expiry_interval: int | None = None
    will_delay_interval: int | None = None
    receive_maximum: int | None = None
    topic_alias_maximum: int | None = None
    maximum_qos: int | None = None
    maximum_packet_size: int | None = None
    user: UserProperties = field(default_factory=UserProperties)
    request_problem_info: bool = True
    request_response_info: bool = False


@dataclass
class WillMessage:
    """The last will and testament message sent with a Connect packet."""

    retain: bool = False
    qos: int = 0
    topic: str = ""
    payload: bytes = b""


@dataclass
class WillProperties:
    """Properties of the will message in a Connect packet."""

    will_delay_interval: int | None = None
    payload_format: int | None = None
    message_expiry: int | None = None
    content_type: str = ""
    response_topic: str = ""
    correlation_data: bytes | None = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Connect:
    """The MQTT Connect packet."""

    password: bytes = b""
    username: str = ""
    client_id: str = ""
    properties: ConnectProperties | None = None
    will_message: WillMessage | None = None
    will_properties: WillProperties | None = None
    keep_alive: int = 0
    clean_start: bool = False
    username_flag: bool = False
    password_flag: bool = False


@dataclass
class DisconnectProperties:
    """Properties that can be set on a Disconnect packet."""

    server_reference: str = ""
    reason_string: str = ""
    session_expiry_interval: int | None = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Disconnect:
    """The MQTT Disconnect packet."""

    properties: DisconnectProperties | None = None
    reason_code: int = 0