import pytest

from mqttcore.control import (
    Auth,
    Auther,
    AuthProperties,
    AuthResponse,
    Connack,
    ConnackProperties,
    Connect,
    ConnectProperties,
    Disconnect,
    DisconnectProperties,
    WillMessage,
    WillProperties,
)
from mqttcore.properties import UserProperties


class FakeAuth(Auther):
    def __init__(self):
        self.done = False

    def authenticate(self, auth):
        return Auth(
            properties=AuthProperties(auth_method="TEST", auth_data=b"secret data"),
        )

    def authenticated(self):
        self.done = True


def test_auther_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Auther()


def test_auther_subclass_answers_auth():
    auther = FakeAuth()
    reply = auther.authenticate(Auth(reason_code=0x18))
    assert reply.properties.auth_method == "TEST"
    assert reply.properties.auth_data == b"secret data"
    auther.authenticated()
    assert auther.done is True


def test_auth_response_carries_values():
    resp = AuthResponse(
        properties=AuthProperties(reason_string="ok"), reason_code=0x18, success=True
    )
    assert resp.success is True
    assert resp.reason_code == 0x18
    assert resp.properties.reason_string == "ok"


def test_connack_properties_default_to_features_available():
    props = ConnackProperties()
    assert props.wildcard_sub_available is True
    assert props.sub_id_available is True
    assert props.shared_sub_available is True
    assert props.retain_available is True
    assert props.maximum_qos is None


@pytest.mark.parametrize(
    "code, failed",
    [(0x00, False), (0x18, False), (0x7F, False), (0x80, True), (0x92, True)],
)
def test_connack_failed_threshold(code, failed):
    assert Connack(reason_code=code).failed() is failed


def test_connect_properties_defaults():
    props = ConnectProperties()
    assert props.request_problem_info is True
    assert props.request_response_info is False
    assert props.user == []


def test_connect_with_will():
    password = b"password"
    cp = Connect(
        keep_alive=30,
        client_id="testClient",
        clean_start=True,
        password=password,
        password_flag=True,
        properties=ConnectProperties(receive_maximum=200),
        will_message=WillMessage(topic="will/topic", payload=b"am gone"),
        will_properties=WillProperties(will_delay_interval=200),
    )
    assert cp.keep_alive == 30
    assert cp.password == password
    assert cp.properties.receive_maximum == 200
    assert cp.will_message.topic == "will/topic"
    assert cp.will_message.payload == b"am gone"
    assert cp.will_properties.will_delay_interval == 200
    assert cp.username_flag is False


def test_default_user_properties_are_not_shared():
    first = ConnectProperties()
    second = ConnectProperties()
    first.user.add("k", "v")
    assert second.user == []
    assert isinstance(first.user, UserProperties)


def test_disconnect_properties():
    d = Disconnect(
        reason_code=0x8B, properties=DisconnectProperties(reason_string="GONE!")
    )
    assert d.properties.reason_string == "GONE!"
    assert d.properties.session_expiry_interval is None
    assert Disconnect().properties is None