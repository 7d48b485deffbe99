from dataclasses import replace

from mqttcore.properties import UserProperties
from mqttcore.publish import (
    Publish,
    PublishProperties,
    PublishResponse,
    PublishResponseProperties,
)


def test_str_without_properties():
    p = Publish(topic="a/b", qos=1, payload=b"hello")
    assert str(p) == "topic: a/b  qos: 1  retain: false\nhello"


def test_str_retain_flag_is_lower_case():
    p = Publish(topic="t", retain=True)
    assert str(p).startswith("topic: t  qos: 0  retain: true\n")


def test_str_lists_properties_in_order():
    props = PublishProperties(
        content_type="text/plain",
        response_topic="resp",
        topic_alias=3,
    )
    props.user.add("k", "v").add("k2", "v2")
    p = Publish(topic="x", qos=2, properties=props, payload=b"body")
    assert str(p) == (
        "topic: x  qos: 2  retain: false\n"
        "ContentType: text/plain\n"
        "ResponseTopic: resp\n"
        "TopicAlias: 3\n"
        "User: k : v\n"
        "User: k2 : v2\n"
        "body"
    )


def test_str_correlation_data_as_byte_list():
    props = PublishProperties(correlation_data=b"\x01\x02")
    text = str(Publish(topic="x", properties=props))
    assert "CorrelationData: [1 2]\n" in text


def test_str_omits_empty_properties():
    p = Publish(topic="x", properties=PublishProperties(), payload=b"p")
    assert str(p) == str(Publish(topic="x", payload=b"p"))


def test_properties_user_lists_are_independent():
    first = PublishProperties()
    second = PublishProperties()
    first.user.add("chatname", "alice")
    assert first.user.get("chatname") == "alice"
    assert second.user == UserProperties()


def test_publish_is_mutable_for_hooks():
    p = Publish(topic="test")
    p.properties = PublishProperties(topic_alias=1)
    p.topic = ""
    assert p == Publish(properties=PublishProperties(topic_alias=1))


def test_publish_response_equality_and_replace():
    resp = PublishResponse(
        reason_code=0x10,
        properties=PublishResponseProperties(reason_string="none"),
    )
    changed = replace(resp, reason_code=0)
    assert changed.properties.reason_string == "none"
    assert changed != resp
    assert replace(changed, reason_code=0x10) == resp