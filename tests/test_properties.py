import dataclasses

import pytest

from mqttcore.properties import UserProperties, UserProperty, bool_to_byte


def test_add_chains_and_appends_in_order():
    props = UserProperties()
    result = props.add("chatname", "alice").add("room", "lobby")
    assert result is props
    assert props == [UserProperty("chatname", "alice"), UserProperty("room", "lobby")]


def test_get_returns_first_match():
    props = UserProperties().add("k", "first").add("k", "second")
    assert props.get("k") == "first"


def test_get_missing_key_returns_empty_string():
    props = UserProperties().add("k", "v")
    assert props.get("absent") == ""


def test_get_all_returns_every_match_in_order():
    props = UserProperties().add("k", "a").add("other", "x").add("k", "b")
    assert props.get_all("k") == ["a", "b"]


def test_get_all_missing_key_returns_empty_list():
    props = UserProperties().add("k", "a")
    assert props.get_all("nope") == []


def test_construct_from_iterable():
    items = [UserProperty("a", "1"), UserProperty("b", "2")]
    props = UserProperties(items)
    assert props.get("b") == "2"
    assert len(props) == 2


def test_user_property_is_immutable():
    prop = UserProperty("k", "v")
    with pytest.raises(dataclasses.FrozenInstanceError):
        prop.key = "other"
    assert prop.key == "k"
    assert prop.value == "v"


@pytest.mark.parametrize("value, expected", [(True, 1), (False, 0)])
def test_bool_to_byte(value, expected):
    assert bool_to_byte(value) == expected