import json

from paapi5.api.param_types import Properties, SortBy


def test_properties_add_remove_exists_length():
    properties = Properties()
    assert len(properties) == 0

    properties.add("k1", "v1")
    properties.add("k2", "v2")
    assert len(properties) == 2

    properties.remove("k1")
    assert len(properties) == 1

    assert properties.exists("k2") is True
    assert properties.exists("k1") is False


def test_properties_remove_missing_key_is_noop():
    properties = Properties()
    properties.add("k1", "v1")
    properties.remove("absent")
    assert dict(properties) == {"k1": "v1"}


def test_properties_add_overwrites():
    properties = Properties()
    properties.add("k", "a")
    properties.add("k", "b")
    assert properties["k"] == "b"
    assert len(properties) == 1


def test_properties_serialise_as_object():
    properties = Properties()
    properties.add("k1", "v1")
    assert json.dumps(properties) == '{"k1": "v1"}'


def test_sort_by_values():
    assert SortBy.PRICE_HIGH_TO_LOW == "Price:HighToLow"
    assert SortBy("Price:LowToHigh") is SortBy.PRICE_LOW_TO_HIGH