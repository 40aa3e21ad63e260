import pytest

from paapi5.api.helpers import exists_in_strings


@pytest.mark.parametrize(
    "value,values,expected",
    [
        ("ABC", ["ABC", "DEF"], True),
        ("XYZ", ["ABC", "DEF"], False),
        ("XYZ", [], False),
    ],
)
def test_exists_in_strings(value, values, expected):
    assert exists_in_strings(value, values) is expected