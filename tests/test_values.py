import pytest

from json2dart.descriptors import Kind
from json2dart.errors import ParseError
from json2dart.values import ValueKind, classify_number, value_kind


@pytest.mark.parametrize(
    ("value", "expected"),
    [(2, Kind.INTEGER), (2.5, Kind.DOUBLE), (2.0, Kind.INTEGER), (-3, Kind.INTEGER), (0.1, Kind.DOUBLE)],
)
def test_classify_number(value, expected) -> None:
    assert classify_number(value) is expected


def test_classify_number_non_finite_is_double() -> None:
    assert classify_number(float("inf")) is Kind.DOUBLE


def test_booleans_are_not_numbers() -> None:
    assert value_kind(True) is ValueKind.BOOLEAN


def test_value_kind_tags_containers_and_null() -> None:
    assert value_kind({}) is ValueKind.OBJECT
    assert value_kind([]) is ValueKind.ARRAY
    assert value_kind(None) is ValueKind.NULL
    assert value_kind("x") is ValueKind.TEXT


def test_value_kind_rejects_non_json_values() -> None:
    with pytest.raises(ParseError):
        value_kind(object())
